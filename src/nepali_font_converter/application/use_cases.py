"""Application use-cases orchestrating selection conversion."""

from __future__ import annotations

import logging

from nepali_font_converter.application.ports import DocumentHost
from nepali_font_converter.application.results import (
    ConversionOutcome,
    ConversionSessionResult,
    WriteBack,
)
from nepali_font_converter.classify import (
    common_font_name,
    detect_selection_font,
    effective_source_font,
    has_nepali_text,
)
from nepali_font_converter.client import ConversionClient
from nepali_font_converter.errors import ConversionError
from nepali_font_converter.fonts.registry import DEFAULT_REGISTRY, FontRegistry
from nepali_font_converter.segment import Run, Selection, segment
from nepali_font_converter.types import CanonicalKey, FailureReason

logger = logging.getLogger(__name__)

# Some legacy glyphs share byte values with Unicode text; a leading legacy
# character keeps the host from rendering the boundary with the wrong font.
LEGACY_RENDER_PREFIX = "a"


def is_selection_eligible(
    host: DocumentHost,
    selection: Selection,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> bool:
    """Use-case: decide whether conversion may be offered for ``selection``."""
    if selection.end <= selection.start:
        return False
    if host.in_excluded_zone(selection.start, selection.end):
        return False
    if not host.read(selection.start, selection.end).strip():
        return False
    return has_nepali_text(host.text_units(selection.start, selection.end), registry)


def find_eligible_target_fonts(
    host: DocumentHost,
    selection: Selection,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> list[str]:
    """Use-case: list target labels, excluding the selection's own font."""
    units = host.text_units(selection.start, selection.end)
    labels = list(registry.all_labels())
    if not common_font_name(units).strip():
        return labels
    source_key = detect_selection_font(units, registry)
    if source_key is None:
        return labels
    current = registry.label_of(source_key)
    return [label for label in labels if label != current]


def convert_selection(
    host: DocumentHost,
    selection: Selection,
    destination_key: CanonicalKey,
    *,
    client: ConversionClient,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> ConversionSessionResult:
    """Use-case: convert every run of ``selection`` into ``destination_key``.

    Runs are converted and written back strictly in order. Offsets of later
    runs are shifted by the length change of earlier write-backs.

    Raises
    ------
    ConversionError
        If ``destination_key`` is not a registered font.
    """
    if destination_key not in registry:
        raise ConversionError(f"Unknown destination font '{destination_key}'.")

    units = host.text_units(selection.start, selection.end)
    runs = segment(units, document_end=host.document_end())
    logger.debug("segmented selection into %d run(s)", len(runs))

    outcomes: list[ConversionOutcome] = []
    edits: list[WriteBack] = []
    delta = 0
    for run in runs:
        current = run.shifted(delta)
        outcome, edit = _convert_run(
            host, current, destination_key, client=client, registry=registry
        )
        outcomes.append(outcome)
        if edit is not None:
            host.replace(edit.start, edit.end, edit.text, edit.font_name)
            edits.append(edit)
            delta += edit.delta

    failure = next((o for o in outcomes if o.is_reportable_failure), None)
    notice = None
    if failure is not None and failure.failure_reason is not None:
        notice = client.notice_for(failure.failure_reason)
    return ConversionSessionResult(
        outcomes=tuple(outcomes),
        edits=tuple(edits),
        failure=failure,
        notice=notice,
    )


def convert_label_selection(
    host: DocumentHost,
    selection: Selection,
    label: str,
    *,
    client: ConversionClient,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> ConversionSessionResult:
    """Use-case: convert ``selection`` into the font whose label was picked."""
    destination_key = registry.key_of_label(label)
    if destination_key is None:
        raise ConversionError(f"Unknown font label '{label}'.")
    return convert_selection(
        host, selection, destination_key, client=client, registry=registry
    )


def probe_service(client: ConversionClient) -> bool:
    """Use-case: check service availability once when conversion is enabled."""
    available = client.probe_availability()
    if not available:
        logger.warning("conversion service is unavailable")
    return available


def _convert_run(
    host: DocumentHost,
    run: Run,
    destination_key: CanonicalKey,
    *,
    client: ConversionClient,
    registry: FontRegistry,
) -> tuple[ConversionOutcome, WriteBack | None]:
    """Convert one run; return its outcome and the edit to apply, if any."""
    text = host.read(run.start, run.end)
    source_key = effective_source_font(run.font_name, text, registry)
    if source_key is None or not text.strip():
        logger.debug(
            "skipping run [%d, %d) in font %r", run.start, run.end, run.font_name
        )
        return ConversionOutcome.fail(FailureReason.UNSUPPORTED_SOURCE), None

    outcome = client.convert(source_key, destination_key, text)
    if not outcome.is_success or outcome.result_text is None:
        logger.debug(
            "run [%d, %d) failed: %s", run.start, run.end, outcome.failure_reason
        )
        return outcome, None

    written = outcome.result_text
    if registry.is_legacy_key(destination_key):
        written = LEGACY_RENDER_PREFIX + written
    edit = WriteBack(
        start=run.start,
        end=run.end,
        text=written,
        font_name=registry.local_name_of(destination_key),
    )
    return outcome, edit
