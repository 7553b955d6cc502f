"""Application-layer use-cases, ports and result objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nepali_font_converter.application.ports import (
    DocumentHost,
    Transport,
    TransportResponse,
)
from nepali_font_converter.application.results import (
    ConversionOutcome,
    ConversionSessionResult,
    RemoteNotice,
    WriteBack,
)
from nepali_font_converter.fonts.registry import DEFAULT_REGISTRY, FontRegistry
from nepali_font_converter.segment import Selection
from nepali_font_converter.types import CanonicalKey

if TYPE_CHECKING:
    from nepali_font_converter.client import ConversionClient


def convert_selection(
    host: DocumentHost,
    selection: Selection,
    destination_key: CanonicalKey,
    *,
    client: ConversionClient,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> ConversionSessionResult:
    """Convert a host selection via lazy use-case import."""
    from nepali_font_converter.application.use_cases import convert_selection as _impl

    return _impl(host, selection, destination_key, client=client, registry=registry)


def convert_label_selection(
    host: DocumentHost,
    selection: Selection,
    label: str,
    *,
    client: ConversionClient,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> ConversionSessionResult:
    """Convert a host selection to the font with the given label."""
    from nepali_font_converter.application.use_cases import (
        convert_label_selection as _impl,
    )

    return _impl(host, selection, label, client=client, registry=registry)


def find_eligible_target_fonts(
    host: DocumentHost,
    selection: Selection,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> list[str]:
    """List target font labels via lazy use-case import."""
    from nepali_font_converter.application.use_cases import (
        find_eligible_target_fonts as _impl,
    )

    return _impl(host, selection, registry)


def is_selection_eligible(
    host: DocumentHost,
    selection: Selection,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> bool:
    """Check conversion eligibility via lazy use-case import."""
    from nepali_font_converter.application.use_cases import (
        is_selection_eligible as _impl,
    )

    return _impl(host, selection, registry)


def probe_service(client: ConversionClient) -> bool:
    """Probe service availability via lazy use-case import."""
    from nepali_font_converter.application.use_cases import probe_service as _impl

    return _impl(client)


__all__ = [
    "DocumentHost",
    "Transport",
    "TransportResponse",
    "ConversionOutcome",
    "ConversionSessionResult",
    "RemoteNotice",
    "WriteBack",
    "convert_label_selection",
    "convert_selection",
    "find_eligible_target_fonts",
    "is_selection_eligible",
    "probe_service",
]
