"""Public text conversion API (delegates to application use-cases)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from nepali_font_converter.adapters.document import InMemoryDocument
from nepali_font_converter.adapters.transport import HttpTransport
from nepali_font_converter.application.ports import Transport
from nepali_font_converter.application.results import ConversionSessionResult
from nepali_font_converter.application.use_cases import (
    convert_selection,
    find_eligible_target_fonts,
    probe_service,
)
from nepali_font_converter.classify import effective_source_font
from nepali_font_converter.client import ConversionClient
from nepali_font_converter.config import ServiceSettings
from nepali_font_converter.errors import ConversionError
from nepali_font_converter.fonts.registry import DEFAULT_REGISTRY, FontRegistry
from nepali_font_converter.segment import Selection
from nepali_font_converter.types import CanonicalKey


@dataclass(frozen=True)
class TextConversion:
    """Converted text together with the session that produced it."""

    text: str
    font_names: tuple[str, ...]
    session: ConversionSessionResult


def resolve_font_key(
    name: str,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> CanonicalKey:
    """Accept a canonical key, a local font name or a display label.

    Raises
    ------
    ConversionError
        If ``name`` matches no registered font.
    """
    cleaned = name.strip()
    if cleaned.upper() in registry:
        return cleaned.upper()
    key = registry.canonical_key_of(cleaned) or registry.key_of_label(cleaned)
    if key is None:
        raise ConversionError(f"Unknown font '{name}'.")
    return key


def detect_source_font(
    text: str,
    font_name: str,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> Optional[CanonicalKey]:
    """Return the key ``text`` in ``font_name`` would be converted from."""
    return effective_source_font(font_name, text, registry)


def target_fonts_for(
    text: str,
    font_name: str,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> list[str]:
    """Return the labels offered as targets for ``text`` in ``font_name``."""
    document = InMemoryDocument(text, font_name)
    return find_eligible_target_fonts(
        document, Selection(0, len(document)), registry
    )


def convert_text(
    text: str,
    font_name: str,
    destination: str,
    settings: ServiceSettings,
    transport: Optional[Transport] = None,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> TextConversion:
    """Convert ``text`` written in ``font_name`` through the remote service.

    ``destination`` may be a key, an installed font name or a label.
    """
    if transport is None:
        with HttpTransport() as owned:
            return convert_text(
                text, font_name, destination, settings, owned, registry
            )

    destination_key = resolve_font_key(destination, registry)
    document = InMemoryDocument(text, font_name)
    session = convert_selection(
        document,
        Selection(0, len(document)),
        destination_key,
        client=ConversionClient(transport, settings),
        registry=registry,
    )
    fonts = tuple(
        dict.fromkeys(document.font_at(i) for i in range(len(document)))
    )
    return TextConversion(text=document.text, font_names=fonts, session=session)


def probe(
    settings: ServiceSettings,
    transport: Optional[Transport] = None,
) -> bool:
    """Return ``True`` when the conversion service answers a demo request."""
    if transport is not None:
        return probe_service(ConversionClient(transport, settings))
    with HttpTransport() as owned:
        return probe_service(ConversionClient(owned, settings))
