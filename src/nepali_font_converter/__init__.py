"""Top-level API for Nepali legacy font conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nepali_font_converter.classify import (
    effective_source_font,
    is_encoded_in_known_legacy_font,
    is_unicode_devanagari,
)
from nepali_font_converter.fonts.registry import (
    DEFAULT_REGISTRY,
    UNICODE_KEY,
    FontEntry,
    FontRegistry,
)
from nepali_font_converter.segment import Run, Selection, TextUnit, segment
from nepali_font_converter.types import FailureReason, OutcomeStatus

if TYPE_CHECKING:
    from nepali_font_converter.api import TextConversion
    from nepali_font_converter.application.ports import Transport
    from nepali_font_converter.config import ServiceSettings

__version__ = "0.1.0"


def convert_text(
    text: str,
    font_name: str,
    destination: str,
    settings: ServiceSettings,
    transport: Transport | None = None,
) -> TextConversion:
    """Convert text written in a Nepali font through the remote service.

    Parameters
    ----------
    text : str
        Text to convert.
    font_name : str
        Installed font name the text is written in (e.g. ``"Preeti"``,
        ``"Mangal"``).
    destination : str
        Target font as key, installed name or label.
    settings : ServiceSettings
        Service addresses and client identity.
    transport : Transport, optional
        Custom transport; an httpx-based transport is used when omitted.

    Returns
    -------
    TextConversion
        Resulting text, fonts and the per-run session result.
    """
    from .api import convert_text as _impl

    return _impl(text, font_name, destination, settings, transport)


def probe(settings: ServiceSettings, transport: Transport | None = None) -> bool:
    """Check whether the conversion service is reachable.

    Parameters
    ----------
    settings : ServiceSettings
        Service addresses and client identity.
    transport : Transport, optional
        Custom transport; an httpx-based transport is used when omitted.

    Returns
    -------
    bool
        ``True`` when a demo conversion returns a successful HTTP status.
    """
    from .api import probe as _impl

    return _impl(settings, transport)


__all__ = [
    "DEFAULT_REGISTRY",
    "UNICODE_KEY",
    "FailureReason",
    "FontEntry",
    "FontRegistry",
    "OutcomeStatus",
    "Run",
    "Selection",
    "TextUnit",
    "convert_text",
    "effective_source_font",
    "is_encoded_in_known_legacy_font",
    "is_unicode_devanagari",
    "probe",
    "segment",
]
