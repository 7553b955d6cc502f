"""Script detection and source-font resolution.

Decides whether text is Devanagari Unicode and which canonical font key a
run of text is encoded in. All checks rely only on code-point ranges and the
font registry.
"""

from __future__ import annotations

from collections.abc import Sequence

from nepali_font_converter.fonts.registry import (
    DEFAULT_REGISTRY,
    UNICODE_KEY,
    FontRegistry,
)
from nepali_font_converter.segment import TextUnit
from nepali_font_converter.types import CanonicalKey

DEVANAGARI_RANGE = (0x0900, 0x097F)
NEPALI_PUNCTUATION = frozenset(",;:?!\"—-")
TOLERANCE_THRESHOLD = 0.94


def _is_devanagari(ch: str) -> bool:
    low, high = DEVANAGARI_RANGE
    return low <= ord(ch) <= high


def _is_tolerated(ch: str) -> bool:
    return _is_devanagari(ch) or ch.isspace() or ch in NEPALI_PUNCTUATION


def devanagari_score(text: str) -> float:
    """Return the share of characters that are Devanagari, blank or punctuation.

    Parameters
    ----------
    text : str
        Text to score. It is not trimmed.

    Returns
    -------
    float
        Value in ``[0, 1]``; ``0.0`` for empty input.
    """
    if not text:
        return 0.0
    return sum(1 for ch in text if _is_tolerated(ch)) / len(text)


def is_unicode_devanagari(text: str, tolerant: bool = False) -> bool:
    """Check whether ``text`` is Devanagari Unicode.

    Parameters
    ----------
    text : str
        Candidate text; surrounding whitespace is ignored.
    tolerant : bool, default=False
        Accept embedded whitespace and Nepali punctuation, requiring at least
        ``TOLERANCE_THRESHOLD`` of the characters to qualify. In strict mode
        every character must be in the Devanagari block.

    Returns
    -------
    bool
        Strict mode is vacuously ``True`` for blank input; tolerant mode is
        ``False`` for it.
    """
    trimmed = text.strip()
    if not tolerant:
        return all(_is_devanagari(ch) for ch in trimmed)
    return devanagari_score(trimmed) >= TOLERANCE_THRESHOLD


def is_encoded_in_known_legacy_font(
    font_name: str,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> bool:
    """Return ``True`` when ``font_name`` is an installed legacy font name."""
    return font_name in registry.legacy_local_names()


def effective_source_font(
    font_name: str,
    text: str,
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> CanonicalKey | None:
    """Resolve the canonical key a run should be converted from.

    Parameters
    ----------
    font_name : str
        Declared font of the run. Blank means mixed formatting.
    text : str
        Run text.
    registry : FontRegistry
        Font table used for legacy-name lookups.

    Returns
    -------
    str | None
        Legacy key for a declared legacy font, the Unicode key for detected
        Devanagari text, otherwise ``None`` (unsupported).
    """
    if not font_name.strip():
        return None
    if is_encoded_in_known_legacy_font(font_name, registry):
        return registry.canonical_key_of(font_name)
    if is_unicode_devanagari(text, tolerant=True):
        return UNICODE_KEY
    return None


def common_font_name(units: Sequence[TextUnit]) -> str:
    """Return the font shared by all units, or ``""`` when they differ."""
    names = {unit.font_name for unit in units}
    if len(names) != 1:
        return ""
    return names.pop()


def has_nepali_text(
    units: Sequence[TextUnit],
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> bool:
    """Return ``True`` if any non-blank unit is in a legacy font or strictly Devanagari."""
    return any(
        is_encoded_in_known_legacy_font(unit.font_name, registry)
        or is_unicode_devanagari(unit.text)
        for unit in units
        if unit.font_name and not unit.is_blank
    )


def detect_selection_font(
    units: Sequence[TextUnit],
    registry: FontRegistry = DEFAULT_REGISTRY,
) -> CanonicalKey | None:
    """Detect the single font a whole selection is written in.

    Returns
    -------
    str | None
        Key of the shared legacy font, the Unicode key when the selection
        holds Nepali text otherwise, or ``None``.
    """
    font_name = common_font_name(units)
    if is_encoded_in_known_legacy_font(font_name, registry):
        return registry.canonical_key_of(font_name)
    if has_nepali_text(units, registry):
        return UNICODE_KEY
    return None
