"""Unit tests for script detection and source-font resolution."""

from __future__ import annotations

import pytest

from nepali_font_converter.classify import (
    detect_selection_font,
    devanagari_score,
    effective_source_font,
    has_nepali_text,
    is_encoded_in_known_legacy_font,
    is_unicode_devanagari,
)
from nepali_font_converter.fonts.registry import UNICODE_KEY
from nepali_font_converter.segment import TextUnit

NEPALI = "नेपाली"


def _tolerant_sample(latin: int) -> str:
    return "क" * 60 + " " * 20 + "," * (20 - latin) + "x" * latin


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (NEPALI, True),
        (f"  {NEPALI}\n", True),
        ("नेपाली भाषा", False),
        ("नेपालीa", False),
        ("abc", False),
        ("", True),
        ("   ", True),
    ],
)
def test_strict_mode(text: str, expected: bool) -> None:
    """Require every trimmed character in U+0900..U+097F; blank text passes vacuously."""
    assert is_unicode_devanagari(text) is expected


def test_tolerant_mode_accepts_95_percent() -> None:
    """Accept 95 qualifying characters out of 100."""
    text = _tolerant_sample(latin=5)
    assert len(text) == 100
    assert devanagari_score(text) == pytest.approx(0.95)
    assert is_unicode_devanagari(text, tolerant=True)


def test_tolerant_mode_rejects_90_percent() -> None:
    """Reject 90 qualifying characters out of 100."""
    text = _tolerant_sample(latin=10)
    assert len(text) == 100
    assert not is_unicode_devanagari(text, tolerant=True)


def test_tolerant_mode_counts_nepali_punctuation() -> None:
    """Count the fixed punctuation set and whitespace as Devanagari."""
    assert is_unicode_devanagari('नेपाली, "भाषा" — हो? हो! ठीक; अब: यो-त्यो', tolerant=True)
    assert not is_unicode_devanagari("Preeti text g]kfnL", tolerant=True)


def test_devanagari_score_empty() -> None:
    assert devanagari_score("") == 0.0


@pytest.mark.parametrize(
    ("font_name", "expected"),
    [("Preeti", True), ("PCS NEPALI", True), ("Mangal", False), ("preeti", False), ("", False)],
)
def test_known_legacy_font(font_name: str, expected: bool) -> None:
    """Match installed legacy names exactly."""
    assert is_encoded_in_known_legacy_font(font_name) is expected


@pytest.mark.parametrize(
    ("font_name", "text", "expected"),
    [
        ("Preeti", "g]kfnL", "PREETI"),
        ("Kantipur", "g]kfnL", "KANTIPUR"),
        ("Mangal", NEPALI, UNICODE_KEY),
        ("Arial", NEPALI + ", भाषा", UNICODE_KEY),
        ("Arial", "hello world", None),
        ("Mangal", "hello world", None),
        ("", NEPALI, None),
        ("   ", "g]kfnL", None),
    ],
)
def test_effective_source_font(font_name: str, text: str, expected: str | None) -> None:
    """Resolve declared legacy font, detected Unicode, or unsupported."""
    assert effective_source_font(font_name, text) == expected


def test_detect_selection_font_prefers_shared_legacy_font() -> None:
    """Report the shared legacy font of all units."""
    units = [TextUnit(0, 4, "g]k ", "Preeti"), TextUnit(4, 8, "fnL ", "Preeti")]
    assert detect_selection_font(units) == "PREETI"


def test_detect_selection_font_unicode_and_unsupported() -> None:
    """Fall back to Unicode for Devanagari text and None otherwise."""
    unicode_units = [TextUnit(0, 7, NEPALI + " ", "Mangal")]
    latin_units = [TextUnit(0, 5, "hello", "Arial")]
    assert detect_selection_font(unicode_units) == UNICODE_KEY
    assert detect_selection_font(latin_units) is None


def test_has_nepali_text_ignores_units_without_font() -> None:
    """Skip units whose font is unknown to the host."""
    assert not has_nepali_text([TextUnit(0, 6, NEPALI, "")])
    assert has_nepali_text([TextUnit(0, 5, "hello", "Arial"), TextUnit(5, 8, "g]k", "Preeti")])


def test_tolerant_mode_rejects_blank_text() -> None:
    assert not is_unicode_devanagari("", tolerant=True)
    assert not is_unicode_devanagari(" \t\n", tolerant=True)


def test_has_nepali_text_ignores_blank_units() -> None:
    """Blank units pass the strict check vacuously but never count as Nepali."""
    assert not has_nepali_text([TextUnit(0, 3, "   ", "Mangal")])
    assert not has_nepali_text([TextUnit(0, 1, " ", "Arial"), TextUnit(1, 6, "hello", "Arial")])
