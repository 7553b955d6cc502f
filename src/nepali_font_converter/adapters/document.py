"""In-memory rich-text host: a character buffer with per-character fonts."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, replace

from nepali_font_converter.classify import NEPALI_PUNCTUATION
from nepali_font_converter.segment import TextUnit
from nepali_font_converter.types import Offset

EXCLUDED_ZONE_KINDS = frozenset(
    {
        "footnote",
        "endnote",
        "comment",
        "citation",
        "bibliography",
        "content-control",
        "clipboard",
    }
)
END_OF_DOCUMENT_MARK = "\r"

_PUNCTUATION_CLASS = "".join(re.escape(ch) for ch in sorted(NEPALI_PUNCTUATION))
# A punctuation mark or a word, each with its trailing whitespace, or
# whitespace with nothing before it.
_WORD_PATTERN = re.compile(
    rf"[{_PUNCTUATION_CLASS}]\s*|[^\s{_PUNCTUATION_CLASS}]+\s*|\s+"
)


@dataclass(frozen=True)
class ExcludedZone:
    """Range of the document that must never be converted."""

    start: Offset
    end: Offset
    kind: str


class InMemoryDocument:
    """Linear text buffer implementing the ``DocumentHost`` port.

    Parameters
    ----------
    text : str, default=""
        Initial text.
    font_name : str, default=""
        Font of the initial text.
    end_mark : bool, default=False
        Terminate the buffer with an end-of-document mark, like word
        processors do. The mark is never part of a conversion.
    """

    def __init__(
        self,
        text: str = "",
        font_name: str = "",
        *,
        end_mark: bool = False,
    ) -> None:
        self._chars: list[str] = []
        self._fonts: list[str] = []
        self._zones: list[ExcludedZone] = []
        self._end_mark = end_mark
        if end_mark:
            self._chars.append(END_OF_DOCUMENT_MARK)
            self._fonts.append(font_name)
        if text:
            self.append(text, font_name)

    @classmethod
    def from_spans(
        cls,
        spans: Iterable[tuple[str, str]],
        *,
        end_mark: bool = False,
    ) -> InMemoryDocument:
        """Build a document from ``(text, font_name)`` pairs."""
        document = cls(end_mark=end_mark)
        for text, font_name in spans:
            document.append(text, font_name)
        return document

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def append(self, text: str, font_name: str) -> None:
        """Append text before the end-of-document mark, if any."""
        at = len(self._chars) - 1 if self._end_mark else len(self._chars)
        self._chars[at:at] = list(text)
        self._fonts[at:at] = [font_name] * len(text)
        if self._end_mark:
            self._fonts[-1] = font_name

    def font_at(self, offset: Offset) -> str:
        self._check_range(offset, offset + 1)
        return self._fonts[offset]

    def exclude(self, start: Offset, end: Offset, kind: str = "comment") -> None:
        """Mark ``[start, end)`` as a zone that must not be converted."""
        self._check_range(start, end)
        if kind not in EXCLUDED_ZONE_KINDS:
            raise ValueError(
                f"unknown zone kind '{kind}'; expected one of: "
                + ", ".join(sorted(EXCLUDED_ZONE_KINDS))
            )
        self._zones.append(ExcludedZone(start, end, kind))

    def text_units(self, start: Offset, end: Offset) -> list[TextUnit]:
        """Split ``[start, end)`` into words, breaking at font changes."""
        self._check_range(start, end)
        units: list[TextUnit] = []
        for stretch_start, stretch_end in self._font_stretches(start, end):
            stretch = "".join(self._chars[stretch_start:stretch_end])
            font_name = self._fonts[stretch_start]
            for match in _WORD_PATTERN.finditer(stretch):
                units.append(
                    TextUnit(
                        start=stretch_start + match.start(),
                        end=stretch_start + match.end(),
                        text=match.group(),
                        font_name=font_name,
                    )
                )
        return units

    def read(self, start: Offset, end: Offset) -> str:
        self._check_range(start, end)
        return "".join(self._chars[start:end])

    def in_excluded_zone(self, start: Offset, end: Offset) -> bool:
        return any(zone.start < end and start < zone.end for zone in self._zones)

    def replace(self, start: Offset, end: Offset, text: str, font_name: str) -> None:
        """Replace ``[start, end)`` and move later excluded zones accordingly."""
        self._check_range(start, end)
        self._chars[start:end] = list(text)
        self._fonts[start:end] = [font_name] * len(text)
        delta = len(text) - (end - start)
        self._zones = [
            replace(zone, start=zone.start + delta, end=zone.end + delta)
            if zone.start >= end
            else zone
            for zone in self._zones
        ]

    def document_end(self) -> Offset | None:
        if not self._end_mark:
            return None
        return len(self._chars)

    def _font_stretches(self, start: Offset, end: Offset) -> list[tuple[int, int]]:
        stretches: list[tuple[int, int]] = []
        cursor = start
        for offset in range(start + 1, end + 1):
            if offset == end or self._fonts[offset] != self._fonts[cursor]:
                stretches.append((cursor, offset))
                cursor = offset
        return stretches

    def _check_range(self, start: Offset, end: Offset) -> None:
        if start < 0 or end < start or end > len(self._chars):
            raise ValueError(
                f"range [{start}, {end}) is outside the document (length {len(self._chars)})"
            )
