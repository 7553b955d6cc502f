"""Segmentation of host text units into same-font runs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from nepali_font_converter.types import Offset


@dataclass(frozen=True)
class Selection:
    """Half-open host range ``[start, end)``."""

    start: Offset
    end: Offset


@dataclass(frozen=True)
class TextUnit:
    """Smallest addressable piece of host text.

    Parameters
    ----------
    start : int
        Inclusive start offset.
    end : int
        Exclusive end offset.
    text : str
        Unit text.
    font_name : str
        Declared font name; empty when the unit mixes fonts.
    """

    start: Offset
    end: Offset
    text: str
    font_name: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class Run:
    """Maximal span of units sharing one effective font."""

    start: Offset
    end: Offset
    font_name: str

    def shifted(self, delta: int) -> Run:
        """Return the run moved by ``delta`` offsets."""
        return replace(self, start=self.start + delta, end=self.end + delta)


def segment(
    units: Iterable[TextUnit],
    *,
    document_end: Offset | None = None,
) -> list[Run]:
    """Merge adjacent units into maximal same-font runs.

    A blank unit never starts a new run: it extends the current one and keeps
    the current font name.

    Parameters
    ----------
    units : Iterable[TextUnit]
        Units in document order.
    document_end : int | None, default=None
        Offset just past the host's end-of-document mark. When the final run
        reaches it, the run is pulled back by one so the mark is not rewritten.

    Returns
    -------
    list[Run]
        Ordered, disjoint runs covering the input units.
    """
    runs: list[Run] = []
    current: Run | None = None
    for unit in units:
        if current is None:
            current = Run(unit.start, unit.end, unit.font_name)
        elif unit.is_blank or unit.font_name == current.font_name:
            current = replace(current, end=unit.end)
        else:
            runs.append(current)
            current = Run(unit.start, unit.end, unit.font_name)

    if current is None:
        return runs

    if document_end is not None and current.end == document_end:
        if current.end - current.start > 1:
            current = replace(current, end=current.end - 1)
    runs.append(current)
    return runs
