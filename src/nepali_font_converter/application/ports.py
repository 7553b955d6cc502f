"""Application ports for the host document and the network transport."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from nepali_font_converter.segment import TextUnit
from nepali_font_converter.types import Offset


@dataclass(frozen=True)
class TransportResponse:
    """Status code and body text returned by a transport call."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """Deliver a serialized payload to a remote address."""

    def post(self, address: str, payload: str, timeout: float) -> TransportResponse:
        """Post payload and return the response; may raise on network failure."""


class DocumentHost(Protocol):
    """Rich-text host exposing units, reads and font-changing replacement."""

    def text_units(self, start: Offset, end: Offset) -> Sequence[TextUnit]:
        """Return the units overlapping ``[start, end)`` in document order."""

    def read(self, start: Offset, end: Offset) -> str:
        """Return the text in ``[start, end)``."""

    def in_excluded_zone(self, start: Offset, end: Offset) -> bool:
        """Return ``True`` when the range lies in a zone that must not be converted."""

    def replace(self, start: Offset, end: Offset, text: str, font_name: str) -> None:
        """Replace ``[start, end)`` with ``text`` rendered in ``font_name``."""

    def document_end(self) -> Offset | None:
        """Offset just past the end-of-document mark, or ``None`` if there is none."""
