"""Font identity registry: canonical key, local font name and display label."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from nepali_font_converter.errors import RegistryError
from nepali_font_converter.types import CanonicalKey

UNICODE_KEY: CanonicalKey = "UNICODE"
UNICODE_LOCAL_NAME = "Mangal"


@dataclass(frozen=True)
class FontEntry:
    """One supported font.

    Parameters
    ----------
    key : str
        Identifier recognized by the conversion service.
    local_name : str
        Font family name as installed on the host.
    label : str
        Devanagari label shown to the user.
    """

    key: CanonicalKey
    local_name: str
    label: str


DEFAULT_FONT_TABLE: tuple[FontEntry, ...] = (
    FontEntry("PREETI", "Preeti", "प्रीति"),
    FontEntry("KANTIPUR", "Kantipur", "कान्तिपूर"),
    FontEntry("HIMLAB", "Himalb", "हिमाली"),
    FontEntry("AAKRITI", "Aakriti", "आकृति"),
    FontEntry("AALEKH", "Aalekh", "आलेख"),
    FontEntry("GANESS", "Ganess", "गणेश"),
    FontEntry("NAVJEEVAN", "Navjeevan", "नवजीवन"),
    FontEntry("PCSNEPALI", "PCS NEPALI", "पीसीएस नेपाली"),
    FontEntry("SHANGRILA", "Shangrila Numeric", "साङ्ग्रिला"),
    FontEntry("SHREENATH", "Shreenath Bold", "श्रीनाथ"),
    FontEntry("SUMOD", "Sumod Acharya", "सूमोद"),
    FontEntry(UNICODE_KEY, UNICODE_LOCAL_NAME, "यूनिकोड"),
)


class FontRegistry:
    """Immutable lookup table over a fixed set of fonts.

    All lookups are linear scans over the entries; the table is small.
    Unknown names degrade to identity or ``None`` instead of raising so that
    text in unmapped fonts is left untouched.
    """

    def __init__(self, entries: Iterable[FontEntry]) -> None:
        table = tuple(entries)
        _validate(table)
        self._entries = table
        self._legacy_local_names = tuple(
            entry.local_name for entry in table if entry.key != UNICODE_KEY
        )

    @property
    def entries(self) -> tuple[FontEntry, ...]:
        """Registered entries in registration order."""
        return self._entries

    def __iter__(self) -> Iterator[FontEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return any(entry.key == key for entry in self._entries)

    def canonical_key_of(self, local_name: str) -> CanonicalKey | None:
        """Return the key registered for ``local_name``, if any."""
        for entry in self._entries:
            if entry.local_name == local_name:
                return entry.key
        return None

    def local_name_of(self, key: CanonicalKey) -> str:
        """Return the installed font name for ``key``, or ``key`` itself."""
        for entry in self._entries:
            if entry.key == key:
                return entry.local_name
        return key

    def label_of(self, key: CanonicalKey) -> str:
        """Return the display label for ``key``, or ``key`` itself."""
        for entry in self._entries:
            if entry.key == key:
                return entry.label
        return key

    def key_of_label(self, label: str) -> CanonicalKey | None:
        """Return the key whose display label is ``label``."""
        for entry in self._entries:
            if entry.label == label:
                return entry.key
        return None

    def all_labels(self) -> tuple[str, ...]:
        """Return display labels in registration order."""
        return tuple(entry.label for entry in self._entries)

    def legacy_local_names(self) -> tuple[str, ...]:
        """Return installed names of every non-Unicode font."""
        return self._legacy_local_names

    def is_legacy_key(self, key: CanonicalKey) -> bool:
        """Return ``True`` for every registered key except the Unicode key."""
        return key != UNICODE_KEY and key in self


def _validate(table: tuple[FontEntry, ...]) -> None:
    """Check key uniqueness and the single Unicode entry.

    Raises
    ------
    RegistryError
        If the table violates an invariant.
    """
    keys = [entry.key for entry in table]
    duplicates = sorted({key for key in keys if keys.count(key) > 1})
    if duplicates:
        raise RegistryError(f"Duplicate font keys: {', '.join(duplicates)}")

    unicode_entries = [
        entry for entry in table if entry.local_name == UNICODE_LOCAL_NAME
    ]
    if len(unicode_entries) != 1 or unicode_entries[0].key != UNICODE_KEY:
        raise RegistryError(
            f"Exactly one entry must map '{UNICODE_LOCAL_NAME}' to '{UNICODE_KEY}'."
        )


DEFAULT_REGISTRY = FontRegistry(DEFAULT_FONT_TABLE)
