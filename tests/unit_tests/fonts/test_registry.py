"""Unit tests for the font identity registry."""

from __future__ import annotations

import pytest

from nepali_font_converter.errors import RegistryError
from nepali_font_converter.fonts.registry import (
    DEFAULT_FONT_TABLE,
    DEFAULT_REGISTRY,
    UNICODE_KEY,
    UNICODE_LOCAL_NAME,
    FontEntry,
    FontRegistry,
)


@pytest.mark.parametrize("entry", DEFAULT_FONT_TABLE, ids=lambda e: e.key)
def test_local_name_roundtrip(entry: FontEntry) -> None:
    """Map every installed name to its key and back."""
    key = DEFAULT_REGISTRY.canonical_key_of(entry.local_name)
    assert key == entry.key
    assert DEFAULT_REGISTRY.local_name_of(key) == entry.local_name


def test_unknown_lookups_degrade_to_identity() -> None:
    """Return unknown keys unchanged instead of raising."""
    assert DEFAULT_REGISTRY.local_name_of("NOT_A_FONT") == "NOT_A_FONT"
    assert DEFAULT_REGISTRY.label_of("NOT_A_FONT") == "NOT_A_FONT"
    assert DEFAULT_REGISTRY.canonical_key_of("Arial") is None
    assert DEFAULT_REGISTRY.key_of_label("Arial") is None


def test_all_labels_keeps_registration_order() -> None:
    """List labels in table order with Unicode last."""
    labels = DEFAULT_REGISTRY.all_labels()
    assert labels == tuple(entry.label for entry in DEFAULT_FONT_TABLE)
    assert labels[0] == "प्रीति"
    assert labels[-1] == "यूनिकोड"
    assert len(labels) == 12


def test_is_legacy_key() -> None:
    """Treat every registered key except Unicode as legacy."""
    assert DEFAULT_REGISTRY.is_legacy_key("PREETI")
    assert DEFAULT_REGISTRY.is_legacy_key("HIMLAB")
    assert not DEFAULT_REGISTRY.is_legacy_key(UNICODE_KEY)
    assert not DEFAULT_REGISTRY.is_legacy_key("NOT_A_FONT")


def test_legacy_local_names_exclude_unicode_font() -> None:
    """Keep the Unicode display font out of legacy-name matching."""
    names = DEFAULT_REGISTRY.legacy_local_names()
    assert UNICODE_LOCAL_NAME not in names
    assert "Preeti" in names
    assert len(names) == len(DEFAULT_REGISTRY) - 1


def test_label_and_key_lookups_agree() -> None:
    """Resolve labels back to keys."""
    for entry in DEFAULT_REGISTRY:
        assert DEFAULT_REGISTRY.key_of_label(DEFAULT_REGISTRY.label_of(entry.key)) == entry.key


def test_duplicate_keys_rejected() -> None:
    """Refuse tables with repeated keys."""
    with pytest.raises(RegistryError, match="Duplicate font keys: PREETI"):
        FontRegistry(
            [
                FontEntry("PREETI", "Preeti", "a"),
                FontEntry("PREETI", "Preeti 2", "b"),
                FontEntry(UNICODE_KEY, UNICODE_LOCAL_NAME, "c"),
            ]
        )


@pytest.mark.parametrize(
    "entries",
    [
        [FontEntry("PREETI", "Preeti", "a")],
        [FontEntry("PREETI", "Preeti", "a"), FontEntry("UNI", UNICODE_LOCAL_NAME, "c")],
    ],
)
def test_unicode_entry_required(entries: list[FontEntry]) -> None:
    """Require exactly one Mangal entry keyed UNICODE."""
    with pytest.raises(RegistryError, match="Exactly one entry"):
        FontRegistry(entries)


def test_registry_is_immutable_snapshot() -> None:
    """Copy the source table so later mutation has no effect."""
    table = list(DEFAULT_FONT_TABLE)
    registry = FontRegistry(table)
    table.clear()
    assert len(registry) == len(DEFAULT_FONT_TABLE)
    with pytest.raises(AttributeError):
        registry.entries[0].key = "X"  # type: ignore[misc]
