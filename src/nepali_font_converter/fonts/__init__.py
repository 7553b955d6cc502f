"""Supported fonts and their identities."""

from .registry import (
    DEFAULT_FONT_TABLE,
    DEFAULT_REGISTRY,
    UNICODE_KEY,
    UNICODE_LOCAL_NAME,
    FontEntry,
    FontRegistry,
)

__all__ = [
    "DEFAULT_FONT_TABLE",
    "DEFAULT_REGISTRY",
    "UNICODE_KEY",
    "UNICODE_LOCAL_NAME",
    "FontEntry",
    "FontRegistry",
]
