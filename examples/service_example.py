#!/usr/bin/env python3
"""Convert text through a live conversion service.

Requires ``NEPALI_FONT_SERVICE_URL`` to point at the service endpoint.
"""

from __future__ import annotations

from nepali_font_converter import convert_text, probe
from nepali_font_converter.config import load_settings


def main() -> None:
    """Probe the service, then convert a Preeti word to Unicode and back."""
    settings = load_settings()
    if not probe(settings):
        raise SystemExit("FAIL: conversion service is unavailable.")

    to_unicode = convert_text("g]kfnL", "Preeti", "UNICODE", settings)
    if to_unicode.session.notice is not None:
        raise SystemExit(f"FAIL: {to_unicode.session.notice.message}")
    print(f"Unicode: {to_unicode.text} ({', '.join(to_unicode.font_names)})")

    back = convert_text(to_unicode.text, "Mangal", "प्रीति", settings)
    if back.session.notice is not None:
        raise SystemExit(f"FAIL: {back.session.notice.message}")
    print(f"Preeti: {back.text} ({', '.join(back.font_names)})")
    print("PASS: service example complete.")


if __name__ == "__main__":
    main()
