#!/usr/bin/env python3
"""Convert a mixed-font document offline using a scripted conversion service."""

from __future__ import annotations

import json

from nepali_font_converter.adapters.document import InMemoryDocument
from nepali_font_converter.application import (
    TransportResponse,
    convert_selection,
    find_eligible_target_fonts,
    is_selection_eligible,
)
from nepali_font_converter.client import ConversionClient
from nepali_font_converter.config import ServiceSettings
from nepali_font_converter.segment import Selection

_DICTIONARY = {
    "g]kfnL ljBfno": "नेपाली विद्यालय",
}


class DictionaryTransport:
    """Answer conversion requests from a fixed word table."""

    def post(self, address: str, payload: str, timeout: float) -> TransportResponse:
        del address, timeout
        word = json.loads(payload)["languageParams"]["words"][0]
        converted = _DICTIONARY.get(word["text"])
        if converted is None:
            body = {"status": "fail", "messageId": "NOT_IN_DICTIONARY"}
        else:
            body = {"status": "success", "result": converted}
        return TransportResponse(200, json.dumps(body, ensure_ascii=False))


def main() -> None:
    """Convert the Preeti part of a document and print the result."""
    document = InMemoryDocument.from_spans(
        [("School: ", "Arial"), ("g]kfnL ", "Preeti"), ("ljBfno", "Preeti")],
        end_mark=True,
    )
    selection = Selection(0, len(document))
    if not is_selection_eligible(document, selection):
        raise SystemExit("FAIL: selection should contain Nepali text.")
    print("targets:", ", ".join(find_eligible_target_fonts(document, selection)))

    settings = ServiceSettings(conversion_url="https://fonts.invalid/convert")
    session = convert_selection(
        document,
        selection,
        "UNICODE",
        client=ConversionClient(DictionaryTransport(), settings),
    )

    if session.has_failure:
        raise SystemExit(f"FAIL: {session.notice.message if session.notice else session.failure}")
    print(repr(document.text))
    print(f"PASS: converted {session.converted_count} run(s), skipped {session.skipped_count}.")


if __name__ == "__main__":
    main()
