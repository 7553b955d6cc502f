"""Unit tests for the service wire schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from nepali_font_converter.schemas import ConversionResponse, WordPayload


def test_word_payload_accepts_field_names_and_aliases() -> None:
    by_name = WordPayload(source_font="PREETI", destination_font="UNICODE", text="x")
    by_alias = WordPayload.model_validate(
        {"sourceFont": "PREETI", "destinationFont": "UNICODE", "text": "x"}
    )
    assert by_name == by_alias


@pytest.mark.parametrize("key", ["", "   "])
def test_word_payload_rejects_blank_font_keys(key: str) -> None:
    with pytest.raises(ValidationError, match="font keys cannot be blank"):
        WordPayload(source_font=key, destination_font="UNICODE", text="x")


def test_response_ignores_unknown_fields_and_stringifies() -> None:
    """Accept extra service fields and non-string scalar values."""
    response = ConversionResponse.model_validate(
        {"status": "success", "result": 42, "messageId": None, "elapsed": 0.3}
    )
    assert response.is_success
    assert response.result == "42"
    assert response.message_id is None
