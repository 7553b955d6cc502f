"""Pydantic schemas for the conversion service wire format."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

ACTION_FONT_CONVERSION = "fontconversion"
DEFAULT_LANGUAGE = "ne"
STATUS_SUCCESS = "success"
REDIRECT_TO_SERVICE_RENEW = "REDIRECT_TO_SERVICE_RENEW"
REDIRECT_TO_SERVICE_PAYMENT = "REDIRECT_TO_SERVICE_PAYMENT"


class WordPayload(BaseModel):
    """One text fragment to convert."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    source_font: str = Field(alias="sourceFont")
    destination_font: str = Field(alias="destinationFont")
    text: str

    @field_validator("source_font", "destination_font")
    @classmethod
    def _validate_font_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("font keys cannot be blank.")
        return value


class LanguageParams(BaseModel):
    """Language wrapper around the words to convert."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    language: str = DEFAULT_LANGUAGE
    words: list[WordPayload] = Field(default_factory=list)


class ConversionRequest(BaseModel):
    """Request body posted to the conversion service."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    request_method: str = Field(default=ACTION_FONT_CONVERSION, alias="requestMethod")
    language_params: LanguageParams = Field(alias="languageParams")
    token: str = ""
    word_plugin_id: str = Field(alias="wordPluginId")

    def to_wire(self) -> str:
        """Serialize with the service's camelCase field names."""
        return self.model_dump_json(by_alias=True)


class ConversionResponse(BaseModel):
    """Response body returned by the conversion service."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    status: str | None = None
    result: str | None = None
    message_id: str | None = Field(default=None, alias="messageId")

    @field_validator("status", "result", "message_id", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> str | None:
        if value is None:
            return None
        return str(value)

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS
