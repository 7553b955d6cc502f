"""Service settings read from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from nepali_font_converter.errors import ConfigurationError

DEFAULT_CONTACT_URL = "https://hijje.com/#/user/contact"
# Fixed install identifier; not derived from machine characteristics.
DEFAULT_CLIENT_ID = "fontconversion-9998"
DEFAULT_TIMEOUT_SECONDS = 5.0

ENV_SERVICE_URL = "NEPALI_FONT_SERVICE_URL"
ENV_RENEW_URL = "NEPALI_FONT_RENEW_URL"
ENV_PAYMENT_URL = "NEPALI_FONT_PAYMENT_URL"
ENV_CONTACT_URL = "NEPALI_FONT_CONTACT_URL"
ENV_CLIENT_ID = "NEPALI_FONT_CLIENT_ID"
ENV_TIMEOUT = "NEPALI_FONT_TIMEOUT"


class ServiceSettings(BaseModel):
    """Addresses and identity used to talk to the conversion service."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    conversion_url: str
    renew_url: str | None = None
    payment_url: str | None = None
    contact_url: str = DEFAULT_CONTACT_URL
    client_id: str = DEFAULT_CLIENT_ID
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)
    language: str = "ne"

    @field_validator("conversion_url", "contact_url", "client_id")
    @classmethod
    def _validate_not_blank(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("value cannot be blank.")
        return cleaned

    @field_validator("renew_url", "payment_url")
    @classmethod
    def _blank_as_missing(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    def renewal_address(self) -> str:
        """Renewal page for this install, or the contact page if unset."""
        if self.renew_url is None:
            return self.contact_url
        return f"{self.renew_url}?appId={self.client_id}"

    def payment_address(self) -> str:
        """Payment page for this install, or the contact page if unset."""
        if self.payment_url is None:
            return self.contact_url
        return f"{self.payment_url}?appId={self.client_id}"


def load_settings(**overrides: object) -> ServiceSettings:
    """Build settings from ``NEPALI_FONT_*`` variables plus explicit overrides.

    Overrides whose value is ``None`` are ignored so CLI options can be passed
    through unconditionally.

    Raises
    ------
    ConfigurationError
        If the conversion URL is missing or a value is invalid.
    """
    values: dict[str, object] = {}
    env_map = {
        "conversion_url": ENV_SERVICE_URL,
        "renew_url": ENV_RENEW_URL,
        "payment_url": ENV_PAYMENT_URL,
        "contact_url": ENV_CONTACT_URL,
        "client_id": ENV_CLIENT_ID,
        "timeout_seconds": ENV_TIMEOUT,
    }
    for field, env_name in env_map.items():
        raw = os.getenv(env_name)
        if raw is not None and raw.strip():
            values[field] = raw
    values.update({key: value for key, value in overrides.items() if value is not None})

    if "conversion_url" not in values:
        raise ConfigurationError(
            f"Conversion service URL is not configured. Set {ENV_SERVICE_URL} "
            "or pass --service-url."
        )
    try:
        return ServiceSettings(**values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid service settings: {exc}") from exc
