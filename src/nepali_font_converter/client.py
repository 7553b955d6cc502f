"""Conversion service client and failure classification."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from nepali_font_converter.application.ports import Transport, TransportResponse
from nepali_font_converter.application.results import ConversionOutcome, RemoteNotice
from nepali_font_converter.config import ServiceSettings
from nepali_font_converter.fonts.registry import UNICODE_KEY
from nepali_font_converter.schemas import (
    REDIRECT_TO_SERVICE_PAYMENT,
    REDIRECT_TO_SERVICE_RENEW,
    ConversionRequest,
    ConversionResponse,
    LanguageParams,
    WordPayload,
)
from nepali_font_converter.types import CanonicalKey, FailureReason

logger = logging.getLogger(__name__)

PROBE_SOURCE_KEY: CanonicalKey = "PREETI"
# "नेपाली" typed in Preeti.
PROBE_TEXT = "g]kfnL"

_MESSAGE_ID_REASONS: dict[str, FailureReason] = {
    REDIRECT_TO_SERVICE_RENEW: FailureReason.LICENSE_EXPIRED,
    REDIRECT_TO_SERVICE_PAYMENT: FailureReason.TRIAL_EXPIRED,
}


class ConversionClient:
    """Send one conversion request per run and classify the reply.

    Parameters
    ----------
    transport : Transport
        Delivers serialized payloads to the service.
    settings : ServiceSettings
        Service address, client identity and timeout.
    """

    def __init__(self, transport: Transport, settings: ServiceSettings) -> None:
        self.transport = transport
        self.settings = settings

    def build_request(
        self,
        source_key: CanonicalKey,
        destination_key: CanonicalKey,
        text: str,
    ) -> ConversionRequest:
        """Wrap a single word triple in the service envelope."""
        word = WordPayload(
            source_font=source_key,
            destination_font=destination_key,
            text=text,
        )
        return ConversionRequest(
            language_params=LanguageParams(
                language=self.settings.language,
                words=[word],
            ),
            word_plugin_id=self.settings.client_id,
        )

    def convert(
        self,
        source_key: CanonicalKey,
        destination_key: CanonicalKey,
        text: str,
    ) -> ConversionOutcome:
        """Convert ``text`` and classify the service reply.

        Never raises for transport or response problems; those become
        ``TRANSIENT_ERROR`` outcomes.
        """
        try:
            payload = self.build_request(source_key, destination_key, text).to_wire()
        except ValidationError:
            logger.warning("invalid conversion request", exc_info=True)
            return ConversionOutcome.fail(FailureReason.TRANSIENT_ERROR)

        response = self._post(payload)
        if response is None:
            return ConversionOutcome.fail(FailureReason.TRANSIENT_ERROR)
        if not response.ok:
            logger.warning("conversion service returned HTTP %s", response.status_code)
            return ConversionOutcome.fail(FailureReason.TRANSIENT_ERROR)
        return classify_response(response.body)

    def probe_availability(self) -> bool:
        """Return ``True`` when a demo conversion comes back with a 2xx status."""
        try:
            payload = self.build_request(
                PROBE_SOURCE_KEY, UNICODE_KEY, PROBE_TEXT
            ).to_wire()
        except ValidationError:
            logger.warning("invalid probe request", exc_info=True)
            return False
        response = self._post(payload)
        return response is not None and response.ok

    def notice_for(self, reason: FailureReason) -> RemoteNotice:
        """Build the user-facing notice for ``reason``."""
        return build_notice(reason, self.settings)

    def _post(self, payload: str) -> TransportResponse | None:
        try:
            return self.transport.post(
                self.settings.conversion_url,
                payload,
                self.settings.timeout_seconds,
            )
        except Exception:
            # Transport failures of any kind are per-run outcomes, not faults.
            logger.warning("conversion transport failed", exc_info=True)
            return None


def classify_response(body: str) -> ConversionOutcome:
    """Map a service response body onto a conversion outcome.

    Parameters
    ----------
    body : str
        JSON response text.

    Returns
    -------
    ConversionOutcome
        Success with the converted text, or a failure whose reason is derived
        from the two known message ids; anything else is transient.
    """
    try:
        raw = json.loads(body)
    except (TypeError, ValueError, RecursionError):
        logger.warning("conversion response is not JSON")
        return ConversionOutcome.fail(FailureReason.TRANSIENT_ERROR)
    if not isinstance(raw, dict):
        logger.warning("conversion response is not a JSON object")
        return ConversionOutcome.fail(FailureReason.TRANSIENT_ERROR)

    try:
        response = ConversionResponse.model_validate(raw)
    except ValidationError:
        logger.warning("unexpected conversion response shape", exc_info=True)
        return ConversionOutcome.fail(FailureReason.TRANSIENT_ERROR)

    if response.is_success:
        if response.result is None:
            logger.warning("successful conversion response without a result")
            return ConversionOutcome.fail(FailureReason.TRANSIENT_ERROR)
        return ConversionOutcome.success(response.result)

    reason = _MESSAGE_ID_REASONS.get(
        response.message_id or "", FailureReason.TRANSIENT_ERROR
    )
    return ConversionOutcome.fail(reason, message_id=response.message_id)


def build_notice(reason: FailureReason, settings: ServiceSettings) -> RemoteNotice:
    """Pick the address and message shown once for a failed session."""
    if reason is FailureReason.LICENSE_EXPIRED:
        address = settings.renewal_address()
        message = (
            "Nepali Font Service licence expired!\n"
            f"Go to the renewal page: {address}"
        )
    elif reason is FailureReason.TRIAL_EXPIRED:
        address = settings.payment_address()
        message = (
            "Nepali Font Service trial is over!\n"
            f"Go to the payment page: {address}"
        )
    else:
        address = settings.contact_url
        message = f"Unable to make font conversion. Go to the contact page: {address}"
    return RemoteNotice(reason=reason, address=address, message=message)
