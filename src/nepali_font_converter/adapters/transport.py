"""HTTP transport adapter backed by httpx."""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from nepali_font_converter.application.ports import TransportResponse
from nepali_font_converter.errors import TransportError

logger = logging.getLogger(__name__)

FORM_FIELD = "data"


class HttpTransport:
    """Post JSON payloads as the ``data`` field of a multipart form.

    Parameters
    ----------
    client : httpx.Client | None, default=None
        Client to send requests with. A new one is created (and owned) when
        omitted.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers={"Accept": "application/json"},
        )

    def post(self, address: str, payload: str, timeout: float) -> TransportResponse:
        """Send ``payload`` to ``address``.

        Raises
        ------
        TransportError
            On connection failures, timeouts and other httpx errors.
        """
        files = {FORM_FIELD: (None, payload.encode("utf-8"), "application/json")}
        try:
            response = self._client.post(address, files=files, timeout=timeout)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request to {address} timed out after {timeout}s") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {address} failed: {exc}") from exc
        logger.debug("POST %s -> %s", address, response.status_code)
        return TransportResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
