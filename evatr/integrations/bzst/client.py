"""Blocking httpx client for the BZSt eVatR XML-RPC endpoint."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

import httpx

from evatr.config import settings
from evatr.errors import ServiceUnreachableError

logger = logging.getLogger(__name__)


class EvatrClient:
    """Thin wrapper around the eVatR confirmation endpoint.

    Endpoint: GET {base_url}?UstId_1=...&UstId_2=...[&Firmenname=...]
    Auth: none
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        connect_timeout: float | None = None,
    ) -> None:
        self._base_url = (base_url or settings.evatr.evatr_base_url).rstrip("?")
        self._timeout = httpx.Timeout(
            timeout or settings.evatr.evatr_timeout,
            connect=connect_timeout or settings.evatr.evatr_connect_timeout,
        )

    def build_url(self, params: dict[str, str]) -> str:
        """Append the URL-encoded query (keys sorted) to the base endpoint."""
        return f"{self._base_url}?{urlencode(sorted(params.items()))}"

    def fetch(self, params: dict[str, str]) -> bytes:
        """Issue one GET request and return the raw XML body.

        Raises:
            ServiceUnreachableError: On timeout, transport failure or a non-2xx status.
        """
        url = self.build_url(params)
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.get(url)
                response.raise_for_status()
                body = response.content

        except httpx.TimeoutException as exc:
            logger.warning("eVatR request timed out after %ss", self._timeout.read)
            raise ServiceUnreachableError("the eVatR service is offline") from exc

        except httpx.HTTPStatusError as exc:
            logger.warning("eVatR HTTP error %s", exc.response.status_code)
            raise ServiceUnreachableError("the eVatR service is offline") from exc

        except httpx.TransportError as exc:
            logger.warning("eVatR transport error: %s", exc)
            raise ServiceUnreachableError("the eVatR service is offline") from exc

        logger.debug("eVatR answered with %d bytes", len(body))
        return body


# Module-level singleton
evatr_client = EvatrClient()
