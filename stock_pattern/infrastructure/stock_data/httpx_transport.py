"""
Infrastructure adapter: httpx → IQuoteTransport.

All httpx details are confined here; any httpx.HTTPError (connect failure,
timeout, non-2xx status) leaves this module as a TransportError.
"""

from typing import Optional

import httpx

from stock_pattern.domain.entities.quote_request import QuoteRequest
from stock_pattern.domain.exceptions import TransportError
from stock_pattern.domain.ports.quote_transport_port import IQuoteTransport
from stock_pattern.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class HttpxQuoteTransport(IQuoteTransport):
    """Blocking GET transport. Pass a shared httpx.Client to reuse connections."""

    def __init__(self, client: Optional[httpx.Client] = None, timeout: float = 10.0) -> None:
        self._client = client
        self._timeout = timeout

    def fetch(self, request: QuoteRequest) -> str:
        logger.debug("GET %s", request.full_url)
        try:
            if self._client is not None:
                response = self._client.get(
                    request.url,
                    params=list(request.params),
                    headers=request.headers,
                    timeout=self._timeout,
                )
            else:
                response = httpx.get(
                    request.url,
                    params=list(request.params),
                    headers=request.headers,
                    timeout=self._timeout,
                )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {request.url} failed: {exc}") from exc
        return response.text
