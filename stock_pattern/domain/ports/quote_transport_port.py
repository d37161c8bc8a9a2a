"""
Port (interface) for the raw HTTP transport behind a quote provider.
Infrastructure adapters (e.g. HttpxQuoteTransport) must implement this interface.
"""

from abc import ABC, abstractmethod

from stock_pattern.domain.entities.quote_request import QuoteRequest


class IQuoteTransport(ABC):
    @abstractmethod
    def fetch(self, request: QuoteRequest) -> str:
        """Perform the request and return the response body as text.

        Raises:
            TransportError: on connection failure, timeout, or non-2xx status.
        """
        ...
