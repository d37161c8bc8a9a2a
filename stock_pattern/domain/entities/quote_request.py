"""
Domain entity describing one quote-provider request.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass, field
from urllib.parse import urlencode


@dataclass(frozen=True)
class QuoteRequest:
    url: str
    params: tuple[tuple[str, str], ...] = ()
    headers: dict[str, str] = field(default_factory=dict, hash=False)

    @property
    def full_url(self) -> str:
        """The endpoint with its query string appended, parameters in order."""
        if not self.params:
            return self.url
        return f"{self.url}?{urlencode(self.params)}"
