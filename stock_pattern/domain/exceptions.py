"""
Domain exceptions raised by infrastructure adapters.
Adapters translate third-party errors (httpx, OSError) into these so the
application layer never imports an SDK just to catch its exceptions.
"""


class TransportError(Exception):
    """The quote provider could not be reached or answered with an error."""


class FileWriteError(Exception):
    """An output file could not be created or appended to."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
