"""Page source interface."""

from typing import Protocol


class PageSource(Protocol):
    """Interface for retrieving the raw page markup."""

    def fetch(self) -> str:
        """Fetch the page. Raises TransportError or StatusError on failure."""
        ...
