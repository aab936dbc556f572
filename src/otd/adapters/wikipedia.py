"""Wikipedia adapter - HTTP client for the "On this day" page."""

import logging

import requests

from otd.config import Config, load_config

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the page could not be retrieved."""

    pass


class TransportError(FetchError):
    """Raised when the HTTP exchange could not be completed."""

    pass


class StatusError(FetchError):
    """Raised when the server answers with anything but 200."""

    def __init__(self, code: int, reason: str = ""):
        self.code = code
        self.reason = reason
        status = f"{code} {reason}".strip()
        super().__init__(f"status code error: {status}")


class WikipediaPageSource:
    """
    Wikipedia page adapter.

    Implements PageSource protocol. One GET per fetch() call, no retries.
    No parsing - just I/O.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        self._session = session or requests.Session()

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent}

    def fetch(self) -> str:
        """Fetch the page markup."""
        logger.debug(f"Fetching {self.config.source_url}")
        try:
            resp = self._session.get(
                self.config.source_url,
                headers=self.headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"request to {self.config.source_url} failed: {e}") from e

        if resp.status_code != 200:
            raise StatusError(resp.status_code, resp.reason or "")

        return resp.text
