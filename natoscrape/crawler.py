"""HTTP access to the site, limited to the site's own domains."""

from __future__ import annotations

import logging
from types import TracebackType
from urllib.parse import urlsplit

import requests

from natoscrape.helpers import NATOMANGA_HOST, NATOMANGA_URL, READ_NATOMANGA_HOST

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/114.0.0.0 Safari/537.36"
)

DEFAULT_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Referer": NATOMANGA_URL.replace("://", "://www.") + "/",
}

ALLOWED_DOMAINS = frozenset(
    {
        NATOMANGA_HOST,
        "www." + NATOMANGA_HOST,
        "read" + NATOMANGA_HOST,
        "www.read" + NATOMANGA_HOST,
        READ_NATOMANGA_HOST,
    }
)

REQUEST_TIMEOUT = 30.0

_log = logging.getLogger(__name__)


class Crawler:
    """Fetches pages of the site with browser-like headers."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)

    def fetch(self, url: str) -> str | None:
        """Return the body of ``url``, or None when it is off-site or the request fails."""
        host = urlsplit(url).hostname
        if host not in ALLOWED_DOMAINS:
            _log.warning("Request URL: %s refused: domain %r is not allowed", url, host)
            return None
        try:
            response = self.session.get(url, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as exc:
            _log.warning("Request URL: %s failed with error: %s", url, exc)
            return None
        return response.text

    def close(self) -> None:
        """Close the session if this crawler created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> Crawler:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()