"""CSV document fetching."""

import logging
from abc import ABC, abstractmethod
from urllib.parse import urlparse

import requests

from csvtable.errors import FetchFailedError

logger = logging.getLogger(__name__)


class CsvFetcher(ABC):
    """Abstract interface for retrieving CSV text."""

    @abstractmethod
    def fetch(self, url: str) -> str:
        """Return the body of the document at ``url``.

        Raises:
            FetchFailedError: The URL is invalid or the document could not be
                retrieved.
        """


class HttpCsvFetcher(CsvFetcher):
    """Fetches CSV documents with a single HTTP GET (no retries)."""

    def __init__(self, timeout: float = 30.0):
        self._timeout = timeout

    def fetch(self, url: str) -> str:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise FetchFailedError(f"Invalid CSV URL: {url}")

        try:
            resp = requests.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            raise FetchFailedError(f"Failed to fetch CSV: {e}") from e

        if not resp.ok:
            raise FetchFailedError(f"Failed to fetch CSV: {resp.status_code} {resp.reason}")

        logger.info("Fetched %d characters from %s", len(resp.text), url)
        return resp.text
