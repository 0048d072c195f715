"""Client for the Celenium rollup blobs endpoint."""

from __future__ import annotations

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from .config import Settings
from .errors import FetchError
from .schemas import Blob, BlobList

logger = logging.getLogger(__name__)

# Only the most recent blob is requested. Blobs published faster than the
# poll interval are never seen.
LATEST_BLOB_QUERY = {
    "limit": 1,
    "offset": 0,
    "sort": "desc",
    "sort_by": "time",
}


class BlobFetcher:
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        self._url = settings.api_url
        self._timeout = settings.request_timeout
        self._headers = {"apikey": settings.api_key}
        self._session = session or requests.Session()

    def fetch(self) -> list[Blob]:
        """Request the latest blob. A single attempt, never retried."""

        try:
            resp = self._session.get(
                self._url, params=LATEST_BLOB_QUERY, headers=self._headers, timeout=self._timeout
            )
        except requests.RequestException as exc:
            raise FetchError(f"request to {self._url} failed: {exc}") from exc

        if resp.status_code != 200:
            raise FetchError(
                f"failed to fetch data: {resp.status_code} {resp.reason}",
                status_code=resp.status_code,
                reason=resp.reason,
            )

        # Strict mode: "42" is not an int, 5000.0 is not a height.
        try:
            blobs = BlobList.validate_json(resp.content, strict=True)
        except ValidationError as exc:
            raise FetchError(f"could not decode response body: {exc}") from exc

        logger.debug("Fetched %d blob(s) from %s", len(blobs), self._url)
        return blobs

    def close(self) -> None:
        self._session.close()
