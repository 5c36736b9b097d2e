from __future__ import annotations

import logging

import requests

from ..core.constants import DEFAULT_EXPORT_TIMEOUT
from ..core.exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


class ExportClient:
    """Fetches the published tab-separated export (public URL, no auth)."""

    def __init__(self, url: str, *, timeout: float = DEFAULT_EXPORT_TIMEOUT, session: requests.Session | None = None):
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_text(self) -> str:
        if not self._url:
            raise ConfigurationError("STATS_EXPORT_URL is not configured")

        logger.debug("Fetching statistics export %s", self._url)
        try:
            resp = self._session.get(self._url, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Statistics export fetch failed: %s", exc)
            raise UpstreamError("Failed to fetch statistics export") from exc

        # Published exports are UTF-8 but are often served without a charset.
        resp.encoding = "utf-8"
        return resp.text
