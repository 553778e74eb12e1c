"""Thin client for the CollegeFootballData.com REST API."""

import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from cfbd_mcp.config import Settings
from cfbd_mcp.errors import UpstreamRequestError, UpstreamStatusError

logger = logging.getLogger(__name__)


class CFBDClient:
    """Issues one bearer-authenticated GET per call.

    ``requests`` is blocking, so :meth:`get` runs it in a worker thread and the
    event loop stays free for other MCP requests. No retries: the first
    failure is reported to the caller.
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.base_url = settings.cfbd_base_url.rstrip("/")
        self.timeout = settings.request_timeout
        self.api_key = settings.cfbd_api_key
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def fetch(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        params = {k: v for k, v in (params or {}).items() if v is not None}
        logger.info(f"Fetching {url} params={params}")
        try:
            response = self.session.get(url, params=params, headers=self._headers(), timeout=self.timeout)
        except requests.Timeout:
            logger.warning(f"Timed out after {self.timeout}s fetching {path}")
            raise UpstreamRequestError(f"Request to {path} timed out after {self.timeout:g}s")
        except requests.RequestException as e:
            logger.warning(f"Request to {path} failed: {e}")
            raise UpstreamRequestError(str(e)) from e

        if not response.ok:
            logger.warning(f"CFBD API returned {response.status_code} for {path}")
            raise UpstreamStatusError(response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamRequestError(f"Invalid JSON from {path}: {e}") from e

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await asyncio.to_thread(self.fetch, path, params)

    def close(self):
        self.session.close()
