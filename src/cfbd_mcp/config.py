"""Runtime configuration read from the process environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

CFBD_BASE_URL = "https://api.collegefootballdata.com"

# Season defaults used when a tool call leaves the argument out
DEFAULT_SEASON = 2025
DEFAULT_RECORDS_START = 2015
DEFAULT_RECORDS_END = DEFAULT_SEASON
DEFAULT_MATCHUP_MIN_YEAR = 2000
DEFAULT_TEAM = "oklahoma"


def _env(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = environ.get(key)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class Settings:
    port: int = 8080
    mcp_api_key: Optional[str] = None
    cfbd_api_key: Optional[str] = None
    cfbd_base_url: str = CFBD_BASE_URL
    request_timeout: float = 10.0
    keepalive_interval: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``os.environ`` (or the mapping given).

        Empty values are treated as unset so that a blank ``CFBD_API_KEY``
        in a deployment manifest still reports the key as missing.
        """
        environ = os.environ if environ is None else environ
        return cls(
            port=int(_env(environ, "PORT") or 8080),
            mcp_api_key=_env(environ, "MCP_API_KEY"),
            cfbd_api_key=_env(environ, "CFBD_API_KEY"),
            cfbd_base_url=(_env(environ, "CFBD_BASE_URL") or CFBD_BASE_URL).rstrip("/"),
            request_timeout=float(_env(environ, "CFBD_TIMEOUT") or 10.0),
            keepalive_interval=float(_env(environ, "KEEPALIVE_INTERVAL") or 30.0),
            log_level=(_env(environ, "LOG_LEVEL") or "INFO").upper(),
        )
