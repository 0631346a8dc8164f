"""Environment-driven configuration.

Values are read on each call so tests and long-running processes pick up
changes without a restart.
"""

from __future__ import annotations

import os

import httpx

DEFAULT_BASE_URL = "https://www.blaseball.com"
DEFAULT_TIMEOUT_SECONDS = 30.0
CONNECT_TIMEOUT_SECONDS = 10.0
DEFAULT_ROUNDING = "builtin"


def get_base_url() -> str:
    return os.environ.get("BLASEBALL_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def get_timeout() -> httpx.Timeout:
    """Build the request timeout from BLASEBALL_TIMEOUT (seconds)."""
    seconds = float(os.environ.get("BLASEBALL_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS)))
    return httpx.Timeout(seconds, connect=CONNECT_TIMEOUT_SECONDS)


def get_rounding_name() -> str:
    return os.environ.get("BLASEBALL_ROUNDING", DEFAULT_ROUNDING).strip().lower()
