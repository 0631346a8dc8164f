"""Error kinds raised by the clients.

Every failure surfaces as one of four subclasses of ``BlaseballError``. None of
them is retried here; callers decide on retry and backoff.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class BlaseballError(Exception):
    """Base class for all client failures."""


class TransportError(BlaseballError):
    """Network or HTTP-level failure reported by httpx."""

    def __init__(self, method: str, url: str, status_code: Optional[int] = None, reason: str = ""):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code}" if status_code is not None else reason or "request failed"
        super().__init__(f"{method} {url}: {detail}")


class DecodeError(BlaseballError):
    """Response body was not valid JSON or did not match the record schema."""

    def __init__(self, model: str, field: Optional[str] = None, reason: str = ""):
        self.model = model
        self.field = field
        self.reason = reason
        where = f"{model}.{field}" if field else model
        super().__init__(f"could not decode {where}: {reason}" if reason else f"could not decode {where}")


class UnexpectedResponseShape(BlaseballError):
    """Login response carried no usable session cookie."""

    def __init__(self, headers: Sequence[str], cookie_name: str):
        self.headers = tuple(headers)
        self.cookie_name = cookie_name
        if self.headers:
            msg = f"no parseable {cookie_name} cookie in {len(self.headers)} Set-Cookie header(s)"
        else:
            msg = f"response has no Set-Cookie header (expected {cookie_name})"
        super().__init__(msg)


class EncodingError(BlaseballError):
    """Outgoing query parameters or request body could not be serialized."""

    def __init__(self, params: Any, reason: str = ""):
        self.params = params
        self.reason = reason
        super().__init__(f"could not encode request parameters: {reason}" if reason else "could not encode request parameters")
