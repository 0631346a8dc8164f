"""Request plumbing shared by the public and session clients.

Each call opens its own ``httpx.AsyncClient``, so a client object holds no
connection state and is safe to share between concurrent tasks.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional, Sequence, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from ...config import get_base_url, get_timeout
from ..errors import DecodeError, EncodingError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

TEAM_PATH = "/database/team"
ALL_TEAMS_PATH = "/database/allTeams"
PLAYERS_PATH = "/database/players"
LOGIN_PATH = "/auth/local"
USER_PATH = "/api/getUser"


class RequestConfig:
    """Where and how requests are sent. Shared read-only between client tiers."""

    __slots__ = ("_base_url", "_transport")

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/") if base_url else None
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url or get_base_url()

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def open(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=get_timeout(),
            follow_redirects=True,
            transport=self._transport,
        )


def encode_params(params: Mapping[str, Any]) -> httpx.QueryParams:
    """Encode query parameters, accepting only string values."""
    for key, value in params.items():
        if not isinstance(value, str):
            raise EncodingError(dict(params), f"parameter {key!r} must be a string, got {type(value).__name__}")
    try:
        return httpx.QueryParams(params)
    except (TypeError, ValueError) as exc:
        raise EncodingError(dict(params), str(exc)) from exc


def encode_json(body: Mapping[str, Any]) -> bytes:
    try:
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as exc:
        # The body may hold credentials; report only its keys.
        raise EncodingError(sorted(body), str(exc)) from exc


def join_ids(ids: Sequence[str]) -> str:
    """Comma-join player ids, rejecting anything that is not a string."""
    for player_id in ids:
        if not isinstance(player_id, str):
            raise EncodingError(list(ids), f"player id must be a string, got {type(player_id).__name__}")
    return ",".join(ids)


async def send(
    config: RequestConfig,
    method: str,
    path: str,
    *,
    params: Optional[httpx.QueryParams] = None,
    headers: Optional[Mapping[str, str]] = None,
    content: Optional[bytes] = None,
) -> httpx.Response:
    """Issue one request and return the response once its body is read.

    Raises:
        TransportError: Connection failure, timeout, or a non-2xx status.
    """
    url = config.url(path)
    logger.debug("%s %s", method, path)
    try:
        async with config.open() as client:
            response = await client.request(method, url, params=params, headers=headers, content=content)
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning("%s %s returned HTTP %d", method, path, exc.response.status_code)
        raise TransportError(method, url, status_code=exc.response.status_code) from exc
    except httpx.HTTPError as exc:
        logger.warning("%s %s failed: %s", method, path, exc)
        raise TransportError(method, url, reason=str(exc) or type(exc).__name__) from exc
    return response


def _error_field(exc: ValidationError) -> Optional[str]:
    errors = exc.errors()
    if not errors:
        return None
    return ".".join(str(part) for part in errors[0]["loc"]) or None


def decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
    return _decode(response, TypeAdapter(model), model.__name__)


def decode_list(response: httpx.Response, model: type[ModelT]) -> list[ModelT]:
    return _decode(response, TypeAdapter(list[model]), f"list[{model.__name__}]")


def _decode(response: httpx.Response, adapter: TypeAdapter, name: str):
    """Validate a JSON body against ``adapter``, mapping failures to DecodeError."""
    try:
        payload = response.json()
    except ValueError as exc:
        raise DecodeError(name, reason=f"invalid JSON: {exc}") from exc
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        field = _error_field(exc)
        logger.warning("Response for %s did not match schema at %s", name, field or "<root>")
        raise DecodeError(name, field=field, reason=exc.errors()[0]["msg"] if exc.errors() else "") from exc
