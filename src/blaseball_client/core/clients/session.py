"""Authenticated client: public reads plus session-scoped endpoints.

Login posts credentials to /auth/local and keeps the value of the
``connect.sid`` cookie from the response. That value is sent back as a
Cookie header on every session-scoped request.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx

from ..cookies import SESSION_COOKIE, find_cookie, serialize_cookie
from ..errors import UnexpectedResponseShape
from ..models import Player, Team, User
from . import _requests
from ._requests import RequestConfig
from .public import fetch_all_teams, fetch_players, fetch_team

logger = logging.getLogger(__name__)


class AuthenticatedClient:
    """A client holding a session token.

    Build one with ``await AuthenticatedClient.login(username, password)``.
    The token never changes; log in again with a new client to refresh it.
    The constructor is internal to the login exchange.
    """

    __slots__ = ("_config", "_token")

    def __init__(self, *, _config: RequestConfig, _token: str):
        self._config = _config
        self._token = _token

    def __repr__(self) -> str:
        # Never print the token.
        return f"AuthenticatedClient(base_url={self._config.base_url!r})"

    @classmethod
    async def login(
        cls,
        username: str,
        password: str,
        *,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> AuthenticatedClient:
        """Exchange a username and password for a session.

        Raises:
            TransportError: The request failed or returned a non-2xx status.
            UnexpectedResponseShape: No parseable connect.sid cookie came back.
            EncodingError: The credentials could not be serialized.
        """
        return await cls._login(RequestConfig(base_url, transport), username, password)

    @classmethod
    async def _login(cls, config: RequestConfig, username: str, password: str) -> AuthenticatedClient:
        body = _requests.encode_json({"username": username, "password": password, "isLogin": True})
        response = await _requests.send(
            config,
            "POST",
            _requests.LOGIN_PATH,
            headers={"Content-Type": "application/json"},
            content=body,
        )
        set_cookies = response.headers.get_list("set-cookie")
        token = find_cookie(set_cookies, SESSION_COOKIE)
        if token is None:
            logger.warning("Login for %s returned no %s cookie", username, SESSION_COOKIE)
            raise UnexpectedResponseShape(set_cookies, SESSION_COOKIE)
        logger.info("Logged in as %s", username)
        return cls(_config=config, _token=token)

    @property
    def token(self) -> str:
        """The session cookie value."""
        return self._token

    @property
    def cookie_header(self) -> str:
        return serialize_cookie(SESSION_COOKIE, self._token)

    async def get_team(self, team_id: str) -> Team:
        """Fetch one team by id."""
        return await fetch_team(self._config, team_id)

    async def get_all_teams(self) -> list[Team]:
        """Fetch every team in the league."""
        return await fetch_all_teams(self._config)

    async def get_players(self, ids: Sequence[str]) -> list[Player]:
        """Fetch players by id. An empty id list returns [] without a request."""
        return await fetch_players(self._config, ids)

    async def get_current_user(self) -> User:
        """Fetch the account this session belongs to."""
        response = await _requests.send(
            self._config,
            "GET",
            _requests.USER_PATH,
            headers={"Cookie": self.cookie_header},
        )
        return _requests.decode(response, User)


async def login(
    username: str,
    password: str,
    *,
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AuthenticatedClient:
    """Shortcut for ``AuthenticatedClient.login``."""
    return await AuthenticatedClient.login(username, password, base_url=base_url, transport=transport)
