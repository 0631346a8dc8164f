"""Unauthenticated client for the public game database.

API: https://www.blaseball.com/database/
No session required.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

import httpx

from ..models import Player, Team
from . import _requests
from ._requests import RequestConfig

if TYPE_CHECKING:
    from .session import AuthenticatedClient

logger = logging.getLogger(__name__)


async def fetch_team(config: RequestConfig, team_id: str) -> Team:
    params = _requests.encode_params({"id": team_id})
    response = await _requests.send(config, "GET", _requests.TEAM_PATH, params=params)
    return _requests.decode(response, Team)


async def fetch_all_teams(config: RequestConfig) -> list[Team]:
    response = await _requests.send(config, "GET", _requests.ALL_TEAMS_PATH)
    return _requests.decode_list(response, Team)


async def fetch_players(config: RequestConfig, ids: Sequence[str]) -> list[Player]:
    if isinstance(ids, str):
        ids = [ids]
    if not ids:
        return []
    params = _requests.encode_params({"ids": _requests.join_ids(ids)})
    response = await _requests.send(config, "GET", _requests.PLAYERS_PATH, params=params)
    players = _requests.decode_list(response, Player)
    logger.debug("Fetched %d of %d requested players", len(players), len(ids))
    return players


class UnauthenticatedClient:
    """Reads public data: teams and players.

    Example:
        client = UnauthenticatedClient()
        team = await client.get_team("8d87c468-699a-47a8-b40d-cfb73a5660ad")
    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = RequestConfig(base_url, transport)

    def __repr__(self) -> str:
        return f"UnauthenticatedClient(base_url={self._config.base_url!r})"

    async def get_team(self, team_id: str) -> Team:
        """Fetch one team by id."""
        return await fetch_team(self._config, team_id)

    async def get_all_teams(self) -> list[Team]:
        """Fetch every team in the league."""
        return await fetch_all_teams(self._config)

    async def get_players(self, ids: Sequence[str]) -> list[Player]:
        """Fetch players by id. An empty id list returns [] without a request."""
        return await fetch_players(self._config, ids)

    async def login(self, username: str, password: str) -> AuthenticatedClient:
        """Log in and return a new authenticated client with the same settings.

        This client is left unchanged.
        """
        from .session import AuthenticatedClient

        return await AuthenticatedClient._login(self._config, username, password)
