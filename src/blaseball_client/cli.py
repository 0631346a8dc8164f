"""Command-line front end.

Run: blaseball team <id> | teams | players <id>... [--day N] | login <username>
Every command prints one JSON document.
"""

from __future__ import annotations

import argparse
import asyncio
import getpass
import json
import logging
import math
import os
import sys
from typing import Optional

from .config import get_timeout
from .core.clients.public import UnauthenticatedClient
from .core.errors import BlaseballError
from .core.models import Player, Team
from .core.rounding import configure_rounding
from .core.scoring import star_ratings

logger = logging.getLogger(__name__)


def _team_to_dict(team: Team) -> dict:
    return team.model_dump(mode="json")


def _player_to_dict(player: Player, day: Optional[int]) -> dict:
    return {
        "id": player.id,
        "name": player.name,
        "ratings": {
            category: value if math.isfinite(value) else None
            for category, value in star_ratings(player, day).items()
        },
    }


async def cmd_team(client: UnauthenticatedClient, args: argparse.Namespace) -> dict:
    team = await client.get_team(args.team_id)
    return {
        "title": team.full_name,
        "team": _team_to_dict(team),
        "summary": f"{team.full_name}: {team.championships} championship(s), {len(team.roster)} players",
    }


async def cmd_teams(client: UnauthenticatedClient, args: argparse.Namespace) -> dict:
    teams = await client.get_all_teams()
    return {
        "title": "All Teams",
        "teams": [{"id": t.id, "full_name": t.full_name, "championships": t.championships} for t in teams],
        "summary": f"{len(teams)} team(s)",
    }


async def cmd_players(client: UnauthenticatedClient, args: argparse.Namespace) -> dict:
    players = await client.get_players(args.player_ids)
    return {
        "title": "Player Ratings",
        "day": args.day,
        "players": [_player_to_dict(p, args.day) for p in players],
        "summary": f"{len(players)} of {len(args.player_ids)} player(s) found",
    }


async def cmd_login(client: UnauthenticatedClient, args: argparse.Namespace) -> dict:
    password = os.environ.get("BLASEBALL_PASSWORD") or getpass.getpass("Password: ")
    session = await client.login(args.username, password)
    user = await session.get_current_user()
    return {
        "title": "Current User",
        "user": user.model_dump(mode="json"),
        "summary": f"Logged in as {user.email} ({user.coins} coins, {user.votes} votes)",
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blaseball", description="Query the Blaseball game database.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--base-url", default=None, help="Override BLASEBALL_BASE_URL.")
    sub = parser.add_subparsers(dest="command", required=True)

    team = sub.add_parser("team", help="Fetch one team by id.")
    team.add_argument("team_id")
    team.set_defaults(handler=cmd_team)

    teams = sub.add_parser("teams", help="Fetch every team.")
    teams.set_defaults(handler=cmd_teams)

    players = sub.add_parser("players", help="Fetch players and print their star ratings.")
    players.add_argument("player_ids", nargs="+")
    players.add_argument("--day", type=int, default=None, help="Include vibes for this day.")
    players.set_defaults(handler=cmd_players)

    login = sub.add_parser("login", help="Log in and print the current user.")
    login.add_argument("username")
    login.set_defaults(handler=cmd_login)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the CLI command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.debug("Running %s against %s", args.command, args.base_url or "default base URL")
    try:
        configure_rounding()
        get_timeout()
    except ValueError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1
    client = UnauthenticatedClient(base_url=args.base_url)
    try:
        result = asyncio.run(args.handler(client, args))
    except BlaseballError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False, allow_nan=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
