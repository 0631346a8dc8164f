"""Shared fixtures: wire payloads and a fake HTTP transport."""

import json

import httpx
import pytest

from blaseball_client.core import rounding

BASE_URL = "https://test.local"
BEST_TEAM = "8d87c468-699a-47a8-b40d-cfb73a5660ad"

PLAYER_ATTRIBUTES = [
    "anticapitalism", "baseThirst", "buoyancy", "chasiness", "coldness",
    "continuation", "divinity", "groundFriction", "indulgence", "laserlikeness",
    "martyrdom", "moxie", "musclitude", "omniscience", "overpowerment",
    "patheticism", "ruthlessness", "shakespearianism", "suppression", "tenaciousness",
    "thwackability", "tragicness", "unthwackability", "watchfulness", "pressurization",
    "cinnamon",
]


@pytest.fixture(autouse=True)
def fresh_rounding(monkeypatch):
    """Each test resolves the rounding strategy from its own environment."""
    monkeypatch.setattr(rounding, "_active", None)


@pytest.fixture
def team_payload():
    """Team as served by /database/team, camelCase keys."""
    return {
        "id": BEST_TEAM,
        "lineup": [f"lineup-{i}" for i in range(9)],
        "rotation": [f"rotation-{i}" for i in range(5)],
        "bullpen": [f"bullpen-{i}" for i in range(8)],
        "bench": [f"bench-{i}" for i in range(3)],
        "seasAttr": [],
        "permAttr": ["PARTY_TIME"],
        "fullName": "Hades Tigers",
        "location": "Hades",
        "mainColor": "#5c1c1c",
        "nickname": "Tigers",
        "secondaryColor": "#ff4545",
        "shorthand": "HT",
        "emoji": "0x1F405",
        "slogan": "Never Look Back.",
        "shameRuns": 0,
        "totalShames": 7,
        "totalShamings": 11,
        "seasonShames": 1,
        "seasonShamings": 2,
        "championships": 3,
        "unknownNewField": {"ignored": True},
    }


@pytest.fixture
def make_player_payload():
    """Factory for player payloads: every attribute 0.5 unless overridden."""

    def _make(player_id="player-1", **overrides):
        payload = {attr: 0.5 for attr in PLAYER_ATTRIBUTES}
        payload.update({
            "id": player_id,
            "name": "Jessica Telephone",
            "totalFingers": 10,
            "soul": 7,
            "fate": 42,
            "deceased": False,
            "peanutAllergy": True,
            "bat": "",
            "armor": None,
            "ritual": "Tarot",
            "coffee": 3,
            "blood": 1,
            "permAttr": [],
            "seasAttr": [],
        })
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def user_payload():
    return {
        "id": "user-1",
        "email": "fan@example.com",
        "appleId": None,
        "googleId": "g-123",
        "facebookId": None,
        "name": "Fan",
        "coins": 2500,
        "votes": 4,
        "created": "2020-08-01T12:00:00.000Z",
        "favoriteTeam": BEST_TEAM,
        "unlockedShop": True,
        "unlockedElection": False,
        "dailyCoinsTier": 2,
        "begs": 3,
        "maxBetTier": 1,
        "peanuts": 10,
        "peanutsEaten": 5,
        "squirrels": 0,
    }


class FakeServer:
    """Routes requests by path to canned responses and records what it saw."""

    def __init__(self):
        self.routes = {}
        self.requests: list[httpx.Request] = []

    def add(self, method, path, status=200, json_body=None, content=None, headers=None):
        if json_body is not None:
            content = json.dumps(json_body).encode()
        self.routes[(method, path)] = (status, content or b"", headers or [])

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, content=b"not found")
        status, content, headers = self.routes[key]
        return httpx.Response(status, content=content, headers=headers)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def server():
    return FakeServer()
