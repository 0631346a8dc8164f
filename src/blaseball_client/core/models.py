"""Pydantic data models — the records returned by the game-data service.

The wire format is camelCase JSON. Models are frozen once decoded and ignore
fields they do not know about, so new upstream fields do not break decoding.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Optional

from pydantic import (
    AliasChoices,
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    field_validator,
)
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Base for wire records: camelCase aliases, immutable after decode."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# The wire uses seasonAttributes/permanentAttributes, seasAttr/permAttr, or the
# weekAttr/gameAttr names of one schema revision.
SeasonAttributes = Annotated[
    tuple[str, ...],
    Field(validation_alias=AliasChoices("seasonAttributes", "seasAttr", "weekAttr", "season_attributes")),
]
PermanentAttributes = Annotated[
    tuple[str, ...],
    Field(validation_alias=AliasChoices("permanentAttributes", "permAttr", "gameAttr", "permanent_attributes")),
]


class Category(str, Enum):
    """Scoring dimensions for a player."""

    BATTING = "batting"
    PITCHING = "pitching"
    DEFENSE = "defense"
    BASERUNNING = "baserunning"
    VIBES = "vibes"


@dataclass(frozen=True)
class Vibes:
    """The vibes category on a given day of the season."""

    day: int

    @property
    def category(self) -> Category:
        return Category.VIBES


class Team(Record):
    """A team with its rosters, referenced by player id."""

    id: str
    lineup: Annotated[tuple[str, ...], Field(min_length=9, max_length=9)]
    rotation: Annotated[tuple[str, ...], Field(min_length=5, max_length=5)]
    bullpen: Annotated[tuple[str, ...], Field(min_length=8, max_length=8)]
    bench: Annotated[tuple[str, ...], Field(min_length=3, max_length=3)]
    season_attributes: SeasonAttributes
    permanent_attributes: PermanentAttributes
    full_name: str
    location: str
    main_color: str
    nickname: str
    secondary_color: str
    shorthand: str
    emoji: str
    slogan: str
    shame_runs: NonNegativeInt
    total_shames: NonNegativeInt
    total_shamings: NonNegativeInt
    season_shames: NonNegativeInt
    season_shamings: NonNegativeInt
    championships: NonNegativeInt

    @property
    def roster(self) -> tuple[str, ...]:
        """Every player id on the team, lineup first."""
        return self.lineup + self.rotation + self.bullpen + self.bench


class Player(Record):
    """A player and the raw attributes the scoring functions read.

    Attribute values are usually in [0, 1] but are not range checked.
    """

    id: str
    name: str

    anticapitalism: float
    base_thirst: float
    buoyancy: float
    chasiness: float
    coldness: float
    continuation: float
    divinity: float
    ground_friction: float
    indulgence: float
    laserlikeness: float
    martyrdom: float
    moxie: float
    musclitude: float
    omniscience: float
    overpowerment: float
    patheticism: float
    ruthlessness: float
    shakespearianism: float
    suppression: float
    tenaciousness: float
    thwackability: float
    tragicness: float
    unthwackability: float
    watchfulness: float
    pressurization: float
    cinnamon: float

    total_fingers: int
    soul: int
    fate: int

    deceased: bool
    peanut_allergy: bool

    bat: Optional[str] = None
    armor: Optional[str] = None
    ritual: Optional[str] = None
    coffee: Optional[int] = None
    blood: Optional[int] = None

    season_attributes: SeasonAttributes = ()
    permanent_attributes: PermanentAttributes = ()


class User(Record):
    """The account behind an authenticated session."""

    id: str
    email: str
    apple_id: Optional[str] = None
    google_id: Optional[str] = None
    facebook_id: Optional[str] = None
    name: Optional[str] = None
    coins: NonNegativeInt
    votes: NonNegativeInt
    created: AwareDatetime
    favorite_team: str
    unlocked_shop: bool
    unlocked_election: bool
    daily_coins_tier: NonNegativeInt
    begs: NonNegativeInt
    max_bet_tier: NonNegativeInt
    peanuts: NonNegativeInt
    peanuts_eaten: NonNegativeInt
    squirrels: NonNegativeInt

    @field_validator("created")
    @classmethod
    def _created_in_utc(cls, value: datetime) -> datetime:
        return value.astimezone(timezone.utc)
