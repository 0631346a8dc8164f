"""Player scoring and star ratings.

Turns a player's raw attributes into a category score and a half-star rating.
The formulas are weighted products of powers. Multiplication order is fixed
so results are reproducible bit for bit.

Inputs are not validated: a negative base raised to a fractional power, or a
NaN attribute, yields NaN rather than an error.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Union

from .models import Category, Player, Vibes
from .rounding import round_to_even

logger = logging.getLogger(__name__)

ScoreCategory = Union[Category, Vibes]


def _pow(base: float, exponent: float) -> float:
    """Real exponentiation that yields NaN where math.pow would raise."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan


def batting_score(player: Player) -> float:
    return (
        _pow(1 - player.tragicness, 0.01)
        * _pow(1 - player.patheticism, 0.05)
        * _pow(player.thwackability * player.divinity, 0.35)
        * _pow(player.moxie * player.musclitude, 0.075)
        * _pow(player.martyrdom, 0.02)
    )


def pitching_score(player: Player) -> float:
    return (
        _pow(player.unthwackability, 0.5)
        * _pow(player.ruthlessness, 0.4)
        * _pow(player.overpowerment, 0.15)
        * _pow(player.shakespearianism, 0.1)
        * _pow(player.coldness, 0.025)
    )


def defense_score(player: Player) -> float:
    return (
        _pow(player.omniscience * player.tenaciousness, 0.2)
        * _pow(player.watchfulness * player.anticapitalism * player.chasiness, 0.1)
    )


def baserunning_score(player: Player) -> float:
    return (
        _pow(player.laserlikeness, 0.5)
        * _pow(player.base_thirst * player.continuation * player.ground_friction * player.indulgence, 0.1)
    )


def vibes_score(player: Player, day: int) -> float:
    """Vibes swing with a period set by buoyancy.

    A buoyancy that makes 5 * buoyancy + 3 exactly zero gives an infinite
    (or 0/0) phase, whose cosine is NaN, as it would be under IEEE-754 division.
    """
    pressurization = player.pressurization
    cinnamon = player.cinnamon
    try:
        wave = math.cos(math.pi * day / (5 * player.buoyancy + 3))
    except (ZeroDivisionError, ValueError):
        wave = math.nan
    return 0.5 * round_to_even((pressurization + cinnamon) * wave - pressurization + cinnamon)


_SCORERS = {
    Category.BATTING: batting_score,
    Category.PITCHING: pitching_score,
    Category.DEFENSE: defense_score,
    Category.BASERUNNING: baserunning_score,
}


def score(player: Player, category: ScoreCategory) -> float:
    """Score a player in one category, roughly on [0, 1].

    Args:
        player: Decoded player record.
        category: A Category member, or Vibes(day) for the vibes category.

    Raises:
        ValueError: Category.VIBES was passed without a day.
    """
    if isinstance(category, Vibes):
        return vibes_score(player, category.day)
    category = Category(category)
    if category is Category.VIBES:
        raise ValueError("Vibes depend on the day; pass Vibes(day) instead of Category.VIBES")
    return _SCORERS[category](player)


def rating(player: Player, category: ScoreCategory) -> float:
    """Star rating on a half-point scale: 0, 0.5, 1, ... 5 for in-range attributes."""
    return 0.5 * round_to_even(10 * score(player, category))


def star_ratings(player: Player, day: Optional[int] = None) -> dict[str, float]:
    """Ratings for every category, keyed by category name.

    Vibes are included only when a day is given.
    """
    ratings = {category.value: rating(player, category) for category in _SCORERS}
    if day is not None:
        ratings[Category.VIBES.value] = rating(player, Vibes(day))
    logger.debug("Rated player %s: %s", player.id, ratings)
    return ratings
