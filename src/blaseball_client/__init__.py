"""Blaseball client.

Read teams and players from the game database, log in for session-scoped
data, and turn player attributes into star ratings.
"""

__version__ = "0.1.0"

from .core.clients.public import UnauthenticatedClient
from .core.clients.session import AuthenticatedClient, login
from .core.errors import (
    BlaseballError,
    DecodeError,
    EncodingError,
    TransportError,
    UnexpectedResponseShape,
)
from .core.models import Category, Player, Team, User, Vibes
from .core.rounding import configure_rounding, round_to_even
from .core.scoring import rating, score, star_ratings

__all__ = [
    "AuthenticatedClient",
    "BlaseballError",
    "Category",
    "DecodeError",
    "EncodingError",
    "Player",
    "Team",
    "TransportError",
    "UnauthenticatedClient",
    "UnexpectedResponseShape",
    "configure_rounding",
    "User",
    "Vibes",
    "login",
    "rating",
    "round_to_even",
    "score",
    "star_ratings",
]
