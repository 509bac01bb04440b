"""Order data models for player commands."""

from dataclasses import dataclass


@dataclass
class Move:
    """A single move as submitted by a player.

    Moves are not checked on construction: an invalid move is dropped by the
    order validator without affecting the rest of the order.
    """

    source: int  # Source planet id
    target: int  # Target planet id
    ships: int  # Number of ships to send


@dataclass(frozen=True)
class LaunchOrder:
    """A move that passed validation and is queued for launch.

    Carries the travel time computed from the planet positions at validation
    time.
    """

    player: str
    source: int
    target: int
    ships: int
    turns: int
