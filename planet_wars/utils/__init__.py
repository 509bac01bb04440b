"""Utility functions and constants for Planet Wars."""

from .constants import (
    GROWTH_PER_TURN,
    INITIAL_SHIPS,
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_TURNS,
    PLANET_COUNT,
)
from .distance import euclidean_distance, travel_turns
from .rng import GameRNG

__all__ = [
    "GROWTH_PER_TURN",
    "INITIAL_SHIPS",
    "MAP_HEIGHT",
    "MAP_WIDTH",
    "MAX_TURNS",
    "PLANET_COUNT",
    "euclidean_distance",
    "travel_turns",
    "GameRNG",
]
