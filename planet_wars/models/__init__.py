"""Data models for Planet Wars."""

from .fleet import Fleet
from .game import Game
from .order import LaunchOrder, Move
from .planet import Planet
from .player import NEUTRAL, Player

__all__ = [
    "NEUTRAL",
    "Planet",
    "Fleet",
    "Player",
    "Move",
    "LaunchOrder",
    "Game",
]
