"""Game engine components."""

from .map_generator import generate_map
from .turn_executor import TurnExecutor, TurnResult
from .validator import validate_move, validate_moves
from .victory import is_game_over

__all__ = [
    "generate_map",
    "is_game_over",
    "TurnExecutor",
    "TurnResult",
    "validate_move",
    "validate_moves",
]
