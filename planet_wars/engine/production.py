"""Phase 1: Ship growth.

Every planet owned by a player gains ships at the start of the round.
Neutral planets never grow.
"""

from ..models.game import Game
from ..utils.constants import GROWTH_PER_TURN


def process_growth(game: Game, growth: int = GROWTH_PER_TURN) -> Game:
    """Execute Phase 1: Growth.

    Args:
        game: Current game state
        growth: Ships added to each player-owned planet

    Returns:
        Updated game state
    """
    for planet in game.planets:
        if not planet.is_neutral:
            planet.ships += growth
    return game
