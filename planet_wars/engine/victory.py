"""Phase 6: Liveness update and terminal condition.

This module handles:
1. Marking players without planets and fleets as dead
2. Resetting the per-round move flag of players who must order next round
3. Deciding whether the session is over
"""

from ..models.game import Game
from ..utils.constants import MAX_TURNS


def update_liveness(game: Game) -> Game:
    """Execute Phase 6: Liveness.

    A non-neutral player stays alive while they own at least one planet or
    have at least one fleet in flight. Only players owning a planet owe an
    order next round: a player left with fleets alone has nothing to command.

    Args:
        game: Current game state

    Returns:
        Updated game state
    """
    owners = {planet.owner for planet in game.planets}
    fleet_owners = {fleet.owner for fleet in game.fleets}

    for player in game.real_players:
        owns_planet = player.id in owners
        player.dead = not (owns_planet or player.id in fleet_owners)
        if owns_planet:
            player.moved = False

    return game


def is_game_over(game: Game, max_turns: int = MAX_TURNS) -> bool:
    """Check the terminal condition after a round.

    Returns:
        True if the turn limit is reached or fewer than two players are alive
    """
    if game.turn >= max_turns:
        return True
    return len(game.alive_players) < 2
