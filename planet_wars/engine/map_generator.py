"""Initial map and roster generation."""

from collections.abc import Sequence

from ..models import NEUTRAL, Game, Planet, Player
from ..utils import (
    INITIAL_SHIPS,
    MAP_HEIGHT,
    MAP_WIDTH,
    PLANET_COUNT,
    GameRNG,
)


def generate_map(
    players: Sequence[str],
    seed: int,
    planet_count: int = PLANET_COUNT,
    width: float = MAP_WIDTH,
    height: float = MAP_HEIGHT,
    initial_ships: int = INITIAL_SHIPS,
) -> Game:
    """Generate the starting state for a new game.

    Algorithm:
    1. Place ``planet_count`` planets at uniform random positions inside the
       ``width`` x ``height`` box
    2. Give every planet ``initial_ships`` ships
    3. The last ``len(players)`` planets go to the players, one each, in
       reverse order (the final planet to the first player); the rest are
       neutral
    4. Build the roster: every player plus the neutral player

    Args:
        players: Player ids, unique and non-empty
        seed: RNG seed for deterministic map generation
        planet_count: Number of planets on the map
        width: Width of the bounding box
        height: Height of the bounding box
        initial_ships: Garrison of every planet at start

    Returns:
        Game object with initialized planets and roster

    Raises:
        ValueError: If there are no players, duplicate players, or more
                    players than planets
    """
    if not players:
        raise ValueError("At least one player is required")
    if len(set(players)) != len(players):
        raise ValueError(f"Duplicate player ids: {list(players)}")
    if len(players) > planet_count:
        raise ValueError(
            f"Cannot seat {len(players)} players on a map of {planet_count} planets"
        )

    rng = GameRNG(seed)
    neutral_count = planet_count - len(players)

    planets = []
    for i in range(planet_count):
        owner = NEUTRAL if i < neutral_count else players[planet_count - i - 1]
        planets.append(
            Planet(
                id=i,
                name=f"planet{i}",
                x=rng.uniform(0, width),
                y=rng.uniform(0, height),
                owner=owner,
                ships=initial_ships,
            )
        )

    roster = {player_id: Player(id=player_id) for player_id in players}
    roster[NEUTRAL] = Player(id=NEUTRAL)

    return Game(
        seed=seed,
        turn=0,
        planets=planets,
        fleets=[],
        players=roster,
        rng=rng,
    )
