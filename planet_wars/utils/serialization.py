"""Game state serialization to/from JSON-compatible dictionaries.

``game_to_dict``/``game_from_dict`` round-trip the complete state of a
session. ``state_snapshot`` builds the ``state`` payload broadcast to players.
"""

import json
from typing import Any

from ..models.fleet import Fleet
from ..models.game import Game
from ..models.planet import Planet
from ..models.player import Player
from ..utils.rng import GameRNG


def dumps_game(game: Game) -> str:
    """Serialize game state to a JSON string."""
    return json.dumps(game_to_dict(game))


def loads_game(text: str) -> Game:
    """Reconstruct game state from a JSON string produced by ``dumps_game``.

    Raises:
        ValueError: If the JSON is invalid or malformed
    """
    try:
        data = json.loads(text)
        return game_from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed game state: {e}") from e


def game_to_dict(game: Game) -> dict[str, Any]:
    """Convert Game object to JSON-compatible dictionary.

    Args:
        game: Game to serialize

    Returns:
        Dictionary representation of game state
    """
    return {
        "seed": game.seed,
        "turn": game.turn,
        "planets": [_serialize_planet(p) for p in game.planets],
        "fleets": [_serialize_fleet(f) for f in game.fleets],
        "players": [_serialize_player(p) for p in game.players.values()],
        "fleet_counter": game.fleet_counter,
        "rng_state": game.rng.get_state(),  # Save RNG state for determinism
    }


def game_from_dict(data: dict[str, Any]) -> Game:
    """Reconstruct Game object from dictionary.

    Args:
        data: Dictionary representation of game state

    Returns:
        Reconstructed Game object
    """
    rng = GameRNG(data["seed"])
    if "rng_state" in data:
        # The RNG state is a tuple with version, inner state tuple, and gauss_next;
        # JSON turns the tuples into lists
        state = data["rng_state"]
        if isinstance(state, list):
            state = (state[0], tuple(state[1]), state[2])
        rng.set_state(state)

    players = [_deserialize_player(p) for p in data["players"]]

    return Game(
        seed=data["seed"],
        turn=data["turn"],
        planets=[_deserialize_planet(p) for p in data["planets"]],
        fleets=[_deserialize_fleet(f) for f in data["fleets"]],
        players={p.id: p for p in players},
        rng=rng,
        fleet_counter=data.get("fleet_counter", 0),
    )


def state_snapshot(game: Game) -> dict[str, Any]:
    """Build the ``state`` payload sent to players after every round.

    Returns:
        Dictionary with the roster ids (neutral included), planets and
        in-flight fleets
    """
    return {
        "players": [p.id for p in game.players.values()],
        "planets": [_serialize_planet(p) for p in game.planets],
        "moves": [_serialize_fleet(f) for f in game.fleets],
    }


def _serialize_planet(planet: Planet) -> dict[str, Any]:
    """Convert Planet to dictionary."""
    return {
        "id": planet.id,
        "name": planet.name,
        "x": planet.x,
        "y": planet.y,
        "player": planet.owner,
        "ships": planet.ships,
    }


def _deserialize_planet(data: dict[str, Any]) -> Planet:
    """Reconstruct Planet from dictionary."""
    return Planet(
        id=data["id"],
        name=data["name"],
        x=data["x"],
        y=data["y"],
        owner=data.get("player"),
        ships=data["ships"],
    )


def _serialize_fleet(fleet: Fleet) -> dict[str, Any]:
    """Convert Fleet to dictionary."""
    return {
        "id": fleet.id,
        "source": fleet.source,
        "target": fleet.target,
        "player": fleet.owner,
        "ships": fleet.ships,
        "turns": fleet.turns_remaining,
    }


def _deserialize_fleet(data: dict[str, Any]) -> Fleet:
    """Reconstruct Fleet from dictionary."""
    return Fleet(
        id=data["id"],
        owner=data["player"],
        ships=data["ships"],
        source=data["source"],
        target=data["target"],
        turns_remaining=data["turns"],
    )


def _serialize_player(player: Player) -> dict[str, Any]:
    """Convert Player to dictionary."""
    return {
        "id": player.id,
        "moved": player.moved,
        "dead": player.dead,
    }


def _deserialize_player(data: dict[str, Any]) -> Player:
    """Reconstruct Player from dictionary."""
    return Player(
        id=data["id"],
        moved=data.get("moved", False),
        dead=data.get("dead", False),
    )
