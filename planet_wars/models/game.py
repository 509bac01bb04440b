"""Game state container."""

from dataclasses import dataclass, field
from typing import Optional

from ..utils import GameRNG
from .fleet import Fleet
from .planet import Planet
from .player import NEUTRAL, Player


@dataclass
class Game:
    """Round state of one Planet Wars match.

    Planets form an arena indexed by their id: ``planets[i].id == i``. Fleets
    are the ledger of ships in flight. The roster always includes the neutral
    player. All engine logic operates on this state.
    """

    seed: int  # RNG seed used for map generation
    turn: int = 0  # Number of rounds played
    planets: list[Planet] = field(default_factory=list)  # Planet arena
    fleets: list[Fleet] = field(default_factory=list)  # Fleet ledger
    players: dict[Optional[str], Player] = field(default_factory=dict)  # Roster
    rng: GameRNG | None = None  # Seeded RNG instance
    fleet_counter: int = 0  # Next fleet id
    combats_last_turn: list[dict] = field(
        default_factory=list
    )  # Combat events from previous round

    def __post_init__(self):
        """Initialize RNG and neutral player if not provided."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)
        if self.turn < 0:
            raise ValueError(f"Invalid turn: {self.turn} (must be >= 0)")
        if NEUTRAL not in self.players:
            self.players[NEUTRAL] = Player(id=NEUTRAL)
        for index, planet in enumerate(self.planets):
            if planet.id != index:
                raise ValueError(
                    f"Planet arena out of order: planet {planet.id} at index {index}"
                )

    def get_planet(self, planet_id: int) -> Planet | None:
        """Look up a planet by id, or None if no such planet exists."""
        if isinstance(planet_id, bool) or not isinstance(planet_id, int):
            return None
        if 0 <= planet_id < len(self.planets):
            return self.planets[planet_id]
        return None

    def next_fleet_id(self) -> int:
        fleet_id = self.fleet_counter
        self.fleet_counter += 1
        return fleet_id

    @property
    def real_players(self) -> list[Player]:
        """All non-neutral players in roster order."""
        return [p for p in self.players.values() if not p.is_neutral]

    @property
    def alive_players(self) -> list[Player]:
        return [p for p in self.real_players if not p.dead]

    def players_to_move(self) -> list[str]:
        """Ids of players the current round is still waiting for."""
        return [p.id for p in self.real_players if p.owes_move]
