"""Main round execution orchestrator.

This module coordinates the round phases in the correct order:
1. Growth (Phase 1)
2. Launch of this round's orders (Phase 2)
3. Army seeding (Phase 3)
4. Fleet travel and arrivals (Phase 4)
5. Combat resolution (Phase 5)
6. Liveness update (Phase 6)

The turn counter increments before Phase 1. The whole round runs as one
call; callers never observe the state between phases.

Architecture:
Each phase is an independent method. ``execute_turn`` composes them in the
correct execution order.
"""

import logging
from dataclasses import dataclass, field

from ..models.fleet import Fleet
from ..models.game import Game
from ..models.order import LaunchOrder
from .combat import Army, CombatEvent, process_combat, seed_armies
from .movement import process_fleet_movement, process_launches
from .production import process_growth
from .victory import update_liveness

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """Events produced by one round.

    Attributes:
        turn: Turn number after the round
        launched: Fleets created from this round's orders
        arrived: Fleets that reached their target this round
        combat_events: Fights at planets with two or more armies
        eliminated: Players who died this round
    """

    turn: int
    launched: list[Fleet] = field(default_factory=list)
    arrived: list[Fleet] = field(default_factory=list)
    combat_events: list[CombatEvent] = field(default_factory=list)
    eliminated: list[str] = field(default_factory=list)


class TurnExecutor:
    """Orchestrates the round phases in the correct order.

    Each phase is an independent method that can be tested separately.
    """

    # =========================================================================
    # INDEPENDENT PHASE METHODS
    # =========================================================================

    def execute_phase_growth(self, game: Game) -> Game:
        """Execute Phase 1: every player-owned planet gains a ship."""
        return process_growth(game)

    def execute_phase_launch(
        self, game: Game, orders: list[LaunchOrder]
    ) -> tuple[Game, list[Fleet]]:
        """Execute Phase 2: deduct ships and create fleets for accepted orders."""
        return process_launches(game, orders)

    def execute_phase_armies(self, game: Game) -> dict[int, list[Army]]:
        """Execute Phase 3: seed one army per planet from its garrison."""
        return seed_armies(game)

    def execute_phase_movement(
        self, game: Game, armies: dict[int, list[Army]]
    ) -> tuple[Game, list[Fleet]]:
        """Execute Phase 4: advance fleets and merge arrivals into armies."""
        return process_fleet_movement(game, armies)

    def execute_phase_combat(
        self, game: Game, armies: dict[int, list[Army]]
    ) -> tuple[Game, list[CombatEvent]]:
        """Execute Phase 5: Combat Resolution.

        Resolve the fight at every planet and store the events on the game
        state for observation.

        Args:
            game: Current game state
            armies: Armies per planet id

        Returns:
            Tuple of (updated game state, combat events)
        """
        game, combat_events = process_combat(game, armies)

        game.combats_last_turn = [
            {
                "planet_id": event.planet_id,
                "planet_name": event.planet_name,
                "armies": event.armies,
                "owner_before": event.owner_before,
                "owner_after": event.owner_after,
                "ships_after": event.ships_after,
                "draw": event.draw,
            }
            for event in combat_events
        ]

        return game, combat_events

    def execute_phase_liveness(self, game: Game) -> Game:
        """Execute Phase 6: mark eliminated players and reset move flags."""
        return update_liveness(game)

    # =========================================================================
    # ORCHESTRATION
    # =========================================================================

    def execute_turn(self, game: Game, orders: list[LaunchOrder]) -> tuple[Game, TurnResult]:
        """Execute one complete round.

        Args:
            game: Current game state
            orders: Orders accepted by the validator this round, all players
                    together, in submission order

        Returns:
            Tuple of (updated game state, round events)
        """
        game.turn += 1
        alive_before = {p.id for p in game.alive_players}

        game = self.execute_phase_growth(game)

        game, launched = self.execute_phase_launch(game, orders)

        armies = self.execute_phase_armies(game)

        game, arrived = self.execute_phase_movement(game, armies)

        game, combat_events = self.execute_phase_combat(game, armies)

        game = self.execute_phase_liveness(game)

        eliminated = [p.id for p in game.real_players if p.dead and p.id in alive_before]
        for player_id in eliminated:
            logger.info(f"Player {player_id} eliminated on turn {game.turn}")

        logger.debug(
            f"Turn {game.turn}: {len(launched)} launched, {len(arrived)} arrived, "
            f"{len(combat_events)} fights, {len(game.fleets)} fleets in flight"
        )

        return game, TurnResult(
            turn=game.turn,
            launched=launched,
            arrived=arrived,
            combat_events=combat_events,
            eliminated=eliminated,
        )
