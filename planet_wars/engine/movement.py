"""Phase 2 and 4: Fleet launch and travel.

This module handles:
1. Launching validated orders (deduct ships, create fleets)
2. Fleet travel (decrement turns_remaining)
3. Fleet arrivals (turns_remaining == 0) merged into the target's armies

Note: Ships leave their source planet at launch, before the armies are seeded,
so launched ships never defend the planet they left.
"""

import logging

from ..models.fleet import Fleet
from ..models.game import Game
from ..models.order import LaunchOrder
from .combat import Army, merge_army

logger = logging.getLogger(__name__)


def process_launches(game: Game, orders: list[LaunchOrder]) -> tuple[Game, list[Fleet]]:
    """Execute Phase 2: Launch.

    For every accepted order, subtract its ships from the source planet and
    add a new fleet to the ledger. Orders that no longer fit the state (unknown
    planets, source lost, not enough ships) are logged and ignored.

    Args:
        game: Current game state
        orders: Orders accepted by the validator this round, in submission order

    Returns:
        Tuple of (updated game state, launched fleets)
    """
    launched = []

    for order in orders:
        source = game.get_planet(order.source)
        target = game.get_planet(order.target)
        if source is None or target is None:
            logger.error(
                f"Order from {order.player} references unknown planet "
                f"({order.source} -> {order.target}), ignoring"
            )
            continue
        if source.owner != order.player or order.ships > source.ships:
            logger.error(
                f"Order from {order.player} no longer fits planet {source.id} "
                f"(owner={source.owner}, ships={source.ships}, requested={order.ships}), ignoring"
            )
            continue

        source.ships -= order.ships
        fleet = Fleet(
            id=game.next_fleet_id(),
            owner=order.player,
            ships=order.ships,
            source=order.source,
            target=order.target,
            turns_remaining=order.turns,
        )
        game.fleets.append(fleet)
        launched.append(fleet)

    return game, launched


def process_fleet_movement(
    game: Game, armies: dict[int, list[Army]]
) -> tuple[Game, list[Fleet]]:
    """Execute Phase 4: Travel.

    Every fleet advances one round. Fleets reaching their target merge into
    the target's armies and leave the ledger; the others stay in flight.
    Fleets launched this round travel too.

    Args:
        game: Current game state
        armies: Armies per planet id, updated in place with arrivals

    Returns:
        Tuple of (updated game state, arrived fleets)
    """
    in_flight = []
    arrived = []

    for fleet in game.fleets:
        fleet.turns_remaining -= 1
        if fleet.turns_remaining > 0:
            in_flight.append(fleet)
            continue

        target_armies = armies.get(fleet.target)
        if target_armies is None:
            logger.error(
                f"Fleet {fleet.id} arrived at unknown planet {fleet.target}, ignoring"
            )
            continue

        merge_army(target_armies, fleet.owner, fleet.ships)
        arrived.append(fleet)

    game.fleets = in_flight

    return game, arrived
