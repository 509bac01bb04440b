"""Order validation.

Checks each move of a submitted order against the current planet state. A move
that fails any check is dropped on its own; the remaining moves of the order
are still accepted.
"""

import logging
from collections.abc import Iterable, MutableMapping

from ..errors import OrderValidationError, ValidationErrorKind
from ..models.game import Game
from ..models.order import LaunchOrder, Move
from ..utils.distance import travel_turns

logger = logging.getLogger(__name__)


def validate_move(
    game: Game,
    player_id: str,
    move: Move,
    reserved: MutableMapping[int, int] | None = None,
) -> LaunchOrder:
    """Validate a single move. Raises OrderValidationError if invalid.

    Checks run in a fixed order and stop at the first failure:
    source != target, ships > 0, source exists, source owned by the player,
    target exists, enough ships available at the source.

    Args:
        game: Current game state
        player_id: ID of player issuing the move
        move: Move to validate
        reserved: Ships per source planet already committed by earlier moves
                  this round; they are not available again

    Returns:
        LaunchOrder with the travel time between the two planets

    Raises:
        OrderValidationError: If the move is invalid
    """
    if move.source == move.target:
        raise OrderValidationError(
            ValidationErrorKind.SAME_SOURCE_TARGET,
            "The target must be different from the source in a move",
        )

    if move.ships <= 0:
        raise OrderValidationError(
            ValidationErrorKind.ZERO_SHIPS,
            f"Ship count must be positive, got {move.ships}",
        )

    source = game.get_planet(move.source)
    if source is None:
        raise OrderValidationError(
            ValidationErrorKind.UNKNOWN_SOURCE,
            f"Source planet {move.source} is not valid",
        )

    if source.owner != player_id:
        raise OrderValidationError(
            ValidationErrorKind.NOT_OWNER,
            f"Source planet {source.id} is not under your control",
        )

    target = game.get_planet(move.target)
    if target is None:
        raise OrderValidationError(
            ValidationErrorKind.UNKNOWN_TARGET,
            f"Target planet {move.target} is not valid",
        )

    available = source.ships - (reserved or {}).get(source.id, 0)
    if move.ships > available:
        raise OrderValidationError(
            ValidationErrorKind.INSUFFICIENT_SHIPS,
            f"Source planet {source.id} cannot send {move.ships}, only {available} available",
        )

    return LaunchOrder(
        player=player_id,
        source=source.id,
        target=target.id,
        ships=move.ships,
        turns=travel_turns(source.x, source.y, target.x, target.y),
    )


def validate_moves(
    game: Game,
    player_id: str,
    moves: Iterable[Move],
    reserved: MutableMapping[int, int] | None = None,
) -> tuple[list[LaunchOrder], list[OrderValidationError]]:
    """Validate every move of an order with partial acceptance.

    Invalid moves are skipped; valid ones are kept in submission order. Ships
    of accepted moves are added to ``reserved`` so that later moves from the
    same planet only see what is left.

    Args:
        game: Current game state
        player_id: ID of player issuing the order
        moves: Moves of the order, in submission order
        reserved: Ships per source planet already committed this round
                  (updated in place)

    Returns:
        Tuple of (accepted launch orders, rejection errors)
    """
    if reserved is None:
        reserved = {}

    accepted: list[LaunchOrder] = []
    rejected: list[OrderValidationError] = []

    for i, move in enumerate(moves):
        try:
            order = validate_move(game, player_id, move, reserved)
        except OrderValidationError as e:
            logger.debug(
                f"Player {player_id} move {i} ({move.source} -> {move.target}, "
                f"{move.ships} ships) dropped: {e.message}"
            )
            rejected.append(e)
            continue

        reserved[order.source] = reserved.get(order.source, 0) + order.ships
        accepted.append(order)

    return accepted, rejected
