"""Tests for the order validator."""

import pytest

from planet_wars.engine.validator import validate_move, validate_moves
from planet_wars.errors import OrderValidationError, ValidationErrorKind
from planet_wars.models import NEUTRAL, Game, LaunchOrder, Move, Planet, Player


def create_basic_game():
    """Create a game with one planet per player and a neutral planet between them."""
    planets = [
        Planet(id=0, name="planet0", x=0, y=0, owner="alice", ships=10),
        Planet(id=1, name="planet1", x=3, y=4, owner=NEUTRAL, ships=5),
        Planet(id=2, name="planet2", x=10, y=0, owner="bob", ships=10),
    ]
    players = {"alice": Player(id="alice"), "bob": Player(id="bob")}
    return Game(seed=42, planets=planets, players=players)


def assert_rejected(game, move, kind, player="alice"):
    with pytest.raises(OrderValidationError) as excinfo:
        validate_move(game, player, move)
    assert excinfo.value.kind is kind


def test_valid_move_computes_travel_turns():
    """Test that a valid move yields a launch order with the travel time."""
    game = create_basic_game()

    order = validate_move(game, "alice", Move(source=0, target=1, ships=4))

    assert order == LaunchOrder(player="alice", source=0, target=1, ships=4, turns=5)


def test_validation_does_not_mutate_state():
    game = create_basic_game()

    validate_move(game, "alice", Move(source=0, target=1, ships=10))

    assert game.planets[0].ships == 10
    assert game.fleets == []


def test_same_source_and_target():
    assert_rejected(create_basic_game(), Move(0, 0, 3), ValidationErrorKind.SAME_SOURCE_TARGET)


def test_zero_ships():
    assert_rejected(create_basic_game(), Move(0, 1, 0), ValidationErrorKind.ZERO_SHIPS)


def test_negative_ships():
    assert_rejected(create_basic_game(), Move(0, 1, -3), ValidationErrorKind.ZERO_SHIPS)


def test_unknown_source():
    assert_rejected(create_basic_game(), Move(9, 1, 3), ValidationErrorKind.UNKNOWN_SOURCE)


def test_source_not_owned():
    assert_rejected(create_basic_game(), Move(2, 1, 3), ValidationErrorKind.NOT_OWNER)


def test_neutral_source_not_owned():
    assert_rejected(create_basic_game(), Move(1, 0, 3), ValidationErrorKind.NOT_OWNER)


def test_unknown_target():
    assert_rejected(create_basic_game(), Move(0, 7, 3), ValidationErrorKind.UNKNOWN_TARGET)


def test_insufficient_ships():
    assert_rejected(create_basic_game(), Move(0, 1, 11), ValidationErrorKind.INSUFFICIENT_SHIPS)


def test_checks_short_circuit_in_order():
    """Same source/target is reported before the zero-ship check."""
    assert_rejected(create_basic_game(), Move(5, 5, 0), ValidationErrorKind.SAME_SOURCE_TARGET)
    # Unknown source is reported before the unknown target
    assert_rejected(create_basic_game(), Move(8, 9, 1), ValidationErrorKind.UNKNOWN_SOURCE)


def test_reserved_ships_are_not_available():
    game = create_basic_game()

    with pytest.raises(OrderValidationError) as excinfo:
        validate_move(game, "alice", Move(0, 1, 4), reserved={0: 7})

    assert excinfo.value.kind is ValidationErrorKind.INSUFFICIENT_SHIPS


def test_validate_moves_partial_acceptance():
    """An invalid move in the middle of an order does not affect the others."""
    game = create_basic_game()
    moves = [Move(0, 1, 3), Move(0, 2, 50), Move(0, 2, 2)]

    accepted, rejected = validate_moves(game, "alice", moves)

    assert [(o.target, o.ships) for o in accepted] == [(1, 3), (2, 2)]
    assert len(rejected) == 1
    assert rejected[0].kind is ValidationErrorKind.INSUFFICIENT_SHIPS


def test_validate_moves_cannot_overcommit_a_planet():
    game = create_basic_game()
    reserved = {}
    moves = [Move(0, 1, 6), Move(0, 2, 6), Move(0, 2, 4)]

    accepted, rejected = validate_moves(game, "alice", moves, reserved)

    assert [o.ships for o in accepted] == [6, 4]
    assert reserved == {0: 10}
    assert [e.kind for e in rejected] == [ValidationErrorKind.INSUFFICIENT_SHIPS]


def test_validation_error_is_value_error():
    game = create_basic_game()
    with pytest.raises(ValueError):
        validate_move(game, "alice", Move(0, 0, 1))
