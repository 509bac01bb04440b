"""Tests for Turn Executor - Full Round Integration."""

from planet_wars.engine.turn_executor import TurnExecutor
from planet_wars.engine.validator import validate_moves
from planet_wars.models import NEUTRAL, Fleet, Game, Move, Planet, Player


def create_basic_game():
    """Create a game with both players and an empty neutral planet at (3, 4)."""
    planets = [
        Planet(id=0, name="planet0", x=0, y=0, owner="alice", ships=10),
        Planet(id=1, name="planet1", x=3, y=4, owner=NEUTRAL, ships=0),
        Planet(id=2, name="planet2", x=20, y=20, owner="bob", ships=10),
        Planet(id=3, name="planet3", x=40, y=0, owner=NEUTRAL, ships=5),
    ]
    players = {"alice": Player(id="alice"), "bob": Player(id="bob")}
    return Game(seed=42, planets=planets, players=players)


def accept(game, player_id, *moves):
    orders, _ = validate_moves(game, player_id, list(moves))
    return orders


def test_execute_turn_increments_turn_counter():
    game = create_basic_game()

    game, result = TurnExecutor().execute_turn(game, [])

    assert game.turn == 1
    assert result.turn == 1


def test_growth_without_launches_or_fights():
    """Player planets gain exactly one ship, neutral planets are unchanged."""
    game = create_basic_game()

    game, result = TurnExecutor().execute_turn(game, [])

    assert [p.ships for p in game.planets] == [11, 0, 11, 5]
    assert result.combat_events == []


def test_launch_happens_after_growth():
    game = create_basic_game()
    orders = accept(game, "alice", Move(0, 1, 10))

    game, result = TurnExecutor().execute_turn(game, orders)

    # 10 + 1 growth - 10 launched
    assert game.planets[0].ships == 1
    assert len(result.launched) == 1
    assert game.fleets[0].turns_remaining == 4


def test_fleet_arrives_after_exact_travel_time():
    """A fleet from (0,0) to (3,4) arrives after exactly 5 rounds."""
    game = create_basic_game()
    executor = TurnExecutor()
    orders = accept(game, "alice", Move(0, 1, 5))
    assert orders[0].turns == 5

    game, _ = executor.execute_turn(game, orders)
    for _ in range(3):
        game, _ = executor.execute_turn(game, [])
        assert game.planets[1].owner is NEUTRAL

    game, result = executor.execute_turn(game, [])
    assert game.turn == 5
    assert [f.ships for f in result.arrived] == [5]
    assert game.planets[1].owner == "alice"
    assert game.planets[1].ships == 5
    assert game.fleets == []


def test_simultaneous_arrivals_fight():
    game = create_basic_game()
    game.fleets = [
        Fleet(id=0, owner="alice", ships=8, source=0, target=3, turns_remaining=1),
        Fleet(id=1, owner="bob", ships=6, source=2, target=3, turns_remaining=1),
    ]
    game.fleet_counter = 2

    game, result = TurnExecutor().execute_turn(game, [])

    # Armies: alice 8, bob 6, neutral 5 -> alice wins with 8 - 6
    assert game.planets[3].owner == "alice"
    assert game.planets[3].ships == 2
    assert len(result.combat_events) == 1
    assert game.combats_last_turn[0]["owner_after"] == "alice"


def test_equal_attackers_leave_planet_neutral():
    game = create_basic_game()
    game.fleets = [
        Fleet(id=0, owner="alice", ships=7, source=0, target=3, turns_remaining=1),
        Fleet(id=1, owner="bob", ships=7, source=2, target=3, turns_remaining=1),
    ]

    game, result = TurnExecutor().execute_turn(game, [])

    assert game.planets[3].owner is NEUTRAL
    assert game.planets[3].ships == 0
    assert result.combat_events[0].draw


def test_launched_ships_do_not_defend_source():
    game = create_basic_game()
    game.fleets = [Fleet(id=0, owner="bob", ships=5, source=2, target=0, turns_remaining=1)]
    game.fleet_counter = 1
    orders = accept(game, "alice", Move(0, 1, 8))

    game, _ = TurnExecutor().execute_turn(game, orders)

    # Garrison 10 + 1 - 8 = 3 against 5 attackers
    assert game.planets[0].owner == "bob"
    assert game.planets[0].ships == 2


def test_elimination():
    """A player without planets and fleets after a round is dead."""
    game = create_basic_game()
    game.planets[2].ships = 0
    game.fleets = [Fleet(id=0, owner="alice", ships=3, source=0, target=2, turns_remaining=1)]

    game, result = TurnExecutor().execute_turn(game, [])

    # Bob's planet grew to 1 and fell to 3 attackers
    assert game.planets[2].owner == "alice"
    assert game.planets[2].ships == 2
    assert game.players["bob"].dead
    assert result.eliminated == ["bob"]
    assert game.players_to_move() == ["alice"]


def test_partial_order_has_no_effect_from_rejected_move():
    """Moves 1 and 3 apply; the rejected move 2 leaves no trace."""
    game = create_basic_game()
    orders = accept(game, "alice", Move(0, 1, 2), Move(0, 3, 50), Move(0, 3, 3))

    game, result = TurnExecutor().execute_turn(game, orders)

    assert [(f.target, f.ships) for f in result.launched] == [(1, 2), (3, 3)]
    assert game.planets[0].ships == 10 + 1 - 2 - 3
    assert game.fleet_counter == 2
