"""Tests for fleet launch and travel."""

from planet_wars.engine.combat import Army, seed_armies
from planet_wars.engine.movement import process_fleet_movement, process_launches
from planet_wars.models import NEUTRAL, Fleet, Game, LaunchOrder, Planet, Player


def create_basic_game():
    planets = [
        Planet(id=0, name="planet0", x=0, y=0, owner="alice", ships=10),
        Planet(id=1, name="planet1", x=3, y=4, owner=NEUTRAL, ships=2),
    ]
    return Game(seed=42, planets=planets, players={"alice": Player(id="alice")})


class TestLaunch:
    """Test Phase 2: Launch."""

    def test_launch_deducts_ships_and_creates_fleet(self):
        game = create_basic_game()
        order = LaunchOrder(player="alice", source=0, target=1, ships=6, turns=5)

        game, launched = process_launches(game, [order])

        assert game.planets[0].ships == 4
        assert launched == game.fleets
        fleet = game.fleets[0]
        assert (fleet.owner, fleet.ships, fleet.source, fleet.target) == ("alice", 6, 0, 1)
        assert fleet.turns_remaining == 5

    def test_fleet_ids_increase(self):
        game = create_basic_game()
        orders = [LaunchOrder("alice", 0, 1, 1, 5), LaunchOrder("alice", 0, 1, 2, 5)]

        game, launched = process_launches(game, orders)

        assert [f.id for f in launched] == [0, 1]
        assert game.fleet_counter == 2

    def test_order_for_unknown_planet_is_ignored(self):
        game = create_basic_game()

        game, launched = process_launches(game, [LaunchOrder("alice", 0, 9, 3, 2)])

        assert launched == []
        assert game.planets[0].ships == 10

    def test_order_exceeding_garrison_is_ignored(self):
        game = create_basic_game()

        game, launched = process_launches(game, [LaunchOrder("alice", 0, 1, 11, 5)])

        assert launched == []
        assert game.planets[0].ships == 10


class TestTravel:
    """Test Phase 4: Travel."""

    def test_fleet_in_flight_decrements(self):
        game = create_basic_game()
        game.fleets = [Fleet(id=0, owner="alice", ships=3, source=0, target=1, turns_remaining=3)]
        armies = seed_armies(game)

        game, arrived = process_fleet_movement(game, armies)

        assert arrived == []
        assert game.fleets[0].turns_remaining == 2
        assert armies[1] == [Army(NEUTRAL, 2)]

    def test_arriving_fleet_joins_target_armies(self):
        game = create_basic_game()
        game.fleets = [
            Fleet(id=0, owner="alice", ships=3, source=0, target=1, turns_remaining=1),
            Fleet(id=1, owner="alice", ships=4, source=0, target=1, turns_remaining=1),
        ]
        armies = seed_armies(game)

        game, arrived = process_fleet_movement(game, armies)

        assert [f.id for f in arrived] == [0, 1]
        assert game.fleets == []
        assert armies[1] == [Army(NEUTRAL, 2), Army("alice", 7)]

    def test_fleet_to_unknown_planet_is_dropped(self):
        game = create_basic_game()
        game.fleets = [Fleet(id=0, owner="alice", ships=3, source=0, target=5, turns_remaining=1)]

        game, arrived = process_fleet_movement(game, seed_armies(game))

        assert arrived == []
        assert game.fleets == []
