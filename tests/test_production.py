"""Tests for Phase 1: Growth."""

from planet_wars.engine.production import process_growth
from planet_wars.models import NEUTRAL, Game, Planet, Player


def test_player_planets_grow_by_one():
    planets = [
        Planet(id=0, name="planet0", x=0, y=0, owner="alice", ships=10),
        Planet(id=1, name="planet1", x=5, y=5, owner="bob", ships=0),
    ]
    game = Game(seed=42, planets=planets, players={"alice": Player("alice"), "bob": Player("bob")})

    process_growth(game)

    assert planets[0].ships == 11
    assert planets[1].ships == 1


def test_neutral_planets_do_not_grow():
    planets = [
        Planet(id=0, name="planet0", x=0, y=0, owner=NEUTRAL, ships=5),
        Planet(id=1, name="planet1", x=5, y=5, owner=NEUTRAL, ships=0),
    ]
    game = Game(seed=42, planets=planets)

    process_growth(game)

    assert [p.ships for p in planets] == [5, 0]
