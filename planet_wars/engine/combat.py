"""Phase 3 and 5: Army seeding and combat resolution.

This module handles:
1. Seeding one army per planet from its resident garrison
2. Merging arriving fleets into a planet's armies by owner
3. Resolving the fight at each planet and updating owner and garrison
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..models.game import Game
from ..models.planet import Planet
from ..models.player import NEUTRAL

logger = logging.getLogger(__name__)


@dataclass
class Army:
    """Ships of one owner present at a planet during combat resolution."""

    owner: Optional[str]
    ships: int


@dataclass
class CombatEvent:
    """Record of a fight at a planet.

    Attributes:
        planet_id: ID of planet where the fight occurred
        planet_name: Name of planet where the fight occurred
        armies: Armies present, strongest first, as {"owner", "ships"} dicts
        owner_before: Planet owner before the fight (None for neutral)
        owner_after: Planet owner after the fight (None for neutral)
        ships_after: Surviving garrison
        draw: True if the strongest armies were tied and annihilated each other
    """

    planet_id: int
    planet_name: str
    armies: list[dict] = field(default_factory=list)
    owner_before: Optional[str] = None
    owner_after: Optional[str] = None
    ships_after: int = 0
    draw: bool = False


def seed_armies(game: Game) -> dict[int, list[Army]]:
    """Execute Phase 3: start one army per planet from its garrison.

    The garrison contributes an army even when it holds 0 ships.

    Returns:
        Mapping of planet id to its list of armies
    """
    return {planet.id: [Army(owner=planet.owner, ships=planet.ships)] for planet in game.planets}


def merge_army(armies: list[Army], owner: Optional[str], ships: int) -> None:
    """Add ships to a planet's armies, summing with an army of the same owner."""
    for army in armies:
        if army.owner == owner:
            army.ships += ships
            return
    armies.append(Army(owner=owner, ships=ships))


def merge_duplicate_owners(armies: list[Army]) -> list[Army]:
    """Return armies with one entry per owner.

    Armies are merged by owner as they are built, so a duplicate here is logged
    as an error before being summed.
    """
    owners = [army.owner for army in armies]
    if len(set(owners)) == len(owners):
        return armies

    logger.error(f"Duplicate army owners in fight {owners}, merging before resolution")
    merged: list[Army] = []
    for army in armies:
        merge_army(merged, army.owner, army.ships)
    return merged


def resolve_fight(armies: list[Army]) -> Army:
    """Resolve the fight between the armies present at one planet.

    Rules:
    - A single army holds (or takes) the planet with all its ships
    - Otherwise the strongest army wins with its surplus over the second
      strongest; armies further down are destroyed
    - If the surplus is zero (tie at the top) the planet becomes neutral with
      0 ships, whatever order the armies were listed in

    Args:
        armies: Armies present at the planet (at least one)

    Returns:
        Army describing the new owner and garrison of the planet
    """
    if not armies:
        raise ValueError("Cannot resolve a fight without armies")

    armies = merge_duplicate_owners(armies)

    if len(armies) < 2:
        return Army(owner=armies[0].owner, ships=armies[0].ships)

    ranked = sorted(armies, key=lambda a: a.ships, reverse=True)
    surplus = ranked[0].ships - ranked[1].ships
    if surplus == 0:
        return Army(owner=NEUTRAL, ships=0)
    return Army(owner=ranked[0].owner, ships=surplus)


def process_combat(game: Game, armies: dict[int, list[Army]]) -> tuple[Game, list[CombatEvent]]:
    """Execute Phase 5: Combat Resolution.

    Every planet takes the owner and garrison of the winner of its fight. A
    planet missing from ``armies`` is logged and left untouched.

    Args:
        game: Current game state
        armies: Armies per planet id (garrison plus arrivals)

    Returns:
        Tuple of (updated game state, events for planets with two or more armies)
    """
    combat_events = []
    for planet in game.planets:
        planet_armies = armies.get(planet.id)
        if not planet_armies:
            logger.error(f"No armies present on planet {planet.id}, ignoring")
            continue

        event = _resolve_planet(planet, planet_armies)
        if event:
            combat_events.append(event)

    return game, combat_events


def _resolve_planet(planet: Planet, armies: list[Army]) -> CombatEvent | None:
    owner_before = planet.owner
    armies = merge_duplicate_owners(armies)
    result = resolve_fight(armies)
    planet.owner = result.owner
    planet.ships = result.ships

    if len(armies) < 2:
        return None

    ranked = sorted(armies, key=lambda a: a.ships, reverse=True)
    return CombatEvent(
        planet_id=planet.id,
        planet_name=planet.name,
        armies=[{"owner": a.owner, "ships": a.ships} for a in ranked],
        owner_before=owner_before,
        owner_after=planet.owner,
        ships_after=planet.ships,
        draw=ranked[0].ships == ranked[1].ships,
    )
