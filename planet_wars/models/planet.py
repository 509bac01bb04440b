"""Planet data model."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Planet:
    """Represents a planet on the map.

    Planets are the only places where ships are produced and the only targets
    fleets can be sent to. Position is fixed for the whole game; owner and
    garrison change every round.
    """

    id: int  # Stable index into the planet arena (0..n-1)
    name: str  # Human-readable name (e.g., "planet3")
    x: float  # X coordinate
    y: float  # Y coordinate
    owner: Optional[str]  # Player id, or None (neutral)
    ships: int  # Garrison ship count

    def __post_init__(self):
        """Validate planet data after initialization."""
        if self.id < 0:
            raise ValueError(f"Invalid id: {self.id} (must be >= 0)")
        if self.ships < 0:
            raise ValueError(f"Invalid ships: {self.ships} (must be >= 0)")

    @property
    def is_neutral(self) -> bool:
        return self.owner is None
