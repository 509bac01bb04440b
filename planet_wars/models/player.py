"""Player data model."""

from dataclasses import dataclass
from typing import Optional

# Owner id of planets that belong to no player.
NEUTRAL: Optional[str] = None


@dataclass
class Player:
    """Player liveness and turn-gating state.

    The neutral player is part of every roster but never moves, never grows
    ships and always counts as dead.
    """

    id: Optional[str]  # Player id, or NEUTRAL
    moved: bool = False  # Submitted an order this round
    dead: bool = False  # Eliminated (no planets and no fleets)

    def __post_init__(self):
        """Validate player data after initialization."""
        if self.id is NEUTRAL:
            self.moved = True
            self.dead = True
        elif not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Invalid player id: {self.id!r} (must be a non-empty string)")

    @property
    def is_neutral(self) -> bool:
        return self.id is NEUTRAL

    @property
    def owes_move(self) -> bool:
        """True if the round cannot advance until this player submits."""
        return not self.dead and not self.moved
