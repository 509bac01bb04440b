"""Fleet data model for ships in flight."""

from dataclasses import dataclass


@dataclass
class Fleet:
    """Represents ships travelling between two planets.

    Fleets are created when a validated order is launched. They arrive after a
    number of rounds equal to the rounded-up euclidean distance between the
    planets and are removed from the ledger on arrival.
    """

    id: int  # Monotonic id, unique within a session
    owner: str  # Player id (never neutral)
    ships: int  # Ship count
    source: int  # Source planet id
    target: int  # Target planet id
    turns_remaining: int  # Rounds until arrival

    def __post_init__(self):
        """Validate fleet data after initialization."""
        if self.owner is None:
            raise ValueError("Fleet owner cannot be neutral")
        if self.ships <= 0:
            raise ValueError(f"Invalid ships: {self.ships} (must be > 0)")
        if self.turns_remaining < 1:
            raise ValueError(
                f"Invalid turns_remaining: {self.turns_remaining} (must be >= 1)"
            )
