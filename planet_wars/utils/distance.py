"""Distance calculations for the game map."""

import math


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Calculate straight-line distance between two points.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Euclidean distance between the two points

    Examples:
        >>> euclidean_distance(0, 0, 3, 4)
        5.0
    """
    return math.hypot(x2 - x1, y2 - y1)


def travel_turns(x1: float, y1: float, x2: float, y2: float) -> int:
    """Number of rounds a fleet needs to cross the distance between two points.

    The distance is rounded up. Coincident points would give 0 turns; a fleet
    always spends at least one round in flight, so the result is never below 1.

    Examples:
        >>> travel_turns(0, 0, 3, 4)
        5
        >>> travel_turns(0, 0, 1.2, 0)
        2
        >>> travel_turns(7, 7, 7, 7)
        1
    """
    return max(1, math.ceil(euclidean_distance(x1, y1, x2, y2)))
