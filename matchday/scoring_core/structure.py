"""
Plain value types describing match results.

A MatchResultInput is what a caller hands to the point calculator. A
StoredResult is what comes back out of the data store once the calculator's
breakdown has been persisted alongside it.
"""

from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    """One participant's result in a match."""

    WIN = "WIN"
    DRAW = "DRAW"
    LOSS = "LOSS"


@dataclass(frozen=True)
class MatchResultInput:
    """One participant's outcome in one match, before scoring."""

    player_id: int
    outcome: Outcome
    goals_scored: int = 0
    goals_conceded: int = 0


@dataclass(frozen=True)
class StoredResult:
    """A persisted match result with its already-computed points.

    The aggregator only ever sees these; it never re-derives points from the
    outcome and goals.
    """

    player_id: int
    outcome: Outcome
    goals_scored: int
    goals_conceded: int
    points_earned: int
    conditional_points: int = 0


def parse_outcome(value) -> Outcome:
    """Convert a stored outcome string (or an Outcome) to the enum."""
    if isinstance(value, Outcome):
        return value
    return Outcome(value)
