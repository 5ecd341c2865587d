"""
Aggregation of stored match results into per-player tournament tallies.

This is the pure half of statistics recomputation: given the set of players
to recompute and their persisted results, produce a complete tally for each
one. Points are summed from what was stored with each result and are never
recalculated here.
"""

from typing import Dict, Iterable
from dataclasses import dataclass, asdict

from matchday.scoring_core.structure import Outcome, StoredResult


@dataclass(frozen=True)
class PlayerTally:
    """Aggregate record for one player within one tournament."""

    player_id: int
    matches_played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_scored: int = 0
    goals_conceded: int = 0
    total_points: int = 0
    conditional_points: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_scored - self.goals_conceded

    def as_fields(self) -> Dict[str, int]:
        """Return the derived fields, without the player id, for persistence."""
        fields = asdict(self)
        del fields["player_id"]
        return fields


def tally_results(player_id: int, results: Iterable[StoredResult]) -> PlayerTally:
    """Build the tally for a single player from their results."""
    results = list(results)
    return PlayerTally(
        player_id=player_id,
        matches_played=len(results),
        wins=sum(1 for r in results if r.outcome == Outcome.WIN),
        draws=sum(1 for r in results if r.outcome == Outcome.DRAW),
        losses=sum(1 for r in results if r.outcome == Outcome.LOSS),
        goals_scored=sum(r.goals_scored for r in results),
        goals_conceded=sum(r.goals_conceded for r in results),
        total_points=sum(r.points_earned for r in results),
        conditional_points=sum(r.conditional_points for r in results),
    )


def aggregate_results(
    player_ids: Iterable[int], results: Iterable[StoredResult]
) -> Dict[int, PlayerTally]:
    """
    Group results by player and tally each requested player.

    Every requested player gets an entry, including those with no results,
    so that a player whose last result was removed comes back zeroed rather
    than keeping a stale record. Results belonging to players that were not
    requested are ignored.

    Args:
        player_ids: Players to produce tallies for
        results: Stored results, in any order

    Returns:
        Dictionary mapping player ID to PlayerTally
    """
    grouped: Dict[int, list] = {player_id: [] for player_id in player_ids}
    for result in results:
        if result.player_id in grouped:
            grouped[result.player_id].append(result)

    return {
        player_id: tally_results(player_id, player_results)
        for player_id, player_results in grouped.items()
    }
