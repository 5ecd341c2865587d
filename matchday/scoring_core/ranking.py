"""
Leaderboard ordering for tournament tallies.
"""

from typing import Iterable, List
from dataclasses import dataclass

from matchday.scoring_core.aggregation import PlayerTally


@dataclass(frozen=True)
class Standing:
    rank: int
    player_id: int
    tally: PlayerTally


def leaderboard_sort_key(tally: PlayerTally):
    """Total points, then goals scored, then wins; player id breaks exact ties."""
    return (-tally.total_points, -tally.goals_scored, -tally.wins, tally.player_id)


def rank_tallies(tallies: Iterable[PlayerTally]) -> List[Standing]:
    """Order tallies into a ranked leaderboard, rank 1 first."""
    ordered = sorted(tallies, key=leaderboard_sort_key)
    return [
        Standing(rank=index, player_id=tally.player_id, tally=tally)
        for index, tally in enumerate(ordered, 1)
    ]
