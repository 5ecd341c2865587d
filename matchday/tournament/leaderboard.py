"""
Tournament leaderboard built from the persisted statistics rows.
"""

from typing import List

from matchday.scoring_core.aggregation import PlayerTally
from matchday.scoring_core.ranking import Standing, rank_tallies
from matchday.tournament.models import TournamentPlayerStats

TALLY_FIELDS = (
    "matches_played",
    "wins",
    "draws",
    "losses",
    "goals_scored",
    "goals_conceded",
    "total_points",
    "conditional_points",
)


def stats_to_tally(stats: TournamentPlayerStats) -> PlayerTally:
    return PlayerTally(
        player_id=stats.player_id,
        **{name: getattr(stats, name) for name in TALLY_FIELDS},
    )


def tournament_leaderboard(tournament) -> List[Standing]:
    """Rank every stats row of a tournament, best first."""
    stats_rows = TournamentPlayerStats.objects.filter(tournament=tournament)
    return rank_tallies(stats_to_tally(stats) for stats in stats_rows)
