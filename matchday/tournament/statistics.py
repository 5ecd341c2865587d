"""
Tournament statistics recomputation.

TournamentPlayerStats rows are derived data. They are rebuilt from scratch
for the affected players after every change to which match results exist,
never incremented, so an edit or deletion can not double count. Nothing
reconciles them in the background: every code path that adds, edits or
removes match results must call update_player_statistics for every player it
touched, inside the same transaction as the change itself.
"""

import logging
from typing import Dict, Iterable

from django.db import transaction

from matchday.scoring_core.aggregation import PlayerTally, aggregate_results
from matchday.tournament.db_to_structure import stored_result_rows_to_structure
from matchday.tournament.models import (
    MatchResult,
    TournamentParticipant,
    TournamentPlayerStats,
)

logger = logging.getLogger(__name__)


def _lock_participants(tournament_id, player_ids):
    # Serializes concurrent recomputation for the same (tournament, player).
    # Ordered by player id so two recomputations can't deadlock each other.
    list(
        TournamentParticipant.objects.select_for_update()
        .filter(tournament_id=tournament_id, player_id__in=player_ids)
        .order_by("player_id")
        .values_list("id", flat=True)
    )


def load_stored_results(tournament_id, player_ids):
    """Read every persisted result for ``player_ids`` in one tournament."""
    rows = MatchResult.objects.filter(
        match__tournament_id=tournament_id, player_id__in=player_ids
    ).values(
        "player_id",
        "outcome",
        "goals_scored",
        "goals_conceded",
        "points_earned",
        "conditional_points",
    )
    return stored_result_rows_to_structure(rows)


def update_player_statistics(
    tournament_id, player_ids: Iterable[int]
) -> Dict[int, PlayerTally]:
    """
    Recompute and overwrite the stats rows of ``player_ids`` in a tournament.

    Players with no remaining results get a zeroed row. Database errors
    propagate so the enclosing match change is rolled back with them.

    Args:
        tournament_id: The tournament to recompute within
        player_ids: Every player affected by the change

    Returns:
        Dictionary mapping player ID to the tally that was written
    """
    player_ids = sorted(set(player_ids))
    if not player_ids:
        return {}

    with transaction.atomic():
        _lock_participants(tournament_id, player_ids)
        results = load_stored_results(tournament_id, player_ids)
        tallies = aggregate_results(player_ids, results)

        for player_id, tally in tallies.items():
            TournamentPlayerStats.objects.update_or_create(
                tournament_id=tournament_id,
                player_id=player_id,
                defaults=tally.as_fields(),
            )

    logger.debug(
        "Recomputed stats for %d player(s) in tournament %s",
        len(player_ids),
        tournament_id,
    )
    return tallies


def recalculate_tournament_statistics(tournament_id) -> int:
    """Rebuild stats for every current participant of a tournament.

    Returns:
        The number of players recomputed
    """
    player_ids = list(
        TournamentParticipant.objects.filter(tournament_id=tournament_id).values_list(
            "player_id", flat=True
        )
    )
    if not player_ids:
        return 0

    update_player_statistics(tournament_id, player_ids)
    logger.info(
        "Recalculated statistics for %d participant(s) of tournament %s",
        len(player_ids),
        tournament_id,
    )
    return len(player_ids)


def delete_player_statistics(tournament_id, player_id) -> int:
    """Drop a player's stats row, used when they leave the tournament."""
    deleted, _ = TournamentPlayerStats.objects.filter(
        tournament_id=tournament_id, player_id=player_id
    ).delete()
    return deleted
