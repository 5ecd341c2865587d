"""
Match mutation workflows.

Every function here changes which match results exist for some players in a
tournament, and every one of them finishes by recomputing statistics for the
union of players it touched, inside the same transaction as the change.
"""

import logging
from typing import Iterable, List, Optional, Set

import reversion
from django.core.exceptions import ValidationError
from django.db import transaction

from matchday.scoring_core.calculator import calculate
from matchday.scoring_core.structure import MatchResultInput
from matchday.tournament.db_to_structure import result_input
from matchday.tournament.models import (
    Match,
    MatchResult,
    TournamentParticipant,
)
from matchday.tournament.point_systems import resolve_point_system
from matchday.tournament.statistics import (
    delete_player_statistics,
    update_player_statistics,
)

logger = logging.getLogger(__name__)

# Marker for "leave the stage as it is" in update_match, since None clears it
UNSET = object()


def _coerce_results(results: Iterable) -> List[MatchResultInput]:
    coerced = []
    for r in results:
        if isinstance(r, MatchResultInput):
            coerced.append(r)
            continue
        if "player_id" not in r or "outcome" not in r:
            raise ValidationError("Each match result needs a player_id and an outcome")
        try:
            coerced.append(
                result_input(
                    r["player_id"],
                    r["outcome"],
                    r.get("goals_scored", 0),
                    r.get("goals_conceded", 0),
                )
            )
        except ValueError:
            raise ValidationError("Outcome must be WIN, DRAW, or LOSS")
    return coerced


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_results(tournament, results: List[MatchResultInput]):
    if not results:
        raise ValidationError("At least one match result is required")

    player_ids = [r.player_id for r in results]
    if not all(_is_int(pid) for pid in player_ids):
        raise ValidationError("Player IDs must be integers")
    if len(player_ids) != len(set(player_ids)):
        raise ValidationError("Duplicate player IDs are not allowed in match results")

    for r in results:
        if not _is_int(r.goals_scored) or not _is_int(r.goals_conceded):
            raise ValidationError("Goals scored and conceded must be integers")
        if r.goals_scored < 0 or r.goals_conceded < 0:
            raise ValidationError("Goals scored and conceded must be non-negative")

    participant_ids = set(
        TournamentParticipant.objects.filter(
            tournament=tournament, player_id__in=player_ids
        ).values_list("player_id", flat=True)
    )
    missing = [pid for pid in player_ids if pid not in participant_ids]
    if missing:
        raise ValidationError(
            "Player(s) %s are not participants in this tournament"
            % ", ".join(str(pid) for pid in missing)
        )


def _save_results(match, results: List[MatchResultInput], config):
    for r in results:
        breakdown = calculate(r, config)
        MatchResult.objects.create(
            match=match,
            player_id=r.player_id,
            outcome=r.outcome.value,
            goals_scored=r.goals_scored,
            goals_conceded=r.goals_conceded,
            points_earned=breakdown.total_points,
            base_points=breakdown.base_points,
            conditional_points=breakdown.conditional_points,
            applied_rule_ids=breakdown.applied_rule_ids,
        )


def _rescore_results(match, config):
    """Recalculate the stored breakdown of every existing result of a match."""
    for row in match.results.all():
        breakdown = calculate(
            result_input(row.player_id, row.outcome, row.goals_scored, row.goals_conceded),
            config,
        )
        row.points_earned = breakdown.total_points
        row.base_points = breakdown.base_points
        row.conditional_points = breakdown.conditional_points
        row.applied_rule_ids = breakdown.applied_rule_ids
        row.save()


def record_match(
    tournament, match_date, results, stage_id=None, stage_name=""
) -> Match:
    """
    Create a match with its results and update the participants' stats.

    Args:
        tournament: The Tournament the match belongs to
        match_date: When the match was played
        results: MatchResultInput objects or dicts with player_id, outcome,
                 goals_scored and goals_conceded
        stage_id: Optional stage, used to pick a stage point override
        stage_name: Optional display name for the stage

    Raises:
        ValidationError: on duplicate players, non-integer or negative goals,
                         or players that are not participants of the tournament
    """
    results = _coerce_results(results)
    _validate_results(tournament, results)

    with transaction.atomic(), reversion.create_revision():
        reversion.set_comment("Recorded match.")
        config = resolve_point_system(tournament, stage_id)
        match = Match.objects.create(
            tournament=tournament,
            match_date=match_date,
            stage_id=stage_id,
            stage_name=stage_name or "",
        )
        _save_results(match, results, config)
        update_player_statistics(tournament.pk, [r.player_id for r in results])

    logger.info(
        "Recorded match %s in tournament %s with %d result(s)",
        match.pk,
        tournament.pk,
        len(results),
    )
    return match


def update_match(
    match,
    match_date=None,
    stage_id=UNSET,
    stage_name: Optional[str] = None,
    results=None,
) -> Match:
    """
    Edit a match and, when ``results`` is given, replace all of its results.

    Points are recalculated with the point system for the effective stage
    (the new one if given, else the current one) whenever the results or the
    stage change. Stats are recomputed for both the old and the new
    participant sets, since a player may have been dropped from the match.

    The match row is locked before its current participants are read, so
    concurrent edits of the same match are applied one after the other.

    Returns:
        The updated match, freshly loaded under the lock
    """
    tournament = match.tournament

    if results is not None:
        results = _coerce_results(results)
        _validate_results(tournament, results)

    with transaction.atomic(), reversion.create_revision():
        reversion.set_comment("Updated match.")
        match = Match.objects.select_for_update().get(pk=match.pk)
        old_player_ids: Set[int] = match.player_ids()
        stage_changed = stage_id is not UNSET and stage_id != match.stage_id

        if match_date is not None:
            match.match_date = match_date
        if stage_id is not UNSET:
            match.stage_id = stage_id
        if stage_name is not None:
            match.stage_name = stage_name
        match.save()

        if results is not None or stage_changed:
            config = resolve_point_system(tournament, match.stage_id)
            if results is not None:
                match.results.all().delete()
                _save_results(match, results, config)
            else:
                _rescore_results(match, config)

        update_player_statistics(tournament.pk, old_player_ids | match.player_ids())

    logger.info("Updated match %s in tournament %s", match.pk, tournament.pk)
    return match


def delete_match(match) -> int:
    """Delete a match and its results, then recompute its former players.

    Returns:
        The number of results deleted with the match
    """
    tournament_id = match.tournament_id
    match_id = match.pk

    with transaction.atomic(), reversion.create_revision():
        reversion.set_comment("Deleted match.")
        match = Match.objects.select_for_update().get(pk=match_id)
        player_ids = match.player_ids()
        match.delete()
        update_player_statistics(tournament_id, player_ids)

    logger.info(
        "Deleted match %s from tournament %s (%d result(s))",
        match_id,
        tournament_id,
        len(player_ids),
    )
    return len(player_ids)


def add_participant(tournament, player) -> TournamentParticipant:
    with transaction.atomic(), reversion.create_revision():
        reversion.set_comment("Added participant.")
        participant, created = TournamentParticipant.objects.get_or_create(
            tournament=tournament, player=player
        )
    if created:
        logger.info("Added %s to tournament %s", player, tournament.pk)
    return participant


def remove_participant(tournament, player) -> int:
    """
    Remove a player from a tournament along with their results and stats.

    Opponents who shared matches with the player are recomputed too.

    Raises:
        TournamentParticipant.DoesNotExist: if the player is not a participant

    Returns:
        The number of match results deleted
    """
    participant = TournamentParticipant.objects.get(tournament=tournament, player=player)

    with transaction.atomic(), reversion.create_revision():
        reversion.set_comment("Removed participant.")
        player_results = MatchResult.objects.filter(
            match__tournament=tournament, player=player
        )
        match_ids = list(player_results.values_list("match_id", flat=True))
        co_player_ids = set(
            MatchResult.objects.filter(match_id__in=match_ids)
            .exclude(player=player)
            .values_list("player_id", flat=True)
        )
        deleted, _ = player_results.delete()
        delete_player_statistics(tournament.pk, player.pk)
        participant.delete()
        update_player_statistics(tournament.pk, co_player_ids)

    if deleted:
        logger.warning(
            "Removed %s from tournament %s and deleted %d match result(s)",
            player,
            tournament.pk,
            deleted,
        )
    return deleted


def delete_tournament(tournament):
    """Delete a tournament; matches, results and stats cascade with it."""
    tournament_id = tournament.pk
    with transaction.atomic(), reversion.create_revision():
        reversion.set_comment("Deleted tournament.")
        tournament.delete()
    logger.info("Deleted tournament %s", tournament_id)
