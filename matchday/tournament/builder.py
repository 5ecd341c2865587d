"""
Tournament builder with database persistence.

Fluent interface for setting up tournaments, point systems and matches in
tests and seeding. Matches are recorded through the regular workflows, so
statistics are maintained exactly as in production.
"""

from datetime import timedelta
from typing import Dict, List, Optional

from django.utils import timezone

from matchday.scoring_core.builder import outcome_for, parse_score
from matchday.scoring_core.structure import MatchResultInput, parse_outcome
from matchday.tournament.matches import add_participant, record_match
from matchday.tournament.models import (
    Match,
    Player,
    PointSystemTemplate,
    StagePoint,
    Tournament,
)
from matchday.tournament.point_systems import add_conditional_rule


def _rates(win, draw, loss, goal_scored, goal_conceded):
    return {
        "points_per_win": win,
        "points_per_draw": draw,
        "points_per_loss": loss,
        "points_per_goal_scored": goal_scored,
        "points_per_goal_conceded": goal_conceded,
    }


class TournamentBuilder:
    """Fluent interface for building tournaments with database persistence."""

    def __init__(
        self,
        name: str = "Test Tournament",
        win: int = 3,
        draw: int = 1,
        loss: int = 0,
        goal_scored: int = 0,
        goal_conceded: int = 0,
    ):
        self.name = name
        self.inline_rates = _rates(win, draw, loss, goal_scored, goal_conceded)
        self.tournament: Optional[Tournament] = None
        self.point_system: Optional[PointSystemTemplate] = None
        self.players: Dict[str, Player] = {}
        self.matches: List[Match] = []
        self._match_date = timezone.now() - timedelta(days=30)

    def _ensure_tournament(self) -> Tournament:
        if self.tournament is None:
            self.tournament = Tournament.objects.create(
                name=self.name,
                point_system_template=self.point_system,
                **self.inline_rates,
            )
        return self.tournament

    def _next_date(self):
        self._match_date += timedelta(days=1)
        return self._match_date

    def template(
        self,
        name: str,
        win: int = 3,
        draw: int = 1,
        loss: int = 0,
        goal_scored: int = 0,
        goal_conceded: int = 0,
    ) -> "TournamentBuilder":
        """Create a point system template and assign it to the tournament."""
        self.point_system = PointSystemTemplate.objects.create(
            name=name, **_rates(win, draw, loss, goal_scored, goal_conceded)
        )
        if self.tournament is not None:
            self.tournament.point_system_template = self.point_system
            self.tournament.save()
        return self

    def rule(
        self, condition_type, operator, threshold: int, point_adjustment: int
    ) -> "TournamentBuilder":
        """Add a conditional rule to the current template."""
        if self.point_system is None:
            raise ValueError("Define a template before adding rules")
        add_conditional_rule(
            self.point_system, condition_type, operator, threshold, point_adjustment
        )
        return self

    def stage(
        self,
        stage_id: int,
        stage_name: str,
        win: int = 3,
        draw: int = 1,
        loss: int = 0,
        goal_scored: int = 0,
        goal_conceded: int = 0,
        order: Optional[int] = None,
    ) -> "TournamentBuilder":
        """Add a stage override to the current template."""
        if self.point_system is None:
            raise ValueError("Define a template before adding stages")
        StagePoint.objects.create(
            template=self.point_system,
            stage_id=stage_id,
            stage_name=stage_name,
            stage_order=stage_id if order is None else order,
            **_rates(win, draw, loss, goal_scored, goal_conceded),
        )
        return self

    def player(self, name: str) -> "TournamentBuilder":
        """Create a player and register them as a participant."""
        tournament = self._ensure_tournament()
        if name not in self.players:
            self.players[name] = Player.objects.create(name=name)
        add_participant(tournament, self.players[name])
        return self

    def participants(self, *names: str) -> "TournamentBuilder":
        for name in names:
            self.player(name)
        return self

    def game(
        self, home: str, away: str, score: str, stage_id: Optional[int] = None
    ) -> "TournamentBuilder":
        """Record a two-player match from a score line like '3-1'."""
        home_goals, away_goals = parse_score(score)
        return self.match(
            (home, outcome_for(home_goals, away_goals), home_goals, away_goals),
            (away, outcome_for(away_goals, home_goals), away_goals, home_goals),
            stage_id=stage_id,
        )

    def match(self, *results, stage_id: Optional[int] = None) -> "TournamentBuilder":
        """Record a match from (name, outcome, goals_scored, goals_conceded) tuples."""
        tournament = self._ensure_tournament()
        inputs = []
        for name, outcome, scored, conceded in results:
            self.player(name)
            inputs.append(
                MatchResultInput(
                    self.players[name].pk, parse_outcome(outcome), scored, conceded
                )
            )
        self.matches.append(
            record_match(tournament, self._next_date(), inputs, stage_id=stage_id)
        )
        return self

    def build(self) -> Tournament:
        return self._ensure_tournament()

