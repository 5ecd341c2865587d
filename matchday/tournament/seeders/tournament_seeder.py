"""
Tournament seeder for creating tournaments with participants and matches.

Matches go through the regular match workflows, so the seeded statistics
are produced exactly as they would be in production.
"""

from datetime import timedelta
from typing import List, Optional

from django.utils import timezone

from matchday.scoring_core.builder import outcome_for
from matchday.scoring_core.structure import MatchResultInput
from matchday.tournament.matches import add_participant, record_match
from matchday.tournament.models import Player, PointSystemTemplate, Tournament

from .base import BaseSeeder


class TournamentSeeder(BaseSeeder):
    """Seeder for creating Tournament objects."""

    def seed(
        self,
        count: int = 1,
        players: Optional[List[Player]] = None,
        templates: Optional[List[PointSystemTemplate]] = None,
        matches: int = 10,
        **kwargs,
    ) -> List[Tournament]:
        players = players or []
        templates = templates or []
        tournaments = []

        for i in range(count):
            template = templates[i % len(templates)] if templates else None
            tournament = Tournament.objects.create(
                name=f"{self.fake.city()} {self.fake.word().title()} Cup",
                point_system_template=template,
            )
            for player in players:
                add_participant(tournament, player)

            if len(players) >= 2:
                self._seed_matches(tournament, players, template, matches)
            tournaments.append(self._track(tournament))

        return tournaments

    def _seed_matches(self, tournament, players, template, match_count):
        stage_ids = []
        if template is not None:
            stage_ids = list(template.stage_points.values_list("stage_id", flat=True))

        start = timezone.now() - timedelta(days=match_count)
        for n in range(match_count):
            home, away = self.random.sample(players, 2)
            home_goals = self.random.randint(0, 5)
            away_goals = self.random.randint(0, 5)
            stage_id = self.random.choice(stage_ids) if stage_ids else None
            record_match(
                tournament,
                start + timedelta(days=n),
                [
                    MatchResultInput(
                        home.pk, outcome_for(home_goals, away_goals), home_goals, away_goals
                    ),
                    MatchResultInput(
                        away.pk, outcome_for(away_goals, home_goals), away_goals, home_goals
                    ),
                ],
                stage_id=stage_id,
            )
