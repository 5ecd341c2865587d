"""
Player seeder for creating test players.
"""

from typing import List

from matchday.tournament.models import Player

from .base import BaseSeeder


class PlayerSeeder(BaseSeeder):
    """Seeder for creating Player objects."""

    def seed(self, count: int = 1, **kwargs) -> List[Player]:
        players = []
        for _ in range(count):
            player = Player.objects.create(
                name=self.fake.name(),
                email=self.fake.email(),
            )
            players.append(self._track(player))
        return players
