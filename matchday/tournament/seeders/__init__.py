"""
Database seeders for generating test data.
"""

from .base import BaseSeeder
from .player_seeder import PlayerSeeder
from .point_system_seeder import PointSystemSeeder
from .tournament_seeder import TournamentSeeder

__all__ = [
    "BaseSeeder",
    "PlayerSeeder",
    "PointSystemSeeder",
    "TournamentSeeder",
]
