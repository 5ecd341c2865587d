"""
Management command to seed the database with players, point systems,
tournaments and scored matches.
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from faker import Faker

from matchday.tournament.models import Player, PointSystemTemplate, Tournament
from matchday.tournament.seeders import (
    PlayerSeeder,
    PointSystemSeeder,
    TournamentSeeder,
)


class Command(BaseCommand):
    help = "Seed the database with test data for development and testing"

    def add_arguments(self, parser):
        parser.add_argument(
            "--tournaments",
            type=int,
            default=2,
            help="Number of tournaments to create (default: 2)",
        )
        parser.add_argument(
            "--players",
            type=int,
            default=12,
            help="Number of players per tournament (default: 12)",
        )
        parser.add_argument(
            "--matches",
            type=int,
            default=20,
            help="Number of matches per tournament (default: 20)",
        )
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Random seed for reproducible data",
        )
        parser.add_argument(
            "--locale",
            type=str,
            default="en_US",
            help="Faker locale for data generation (default: en_US)",
        )
        parser.add_argument(
            "--no-clear",
            action="store_true",
            help="Don't clear existing data before seeding",
        )

    def handle(self, *args, **options):
        fake = Faker(options["locale"])
        seed = options["seed"]

        self.stdout.write(self.style.WARNING("Starting database seeding..."))

        if not options["no_clear"]:
            self._clear_data()

        with transaction.atomic():
            self.stdout.write("Creating players...")
            players = PlayerSeeder(fake, seed).seed(options["players"])
            self.stdout.write(self.style.SUCCESS(f"✓ Created {len(players)} players"))

            self.stdout.write("Creating point systems...")
            templates = PointSystemSeeder(fake, seed).seed(2)
            self.stdout.write(
                self.style.SUCCESS(f"✓ Created {len(templates)} point system templates")
            )

            self.stdout.write("Creating tournaments and matches...")
            tournaments = TournamentSeeder(fake, seed).seed(
                options["tournaments"],
                players=players,
                templates=templates,
                matches=options["matches"],
            )
            self.stdout.write(
                self.style.SUCCESS(f"✓ Created {len(tournaments)} tournaments")
            )

        self.stdout.write(self.style.SUCCESS("Database seeding completed!"))

    def _clear_data(self):
        self.stdout.write("Clearing existing data...")
        Tournament.objects.all().delete()
        PointSystemTemplate.objects.all().delete()
        Player.objects.all().delete()
