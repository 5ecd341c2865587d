"""
Management command to rebuild tournament statistics from match results.
"""

from django.core.management.base import BaseCommand, CommandError

from matchday.tournament.models import Tournament
from matchday.tournament.statistics import recalculate_tournament_statistics


class Command(BaseCommand):
    help = "Recalculate player statistics for one or more tournaments"

    def add_arguments(self, parser):
        parser.add_argument(
            "tournament_ids",
            nargs="*",
            type=int,
            help="IDs of the tournaments to recalculate",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            help="Recalculate every tournament",
        )

    def handle(self, *args, **options):
        if options["all"]:
            tournaments = Tournament.objects.order_by("id")
        elif options["tournament_ids"]:
            tournaments = Tournament.objects.filter(
                id__in=options["tournament_ids"]
            ).order_by("id")
            found = set(tournaments.values_list("id", flat=True))
            missing = sorted(set(options["tournament_ids"]) - found)
            if missing:
                raise CommandError(
                    "Tournament(s) not found: %s" % ", ".join(map(str, missing))
                )
        else:
            raise CommandError("Give at least one tournament ID, or --all")

        for tournament in tournaments:
            count = recalculate_tournament_statistics(tournament.id)
            self.stdout.write(
                self.style.SUCCESS(
                    f"✓ Statistics recalculated for {tournament.name} "
                    f"({count} participant(s))"
                )
            )
