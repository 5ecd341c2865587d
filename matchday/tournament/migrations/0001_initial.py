import django.db.models.deletion
from django.db import migrations, models

RATE_FIELDS = [
    ("points_per_win", models.IntegerField(default=3)),
    ("points_per_draw", models.IntegerField(default=1)),
    ("points_per_loss", models.IntegerField(default=0)),
    ("points_per_goal_scored", models.IntegerField(default=0)),
    ("points_per_goal_conceded", models.IntegerField(default=0)),
]


def _base_fields():
    return [
        ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
        ("date_created", models.DateTimeField(auto_now_add=True)),
        ("date_modified", models.DateTimeField(auto_now=True)),
    ]


def _rate_fields():
    return [(name, field.clone()) for name, field in RATE_FIELDS]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Player",
            fields=_base_fields() + [
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(blank=True, max_length=254)),
            ],
            options={"ordering": ("name",)},
        ),
        migrations.CreateModel(
            name="PointSystemTemplate",
            fields=_base_fields() + _rate_fields() + [
                ("name", models.CharField(max_length=100, unique=True)),
                ("description", models.TextField(blank=True)),
            ],
            options={"abstract": False},
        ),
        migrations.CreateModel(
            name="ConditionalRule",
            fields=_base_fields() + [
                ("condition_type", models.CharField(choices=[("GOALS_SCORED_THRESHOLD", "Goals scored threshold"), ("GOALS_CONCEDED_THRESHOLD", "Goals conceded threshold"), ("GOAL_DIFFERENCE_THRESHOLD", "Goal difference threshold"), ("CLEAN_SHEET", "Clean sheet")], max_length=32)),
                ("operator", models.CharField(choices=[("EQUALS", "="), ("GREATER_THAN", ">"), ("LESS_THAN", "<"), ("GREATER_THAN_OR_EQUAL", ">="), ("LESS_THAN_OR_EQUAL", "<=")], max_length=32)),
                ("threshold", models.IntegerField()),
                ("point_adjustment", models.IntegerField()),
                ("template", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="conditional_rules", to="tournament.pointsystemtemplate")),
            ],
            options={"ordering": ("id",)},
        ),
        migrations.CreateModel(
            name="StagePoint",
            fields=_base_fields() + _rate_fields() + [
                ("stage_id", models.PositiveIntegerField()),
                ("stage_name", models.CharField(max_length=100)),
                ("stage_order", models.PositiveIntegerField(default=0)),
                ("template", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="stage_points", to="tournament.pointsystemtemplate")),
            ],
            options={
                "ordering": ("stage_order", "stage_id"),
                "unique_together": {("template", "stage_id")},
            },
        ),
        migrations.CreateModel(
            name="Tournament",
            fields=_base_fields() + _rate_fields() + [
                ("name", models.CharField(max_length=255)),
                ("point_system_template", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="tournaments", to="tournament.pointsystemtemplate")),
            ],
            options={"abstract": False},
        ),
        migrations.CreateModel(
            name="TournamentParticipant",
            fields=_base_fields() + [
                ("tournament", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="participants", to="tournament.tournament")),
                ("player", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="tournament.player")),
            ],
            options={"unique_together": {("tournament", "player")}},
        ),
        migrations.CreateModel(
            name="Match",
            fields=_base_fields() + [
                ("match_date", models.DateTimeField()),
                ("stage_id", models.PositiveIntegerField(blank=True, null=True)),
                ("stage_name", models.CharField(blank=True, max_length=100)),
                ("tournament", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="matches", to="tournament.tournament")),
            ],
            options={
                "ordering": ("-match_date", "-id"),
                "verbose_name_plural": "matches",
            },
        ),
        migrations.CreateModel(
            name="MatchResult",
            fields=_base_fields() + [
                ("outcome", models.CharField(choices=[("WIN", "Win"), ("DRAW", "Draw"), ("LOSS", "Loss")], max_length=8)),
                ("goals_scored", models.PositiveIntegerField(default=0)),
                ("goals_conceded", models.PositiveIntegerField(default=0)),
                ("points_earned", models.IntegerField(default=0)),
                ("base_points", models.IntegerField(default=0)),
                ("conditional_points", models.IntegerField(default=0)),
                ("applied_rule_ids", models.JSONField(blank=True, default=list)),
                ("match", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="results", to="tournament.match")),
                ("player", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="tournament.player")),
            ],
            options={"unique_together": {("match", "player")}},
        ),
        migrations.CreateModel(
            name="TournamentPlayerStats",
            fields=_base_fields() + [
                ("matches_played", models.PositiveIntegerField(default=0)),
                ("wins", models.PositiveIntegerField(default=0)),
                ("draws", models.PositiveIntegerField(default=0)),
                ("losses", models.PositiveIntegerField(default=0)),
                ("goals_scored", models.PositiveIntegerField(default=0)),
                ("goals_conceded", models.PositiveIntegerField(default=0)),
                ("total_points", models.IntegerField(default=0)),
                ("conditional_points", models.IntegerField(default=0)),
                ("tournament", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="player_stats", to="tournament.tournament")),
                ("player", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="tournament.player")),
            ],
            options={
                "unique_together": {("tournament", "player")},
                "verbose_name_plural": "tournament player stats",
            },
        ),
    ]
