import reversion
from django.core.exceptions import ValidationError
from django.db import models

from matchday.scoring_core.rules import ConditionType, Operator
from matchday.scoring_core.structure import Outcome
from matchday.scoring_core.validation import validate_rule

OUTCOME_OPTIONS = [(o.value, o.value.title()) for o in Outcome]

CONDITION_TYPE_OPTIONS = (
    (ConditionType.GOALS_SCORED_THRESHOLD.value, "Goals scored threshold"),
    (ConditionType.GOALS_CONCEDED_THRESHOLD.value, "Goals conceded threshold"),
    (ConditionType.GOAL_DIFFERENCE_THRESHOLD.value, "Goal difference threshold"),
    (ConditionType.CLEAN_SHEET.value, "Clean sheet"),
)

OPERATOR_OPTIONS = (
    (Operator.EQUALS.value, "="),
    (Operator.GREATER_THAN.value, ">"),
    (Operator.LESS_THAN.value, "<"),
    (Operator.GREATER_THAN_OR_EQUAL.value, ">="),
    (Operator.LESS_THAN_OR_EQUAL.value, "<="),
)


# -------------------------------------------------------------------------------
class _BaseModel(models.Model):
    date_created = models.DateTimeField(auto_now_add=True)
    date_modified = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


# -------------------------------------------------------------------------------
class _PointRatesModel(_BaseModel):
    points_per_win = models.IntegerField(default=3)
    points_per_draw = models.IntegerField(default=1)
    points_per_loss = models.IntegerField(default=0)
    points_per_goal_scored = models.IntegerField(default=0)
    points_per_goal_conceded = models.IntegerField(default=0)

    class Meta:
        abstract = True

    def point_rates(self):
        return {
            "points_per_win": self.points_per_win,
            "points_per_draw": self.points_per_draw,
            "points_per_loss": self.points_per_loss,
            "points_per_goal_scored": self.points_per_goal_scored,
            "points_per_goal_conceded": self.points_per_goal_conceded,
        }


# -------------------------------------------------------------------------------
class Player(_BaseModel):
    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True)

    class Meta:
        ordering = ("name",)

    def __str__(self):
        return self.name


# -------------------------------------------------------------------------------
@reversion.register()
class PointSystemTemplate(_PointRatesModel):
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)

    def __str__(self):
        return self.name


# -------------------------------------------------------------------------------
@reversion.register()
class ConditionalRule(_BaseModel):
    template = models.ForeignKey(
        PointSystemTemplate, on_delete=models.CASCADE, related_name="conditional_rules"
    )
    condition_type = models.CharField(max_length=32, choices=CONDITION_TYPE_OPTIONS)
    operator = models.CharField(max_length=32, choices=OPERATOR_OPTIONS)
    threshold = models.IntegerField()
    point_adjustment = models.IntegerField()

    class Meta:
        ordering = ("id",)

    def clean(self):
        errors = validate_rule(self.condition_type, self.operator, self.threshold)
        if errors:
            raise ValidationError(errors)

    def __str__(self):
        return "%s %s %s => %+d" % (
            self.condition_type,
            self.get_operator_display(),
            self.threshold,
            self.point_adjustment,
        )


# -------------------------------------------------------------------------------
@reversion.register()
class StagePoint(_PointRatesModel):
    template = models.ForeignKey(
        PointSystemTemplate, on_delete=models.CASCADE, related_name="stage_points"
    )
    stage_id = models.PositiveIntegerField()
    stage_name = models.CharField(max_length=100)
    stage_order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ("stage_order", "stage_id")
        unique_together = ("template", "stage_id")

    def __str__(self):
        return "%s - %s" % (self.template, self.stage_name)


# -------------------------------------------------------------------------------
@reversion.register()
class Tournament(_PointRatesModel):
    name = models.CharField(max_length=255)
    point_system_template = models.ForeignKey(
        PointSystemTemplate,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="tournaments",
    )

    def __str__(self):
        return self.name


# -------------------------------------------------------------------------------
class TournamentParticipant(_BaseModel):
    tournament = models.ForeignKey(
        Tournament, on_delete=models.CASCADE, related_name="participants"
    )
    player = models.ForeignKey(Player, on_delete=models.CASCADE)

    class Meta:
        unique_together = ("tournament", "player")

    def __str__(self):
        return "%s - %s" % (self.tournament, self.player)


# -------------------------------------------------------------------------------
@reversion.register(follow=("results",))
class Match(_BaseModel):
    tournament = models.ForeignKey(
        Tournament, on_delete=models.CASCADE, related_name="matches"
    )
    match_date = models.DateTimeField()
    stage_id = models.PositiveIntegerField(null=True, blank=True)
    stage_name = models.CharField(max_length=100, blank=True)

    class Meta:
        ordering = ("-match_date", "-id")
        verbose_name_plural = "matches"

    def player_ids(self):
        return set(self.results.values_list("player_id", flat=True))

    def __str__(self):
        return "%s - match %s" % (self.tournament, self.pk)


# -------------------------------------------------------------------------------
@reversion.register()
class MatchResult(_BaseModel):
    match = models.ForeignKey(Match, on_delete=models.CASCADE, related_name="results")
    player = models.ForeignKey(Player, on_delete=models.CASCADE)
    outcome = models.CharField(max_length=8, choices=OUTCOME_OPTIONS)
    goals_scored = models.PositiveIntegerField(default=0)
    goals_conceded = models.PositiveIntegerField(default=0)

    # Point breakdown from the calculator at the time the result was recorded
    points_earned = models.IntegerField(default=0)
    base_points = models.IntegerField(default=0)
    conditional_points = models.IntegerField(default=0)
    applied_rule_ids = models.JSONField(default=list, blank=True)

    class Meta:
        unique_together = ("match", "player")

    def __str__(self):
        return "%s - %s %s (%s-%s)" % (
            self.match,
            self.player,
            self.outcome,
            self.goals_scored,
            self.goals_conceded,
        )


# -------------------------------------------------------------------------------
class TournamentPlayerStats(_BaseModel):
    """Derived per-player totals; only ever written by statistics recomputation."""

    tournament = models.ForeignKey(
        Tournament, on_delete=models.CASCADE, related_name="player_stats"
    )
    player = models.ForeignKey(Player, on_delete=models.CASCADE)
    matches_played = models.PositiveIntegerField(default=0)
    wins = models.PositiveIntegerField(default=0)
    draws = models.PositiveIntegerField(default=0)
    losses = models.PositiveIntegerField(default=0)
    goals_scored = models.PositiveIntegerField(default=0)
    goals_conceded = models.PositiveIntegerField(default=0)
    total_points = models.IntegerField(default=0)
    conditional_points = models.IntegerField(default=0)

    class Meta:
        unique_together = ("tournament", "player")
        verbose_name_plural = "tournament player stats"

    def __str__(self):
        return "%s - %s" % (self.tournament, self.player)
