"""
Configurable point systems for tournaments.

This module defines how a single match result is converted to points: a
rate for the outcome, rates per goal scored and conceded, and any number of
conditional rules layered on top.
"""

from typing import Tuple
from dataclasses import dataclass, field, replace

from matchday.scoring_core.rules import ConditionalRule
from matchday.scoring_core.structure import Outcome


@dataclass(frozen=True)
class PointSystemConfig:
    """The scoring rules in effect for one calculation.

    Any rate may be negative; a negative goal-conceded rate is the usual way
    to penalise leaky defences.
    """

    points_per_win: int = 3
    points_per_draw: int = 1
    points_per_loss: int = 0
    points_per_goal_scored: int = 0
    points_per_goal_conceded: int = 0

    # Evaluated in order; all of them can fire for the same result
    conditional_rules: Tuple[ConditionalRule, ...] = field(default_factory=tuple)

    def outcome_points(self, outcome: Outcome) -> int:
        """Get the base rate for an outcome."""
        if outcome == Outcome.WIN:
            return self.points_per_win
        elif outcome == Outcome.DRAW:
            return self.points_per_draw
        return self.points_per_loss

    def goal_points(self, goals_scored: int, goals_conceded: int) -> int:
        """Get the points contributed by goal counts alone."""
        return (
            goals_scored * self.points_per_goal_scored
            + goals_conceded * self.points_per_goal_conceded
        )

    def base_rates_only(self) -> "PointSystemConfig":
        """Return a copy of this config with the conditional rules dropped."""
        return replace(self, conditional_rules=())

    def with_rules(self, *rules: ConditionalRule) -> "PointSystemConfig":
        """Return a copy of this config with extra rules appended."""
        return replace(self, conditional_rules=tuple(self.conditional_rules) + rules)


# Pre-defined point systems
DEFAULT_POINT_SYSTEM = PointSystemConfig()

# Rewards attacking play: every goal is worth a point on top of the result
GOALS_COUNT_POINT_SYSTEM = PointSystemConfig(
    points_per_win=3,
    points_per_draw=1,
    points_per_loss=0,
    points_per_goal_scored=1,
    points_per_goal_conceded=0,
)
