"""
Point calculator.

Converts one participant's match result into a point breakdown under a
given point system. The calculation is pure and total: it does no I/O and
raises nothing for business conditions. A malformed rule simply never fires,
so recording a match is never blocked by bad configuration.
"""

from typing import List, Tuple
from dataclasses import dataclass, field

from matchday.scoring_core.rules import rule_fires
from matchday.scoring_core.scoring import PointSystemConfig
from matchday.scoring_core.structure import MatchResultInput


@dataclass(frozen=True)
class AppliedRule:
    """A conditional rule that fired, with the adjustment it contributed."""

    rule_id: int
    point_adjustment: int


@dataclass(frozen=True)
class PointCalculationResult:
    """Detailed breakdown of the points earned for one match result."""

    base_points: int
    conditional_points: int
    total_points: int
    applied_rules: Tuple[AppliedRule, ...] = field(default_factory=tuple)

    @property
    def applied_rule_ids(self) -> List[int]:
        """Identifiers of the fired rules, in evaluation order."""
        return [applied.rule_id for applied in self.applied_rules]


def calculate(
    result: MatchResultInput, config: PointSystemConfig
) -> PointCalculationResult:
    """
    Calculate points with a full breakdown including conditional rules.

    Base points are the outcome rate plus the two goal-rate terms. Every
    conditional rule is then evaluated independently, in the order given by
    the config, and the adjustments of those that fire are summed.

    Args:
        result: The participant's outcome and goal counts
        config: The point system in effect for this match

    Returns:
        PointCalculationResult with base, conditional and total points
    """
    base_points = config.outcome_points(result.outcome)
    base_points += config.goal_points(result.goals_scored, result.goals_conceded)

    applied_rules = []
    conditional_points = 0
    for rule in config.conditional_rules:
        if rule_fires(rule, result.goals_scored, result.goals_conceded):
            applied_rules.append(AppliedRule(rule.rule_id, rule.point_adjustment))
            conditional_points += rule.point_adjustment

    return PointCalculationResult(
        base_points=base_points,
        conditional_points=conditional_points,
        total_points=base_points + conditional_points,
        applied_rules=tuple(applied_rules),
    )


def calculate_points(result: MatchResultInput, config: PointSystemConfig) -> int:
    """Calculate only the total points for a match result."""
    return calculate(result, config).total_points
