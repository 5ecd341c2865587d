"""
Conditional point rules.

A conditional rule adds a fixed adjustment to a result's points whenever a
numeric condition on the result holds. Each condition kind is its own frozen
dataclass so that a rule only carries the fields that matter for it. Rules
loaded from storage with a condition type or operator we do not recognise
become an UnrecognizedRule, which never fires.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ConditionType(Enum):
    GOALS_SCORED_THRESHOLD = "GOALS_SCORED_THRESHOLD"
    GOALS_CONCEDED_THRESHOLD = "GOALS_CONCEDED_THRESHOLD"
    GOAL_DIFFERENCE_THRESHOLD = "GOAL_DIFFERENCE_THRESHOLD"
    CLEAN_SHEET = "CLEAN_SHEET"


class Operator(Enum):
    EQUALS = "EQUALS"
    GREATER_THAN = "GREATER_THAN"
    LESS_THAN = "LESS_THAN"
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"
    LESS_THAN_OR_EQUAL = "LESS_THAN_OR_EQUAL"

    def compare(self, value: int, threshold: int) -> bool:
        """Apply this operator as ``value <op> threshold``."""
        if self is Operator.EQUALS:
            return value == threshold
        elif self is Operator.GREATER_THAN:
            return value > threshold
        elif self is Operator.LESS_THAN:
            return value < threshold
        elif self is Operator.GREATER_THAN_OR_EQUAL:
            return value >= threshold
        elif self is Operator.LESS_THAN_OR_EQUAL:
            return value <= threshold
        return False


@dataclass(frozen=True)
class GoalsScoredThreshold:
    """Fires when goals scored compares true against the threshold."""

    rule_id: int
    operator: Operator
    threshold: int
    point_adjustment: int

    condition_type = ConditionType.GOALS_SCORED_THRESHOLD


@dataclass(frozen=True)
class GoalsConcededThreshold:
    """Fires when goals conceded compares true against the threshold."""

    rule_id: int
    operator: Operator
    threshold: int
    point_adjustment: int

    condition_type = ConditionType.GOALS_CONCEDED_THRESHOLD


@dataclass(frozen=True)
class GoalDifferenceThreshold:
    """Fires on the signed goal difference (scored minus conceded)."""

    rule_id: int
    operator: Operator
    threshold: int
    point_adjustment: int

    condition_type = ConditionType.GOAL_DIFFERENCE_THRESHOLD


@dataclass(frozen=True)
class CleanSheet:
    """Fires when no goals were conceded.

    The operator and threshold are kept so that a stored row is evaluated
    exactly as written; a well-formed clean sheet rule is EQUALS 0.
    """

    rule_id: int
    point_adjustment: int
    operator: Operator = Operator.EQUALS
    threshold: int = 0

    condition_type = ConditionType.CLEAN_SHEET


@dataclass(frozen=True)
class UnrecognizedRule:
    """A stored rule whose condition type or operator is unknown."""

    rule_id: int
    point_adjustment: int
    raw_condition_type: str = ""
    raw_operator: str = ""

    condition_type = None


ConditionalRule = Union[
    GoalsScoredThreshold,
    GoalsConcededThreshold,
    GoalDifferenceThreshold,
    CleanSheet,
    UnrecognizedRule,
]


def _enum_or_none(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def rule_from_values(
    rule_id: int,
    condition_type,
    operator,
    threshold: int,
    point_adjustment: int,
) -> ConditionalRule:
    """Build the rule variant for raw stored values.

    Never raises for unknown condition types or operators; those produce an
    UnrecognizedRule instead.
    """
    ctype = _enum_or_none(ConditionType, condition_type)
    op = _enum_or_none(Operator, operator)
    if ctype is None or op is None:
        return UnrecognizedRule(
            rule_id=rule_id,
            point_adjustment=point_adjustment,
            raw_condition_type=str(getattr(condition_type, "value", condition_type)),
            raw_operator=str(getattr(operator, "value", operator)),
        )

    if ctype == ConditionType.GOALS_SCORED_THRESHOLD:
        return GoalsScoredThreshold(rule_id, op, threshold, point_adjustment)
    elif ctype == ConditionType.GOALS_CONCEDED_THRESHOLD:
        return GoalsConcededThreshold(rule_id, op, threshold, point_adjustment)
    elif ctype == ConditionType.GOAL_DIFFERENCE_THRESHOLD:
        return GoalDifferenceThreshold(rule_id, op, threshold, point_adjustment)
    else:  # CLEAN_SHEET
        return CleanSheet(rule_id, point_adjustment, op, threshold)


def rule_metric(
    rule: ConditionalRule, goals_scored: int, goals_conceded: int
) -> Optional[int]:
    """Return the value a rule compares against its threshold.

    None means the rule has nothing to compare and cannot fire.
    """
    if isinstance(rule, GoalsScoredThreshold):
        return goals_scored
    elif isinstance(rule, GoalsConcededThreshold):
        return goals_conceded
    elif isinstance(rule, GoalDifferenceThreshold):
        return goals_scored - goals_conceded
    elif isinstance(rule, CleanSheet):
        return goals_conceded
    return None


def rule_fires(rule: ConditionalRule, goals_scored: int, goals_conceded: int) -> bool:
    """Whether ``rule`` applies to a result with the given goal counts."""
    value = rule_metric(rule, goals_scored, goals_conceded)
    if value is None:
        return False
    return rule.operator.compare(value, rule.threshold)
