"""
Transform database models to scoring_core structures.

This module converts Django ORM rows from matchday.tournament into the plain
scoring_core values used by the point calculator and the aggregator.
"""

from typing import Iterable, List

from matchday.scoring_core.rules import ConditionalRule, rule_from_values
from matchday.scoring_core.scoring import PointSystemConfig
from matchday.scoring_core.structure import (
    MatchResultInput,
    StoredResult,
    parse_outcome,
)


def rule_to_structure(rule) -> ConditionalRule:
    """Convert a ConditionalRule model instance to its rule variant."""
    return rule_from_values(
        rule.id,
        rule.condition_type,
        rule.operator,
        rule.threshold,
        rule.point_adjustment,
    )


def rates_to_config(rates_model, rules: Iterable = ()) -> PointSystemConfig:
    """Build a PointSystemConfig from any model carrying the five point rates.

    Args:
        rates_model: A PointSystemTemplate, StagePoint or Tournament instance
        rules: ConditionalRule model instances to attach, in evaluation order
    """
    return PointSystemConfig(
        conditional_rules=tuple(rule_to_structure(rule) for rule in rules),
        **rates_model.point_rates(),
    )


def template_to_config(template) -> PointSystemConfig:
    """A template's base rates plus all of its conditional rules."""
    return rates_to_config(template, template.conditional_rules.order_by("id"))


def result_input(player_id, outcome, goals_scored, goals_conceded) -> MatchResultInput:
    return MatchResultInput(
        player_id=player_id,
        outcome=parse_outcome(outcome),
        goals_scored=goals_scored,
        goals_conceded=goals_conceded,
    )


def stored_result_rows_to_structure(rows: Iterable[dict]) -> List[StoredResult]:
    """Convert MatchResult ``values()`` rows to StoredResult objects."""
    return [
        StoredResult(
            player_id=row["player_id"],
            outcome=parse_outcome(row["outcome"]),
            goals_scored=row["goals_scored"],
            goals_conceded=row["goals_conceded"],
            points_earned=row["points_earned"],
            conditional_points=row["conditional_points"],
        )
        for row in rows
    ]
