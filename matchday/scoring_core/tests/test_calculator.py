"""
Unit tests for the point calculator.
No database, no Django models - just pure function tests.
"""

import itertools
import unittest

from matchday.scoring_core.calculator import (
    AppliedRule,
    calculate,
    calculate_points,
)
from matchday.scoring_core.rules import (
    CleanSheet,
    ConditionType,
    GoalDifferenceThreshold,
    GoalsConcededThreshold,
    GoalsScoredThreshold,
    Operator,
    UnrecognizedRule,
    rule_from_values,
)
from matchday.scoring_core.scoring import (
    DEFAULT_POINT_SYSTEM,
    GOALS_COUNT_POINT_SYSTEM,
    PointSystemConfig,
)
from matchday.scoring_core.structure import MatchResultInput, Outcome


def result(outcome, scored=0, conceded=0, player_id=1):
    return MatchResultInput(player_id, outcome, scored, conceded)


class BasePointsTests(unittest.TestCase):
    """Outcome and goal rates without any conditional rules."""

    def test_win_with_goal_points(self):
        """3 for the win plus one per goal scored: 3 + 3*1 + 1*0 = 6."""
        breakdown = calculate(result(Outcome.WIN, 3, 1), GOALS_COUNT_POINT_SYSTEM)

        self.assertEqual(breakdown.base_points, 6)
        self.assertEqual(breakdown.conditional_points, 0)
        self.assertEqual(breakdown.total_points, 6)
        self.assertEqual(breakdown.applied_rules, ())

    def test_exactly_one_outcome_rate_applies(self):
        config = PointSystemConfig(
            points_per_win=100,
            points_per_draw=10,
            points_per_loss=1,
            points_per_goal_scored=0,
            points_per_goal_conceded=0,
        )
        self.assertEqual(calculate(result(Outcome.WIN), config).base_points, 100)
        self.assertEqual(calculate(result(Outcome.DRAW), config).base_points, 10)
        self.assertEqual(calculate(result(Outcome.LOSS), config).base_points, 1)

    def test_negative_goal_conceded_rate(self):
        config = PointSystemConfig(
            points_per_win=3,
            points_per_draw=1,
            points_per_loss=0,
            points_per_goal_scored=1,
            points_per_goal_conceded=-1,
        )
        # 0 for the loss, +1 scored, -4 conceded
        self.assertEqual(calculate(result(Outcome.LOSS, 1, 4), config).total_points, -3)

    def test_negative_outcome_rate(self):
        config = PointSystemConfig(points_per_loss=-2)
        self.assertEqual(calculate(result(Outcome.LOSS, 0, 2), config).total_points, -2)

    def test_base_points_formula_over_grid(self):
        config = PointSystemConfig(
            points_per_win=3,
            points_per_draw=1,
            points_per_loss=-1,
            points_per_goal_scored=2,
            points_per_goal_conceded=-1,
            conditional_rules=(
                CleanSheet(rule_id=1, point_adjustment=2),
                GoalsScoredThreshold(2, Operator.GREATER_THAN, 2, 1),
            ),
        )
        for outcome in Outcome:
            for scored, conceded in itertools.product(range(5), range(5)):
                breakdown = calculate(result(outcome, scored, conceded), config)
                expected_base = config.outcome_points(outcome) + 2 * scored - conceded
                self.assertEqual(breakdown.base_points, expected_base)
                self.assertEqual(
                    breakdown.total_points,
                    breakdown.base_points + breakdown.conditional_points,
                )

    def test_calculate_points_returns_total(self):
        config = DEFAULT_POINT_SYSTEM.with_rules(CleanSheet(rule_id=7, point_adjustment=2))
        self.assertEqual(calculate_points(result(Outcome.WIN, 1, 0), config), 5)


class ConditionalRuleTests(unittest.TestCase):
    """Conditional rule evaluation."""

    def test_clean_sheet_bonus(self):
        """Win 2-0 with a clean sheet rule: base 3+2=5, +2 bonus, total 7."""
        config = GOALS_COUNT_POINT_SYSTEM.with_rules(
            rule_from_values(11, "CLEAN_SHEET", "EQUALS", 0, 2)
        )
        breakdown = calculate(result(Outcome.WIN, 2, 0), config)

        self.assertEqual(breakdown.base_points, 5)
        self.assertEqual(breakdown.conditional_points, 2)
        self.assertEqual(breakdown.total_points, 7)
        self.assertEqual(breakdown.applied_rules, (AppliedRule(11, 2),))
        self.assertEqual(breakdown.applied_rule_ids, [11])

    def test_clean_sheet_fires_only_without_goals_conceded(self):
        config = DEFAULT_POINT_SYSTEM.with_rules(CleanSheet(rule_id=1, point_adjustment=2))
        for scored in range(4):
            self.assertEqual(
                calculate(result(Outcome.DRAW, scored, 0), config).conditional_points, 2
            )
            for conceded in range(1, 4):
                self.assertEqual(
                    calculate(result(Outcome.DRAW, scored, conceded), config).conditional_points,
                    0,
                )

    def test_goal_difference_threshold(self):
        """Win 4-0 with GD >= 3 rule adds +1 on top of base."""
        config = GOALS_COUNT_POINT_SYSTEM.with_rules(
            GoalDifferenceThreshold(5, Operator.GREATER_THAN_OR_EQUAL, 3, 1)
        )
        breakdown = calculate(result(Outcome.WIN, 4, 0), config)

        self.assertEqual(breakdown.base_points, 7)
        self.assertEqual(breakdown.conditional_points, 1)
        self.assertEqual(breakdown.total_points, 8)

    def test_goal_difference_is_signed(self):
        config = DEFAULT_POINT_SYSTEM.with_rules(
            GoalDifferenceThreshold(9, Operator.LESS_THAN, 0, -2)
        )
        self.assertEqual(calculate(result(Outcome.LOSS, 1, 3), config).conditional_points, -2)
        self.assertEqual(calculate(result(Outcome.DRAW, 2, 2), config).conditional_points, 0)

    def test_goals_scored_and_conceded_thresholds(self):
        config = DEFAULT_POINT_SYSTEM.with_rules(
            GoalsScoredThreshold(1, Operator.GREATER_THAN_OR_EQUAL, 3, 2),
            GoalsConcededThreshold(2, Operator.GREATER_THAN, 3, -1),
        )
        hat_trick = calculate(result(Outcome.LOSS, 3, 5), config)
        self.assertEqual(hat_trick.applied_rule_ids, [1, 2])
        self.assertEqual(hat_trick.conditional_points, 1)

        quiet = calculate(result(Outcome.WIN, 1, 0), config)
        self.assertEqual(quiet.applied_rule_ids, [])

    def test_every_operator(self):
        cases = [
            (Operator.EQUALS, [False, True, False]),
            (Operator.GREATER_THAN, [False, False, True]),
            (Operator.LESS_THAN, [True, False, False]),
            (Operator.GREATER_THAN_OR_EQUAL, [False, True, True]),
            (Operator.LESS_THAN_OR_EQUAL, [True, True, False]),
        ]
        for operator, expected in cases:
            config = DEFAULT_POINT_SYSTEM.with_rules(
                GoalsScoredThreshold(1, operator, 2, 1)
            )
            fired = [
                calculate(result(Outcome.WIN, goals, 0), config).conditional_points == 1
                for goals in (1, 2, 3)
            ]
            self.assertEqual(fired, expected, operator)

    def test_multiple_rules_all_fire(self):
        config = DEFAULT_POINT_SYSTEM.with_rules(
            CleanSheet(rule_id=1, point_adjustment=2),
            GoalDifferenceThreshold(2, Operator.GREATER_THAN_OR_EQUAL, 3, 1),
            GoalsScoredThreshold(3, Operator.GREATER_THAN, 0, 1),
        )
        breakdown = calculate(result(Outcome.WIN, 3, 0), config)
        self.assertEqual(breakdown.applied_rule_ids, [1, 2, 3])
        self.assertEqual(breakdown.conditional_points, 4)
        self.assertEqual(breakdown.total_points, 7)

    def test_rule_order_does_not_change_totals(self):
        rules = [
            CleanSheet(rule_id=1, point_adjustment=2),
            GoalDifferenceThreshold(2, Operator.GREATER_THAN_OR_EQUAL, 2, 1),
            GoalsScoredThreshold(3, Operator.GREATER_THAN, 1, 3),
            GoalsConcededThreshold(4, Operator.EQUALS, 0, -1),
        ]
        match_result = result(Outcome.WIN, 2, 0)
        baseline = calculate(match_result, DEFAULT_POINT_SYSTEM.with_rules(*rules))

        for permutation in itertools.permutations(rules):
            breakdown = calculate(
                match_result, DEFAULT_POINT_SYSTEM.with_rules(*permutation)
            )
            self.assertEqual(breakdown.total_points, baseline.total_points)
            self.assertEqual(breakdown.conditional_points, baseline.conditional_points)
            # Applied list follows the given order
            self.assertEqual(
                breakdown.applied_rule_ids,
                [rule.rule_id for rule in permutation],
            )

    def test_unrecognized_rule_never_fires(self):
        config = DEFAULT_POINT_SYSTEM.with_rules(
            rule_from_values(1, "ASSISTS_THRESHOLD", "EQUALS", 0, 5),
            rule_from_values(2, "CLEAN_SHEET", "ROUGHLY", 0, 5),
        )
        self.assertIsInstance(config.conditional_rules[0], UnrecognizedRule)
        self.assertIsInstance(config.conditional_rules[1], UnrecognizedRule)

        breakdown = calculate(result(Outcome.WIN, 0, 0), config)
        self.assertEqual(breakdown.conditional_points, 0)
        self.assertEqual(breakdown.total_points, 3)

    def test_misconfigured_clean_sheet_is_evaluated_as_written(self):
        # GREATER_THAN 0 on goals conceded: fires when goals were conceded
        config = DEFAULT_POINT_SYSTEM.with_rules(
            rule_from_values(1, ConditionType.CLEAN_SHEET, Operator.GREATER_THAN, 0, -1)
        )
        self.assertEqual(calculate(result(Outcome.LOSS, 0, 2), config).conditional_points, -1)
        self.assertEqual(calculate(result(Outcome.WIN, 1, 0), config).conditional_points, 0)

    def test_base_rates_only_drops_rules(self):
        config = DEFAULT_POINT_SYSTEM.with_rules(CleanSheet(rule_id=1, point_adjustment=2))
        self.assertEqual(config.base_rates_only().conditional_rules, ())
        self.assertEqual(
            calculate(result(Outcome.WIN, 1, 0), config.base_rates_only()).total_points, 3
        )


if __name__ == "__main__":
    unittest.main()
