"""
Write-time validation of conditional rule configuration.

The calculator never rejects a rule; this is where bad combinations are
caught, before they are stored.
"""

from typing import Dict, List

from matchday.scoring_core.rules import ConditionType, Operator

CONDITION_TYPE_MESSAGE = (
    "Condition type must be one of: "
    + ", ".join(c.value for c in ConditionType)
)
OPERATOR_MESSAGE = "Operator must be one of: " + ", ".join(o.value for o in Operator)
NEGATIVE_THRESHOLD_MESSAGE = "Threshold must be non-negative for goal count conditions"
CLEAN_SHEET_MESSAGE = "Clean sheet condition must use EQUALS operator with threshold 0"


def validate_rule(condition_type, operator, threshold) -> Dict[str, List[str]]:
    """
    Check a rule's condition type, operator and threshold for consistency.

    Goal count thresholds cannot be negative since goal counts never are.
    Goal difference is signed, so any threshold is accepted for it.

    Returns:
        Dictionary mapping field name to error messages; empty when valid
    """
    errors: Dict[str, List[str]] = {}

    try:
        ctype = ConditionType(getattr(condition_type, "value", condition_type))
    except ValueError:
        ctype = None
        errors.setdefault("condition_type", []).append(CONDITION_TYPE_MESSAGE)

    try:
        op = Operator(getattr(operator, "value", operator))
    except ValueError:
        op = None
        errors.setdefault("operator", []).append(OPERATOR_MESSAGE)

    if not isinstance(threshold, int) or isinstance(threshold, bool):
        errors.setdefault("threshold", []).append("Threshold must be an integer")
        return errors

    if ctype in (
        ConditionType.GOALS_SCORED_THRESHOLD,
        ConditionType.GOALS_CONCEDED_THRESHOLD,
    ):
        if threshold < 0:
            errors.setdefault("threshold", []).append(NEGATIVE_THRESHOLD_MESSAGE)
    elif ctype == ConditionType.CLEAN_SHEET and op is not None:
        if op != Operator.EQUALS or threshold != 0:
            errors.setdefault("operator", []).append(CLEAN_SHEET_MESSAGE)

    return errors
