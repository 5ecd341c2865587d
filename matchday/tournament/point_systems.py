"""
Point system resolution and template rule management.

The point system for a match is resolved fresh every time a match is
recorded or edited: the stage can differ per match and templates are edited
independently of the tournaments that use them.
"""

import logging

import reversion
from django.db import transaction

from matchday.scoring_core.scoring import PointSystemConfig
from matchday.tournament.db_to_structure import rates_to_config, template_to_config
from matchday.tournament.models import (
    ConditionalRule,
    PointSystemTemplate,
    StagePoint,
)

logger = logging.getLogger(__name__)


def _get_template(tournament):
    """Return the tournament's template, or None if unset or since deleted."""
    if tournament.point_system_template_id is None:
        return None
    return PointSystemTemplate.objects.filter(
        pk=tournament.point_system_template_id
    ).first()


def resolve_point_system(tournament, stage_id=None) -> PointSystemConfig:
    """
    Choose the point system for a match in ``tournament``.

    Precedence:
    1. A stage override in the tournament's template for ``stage_id``.
       Overrides replace the base rates only and never carry rules.
    2. The tournament's template: base rates plus all conditional rules.
    3. The tournament's own inline rates, without rules.
    """
    template = _get_template(tournament)

    if template is not None and stage_id is not None:
        stage_point = StagePoint.objects.filter(
            template=template, stage_id=stage_id
        ).first()
        if stage_point is not None:
            logger.debug(
                "Using stage %s override of template %s for tournament %s",
                stage_id,
                template.pk,
                tournament.pk,
            )
            return rates_to_config(stage_point)

    if template is not None:
        logger.debug(
            "Using template %s for tournament %s", template.pk, tournament.pk
        )
        return template_to_config(template)

    if tournament.point_system_template_id is not None:
        logger.warning(
            "Tournament %s references missing template %s, using inline rates",
            tournament.pk,
            tournament.point_system_template_id,
        )
    return rates_to_config(tournament)


def tournament_stages(tournament):
    """Stage overrides available to a tournament, in stage order."""
    template = _get_template(tournament)
    if template is None:
        return StagePoint.objects.none()
    return template.stage_points.order_by("stage_order", "stage_id")


def add_conditional_rule(
    template, condition_type, operator, threshold, point_adjustment
) -> ConditionalRule:
    """Validate and store a new rule on a template.

    Raises:
        ValidationError: if the rule's condition and operator do not fit together
    """
    rule = ConditionalRule(
        template=template,
        condition_type=getattr(condition_type, "value", condition_type),
        operator=getattr(operator, "value", operator),
        threshold=threshold,
        point_adjustment=point_adjustment,
    )
    rule.full_clean()
    with transaction.atomic(), reversion.create_revision():
        reversion.set_comment("Added conditional rule.")
        rule.save()
    logger.info("Added rule %s to template %s", rule.pk, template.pk)
    return rule


def update_conditional_rule(rule, **changes) -> ConditionalRule:
    """Apply field changes to a rule, validating the combined result."""
    for name, value in changes.items():
        if name not in ("condition_type", "operator", "threshold", "point_adjustment"):
            raise TypeError(f"Unknown conditional rule field: {name}")
        setattr(rule, name, getattr(value, "value", value))
    rule.full_clean()
    with transaction.atomic(), reversion.create_revision():
        reversion.set_comment("Updated conditional rule.")
        rule.save()
    return rule
