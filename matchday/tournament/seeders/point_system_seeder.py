"""
Point system seeder for creating templates with rules and stage overrides.
"""

from typing import List

from matchday.scoring_core.rules import ConditionType, Operator
from matchday.tournament.models import PointSystemTemplate, StagePoint
from matchday.tournament.point_systems import add_conditional_rule

from .base import BaseSeeder

TEMPLATE_CONFIGS = [
    {
        "name": "League Classic",
        "description": "Three points for a win, one for a draw",
        "points_per_win": 3,
        "points_per_draw": 1,
        "points_per_loss": 0,
        "points_per_goal_scored": 0,
        "points_per_goal_conceded": 0,
        "rules": [
            (ConditionType.CLEAN_SHEET, Operator.EQUALS, 0, 1),
        ],
        "stages": [],
    },
    {
        "name": "Attacking Cup",
        "description": "Goals count, heavy wins earn a bonus",
        "points_per_win": 3,
        "points_per_draw": 1,
        "points_per_loss": 0,
        "points_per_goal_scored": 1,
        "points_per_goal_conceded": 0,
        "rules": [
            (ConditionType.GOAL_DIFFERENCE_THRESHOLD, Operator.GREATER_THAN_OR_EQUAL, 3, 1),
            (ConditionType.CLEAN_SHEET, Operator.EQUALS, 0, 2),
            (ConditionType.GOALS_CONCEDED_THRESHOLD, Operator.GREATER_THAN, 4, -1),
        ],
        "stages": [
            (1, "Group Stage", 1, (3, 1, 0, 1, 0)),
            (2, "Semi Final", 2, (4, 2, 0, 1, 0)),
            (3, "Final", 3, (5, 2, 1, 1, 0)),
        ],
    },
]


class PointSystemSeeder(BaseSeeder):
    """Seeder for creating PointSystemTemplate objects."""

    def seed(self, count: int = 1, **kwargs) -> List[PointSystemTemplate]:
        templates = []
        for i in range(count):
            config = dict(TEMPLATE_CONFIGS[i % len(TEMPLATE_CONFIGS)])
            rules = config.pop("rules")
            stages = config.pop("stages")
            if i >= len(TEMPLATE_CONFIGS):
                config["name"] = f"{config['name']} {i + 1}"

            template = PointSystemTemplate.objects.create(**config)
            for condition_type, operator, threshold, adjustment in rules:
                add_conditional_rule(
                    template, condition_type, operator, threshold, adjustment
                )
            for stage_id, stage_name, stage_order, rates in stages:
                win, draw, loss, scored, conceded = rates
                StagePoint.objects.create(
                    template=template,
                    stage_id=stage_id,
                    stage_name=stage_name,
                    stage_order=stage_order,
                    points_per_win=win,
                    points_per_draw=draw,
                    points_per_loss=loss,
                    points_per_goal_scored=scored,
                    points_per_goal_conceded=conceded,
                )
            templates.append(self._track(template))
        return templates
