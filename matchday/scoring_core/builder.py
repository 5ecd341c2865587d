"""
Builder for creating scored result logs with a fluent API.

Lets tests describe matches by player name and score line, runs each
participant through the point calculator, and keeps the stored results so
they can be aggregated exactly as the database layer would.
"""

from typing import Dict, List, Optional, Tuple, Union
from dataclasses import dataclass, field

from matchday.scoring_core.aggregation import PlayerTally, aggregate_results
from matchday.scoring_core.calculator import calculate
from matchday.scoring_core.scoring import PointSystemConfig, DEFAULT_POINT_SYSTEM
from matchday.scoring_core.structure import (
    MatchResultInput,
    Outcome,
    StoredResult,
    parse_outcome,
)


@dataclass
class ResultLog:
    """Stored results plus the name mapping used to build them."""

    name_to_id: Dict[str, int] = field(default_factory=dict)
    results: List[StoredResult] = field(default_factory=list)

    @property
    def player_ids(self) -> List[int]:
        return list(self.name_to_id.values())

    def tallies(self) -> Dict[int, PlayerTally]:
        """Aggregate every known player's results."""
        return aggregate_results(self.player_ids, self.results)

    def results_for(self, name: str) -> List[StoredResult]:
        player_id = self.name_to_id[name]
        return [r for r in self.results if r.player_id == player_id]


def parse_score(score: str) -> Tuple[int, int]:
    """Parse a score line like '3-1' into (home_goals, away_goals)."""
    home, sep, away = score.partition("-")
    if not sep:
        raise ValueError(f"Invalid score line: {score}")
    return int(home), int(away)


def outcome_for(goals_for: int, goals_against: int) -> Outcome:
    if goals_for > goals_against:
        return Outcome.WIN
    elif goals_for < goals_against:
        return Outcome.LOSS
    return Outcome.DRAW


class ResultLogBuilder:
    """Builder for creating scored results easily."""

    def __init__(self, config: PointSystemConfig = DEFAULT_POINT_SYSTEM):
        self.config = config
        self.log = ResultLog()
        self._next_player_id = 1

    def player(self, name: str, player_id: Optional[int] = None) -> "ResultLogBuilder":
        """Register a player, optionally with a fixed ID."""
        if name in self.log.name_to_id:
            return self
        if player_id is None:
            player_id = self._next_player_id
        self._next_player_id = max(self._next_player_id, player_id + 1)
        self.log.name_to_id[name] = player_id
        return self

    def _player_id(self, name: str) -> int:
        self.player(name)
        return self.log.name_to_id[name]

    def result(
        self,
        name: str,
        outcome: Union[Outcome, str],
        goals_scored: int = 0,
        goals_conceded: int = 0,
        config: Optional[PointSystemConfig] = None,
    ) -> "ResultLogBuilder":
        """Score one participant's result and store it."""
        player_id = self._player_id(name)
        result = MatchResultInput(
            player_id=player_id,
            outcome=parse_outcome(outcome),
            goals_scored=goals_scored,
            goals_conceded=goals_conceded,
        )
        breakdown = calculate(result, config or self.config)
        self.log.results.append(
            StoredResult(
                player_id=player_id,
                outcome=result.outcome,
                goals_scored=goals_scored,
                goals_conceded=goals_conceded,
                points_earned=breakdown.total_points,
                conditional_points=breakdown.conditional_points,
            )
        )
        return self

    def game(
        self,
        home: str,
        away: str,
        score: str,
        config: Optional[PointSystemConfig] = None,
    ) -> "ResultLogBuilder":
        """Add a two-player match from a score line in the home player's favour.

        Example:
            builder.game("Alice", "Bob", "3-1")  # Alice wins 3-1
        """
        home_goals, away_goals = parse_score(score)
        self.result(
            home, outcome_for(home_goals, away_goals), home_goals, away_goals, config
        )
        self.result(
            away, outcome_for(away_goals, home_goals), away_goals, home_goals, config
        )
        return self

    def stored(
        self,
        name: str,
        outcome: Union[Outcome, str],
        points_earned: int,
        goals_scored: int = 0,
        goals_conceded: int = 0,
        conditional_points: int = 0,
    ) -> "ResultLogBuilder":
        """Add an already-scored result without going through the calculator."""
        self.log.results.append(
            StoredResult(
                player_id=self._player_id(name),
                outcome=parse_outcome(outcome),
                goals_scored=goals_scored,
                goals_conceded=goals_conceded,
                points_earned=points_earned,
                conditional_points=conditional_points,
            )
        )
        return self

    def build(self) -> ResultLog:
        return self.log
