"""
Fluent assertion interface for testing player tallies.

Works on a ResultLog from the builder, or on any mapping of player ID to
PlayerTally together with a name mapping.
"""

from typing import Dict, Optional
from dataclasses import dataclass

from matchday.scoring_core.aggregation import PlayerTally
from matchday.scoring_core.builder import ResultLog
from matchday.scoring_core.ranking import rank_tallies


# Use the built-in AssertionError for proper test framework integration


@dataclass
class TallyAssertion:
    """Fluent interface for asserting player tallies."""

    tallies: Dict[int, PlayerTally]
    name_to_id: Dict[str, int]
    player_name: Optional[str] = None

    def player(self, name: str) -> "PlayerTallyAssertion":
        """Select a player by name for assertions."""
        if name not in self.name_to_id:
            raise AssertionError(f"Player '{name}' not found")
        return PlayerTallyAssertion(self.tallies, self.name_to_id, name)


class PlayerTallyAssertion(TallyAssertion):
    """Assertions for a specific player."""

    def _tally(self) -> PlayerTally:
        player_id = self.name_to_id[self.player_name]
        if player_id not in self.tallies:
            raise AssertionError(f"No tally for {self.player_name}")
        return self.tallies[player_id]

    def _check(self, field_name: str, expected) -> "PlayerTallyAssertion":
        actual = getattr(self._tally(), field_name)
        if actual != expected:
            label = field_name.replace("_", " ")
            raise AssertionError(
                f"{self.player_name} expected {expected} {label}, got {actual}"
            )
        return self

    def assert_(self) -> "PlayerTallyAssertion":
        """Start a chain of assertions for this player."""
        return self

    def matches_played(self, expected: int) -> "PlayerTallyAssertion":
        return self._check("matches_played", expected)

    def wins(self, expected: int) -> "PlayerTallyAssertion":
        return self._check("wins", expected)

    def draws(self, expected: int) -> "PlayerTallyAssertion":
        return self._check("draws", expected)

    def losses(self, expected: int) -> "PlayerTallyAssertion":
        return self._check("losses", expected)

    def goals_scored(self, expected: int) -> "PlayerTallyAssertion":
        return self._check("goals_scored", expected)

    def goals_conceded(self, expected: int) -> "PlayerTallyAssertion":
        return self._check("goals_conceded", expected)

    def total_points(self, expected: int) -> "PlayerTallyAssertion":
        return self._check("total_points", expected)

    def conditional_points(self, expected: int) -> "PlayerTallyAssertion":
        return self._check("conditional_points", expected)

    def goal_difference(self, expected: int) -> "PlayerTallyAssertion":
        return self._check("goal_difference", expected)

    def position(self, expected: int) -> "PlayerTallyAssertion":
        """Assert the player's rank on the leaderboard."""
        player_id = self.name_to_id[self.player_name]
        for standing in rank_tallies(self.tallies.values()):
            if standing.player_id == player_id:
                if standing.rank != expected:
                    raise AssertionError(
                        f"{self.player_name} expected position {expected}, "
                        f"got {standing.rank}"
                    )
                return self
        raise AssertionError(f"{self.player_name} not found in standings")


def assert_tallies(
    log_or_tallies, name_to_id: Optional[Dict[str, int]] = None
) -> TallyAssertion:
    """Entry point for tally assertions.

    Example:
        assert_tallies(log).player("Alice").assert_().wins(2).total_points(8)
    """
    if isinstance(log_or_tallies, ResultLog):
        return TallyAssertion(log_or_tallies.tallies(), log_or_tallies.name_to_id)
    if name_to_id is None:
        name_to_id = {str(pid): pid for pid in log_or_tallies}
    return TallyAssertion(log_or_tallies, name_to_id)
