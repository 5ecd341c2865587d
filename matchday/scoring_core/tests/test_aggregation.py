"""
Unit tests for aggregating stored results into player tallies.
"""

import unittest

from matchday.scoring_core.aggregation import (
    PlayerTally,
    aggregate_results,
    tally_results,
)
from matchday.scoring_core.structure import Outcome, StoredResult


def stored(player_id, outcome, points, scored=0, conceded=0, conditional=0):
    return StoredResult(player_id, outcome, scored, conceded, points, conditional)


class AggregateResultsTests(unittest.TestCase):
    def test_win_and_loss(self):
        """Two results worth 6 and 1 points sum to 7 over two matches."""
        results = [
            stored(1, Outcome.WIN, 6, 3, 1),
            stored(1, Outcome.LOSS, 1, 1, 2),
        ]
        tally = aggregate_results([1], results)[1]

        self.assertEqual(tally.matches_played, 2)
        self.assertEqual(tally.wins, 1)
        self.assertEqual(tally.draws, 0)
        self.assertEqual(tally.losses, 1)
        self.assertEqual(tally.goals_scored, 4)
        self.assertEqual(tally.goals_conceded, 3)
        self.assertEqual(tally.total_points, 7)

    def test_after_removing_a_result(self):
        results = [stored(1, Outcome.LOSS, 1, 1, 2)]
        tally = aggregate_results([1], results)[1]

        self.assertEqual(tally.matches_played, 1)
        self.assertEqual(tally.wins, 0)
        self.assertEqual(tally.losses, 1)
        self.assertEqual(tally.total_points, 1)

    def test_points_are_summed_not_recalculated(self):
        # A win stored with 0 points stays at 0 points
        tally = aggregate_results([1], [stored(1, Outcome.WIN, 0, 5, 0)])[1]
        self.assertEqual(tally.total_points, 0)
        self.assertEqual(tally.wins, 1)

    def test_requested_player_without_results_is_zeroed(self):
        tallies = aggregate_results([1, 2], [stored(1, Outcome.DRAW, 1, 1, 1)])

        self.assertEqual(tallies[2], PlayerTally(player_id=2))
        self.assertEqual(tallies[2].matches_played, 0)
        self.assertEqual(tallies[2].total_points, 0)

    def test_unrequested_players_are_ignored(self):
        tallies = aggregate_results(
            [1], [stored(1, Outcome.WIN, 3), stored(2, Outcome.LOSS, 0)]
        )
        self.assertEqual(list(tallies), [1])

    def test_conditional_points_subtotal(self):
        tally = tally_results(
            1,
            [
                stored(1, Outcome.WIN, 5, 2, 0, conditional=2),
                stored(1, Outcome.WIN, 4, 1, 0, conditional=1),
            ],
        )
        self.assertEqual(tally.conditional_points, 3)
        self.assertEqual(tally.total_points, 9)

    def test_idempotent(self):
        results = [
            stored(1, Outcome.WIN, 3, 2, 1),
            stored(2, Outcome.LOSS, 0, 1, 2),
        ]
        self.assertEqual(
            aggregate_results([1, 2], results), aggregate_results([1, 2], results)
        )

    def test_as_fields_excludes_player_id(self):
        fields = PlayerTally(player_id=3, wins=2, total_points=6).as_fields()
        self.assertNotIn("player_id", fields)
        self.assertEqual(fields["wins"], 2)
        self.assertEqual(fields["total_points"], 6)
        self.assertEqual(len(fields), 8)


if __name__ == "__main__":
    unittest.main()
