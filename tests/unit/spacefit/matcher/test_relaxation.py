#!/usr/bin/env python3
"""
Unit tests for the threshold relaxation ladder.
"""

import unittest

from spacefit.matcher.relaxation import ThresholdLadder
from spacefit.scorer.models import MatchResult, ScoreBreakdown
from tests import make_listing, make_requirement


def _result(score: int, listing_id: str = None) -> MatchResult:
    return MatchResult(
        listing=make_listing(id=listing_id or f"listing-{score}"),
        requirement=make_requirement(),
        score=score,
        breakdown=ScoreBreakdown(location=score, size=score, budget=score, property_type=score),
    )


class TestThresholdLadder(unittest.TestCase):

    def setUp(self):
        self.ladder = ThresholdLadder()

    def test_default_rungs(self):
        self.assertEqual(self.ladder.rungs, (60, 50, 40, 30))
        self.assertEqual(self.ladder.next_rung(60), 50)
        self.assertIsNone(self.ladder.next_rung(30))

    def test_first_rung_wins(self):
        outcome = self.ladder.select([_result(65), _result(45)])
        self.assertEqual(outcome.threshold, 60)
        self.assertEqual([m.score for m in outcome.matches], [65])
        self.assertEqual(outcome.consulted, (60,))

    def test_relaxes_one_rung(self):
        outcome = self.ladder.select([_result(55), _result(45)])
        self.assertEqual(outcome.threshold, 50)
        self.assertEqual([m.score for m in outcome.matches], [55])
        self.assertEqual(outcome.consulted, (60, 50))

    def test_relaxes_to_floor(self):
        outcome = self.ladder.select([_result(35)])
        self.assertEqual(outcome.threshold, 30)
        self.assertEqual(outcome.consulted, (60, 50, 40, 30))
        self.assertTrue(outcome.found)

    def test_none_found(self):
        outcome = self.ladder.select([])
        self.assertIsNone(outcome.threshold)
        self.assertEqual(outcome.matches, ())
        self.assertEqual(outcome.consulted, (60, 50, 40, 30))
        self.assertFalse(outcome.found)

    def test_below_floor_never_accepted(self):
        outcome = self.ladder.select([_result(29)])
        self.assertFalse(outcome.found)

    def test_lower_rung_results_not_mixed_in(self):
        outcome = self.ladder.select([_result(100), _result(48), _result(31)])
        self.assertEqual([m.score for m in outcome.matches], [100])

    def test_thresholds_below_floor_dropped(self):
        self.assertEqual(ThresholdLadder([60, 20], floor=30).rungs, (60, 30))

    def test_floor_appended(self):
        self.assertEqual(ThresholdLadder([70, 50], floor=30).rungs, (70, 50, 30))


if __name__ == '__main__':
    unittest.main()
