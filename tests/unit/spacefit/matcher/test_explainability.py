#!/usr/bin/env python3
"""
Unit tests for match rationales and band display strings.
"""

import unittest

from spacefit.config_loader import ExplainabilityConfig
from spacefit.matcher.explainability import (
    describe_budget_range, describe_size_range, generate_match_reasons
)
from spacefit.matcher.ranking import RequestRanker
from spacefit.scorer.models import Listing, MatchResult, PriceType, Requirement, ScoreBreakdown
from tests import make_listing, make_requirement


def _match(location=100, size=100, budget=100, property_type=100, **listing_overrides) -> MatchResult:
    return MatchResult(
        listing=make_listing(**listing_overrides),
        requirement=make_requirement(),
        score=90,
        breakdown=ScoreBreakdown(location=location, size=size, budget=budget, property_type=property_type),
    )


class TestGenerateMatchReasons(unittest.TestCase):

    def test_partial_scores(self):
        reasons = generate_match_reasons(
            _match(location=70, size=70, budget=70, property_type=40, amenities=())
        )
        self.assertEqual(reasons, [
            "Good location - nearby your preferred areas",
            "Close to your budget range",
            "Good size match - 1,500 sqft",
        ])

    def test_low_scores_give_no_component_reasons(self):
        reasons = generate_match_reasons(
            _match(location=30, size=0, budget=0, property_type=0, amenities=())
        )
        self.assertEqual(reasons, [])

    def test_yearly_price_shown_monthly(self):
        reasons = generate_match_reasons(_match(price=1800000, price_type=PriceType.YEARLY))
        self.assertIn("Great value - ₹150,000/month within your budget", reasons)

    def test_amenities_and_condition(self):
        match = _match(location=0, size=0, budget=0, property_type=0, condition="Excellent")
        self.assertEqual(generate_match_reasons(match), [
            "Parking available",
            "Ground floor - high visibility",
            "Property in excellent condition",
        ])

    def test_reason_cap_and_currency(self):
        config = ExplainabilityConfig(max_reasons=2, currency_symbol="$")
        reasons = generate_match_reasons(_match(), config=config)
        self.assertEqual(len(reasons), 2)
        self.assertEqual(reasons[1], "Great value - $150,000/month within your budget")

    def test_unknown_area_gives_no_size_reason(self):
        for size in (None, 0):
            reasons = generate_match_reasons(_match(size=size))
            self.assertFalse([r for r in reasons if "sqft" in r], reasons)
            self.assertIn("Perfect location match - in Bangalore", reasons)

    def test_record_without_area_ranked(self):
        listing = Listing.from_record({
            'id': 'p-no-area',
            'address': '123 Test Street, Koramangala',
            'city': 'Bangalore',
            'price': 150000,
            'category': 'retail',
        })
        requirement = make_requirement(size_min=None, size_max=None)
        for candidate in (listing, make_listing(size=None)):
            ranked = RequestRanker().rank([candidate], requirement)

            self.assertTrue(ranked.found)
            self.assertEqual(ranked.matches[0].breakdown.size, 80)
            self.assertFalse([r for r in ranked.matches[0].reasons if "Ideal size" in r])

    def test_business_type_fallback(self):
        reasons = generate_match_reasons(_match(), business_type="Bakery")
        self.assertIn("Ideal size - 1,500 sqft perfect for Bakery", reasons)


class TestDescribeRanges(unittest.TestCase):

    def test_full_bands(self):
        requirement = make_requirement()
        self.assertEqual(describe_size_range(requirement), "1,400 - 1,600 sqft")
        self.assertEqual(describe_budget_range(requirement), "₹100K - ₹200K/month")

    def test_open_bands(self):
        self.assertEqual(describe_size_range(Requirement(size_min=800)), "From 800 sqft")
        self.assertEqual(describe_size_range(Requirement(size_max=2000)), "Up to 2,000 sqft")
        self.assertEqual(describe_budget_range(Requirement(budget_max=90000)), "Up to ₹90K/month")

    def test_flexible(self):
        self.assertEqual(describe_size_range(Requirement()), "Size flexible")
        self.assertEqual(describe_budget_range(Requirement()), "Budget flexible")


if __name__ == '__main__':
    unittest.main()
