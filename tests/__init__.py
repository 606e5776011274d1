#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v

Builders below return the reference fixtures used across the suite: a retail
listing in Koramangala and a cafe/QSR brand looking for exactly that.
"""

from dataclasses import replace

from spacefit.scorer.models import Listing, PriceType, PropertyCategory, Requirement

BASE_LISTING = Listing(
    id="prop-1",
    title="Test Property",
    address="123 Test Street, Koramangala",
    city="Bangalore",
    state="Karnataka",
    zip_code="560095",
    price=150000,
    price_type=PriceType.MONTHLY,
    size=1500,
    category=PropertyCategory.RETAIL,
    amenities=("parking", "ground floor", "ac"),
)

BASE_REQUIREMENT = Requirement(
    locations=("Koramangala",),
    size_min=1400,
    size_max=1600,
    budget_min=100000,
    budget_max=200000,
    business_type="cafe_qsr",
    id="brand-1",
    name="Test Cafe",
)


def make_listing(**overrides) -> Listing:
    """Reference listing with field overrides."""
    return replace(BASE_LISTING, **overrides)


def make_requirement(**overrides) -> Requirement:
    """Reference requirement with field overrides."""
    return replace(BASE_REQUIREMENT, **overrides)
