#!/usr/bin/env python3
"""
Type Compatibility Scorer - Business/use category vs listing category.

Keyword and compatibility policy lives in spacefit.reference.categories;
this module only applies it.
"""

from typing import Optional, Sequence
import logging

from spacefit.reference.categories import (
    VISIBILITY_AMENITIES,
    VISIBILITY_SENSITIVE,
    acceptable_categories,
    compatible_categories,
    resolve_business_tags,
    resolve_property_category,
)
from spacefit.utils import contains_any_phrase, normalize_text

logger = logging.getLogger(__name__)

PERFECT_SCORE = 100
COMPATIBLE_SCORE = 70
ACCEPTABLE_SCORE = 40
NO_MATCH_SCORE = 0
NEUTRAL_SCORE = 50

EXPLICIT_MATCH_SCORE = 100
EXPLICIT_MISMATCH_SCORE = 40


def has_high_visibility(amenities: Optional[Sequence[str]]) -> bool:
    """True if any amenity tag signals ground floor / street-facing frontage."""
    for amenity in amenities or ():
        if contains_any_phrase(normalize_text(amenity), VISIBILITY_AMENITIES):
            return True
    return False


def calculate_property_type_score(
    listing_category: Optional[str],
    business_type: Optional[str],
    amenities: Optional[Sequence[str]] = None,
    preferred_property_type: Optional[str] = None
) -> int:
    """
    Score how well a listing category suits a business.

    An explicit preferred property type overrides the keyword tables.
    """
    category = resolve_property_category(listing_category)

    if preferred_property_type:
        preferred = resolve_property_category(preferred_property_type)
        return EXPLICIT_MATCH_SCORE if category and category == preferred else EXPLICIT_MISMATCH_SCORE

    tags = resolve_business_tags(business_type)
    if not tags:
        if business_type:
            logger.debug(f"Unrecognized business type '{business_type}', using neutral score")
        return NEUTRAL_SCORE

    if category in compatible_categories(tags):
        if not tags & VISIBILITY_SENSITIVE or has_high_visibility(amenities):
            return PERFECT_SCORE
        return COMPATIBLE_SCORE

    if category in acceptable_categories(tags):
        return ACCEPTABLE_SCORE

    return NO_MATCH_SCORE
