#!/usr/bin/env python3
"""
Category Tables - business keyword and space-type compatibility policy.

- BUSINESS_KEYWORDS: free-text keyword -> canonical business tag
- COMPATIBLE_CATEGORIES: business tag -> listing categories that fit well
- ACCEPTABLE_CATEGORIES: business tag -> categories that work, but not ideally
- VISIBILITY_SENSITIVE: tags whose best fit also needs street visibility
- PROPERTY_TYPE_KEYWORDS: display name keyword -> listing category

All tables are read-only and shared process-wide.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Set, Tuple

from spacefit.utils import contains_phrase, normalize_text

OFFICE = 'office'
RETAIL = 'retail'
WAREHOUSE = 'warehouse'
RESTAURANT = 'restaurant'
OTHER = 'other'

PROPERTY_CATEGORIES: Tuple[str, ...] = (OFFICE, RETAIL, WAREHOUSE, RESTAURANT, OTHER)

BUSINESS_KEYWORDS: Mapping[str, str] = MappingProxyType({
    'cafe': 'cafe',
    'coffee': 'cafe',
    'tea': 'cafe',
    'qsr': 'qsr',
    'quick service': 'qsr',
    'fast food': 'qsr',
    'bakery': 'qsr',
    'dessert': 'qsr',
    'kiosk': 'qsr',
    'restaurant': 'restaurant',
    'dining': 'restaurant',
    'fine dine': 'restaurant',
    'food court': 'restaurant',
    'cloud kitchen': 'restaurant',
    'bar': 'bar',
    'pub': 'bar',
    'brewery': 'bar',
    'lounge': 'bar',
    'retail': 'retail',
    'apparel': 'retail',
    'fashion': 'retail',
    'footwear': 'retail',
    'jewellery': 'retail',
    'jewelry': 'retail',
    'electronics': 'retail',
    'store': 'retail',
    'showroom': 'retail',
    'supermarket': 'retail',
    'pharmacy': 'retail',
    'salon': 'retail',
    'gym': 'fitness',
    'fitness': 'fitness',
    'yoga': 'fitness',
    'studio': 'fitness',
    'entertainment': 'entertainment',
    'gaming': 'entertainment',
    'cinema': 'entertainment',
    'office': 'office',
    'coworking': 'office',
    'co working': 'office',
    'it services': 'office',
    'clinic': 'office',
    'warehouse': 'warehouse',
    'logistics': 'warehouse',
    'storage': 'warehouse',
    'distribution': 'warehouse',
})

COMPATIBLE_CATEGORIES: Mapping[str, FrozenSet[str]] = MappingProxyType({
    'cafe': frozenset({RETAIL, RESTAURANT}),
    'qsr': frozenset({RETAIL}),
    'restaurant': frozenset({RESTAURANT, RETAIL}),
    'bar': frozenset({RESTAURANT, RETAIL}),
    'retail': frozenset({RETAIL}),
    'fitness': frozenset({OFFICE, RETAIL}),
    'entertainment': frozenset({RETAIL, OFFICE}),
    'office': frozenset({OFFICE}),
    'warehouse': frozenset({WAREHOUSE}),
})

ACCEPTABLE_CATEGORIES: Mapping[str, FrozenSet[str]] = MappingProxyType({
    'qsr': frozenset({RESTAURANT}),
    'retail': frozenset({OFFICE}),
    'office': frozenset({RETAIL}),
    'fitness': frozenset({WAREHOUSE}),
    'warehouse': frozenset({OTHER}),
    'entertainment': frozenset({OTHER}),
})

VISIBILITY_SENSITIVE: FrozenSet[str] = frozenset({'cafe', 'qsr', 'restaurant', 'bar', 'retail'})

VISIBILITY_AMENITIES: Tuple[str, ...] = (
    'ground floor',
    'ground',
    'street facing',
    'high street',
    'main road',
    'frontage',
    'high visibility',
)

# Ordered: first hit wins, so "food court" resolves before "court" style words.
PROPERTY_TYPE_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ('office', OFFICE),
    ('business park', OFFICE),
    ('it park', OFFICE),
    ('co working', OFFICE),
    ('coworking', OFFICE),
    ('retail', RETAIL),
    ('mall', RETAIL),
    ('showroom', RETAIL),
    ('kiosk', RETAIL),
    ('high street', RETAIL),
    ('warehouse', WAREHOUSE),
    ('industrial', WAREHOUSE),
    ('restaurant', RESTAURANT),
    ('food court', RESTAURANT),
    ('cafe', RESTAURANT),
    ('qsr', RESTAURANT),
    ('dessert', RESTAURANT),
    ('bakery', RESTAURANT),
)


def resolve_business_tags(business_type: Optional[str]) -> Set[str]:
    """Canonical business tags named in free text ("cafe_qsr" -> {"cafe", "qsr"})."""
    normalized = normalize_text(business_type)
    if not normalized:
        return set()
    return {
        tag for keyword, tag in BUSINESS_KEYWORDS.items()
        if contains_phrase(normalized, keyword)
    }


def compatible_categories(tags: Set[str]) -> Set[str]:
    categories: Set[str] = set()
    for tag in tags:
        categories |= COMPATIBLE_CATEGORIES.get(tag, frozenset())
    return categories


def acceptable_categories(tags: Set[str]) -> Set[str]:
    categories: Set[str] = set()
    for tag in tags:
        categories |= ACCEPTABLE_CATEGORIES.get(tag, frozenset())
    return categories


def resolve_property_category(value: Optional[str]) -> Optional[str]:
    """
    Map a listing category or a display name ("Mall", "IT Park", "QSR") to
    one of PROPERTY_CATEGORIES. Unrecognized non-empty text maps to 'other';
    empty text to None.
    """
    normalized = normalize_text(value)
    if not normalized:
        return None
    if normalized in PROPERTY_CATEGORIES:
        return normalized
    for keyword, category in PROPERTY_TYPE_KEYWORDS:
        if contains_phrase(normalized, keyword):
            return category
    return OTHER
