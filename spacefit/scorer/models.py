#!/usr/bin/env python3
"""
Scoring Models - Value objects for listings, requirements and match results.

All objects are immutable and created per request. Raw records coming from
the persistence layer go through the from_record constructors, which apply
the defensive normalization (missing numbers, sentinels, key spellings).
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from spacefit.reference.categories import resolve_property_category
from spacefit.utils import bound_or_none, safe_float

logger = logging.getLogger(__name__)


class PriceType(str, Enum):
    MONTHLY = 'monthly'
    YEARLY = 'yearly'
    PER_AREA = 'sqft'

    @classmethod
    def parse(cls, value: Any) -> 'PriceType':
        """Unknown or missing price types are treated as monthly."""
        if isinstance(value, PriceType):
            return value
        text = str(value or '').strip().lower().replace('-', '_')
        if text in ('yearly', 'annual', 'annually', 'per_year'):
            return cls.YEARLY
        if text in ('sqft', 'per_sqft', 'per_area', 'per_sq_ft', 'psf'):
            return cls.PER_AREA
        return cls.MONTHLY


class PropertyCategory(str, Enum):
    OFFICE = 'office'
    RETAIL = 'retail'
    WAREHOUSE = 'warehouse'
    RESTAURANT = 'restaurant'
    OTHER = 'other'

    @classmethod
    def parse(cls, value: Any) -> Optional['PropertyCategory']:
        if isinstance(value, PropertyCategory):
            return value
        category = resolve_property_category(value)
        return cls(category) if category else None


def _first(record: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


def _string_list(value: Any) -> Tuple[str, ...]:
    """Lists may arrive as real lists or as JSON-encoded strings."""
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return ()
        try:
            value = json.loads(stripped)
        except ValueError:
            value = [part for part in stripped.split(',')]
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(item).strip() for item in value if item is not None and str(item).strip())


@dataclass(frozen=True)
class Listing:
    """A commercial-space listing (read-only input)."""
    id: str
    title: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    price: float = 0.0
    price_type: PriceType = PriceType.MONTHLY
    size: float = 0.0
    category: PropertyCategory = PropertyCategory.OTHER
    amenities: Tuple[str, ...] = ()
    is_available: bool = True
    condition: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Listing':
        """Build a Listing from a persistence-layer record (camelCase or snake_case)."""
        price = safe_float(_first(record, 'price'))
        size = safe_float(_first(record, 'size', 'area'))
        availability = _first(record, 'is_available', 'isAvailable', 'availability', default=True)

        listing = cls(
            id=str(_first(record, 'id', default='')),
            title=str(_first(record, 'title', default='')),
            address=str(_first(record, 'address', default='')),
            city=str(_first(record, 'city', default='')),
            state=str(_first(record, 'state', default='')),
            zip_code=str(_first(record, 'zip_code', 'zipCode', default='')),
            price=max(price or 0.0, 0.0),
            price_type=PriceType.parse(_first(record, 'price_type', 'priceType')),
            size=max(size or 0.0, 0.0),
            category=PropertyCategory.parse(
                _first(record, 'category', 'property_type', 'propertyType')
            ) or PropertyCategory.OTHER,
            amenities=_string_list(_first(record, 'amenities', default=[])),
            is_available=availability is not False,
            condition=_first(record, 'condition'),
        )
        logger.debug(f"Normalized listing {listing.id}: {listing.price_type.value} {listing.price}, {listing.size} area")
        return listing


@dataclass(frozen=True)
class Requirement:
    """
    A brand's requirements (read-only input).

    Bounds set to None are unconstrained.
    """
    locations: Tuple[str, ...] = ()
    size_min: Optional[float] = None
    size_max: Optional[float] = None
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    business_type: Optional[str] = None
    property_type: Optional[PropertyCategory] = None
    id: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Requirement':
        """
        Build a Requirement from a brand-profile record.

        Zero, negative and "no limit" sentinel bounds become None.
        """
        explicit_type = _first(record, 'property_type', 'propertyType')
        return cls(
            locations=_string_list(_first(
                record, 'locations', 'preferred_locations', 'preferredLocations', default=[]
            )),
            size_min=bound_or_none(_first(record, 'size_min', 'sizeMin', 'min_size', 'minSize')),
            size_max=bound_or_none(_first(record, 'size_max', 'sizeMax', 'max_size', 'maxSize')),
            budget_min=bound_or_none(_first(record, 'budget_min', 'budgetMin')),
            budget_max=bound_or_none(_first(record, 'budget_max', 'budgetMax')),
            business_type=_first(record, 'business_type', 'businessType', 'industry'),
            property_type=PropertyCategory.parse(explicit_type) if explicit_type else None,
            id=_first(record, 'id'),
            name=_first(record, 'name', 'company_name', 'companyName'),
        )


def match_quality(score: int) -> str:
    """Excellent (>= 85), Good (>= 70) or Fair."""
    if score >= 85:
        return "Excellent"
    if score >= 70:
        return "Good"
    return "Fair"


@dataclass(frozen=True)
class ScoreBreakdown:
    """Four sub-scores, each an integer 0-100."""
    location: int
    size: int
    budget: int
    property_type: int

    def to_dict(self) -> Dict[str, int]:
        return {
            'location': self.location,
            'size': self.size,
            'budget': self.budget,
            'property_type': self.property_type,
        }


@dataclass(frozen=True)
class MatchResult:
    """Composite fit index for one listing/requirement pair."""
    listing: Listing
    requirement: Requirement
    score: int
    breakdown: ScoreBreakdown
    direction: str = "bfi"  # bfi | pfi
    reasons: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def quality(self) -> str:
        return match_quality(self.score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'listing_id': self.listing.id,
            'requirement_id': self.requirement.id,
            'direction': self.direction,
            'score': self.score,
            'quality': self.quality,
            'breakdown': self.breakdown.to_dict(),
            'reasons': list(self.reasons),
        }
