"""Reference Tables - static zone and category lookup data."""
from spacefit.reference.zones import ZONE_TABLE, resolve_zone, resolve_zones
from spacefit.reference.categories import (
    PROPERTY_CATEGORIES, resolve_business_tags, resolve_property_category
)

__all__ = [
    'ZONE_TABLE', 'resolve_zone', 'resolve_zones',
    'PROPERTY_CATEGORIES', 'resolve_business_tags', 'resolve_property_category'
]
