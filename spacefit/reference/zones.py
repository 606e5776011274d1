#!/usr/bin/env python3
"""
Zone Table - static geographic fallback tiers.

Each named zone groups several micro-areas. When a listing is not in one of
the requested locations, sharing a zone with one of them still counts as a
partial location match.

The table is a strict partition: every keyword belongs to exactly one zone,
so a text never resolves to two zones with equal priority.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Set, Tuple

from spacefit.utils import contains_phrase, normalize_text

ZONE_TABLE: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'central': ('mg road', 'brigade road', 'church street', 'commercial street'),
    'south': ('koramangala', 'jayanagar', 'btm', 'hsr', 'indiranagar'),
    'east': ('whitefield', 'marathahalli', 'kundalahalli'),
    'north': ('hebbal', 'yelahanka', 'sahakar nagar'),
    'west': ('rajajinagar', 'malleswaram', 'yeshwanthpur'),
})


def resolve_zone(*texts: Optional[str]) -> Optional[str]:
    """
    Resolve the first text that names a known area to its zone.

    Texts are tried in order (e.g. city before address); zones in table order.
    """
    for text in texts:
        normalized = normalize_text(text)
        if not normalized:
            continue
        for zone, areas in ZONE_TABLE.items():
            if any(contains_phrase(normalized, area) for area in areas):
                return zone
    return None


def resolve_zones(locations: Iterable[Optional[str]]) -> Set[str]:
    """Zones named by any of the given locations."""
    zones = set()
    for location in locations:
        zone = resolve_zone(location)
        if zone:
            zones.add(zone)
    return zones
