#!/usr/bin/env python3
"""
Request-Level Ranking - Threshold relaxation, budget-first ordering and rationales.

Wraps the Match Finder for a single search request:
1. Merge caller-supplied filters (MatchRequest) over the base requirement
2. Rank listings by BFI (floor enforced by the Match Finder)
3. Walk the threshold ladder until a rung yields matches
4. Re-order budget sub-score first, then composite index
5. Cap to top_k and attach rationale strings
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple
import logging

from pydantic import BaseModel, Field

from spacefit.config_loader import MatchingConfig
from spacefit.matcher.explainability import generate_match_reasons
from spacefit.matcher.relaxation import ThresholdLadder
from spacefit.matcher.service import MatchFinder
from spacefit.scorer.models import Listing, MatchResult, PropertyCategory, Requirement

logger = logging.getLogger(__name__)


class RangeFilter(BaseModel):
    """An optional band; either side may be omitted."""
    min: Optional[float] = Field(None, ge=0, description="Lower bound (inclusive)")
    max: Optional[float] = Field(None, ge=0, description="Upper bound (inclusive)")


class MatchRequest(BaseModel):
    """Caller-supplied search filters. Every field is optional."""
    business_type: Optional[str] = Field(None, description="Business/use category, free text")
    locations: Optional[List[str]] = Field(None, description="Preferred locations")
    size_range: Optional[RangeFilter] = Field(None, description="Area band")
    budget_range: Optional[RangeFilter] = Field(None, description="Monthly budget band")
    property_type: Optional[str] = Field(None, description="Explicit listing category or display name")

    def to_requirement(self, base: Optional[Requirement] = None) -> Requirement:
        """Overlay supplied filters on a base requirement (or on an empty one)."""
        requirement = base or Requirement()
        overrides = {}
        if self.business_type is not None:
            overrides['business_type'] = self.business_type
        if self.locations is not None:
            overrides['locations'] = tuple(loc for loc in self.locations if loc and loc.strip())
        if self.size_range is not None:
            overrides['size_min'] = self.size_range.min or None
            overrides['size_max'] = self.size_range.max or None
        if self.budget_range is not None:
            overrides['budget_min'] = self.budget_range.min or None
            overrides['budget_max'] = self.budget_range.max or None
        if self.property_type:
            overrides['property_type'] = PropertyCategory.parse(self.property_type)
        return replace(requirement, **overrides) if overrides else requirement


@dataclass(frozen=True)
class RankedMatches:
    """Ranked, capped and annotated matches for one request."""
    matches: Tuple[MatchResult, ...] = field(default_factory=tuple)
    threshold_used: Optional[int] = None  # None: none found
    total_candidates: int = 0
    total_matches: int = 0  # accepted at threshold_used, before capping

    @property
    def found(self) -> bool:
        return self.threshold_used is not None


def budget_first_order(matches: Sequence[MatchResult]) -> List[MatchResult]:
    """Budget sub-score descending, ties by composite index descending."""
    return sorted(matches, key=lambda m: (m.breakdown.budget, m.score), reverse=True)


class RequestRanker:
    """Request-level ranking over the Match Finder."""

    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or MatchingConfig()
        policy = self.config.result_policy
        self.finder = MatchFinder(
            scorer_config=self.config.scorer,
            matcher_config=self.config.matcher,
            result_policy=policy
        )
        self.ladder = ThresholdLadder(policy.relaxation_thresholds, floor=policy.min_score)

    def rank(
        self,
        listings: Sequence[Listing],
        requirement: Optional[Requirement] = None,
        request: Optional[MatchRequest] = None
    ) -> RankedMatches:
        """
        Rank listings for one search request.

        Args:
            listings: Candidate listings (bounded by the caller)
            requirement: Base brand requirement, if any
            request: Caller-supplied filters overriding the requirement

        Returns: RankedMatches with the threshold that produced them
        """
        effective = request.to_requirement(requirement) if request else (requirement or Requirement())
        candidates = list(listings or [])

        ranked = self.finder.find_listing_matches(candidates, effective)
        logger.info(f"Total matches before relaxation: {len(ranked)} of {len(candidates)} listings")
        if ranked:
            logger.debug(f"Score range: {ranked[-1].score} - {ranked[0].score}")

        outcome = self.ladder.select(ranked)
        if not outcome.found:
            return RankedMatches(total_candidates=len(candidates))

        ordered = budget_first_order(outcome.matches)[:self.config.result_policy.top_k]
        annotated = tuple(
            replace(m, reasons=tuple(generate_match_reasons(
                m, business_type=effective.business_type, config=self.config.explainability
            )))
            for m in ordered
        )

        logger.info(f"Returning {len(annotated)} of {len(outcome.matches)} matches at threshold {outcome.threshold}")
        return RankedMatches(
            matches=annotated,
            threshold_used=outcome.threshold,
            total_candidates=len(candidates),
            total_matches=len(outcome.matches)
        )
