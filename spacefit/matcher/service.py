#!/usr/bin/env python3
"""
Match Finder - Reusable ranking primitive for both directions.

Scores every candidate, drops anything under the quality floor and sorts by
composite index (highest first). No pagination or threshold negotiation
happens here; see ranking.RequestRanker for that.
"""

from typing import List, Optional, Sequence
import logging

from spacefit.config_loader import MatcherConfig, ResultPolicy, ScorerConfig
from spacefit.scorer.composer import calculate_bfi, calculate_pfi
from spacefit.scorer.models import Listing, MatchResult, Requirement

logger = logging.getLogger(__name__)


class MatchFinder:
    """
    Score and rank candidates against one counterpart.

    - find_listing_matches: listings vs one brand requirement (BFI)
    - find_requirement_matches: brand requirements vs one listing (PFI)
    """

    def __init__(
        self,
        scorer_config: Optional[ScorerConfig] = None,
        matcher_config: Optional[MatcherConfig] = None,
        result_policy: Optional[ResultPolicy] = None
    ):
        self.scorer_config = scorer_config or ScorerConfig()
        self.matcher_config = matcher_config or MatcherConfig()
        self.result_policy = result_policy or ResultPolicy()

    @property
    def min_score(self) -> int:
        return self.result_policy.min_score

    def _rank(self, results: List[MatchResult]) -> List[MatchResult]:
        kept = [r for r in results if r.score >= self.min_score]
        # sort is stable: equal scores keep candidate order
        kept.sort(key=lambda r: r.score, reverse=True)
        return kept

    def find_listing_matches(
        self,
        listings: Sequence[Listing],
        requirement: Requirement
    ) -> List[MatchResult]:
        """
        Rank listings for a brand by BFI.

        Returns: MatchResults with score >= min_score, highest first
        """
        candidates = list(listings or [])
        if self.matcher_config.skip_unavailable:
            available = [listing for listing in candidates if getattr(listing, 'is_available', True)]
            if len(available) < len(candidates):
                logger.debug(f"Skipping {len(candidates) - len(available)} unavailable listings")
            candidates = available

        results = [calculate_bfi(listing, requirement, self.scorer_config) for listing in candidates]
        ranked = self._rank(results)

        logger.debug(f"BFI: {len(ranked)}/{len(candidates)} listings at or above {self.min_score}")
        return ranked

    def find_requirement_matches(
        self,
        requirements: Sequence[Requirement],
        listing: Listing
    ) -> List[MatchResult]:
        """
        Rank brand requirements for a listing by PFI.

        Returns: MatchResults with score >= min_score, highest first
        """
        candidates = list(requirements or [])
        results = [calculate_pfi(requirement, listing, self.scorer_config) for requirement in candidates]
        ranked = self._rank(results)

        logger.debug(f"PFI: {len(ranked)}/{len(candidates)} brands at or above {self.min_score}")
        return ranked
