#!/usr/bin/env python3
"""
Pairwise Matcher - Every brand against every listing.

Used for the operator's match overview: each pair is kept when its PFI
clears the minimum score, annotated with the BFI of the same pair and a
quality label, and can be grouped by listing or by brand.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence
import logging

from spacefit.config_loader import MatchingConfig
from spacefit.matcher.explainability import describe_budget_range, describe_size_range
from spacefit.scorer.composer import calculate_bfi, calculate_pfi
from spacefit.scorer.models import Listing, MatchResult, Requirement, match_quality

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairMatch:
    """One brand/listing pair scored in both directions."""
    requirement: Requirement
    listing: Listing
    pfi: MatchResult
    bfi: MatchResult
    requirement_key: str = ""

    @property
    def pair_id(self) -> str:
        return f"{self.requirement_key or self.requirement.id}-{self.listing.id}"

    @property
    def quality(self) -> str:
        return match_quality(self.pfi.score)


@dataclass(frozen=True)
class PairGroup:
    """Pairs sharing a listing or a brand, best PFI first."""
    key: str
    matches: List[PairMatch]


class PairwiseMatcher:
    """Score the brand x listing matrix."""

    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or MatchingConfig()

    def match_all(
        self,
        requirements: Sequence[Requirement],
        listings: Sequence[Listing],
        min_score: Optional[int] = None
    ) -> List[PairMatch]:
        """
        Score every pair; keep those with PFI >= min_score (default: floor).

        Returns: pairs sorted by PFI descending
        """
        threshold = self.config.result_policy.min_score if min_score is None else min_score
        scorer_config = self.config.scorer
        skip_unavailable = self.config.matcher.skip_unavailable
        pairs: List[PairMatch] = []

        for position, requirement in enumerate(requirements or []):
            key = requirement_key(requirement, position)
            for listing in listings or []:
                if skip_unavailable and not getattr(listing, 'is_available', True):
                    continue
                pfi = calculate_pfi(requirement, listing, scorer_config)
                if pfi.score < threshold:
                    continue
                bfi = calculate_bfi(listing, requirement, scorer_config)
                pairs.append(PairMatch(
                    requirement=requirement, listing=listing, pfi=pfi, bfi=bfi, requirement_key=key
                ))

        pairs.sort(key=lambda p: p.pfi.score, reverse=True)
        logger.info(f"Pairwise: {len(pairs)} pairs with PFI >= {threshold}")
        return pairs

    @staticmethod
    def group_by_listing(pairs: Sequence[PairMatch]) -> List[PairGroup]:
        return _group(pairs, lambda p: str(p.listing.id))

    @staticmethod
    def group_by_requirement(pairs: Sequence[PairMatch]) -> List[PairGroup]:
        return _group(pairs, lambda p: p.requirement_key or str(p.requirement.id))

    def describe_requirement(self, requirement: Requirement) -> Dict[str, str]:
        """Display strings for a brand's size and budget bands."""
        explain = self.config.explainability
        return {
            'size_range': describe_size_range(requirement, explain.area_unit),
            'budget_range': describe_budget_range(requirement, explain.currency_symbol),
        }


def requirement_key(requirement: Requirement, position: int) -> str:
    """Brand id, else brand name, else its position in the input."""
    if requirement.id is not None:
        return str(requirement.id)
    if requirement.name:
        return str(requirement.name)
    return f"brand-{position}"


def _group(pairs: Sequence[PairMatch], key_of) -> List[PairGroup]:
    # dicts keep insertion order, so groups follow the best pair of each key
    grouped: Dict[str, List[PairMatch]] = {}
    for pair in pairs:
        grouped.setdefault(key_of(pair), []).append(pair)
    return [PairGroup(key=key, matches=matches) for key, matches in grouped.items()]
