"""Matcher Module - Ranking, threshold relaxation and match rationales."""
from spacefit.matcher.service import MatchFinder
from spacefit.matcher.relaxation import RelaxationOutcome, ThresholdLadder
from spacefit.matcher.ranking import MatchRequest, RangeFilter, RankedMatches, RequestRanker
from spacefit.matcher.pairwise import PairGroup, PairMatch, PairwiseMatcher
from spacefit.matcher.explainability import generate_match_reasons
from spacefit.scorer.models import match_quality

__all__ = [
    'MatchFinder', 'ThresholdLadder', 'RelaxationOutcome',
    'RequestRanker', 'MatchRequest', 'RangeFilter', 'RankedMatches',
    'PairwiseMatcher', 'PairMatch', 'PairGroup',
    'generate_match_reasons', 'match_quality'
]
