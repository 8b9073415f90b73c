"""
Classifier

Classifies matches into fit tiers by the gap between the student's score and
the match's best cutoff:
- Best Fit (within 2 points either way)
- Safe (3 to 7 points above)
- Low Quality (10 or more points above)
- Dream (everything else)
"""

from typing import Dict, List, Sequence

from .contracts import CanonicalMatch, StrategyMatch, StrategyFilter
from .constants import (
    FitTier,
    TIER_ORDER,
    BEST_FIT_MAX_ABS_GAP,
    SAFE_GAP_RANGE,
    LOW_QUALITY_MIN_GAP,
)
from .filters import apply_strategy_filter
from .projector import cutoff_metrics, project_strategy


def classify_gap(gap: float) -> FitTier:
    """
    Classify a single score gap into a fit tier.

    Gaps of 8-10 points and gaps falling between the integer bands
    (e.g. 2.5) are dream by the catch-all branch.
    """
    if abs(gap) <= BEST_FIT_MAX_ABS_GAP:
        return FitTier.BEST_FIT

    low, high = SAFE_GAP_RANGE
    if low <= gap <= high:
        return FitTier.SAFE

    if gap >= LOW_QUALITY_MIN_GAP:
        return FitTier.LOW_QUALITY

    return FitTier.DREAM


def classify_match(match: CanonicalMatch, student_score: float) -> StrategyMatch:
    """Annotate one match with its best cutoff, gap, ratio and tier."""
    metrics = cutoff_metrics(match, student_score)
    _, gap, _ = metrics
    return project_strategy(match, metrics, classify_gap(gap))


def build_strategy_matches(
    matches: Sequence[CanonicalMatch],
    student_score: float,
) -> List[StrategyMatch]:
    """
    Classify all matches for one student score.

    Args:
        matches: Canonical matches
        student_score: Student aggregate, fixed for the whole batch

    Returns:
        List of StrategyMatch in input order
    """
    if matches is None:
        raise TypeError("matches must be a sequence, not None")
    return [classify_match(m, student_score) for m in matches]


def group_by_tier(
    matches: Sequence[StrategyMatch],
    spec: StrategyFilter = None,
) -> Dict[FitTier, List[StrategyMatch]]:
    """
    Group matches by tier after an optional city/program/type filter.

    Every tier is present in the result, in display order.
    """
    groups: Dict[FitTier, List[StrategyMatch]] = {tier: [] for tier in TIER_ORDER}
    for match in apply_strategy_filter(matches, spec):
        groups[match.tier].append(match)
    return groups


def tier_counts(groups: Dict[FitTier, List[StrategyMatch]]) -> Dict[FitTier, int]:
    """
    Count matches in each tier.
    """
    return {tier: len(groups.get(tier, [])) for tier in TIER_ORDER}
