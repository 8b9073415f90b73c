"""
Match Projector

Maps canonical rows plus their eligibility into the output match records.
"""

from typing import Optional, Tuple

from .contracts import CutoffRow, CanonicalMatch, StrategyMatch
from .constants import UNKNOWN_CITY, FitTier
from .eligibility import is_eligible, first_cutoff


def _cutoff_or_none(value: Optional[float]) -> Optional[float]:
    if value is None or value == 0:
        return None
    return float(value)


def project_match(row: CutoffRow, student_score: float) -> CanonicalMatch:
    """
    Build a CanonicalMatch from a raw row for one student score.

    City falls back to "Unknown"; zero cutoffs become missing rounds.
    """
    return CanonicalMatch(
        institution=row.institution,
        city=row.city or UNKNOWN_CITY,
        program=row.program,
        category=row.category,
        institution_type=row.institution_type or "",
        round1=_cutoff_or_none(row.round1),
        round2=_cutoff_or_none(row.round2),
        round3=_cutoff_or_none(row.round3),
        eligible=is_eligible(row, student_score),
    )


def cutoff_metrics(match: CanonicalMatch, student_score: float) -> Tuple[float, float, float]:
    """
    Return (best_cutoff, cutoff_gap, quality_ratio) for a match.
    """
    best_cutoff = first_cutoff(match)
    gap = student_score - best_cutoff
    ratio = student_score / best_cutoff if best_cutoff > 0 else 0.0
    return best_cutoff, gap, ratio


def project_strategy(
    match: CanonicalMatch,
    metrics: Tuple[float, float, float],
    tier: FitTier,
) -> StrategyMatch:
    """
    Annotate a canonical match with its fit tier.

    `metrics` is the (best_cutoff, cutoff_gap, quality_ratio) tuple from
    cutoff_metrics, computed once by the caller.
    """
    best_cutoff, gap, ratio = metrics
    return StrategyMatch(
        **match.model_dump(include=set(CanonicalMatch.model_fields)),
        best_cutoff=best_cutoff,
        cutoff_gap=gap,
        quality_ratio=ratio,
        tier=tier,
    )
