"""
Eligibility Evaluator

Decides whether a student's aggregate clears a match's cutoffs.
A student is eligible when ANY present round cutoff is at or below the score.
"""

from typing import List, Optional, Tuple

from .contracts import EligibilityResult
from .constants import ROUND_FIELDS


def _is_present(cutoff: Optional[float]) -> bool:
    # Zero cutoffs carry no information; they are treated as a missing round
    return cutoff is not None and cutoff != 0


def present_cutoffs(match) -> List[Tuple[str, float]]:
    """
    Return (round_name, cutoff) for each present round, in round order.

    Works on any object exposing round1/round2/round3 attributes.
    """
    present = []
    for field in ROUND_FIELDS:
        value = getattr(match, field, None)
        if _is_present(value):
            present.append((field, float(value)))
    return present


def lowest_cutoff(match, default: float) -> float:
    """Minimum of the present round cutoffs, or `default` when there are none."""
    cutoffs = [value for _, value in present_cutoffs(match)]
    return min(cutoffs) if cutoffs else default


def first_cutoff(match) -> float:
    """First present cutoff in round1 -> round2 -> round3 order, 0 if none."""
    cutoffs = present_cutoffs(match)
    return cutoffs[0][1] if cutoffs else 0.0


def is_eligible(match, student_score: float) -> bool:
    """
    Check eligibility across all rounds.

    Args:
        match: Row or match exposing round cutoffs
        student_score: Student aggregate (not range-checked)

    Returns:
        True iff the score clears at least one present round cutoff
    """
    return any(student_score >= cutoff for _, cutoff in present_cutoffs(match))


def evaluate(match, student_score: float) -> EligibilityResult:
    """
    Evaluate eligibility and report the lowest cutoff the student clears.

    When the student clears no round, best_cutoff/cutoff_round are None.
    """
    cleared = [
        (field, cutoff)
        for field, cutoff in present_cutoffs(match)
        if student_score >= cutoff
    ]
    if not cleared:
        return EligibilityResult(eligible=False)

    field, cutoff = min(cleared, key=lambda item: item[1])
    return EligibilityResult(eligible=True, best_cutoff=cutoff, cutoff_round=field)
