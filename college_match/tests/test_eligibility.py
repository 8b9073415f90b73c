"""
Tests for the eligibility evaluator.
"""

from college_match.logic.contracts import CutoffRow
from college_match.logic.eligibility import (
    evaluate,
    first_cutoff,
    is_eligible,
    lowest_cutoff,
    present_cutoffs,
)


def row(round1=None, round2=None, round3=None) -> CutoffRow:
    return CutoffRow(
        institution="InstB",
        program="IT",
        category="OBC",
        round1=round1,
        round2=round2,
        round3=round3,
    )


def test_eligible_through_any_round() -> None:
    """A student clearing only a later round is still eligible."""
    assert is_eligible(row(round2=70), 75) is True
    assert is_eligible(row(round1=90, round2=70), 75) is True
    assert is_eligible(row(round1=90, round2=85, round3=74), 75) is True


def test_score_equal_to_cutoff_is_eligible() -> None:
    assert is_eligible(row(round1=80), 80) is True
    assert is_eligible(row(round1=80), 79.99) is False


def test_no_cutoffs_is_never_eligible() -> None:
    assert is_eligible(row(), 100) is False
    assert is_eligible(row(), 0) is False


def test_zero_cutoff_counts_as_missing_round() -> None:
    assert present_cutoffs(row(round1=0, round2=65)) == [("round2", 65.0)]
    assert is_eligible(row(round1=0), 50) is False


def test_eligibility_is_monotonic_in_score() -> None:
    match = row(round1=88, round2=81.5, round3=79)
    flags = [is_eligible(match, score / 2) for score in range(0, 201)]
    first_true = flags.index(True)
    assert all(flags[first_true:])
    assert not any(flags[:first_true])


def test_out_of_range_scores_are_accepted() -> None:
    assert is_eligible(row(round1=60), -5) is False
    assert is_eligible(row(round1=60), 250) is True


def test_evaluate_reports_lowest_cleared_cutoff() -> None:
    result = evaluate(row(round1=70, round2=60), 65)
    assert result.eligible is True
    assert result.best_cutoff == 60
    assert result.cutoff_round == "round2"


def test_evaluate_not_eligible() -> None:
    result = evaluate(row(round1=70, round2=60), 50)
    assert result.eligible is False
    assert result.best_cutoff is None
    assert result.cutoff_round is None


def test_first_and_lowest_cutoff() -> None:
    match = row(round1=70, round2=60)
    assert first_cutoff(match) == 70
    assert lowest_cutoff(match, 100) == 60

    assert first_cutoff(row(round2=64, round3=61)) == 64
    assert first_cutoff(row()) == 0
    assert lowest_cutoff(row(), 100) == 100
    assert lowest_cutoff(row(), 0) == 0
