"""
Record Canonicalizer

Deduplicates raw cutoff rows into one row per (institution, program, category).
The first row seen for a key wins; later duplicates are dropped, never merged.
"""

from typing import Iterable, List, Tuple

from .contracts import CutoffRow, CanonicalMatch
from .projector import project_match


def canonical_key(row) -> Tuple[str, str, str]:
    """Exact, case-sensitive identity of a cutoff row."""
    return (row.institution, row.program, row.category)


def dedupe_rows(rows: Iterable) -> List:
    """
    Keep the first row for each canonical key, in first-occurrence order.

    Args:
        rows: CutoffRow or CanonicalMatch objects

    Returns:
        New list with one entry per key
    """
    if rows is None:
        raise TypeError("rows must be a sequence, not None")

    seen = set()
    unique = []
    for row in rows:
        key = canonical_key(row)
        if key in seen:
            continue
        seen.add(key)
        unique.append(row)
    return unique


def canonicalize(rows: Iterable[CutoffRow], student_score: float) -> List[CanonicalMatch]:
    """
    Deduplicate raw rows and project each into a CanonicalMatch.

    Args:
        rows: Raw cutoff rows (possibly with duplicates)
        student_score: Student aggregate used for eligibility

    Returns:
        One CanonicalMatch per unique key, in first-occurrence order
    """
    return [project_match(row, student_score) for row in dedupe_rows(rows)]
