"""
Filter Composer

Applies a conjunction of optional predicates to a match list and derives the
filter options (facets) a caller can offer. Filtering never reorders.
"""

from typing import Iterable, List, Sequence, Union

from .contracts import CanonicalMatch, FilterSpec, StrategyFilter, Facets
from .constants import FILTER_DIMENSIONS


def _in_set(value: str, allowed) -> bool:
    return not allowed or value in allowed


def matches_search(match: CanonicalMatch, search_term: str) -> bool:
    """Case-insensitive substring match on institution, program or city."""
    if not search_term:
        return True
    needle = search_term.lower()
    return (
        needle in match.institution.lower()
        or needle in match.program.lower()
        or needle in match.city.lower()
    )


def match_passes(match: CanonicalMatch, spec: FilterSpec) -> bool:
    """True iff the match satisfies every predicate in the spec."""
    if spec.eligible_only and not match.eligible:
        return False
    if not _in_set(match.city, spec.cities):
        return False
    if not _in_set(match.program, spec.programs):
        return False
    if not _in_set(match.category, spec.categories):
        return False
    return matches_search(match, spec.search_term)


def apply_filters(
    matches: Sequence[CanonicalMatch],
    spec: FilterSpec = None,
) -> List[CanonicalMatch]:
    """
    Keep matches passing all filters, preserving order.

    Args:
        matches: Ranked or unranked matches
        spec: Filter specification (None means no filtering)

    Returns:
        New filtered list
    """
    if matches is None:
        raise TypeError("matches must be a sequence, not None")
    if spec is None:
        return list(matches)
    return [m for m in matches if match_passes(m, spec)]


def apply_strategy_filter(matches: Sequence, spec: StrategyFilter = None) -> List:
    """Filter advisory matches by city, program and institution type."""
    if matches is None:
        raise TypeError("matches must be a sequence, not None")
    if spec is None:
        return list(matches)
    return [
        m for m in matches
        if _in_set(m.city, spec.cities)
        and _in_set(m.program, spec.programs)
        and _in_set(m.institution_type, spec.institution_types)
    ]


def count_eligible(matches: Iterable[CanonicalMatch]) -> int:
    return sum(1 for m in matches if m.eligible)


def collect_facets(matches: Iterable[CanonicalMatch]) -> Facets:
    """
    Distinct, sorted filter options present in a match list.
    """
    matches = list(matches)
    return Facets(
        cities=sorted({m.city for m in matches}),
        programs=sorted({m.program for m in matches}),
        categories=sorted({m.category for m in matches}),
        institution_types=sorted({m.institution_type for m in matches if m.institution_type}),
    )


# =============================================================================
# FILTER STATE HELPERS
# =============================================================================

def toggle_filter(
    spec: FilterSpec,
    dimension: str,
    value: Union[str, bool],
    multi: bool = False,
) -> FilterSpec:
    """
    Return a new FilterSpec with one dimension toggled.

    Single-select (default): "all" or "" clears the dimension, selecting the
    active value clears it, any other value replaces the active set.
    Multi-select: the value is added or removed from the set.
    `eligible_only` takes a boolean and `search_term` a string.
    """
    if dimension == "eligible_only":
        return spec.model_copy(update={"eligible_only": bool(value)})
    if dimension == "search_term":
        return spec.model_copy(update={"search_term": value or ""})
    if dimension not in FILTER_DIMENSIONS:
        raise ValueError(f"Unknown filter dimension: {dimension}")

    current = getattr(spec, dimension)

    if value in ("all", ""):
        updated = frozenset()
    elif multi:
        updated = current - {value} if value in current else current | {value}
    else:
        updated = frozenset() if value in current else frozenset([value])

    return spec.model_copy(update={dimension: updated})


def clear_filters() -> FilterSpec:
    return FilterSpec()
