"""
Ranker

Orders match lists under one of several sort modes.
All orderings are stable: matches with equal keys keep their input order.
"""

from typing import Callable, Dict, List, Sequence

from .contracts import CanonicalMatch
from .constants import SortMode, MISSING_CUTOFF_ASC, MISSING_CUTOFF_DESC
from .eligibility import lowest_cutoff


def _preference_index(preferences: Sequence[str]) -> Callable[[str], int]:
    """
    Build a lookup from value to preference rank.

    Listed values rank by their first position; unlisted values all share the
    rank after the last listed one, so they tie with each other.
    """
    preferences = list(preferences or ())
    positions: Dict[str, int] = {}
    for index, value in enumerate(preferences):
        positions.setdefault(value, index)
    unlisted = len(preferences)

    def rank(value: str) -> int:
        return positions.get(value, unlisted)

    return rank


def eligibility_first_key(
    preferred_programs: Sequence[str] = (),
    preferred_cities: Sequence[str] = (),
) -> Callable[[CanonicalMatch], tuple]:
    """
    Compound key: eligible first, program preference, city preference,
    then ascending lowest cutoff (matches with no cutoff last).
    """
    program_rank = _preference_index(preferred_programs)
    city_rank = _preference_index(preferred_cities)

    def key(match: CanonicalMatch) -> tuple:
        return (
            not match.eligible,
            program_rank(match.program),
            city_rank(match.city),
            lowest_cutoff(match, MISSING_CUTOFF_ASC),
        )

    return key


def rank_matches(
    matches: Sequence[CanonicalMatch],
    sort_mode: SortMode = SortMode.ELIGIBLE,
    preferred_programs: Sequence[str] = (),
    preferred_cities: Sequence[str] = (),
) -> List[CanonicalMatch]:
    """
    Rank matches by the requested mode.

    Args:
        matches: Matches to order (not modified)
        sort_mode: One of SortMode
        preferred_programs: Program names in order of preference
        preferred_cities: City names in order of preference

    Returns:
        New sorted list
    """
    if matches is None:
        raise TypeError("matches must be a sequence, not None")

    mode = SortMode(sort_mode)

    if mode == SortMode.ELIGIBLE:
        return sorted(matches, key=eligibility_first_key(preferred_programs, preferred_cities))

    if mode == SortMode.CUTOFF_ASC:
        return sorted(matches, key=lambda m: lowest_cutoff(m, MISSING_CUTOFF_ASC))

    if mode == SortMode.CUTOFF_DESC:
        return sorted(
            matches,
            key=lambda m: lowest_cutoff(m, MISSING_CUTOFF_DESC),
            reverse=True,
        )

    if mode == SortMode.NAME_ASC:
        return sorted(matches, key=lambda m: m.institution.casefold())

    if mode == SortMode.NAME_DESC:
        return sorted(matches, key=lambda m: m.institution.casefold(), reverse=True)

    # SortMode.CITY_ASC
    return sorted(matches, key=lambda m: m.city.casefold())
