"""
Match Logic Module

Provides the deterministic engine for matching a student's aggregate against
historical admission cutoffs.
"""

from .contracts import (
    CutoffRow,
    CanonicalMatch,
    StrategyMatch,
    EligibilityResult,
    FilterSpec,
    StrategyFilter,
    MatchQuery,
    Page,
    Facets,
    MatchPage,
    StrategyReport,
)
from .engine import MatchEngine, get_match_page, get_strategy_report
from .constants import FitTier, SortMode

__all__ = [
    # Main engine
    "MatchEngine",
    "get_match_page",
    "get_strategy_report",

    # Contracts
    "CutoffRow",
    "CanonicalMatch",
    "StrategyMatch",
    "EligibilityResult",
    "FilterSpec",
    "StrategyFilter",
    "MatchQuery",
    "Page",
    "Facets",
    "MatchPage",
    "StrategyReport",

    # Enums
    "FitTier",
    "SortMode",
]
