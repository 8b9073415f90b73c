"""
Match Engine Constants

Defines tier thresholds, sort modes, sentinels and paging defaults used by the
match engine. All values are deterministic with no AI/ML components.
"""

import os
from enum import Enum
from typing import Dict

# =============================================================================
# ROUNDS & SENTINELS
# =============================================================================

# Admission rounds in priority order (first present round is the "best" cutoff)
ROUND_FIELDS = ("round1", "round2", "round3")

ROUND_LABELS: Dict[str, str] = {
    "round1": "CAP Round 1",
    "round2": "CAP Round 2",
    "round3": "CAP Round 3",
}

UNKNOWN_CITY = "Unknown"

# Lowest-cutoff stand-in for matches with no cutoff at all
MISSING_CUTOFF_ASC = 100.0   # eligible / cutoff-asc: sorts last
MISSING_CUTOFF_DESC = 0.0    # cutoff-desc: sorts as if zero

# Retrieval-layer category value meaning "no category filter"
ALL_CATEGORIES = "ALL"

# =============================================================================
# SORT MODES
# =============================================================================

class SortMode(str, Enum):
    """Orderings offered by the ranker."""
    ELIGIBLE = "eligible"        # eligibility-first compound order
    CUTOFF_ASC = "cutoff-asc"
    CUTOFF_DESC = "cutoff-desc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    CITY_ASC = "city-asc"


# =============================================================================
# FIT TIERS
# =============================================================================

class FitTier(str, Enum):
    """Advisory classification of a student's score against a cutoff."""
    BEST_FIT = "best-fit"        # within a couple of points either way
    SAFE = "safe"                # comfortably above the cutoff
    LOW_QUALITY = "low-quality"  # far above, weak peer group
    DREAM = "dream"              # below the cutoff (and the 8-10 band)


# Display order for grouped output
TIER_ORDER = (FitTier.BEST_FIT, FitTier.SAFE, FitTier.LOW_QUALITY, FitTier.DREAM)

# Gap thresholds (student score - best cutoff)
BEST_FIT_MAX_ABS_GAP = 2.0
SAFE_GAP_RANGE = (3.0, 7.0)
LOW_QUALITY_MIN_GAP = 10.0

TIER_DETAILS: Dict[FitTier, Dict[str, str]] = {
    FitTier.BEST_FIT: {
        "title": "Best Fit",
        "description": "Perfect academic match. Highly recommended.",
    },
    FitTier.SAFE: {
        "title": "Safe Option",
        "description": "Easier to get in, still relevant to your level.",
    },
    FitTier.LOW_QUALITY: {
        "title": "Low Quality Match",
        "description": "Too easy. Eligible but not recommended due to low-quality peer group.",
    },
    FitTier.DREAM: {
        "title": "Dream Option",
        "description": "Cutoff is higher than your marks. Risky.",
    },
}

# =============================================================================
# PAGING & RETRIEVAL CONFIGURATION
# =============================================================================

DEFAULT_PAGE_SIZE = int(os.getenv("MATCH_PAGE_SIZE", "35"))
MAX_FETCH_ROWS = int(os.getenv("MATCH_FETCH_LIMIT", "5000"))

# Filter dimensions that accept toggling
FILTER_DIMENSIONS = ("cities", "programs", "categories")
