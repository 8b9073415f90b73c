"""
Data Contracts for the Match Engine

Defines Pydantic models for raw cutoff rows (input), the immutable query object,
canonical/strategy matches and the browsing/advisory outputs.
These contracts are the API boundary for the match engine.
"""

from typing import List, Optional, Dict, FrozenSet, Any
from pydantic import BaseModel, Field, field_validator

from .constants import SortMode, FitTier, DEFAULT_PAGE_SIZE


def _to_string_set(value: Any) -> FrozenSet[str]:
    """Normalize a single value, an iterable or None into a set of strings."""
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset([value]) if value else frozenset()
    # pydantic only reports ValueError as a validation failure
    try:
        values = iter(value)
    except TypeError:
        raise ValueError(f"expected a string or a list of strings, got {type(value).__name__}")
    return frozenset(str(v) for v in values if v is not None and v != "")


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class CutoffRow(BaseModel):
    """
    Raw cutoff record as supplied by the data-retrieval layer.
    Rows are not assumed unique per (institution, program, category).
    """
    institution: str
    program: str
    category: str

    # Round cutoffs (absent when a round produced no cutoff)
    round1: Optional[float] = None
    round2: Optional[float] = None
    round3: Optional[float] = None

    city: Optional[str] = None
    institution_type: str = ""
    year: Optional[int] = None

    class Config:
        frozen = True


class FilterSpec(BaseModel):
    """
    Conjunction of optional predicates over a match list.
    Empty sets and an empty search term mean "no constraint".
    """
    search_term: str = ""
    cities: FrozenSet[str] = Field(default_factory=frozenset)
    programs: FrozenSet[str] = Field(default_factory=frozenset)
    categories: FrozenSet[str] = Field(default_factory=frozenset)
    eligible_only: bool = False

    @field_validator("cities", "programs", "categories", mode="before")
    @classmethod
    def _normalize_sets(cls, value):
        return _to_string_set(value)

    @field_validator("search_term", mode="before")
    @classmethod
    def _normalize_search(cls, value):
        return value or ""

    class Config:
        frozen = True


class StrategyFilter(BaseModel):
    """Pre-grouping filter for the advisory view."""
    cities: FrozenSet[str] = Field(default_factory=frozenset)
    programs: FrozenSet[str] = Field(default_factory=frozenset)
    institution_types: FrozenSet[str] = Field(default_factory=frozenset)

    @field_validator("cities", "programs", "institution_types", mode="before")
    @classmethod
    def _normalize_sets(cls, value):
        return _to_string_set(value)

    class Config:
        frozen = True


class MatchQuery(BaseModel):
    """
    Immutable browsing query.
    Every call to the engine takes one of these; the engine holds no state.
    """
    student_score: float
    preferred_programs: List[str] = Field(default_factory=list)
    preferred_cities: List[str] = Field(default_factory=list)
    filters: FilterSpec = Field(default_factory=FilterSpec)
    sort_mode: SortMode = SortMode.ELIGIBLE

    # Paging
    page: int = 1
    current_page: int = 1  # page the caller is on; kept when `page` is out of range
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)

    class Config:
        frozen = True

    def with_filters(self, filters: FilterSpec) -> "MatchQuery":
        """New query with different filters; paging restarts at page 1."""
        return self.model_copy(update={"filters": filters, "page": 1, "current_page": 1})

    def with_sort(self, sort_mode: SortMode) -> "MatchQuery":
        """New query with a different ordering; paging restarts at page 1."""
        return self.model_copy(
            update={"sort_mode": SortMode(sort_mode), "page": 1, "current_page": 1}
        )

    def with_page(self, page: int, current_page: Optional[int] = None) -> "MatchQuery":
        """New query requesting another page of the same result set."""
        if current_page is None:
            current_page = self.page
        return self.model_copy(update={"page": page, "current_page": current_page})


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class EligibilityResult(BaseModel):
    """Eligibility of one match, with the lowest cutoff the student clears."""
    eligible: bool
    best_cutoff: Optional[float] = None
    cutoff_round: Optional[str] = None


class CanonicalMatch(BaseModel):
    """
    One match per unique (institution, program, category).
    """
    institution: str
    city: str
    program: str
    category: str
    institution_type: str = ""

    round1: Optional[float] = None
    round2: Optional[float] = None
    round3: Optional[float] = None

    eligible: bool = False

    class Config:
        frozen = True


class StrategyMatch(CanonicalMatch):
    """
    Canonical match annotated with its fit tier for one student score.
    """
    best_cutoff: float = 0.0
    cutoff_gap: float = 0.0
    quality_ratio: float = 0.0
    tier: FitTier = FitTier.DREAM


class Page(BaseModel):
    """One page of an ordered, filtered match list with its metadata."""
    items: List[CanonicalMatch] = Field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    total_count: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    # 1-based positions of the first/last item shown (0 when empty)
    first_index: int = 0
    last_index: int = 0

    @property
    def has_results(self) -> bool:
        return self.total_count > 0


class Facets(BaseModel):
    """Distinct filter options present in a match list."""
    cities: List[str] = Field(default_factory=list)
    programs: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    institution_types: List[str] = Field(default_factory=list)


class MatchPage(BaseModel):
    """
    Output of the browsing view.
    """
    page: Page
    sort_mode: SortMode = SortMode.ELIGIBLE

    # Summary statistics
    total_matches: int = 0     # canonical matches before filtering
    eligible_count: int = 0    # eligible matches after filtering

    facets: Facets = Field(default_factory=Facets)
    warnings: List[str] = Field(default_factory=list)


class StrategyReport(BaseModel):
    """
    Output of the advisory view: matches grouped by fit tier.
    """
    student_score: float
    groups: Dict[FitTier, List[StrategyMatch]] = Field(default_factory=dict)
    counts: Dict[FitTier, int] = Field(default_factory=dict)
    total: int = 0
    facets: Facets = Field(default_factory=Facets)
    warnings: List[str] = Field(default_factory=list)
