"""
Match Engine

Main orchestrator that combines the match components into two pipelines.
This is the primary entry point for browsing and advisory results.
"""

import logging
from typing import Iterable, Optional

from .contracts import (
    CutoffRow,
    MatchQuery,
    MatchPage,
    StrategyFilter,
    StrategyReport,
)
from .canonicalizer import canonicalize
from .ranker import rank_matches
from .filters import apply_filters, collect_facets, count_eligible
from .paginator import paginate
from .classifier import build_strategy_matches, group_by_tier, tier_counts

logger = logging.getLogger(__name__)

NO_CUTOFFS_WARNING = "No programs found matching your criteria."
NO_FILTER_MATCH_WARNING = "No programs match the selected filters. Consider clearing some filters."


class MatchEngine:
    """
    Stateless match engine.

    Browsing pipeline:
    1. Canonicalization - Deduplicate rows and evaluate eligibility
    2. Ranking - Order by the query's sort mode and preferences
    3. Filtering - Apply the query's filter spec
    4. Pagination - Slice out the requested page

    Advisory pipeline:
    1. Canonicalization
    2. Classification - Tag every match with a fit tier
    3. Grouping - Filter and bucket by tier
    """

    version = "1.0.0"

    def browse(self, rows: Iterable[CutoffRow], query: MatchQuery) -> MatchPage:
        """
        Produce one page of ranked, filtered matches.

        Args:
            rows: Raw cutoff rows (duplicates allowed)
            query: Immutable browsing query

        Returns:
            MatchPage with items, page metadata, facets and warnings
        """
        matches = canonicalize(rows, query.student_score)

        ranked = rank_matches(
            matches,
            query.sort_mode,
            preferred_programs=query.preferred_programs,
            preferred_cities=query.preferred_cities,
        )
        filtered = apply_filters(ranked, query.filters)
        page = paginate(filtered, query.page, query.page_size, query.current_page)

        logger.debug(
            "Browse: %d matches, %d after filters, page %d/%d",
            len(matches), len(filtered), page.current_page, page.total_pages,
        )

        warnings = []
        if not matches:
            warnings.append(NO_CUTOFFS_WARNING)
        elif not filtered:
            warnings.append(NO_FILTER_MATCH_WARNING)

        return MatchPage(
            page=page,
            sort_mode=query.sort_mode,
            total_matches=len(matches),
            eligible_count=count_eligible(filtered),
            facets=collect_facets(matches),
            warnings=warnings,
        )

    def strategy(
        self,
        rows: Iterable[CutoffRow],
        student_score: float,
        spec: Optional[StrategyFilter] = None,
    ) -> StrategyReport:
        """
        Group matches into fit tiers for one student score.

        Args:
            rows: Raw cutoff rows (duplicates allowed)
            student_score: Student aggregate
            spec: Optional city/program/institution-type filter

        Returns:
            StrategyReport with all four tiers
        """
        matches = canonicalize(rows, student_score)
        classified = build_strategy_matches(matches, student_score)
        groups = group_by_tier(classified, spec)
        counts = tier_counts(groups)

        logger.debug("Strategy: %d matches, tiers %s", len(classified), counts)

        warnings = []
        if not matches:
            warnings.append(NO_CUTOFFS_WARNING)

        return StrategyReport(
            student_score=student_score,
            groups=groups,
            counts=counts,
            total=sum(counts.values()),
            facets=collect_facets(matches),
            warnings=warnings,
        )

    def browse_from_dict(self, rows: Iterable[CutoffRow], query_data: dict) -> MatchPage:
        """
        Convenience method for API integration.
        """
        return self.browse(rows, MatchQuery(**query_data))


# Convenience functions for simple usage
def get_match_page(rows: Iterable[CutoffRow], query: MatchQuery) -> MatchPage:
    return MatchEngine().browse(rows, query)


def get_strategy_report(
    rows: Iterable[CutoffRow],
    student_score: float,
    spec: Optional[StrategyFilter] = None,
) -> StrategyReport:
    return MatchEngine().strategy(rows, student_score, spec)
