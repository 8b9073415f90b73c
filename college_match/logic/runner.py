"""
Engine Runner

Orchestrates the match pipeline:
1. Accepts a MatchQuery (or a student score for the advisory view)
2. Fetches cutoff rows via adapter
3. Runs the match engine
4. Returns the page or strategy report

This is a pure orchestration layer - NO ranking, NO SQL, NO business logic.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from .adapter import fetch_cutoff_rows
from .contracts import MatchQuery, MatchPage, StrategyFilter, StrategyReport
from .engine import MatchEngine

logger = logging.getLogger(__name__)


def run_match_query(
    db: Session,
    query: MatchQuery,
    categories: Optional[Sequence[str]] = None,
    institution_types: Optional[Sequence[str]] = None,
    year: Optional[int] = None,
) -> MatchPage:
    """
    Main entry point for the browsing view.

    Args:
        db: Database session
        query: Browsing query
        categories: Retrieval-level category selection ("ALL" for none)
        institution_types: Retrieval-level college type selection
        year: Admission year

    Returns:
        MatchPage for the requested page
    """
    logger.info(f"🚀 Starting match pipeline for score {query.student_score}")
    logger.info(f"🎯 Categories: {list(categories or [])} | Sort: {query.sort_mode.value}")

    rows = fetch_cutoff_rows(
        db,
        categories=categories,
        institution_types=institution_types,
        year=year,
    )

    if not rows:
        logger.warning("⚠️ No cutoff rows found matching criteria")

    output = MatchEngine().browse(rows, query)

    logger.info(
        f"✅ Matches: {output.total_matches} | Eligible after filters: {output.eligible_count} "
        f"| Page {output.page.current_page}/{output.page.total_pages}"
    )
    return output


def run_strategy_report(
    db: Session,
    student_score: float,
    spec: Optional[StrategyFilter] = None,
    categories: Optional[Sequence[str]] = None,
    year: Optional[int] = None,
) -> StrategyReport:
    """
    Main entry point for the advisory view.

    Args:
        db: Database session
        student_score: Student aggregate
        spec: City/program/institution-type filter applied before grouping
        categories: Retrieval-level category selection
        year: Admission year

    Returns:
        StrategyReport grouped by fit tier
    """
    logger.info(f"🚀 Starting strategy pipeline for score {student_score}")

    rows = fetch_cutoff_rows(db, categories=categories, year=year)

    if not rows:
        logger.warning("⚠️ No cutoff rows found matching criteria")

    report = MatchEngine().strategy(rows, student_score, spec)

    logger.info(
        "📊 Tiers: " + ", ".join(f"{tier.value}={count}" for tier, count in report.counts.items())
    )
    return report
