"""
Data Adapter for the Match Engine

Reads cutoff rows from the `cutoffs` table and transforms them into CutoffRow
contracts for the engine.

This is a pure READ + TRANSFORM layer:
- NO eligibility logic
- NO ranking/classification
- NO DB writes
"""

import logging
from typing import List, Dict, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import CutoffRecord
from .contracts import CutoffRow
from .constants import ALL_CATEGORIES, MAX_FETCH_ROWS

logger = logging.getLogger(__name__)


def _clean_values(values: Optional[Sequence[str]]) -> List[str]:
    """Drop empty entries and the ALL sentinel from a filter list."""
    if not values:
        return []
    if isinstance(values, str):
        values = [values]
    return [v for v in values if v and v != ALL_CATEGORIES]


def _to_cutoff_row(record: CutoffRecord) -> CutoffRow:
    """
    Convert a cutoffs table row to the engine's input contract.
    """
    return CutoffRow(
        institution=record.college_name or "",
        program=record.branch_name or "",
        category=record.category or "",
        round1=record.cap1_cutoff,
        round2=record.cap2_cutoff,
        round3=record.cap3_cutoff,
        city=record.city,
        institution_type=record.college_type or "",
        year=record.year,
    )


def fetch_cutoff_rows(
    db: Session,
    categories: Optional[Sequence[str]] = None,
    programs: Optional[Sequence[str]] = None,
    institution_types: Optional[Sequence[str]] = None,
    cities: Optional[Sequence[str]] = None,
    year: Optional[int] = None,
    limit: int = MAX_FETCH_ROWS,
) -> List[CutoffRow]:
    """
    Fetch cutoff rows with optional SQL-level pre-filters.

    Pre-filtering only narrows the catalog; the engine is correct on the full
    set too. A category of "ALL" means no category filter.

    Rows are ordered by round 1 cutoff ascending (then id), so the canonical
    row kept for duplicate keys is the one with the lowest round 1 cutoff.

    Args:
        db: Database session
        categories: Admission categories to keep
        programs: Branch/program names to keep
        institution_types: College types to keep
        cities: Cities to keep
        year: Admission year
        limit: Max rows to fetch

    Returns:
        List of CutoffRow
    """
    query = select(CutoffRecord)

    categories = _clean_values(categories)
    if categories:
        query = query.where(CutoffRecord.category.in_(categories))

    programs = _clean_values(programs)
    if programs:
        query = query.where(CutoffRecord.branch_name.in_(programs))

    institution_types = _clean_values(institution_types)
    if institution_types:
        query = query.where(CutoffRecord.college_type.in_(institution_types))

    cities = _clean_values(cities)
    if cities:
        query = query.where(CutoffRecord.city.in_(cities))

    if year is not None:
        query = query.where(CutoffRecord.year == year)

    query = query.order_by(
        CutoffRecord.cap1_cutoff.asc().nulls_last(),
        CutoffRecord.id.asc(),
    ).limit(limit)

    records = db.execute(query).scalars().all()
    logger.info(f"📥 Cutoff rows fetched: {len(records)}")
    if len(records) == limit:
        logger.warning(
            f"⚠️ Fetch limit of {limit} rows reached; catalog may be truncated "
            f"before deduplication"
        )

    return [_to_cutoff_row(record) for record in records]


def _distinct(db: Session, column) -> List[str]:
    values = db.execute(select(column).distinct()).scalars().all()
    return sorted({v.strip() for v in values if v and v.strip()})


def fetch_filter_options(db: Session) -> Dict[str, List[str]]:
    """
    Distinct filter values available in the catalog.
    """
    return {
        "categories": _distinct(db, CutoffRecord.category),
        "programs": _distinct(db, CutoffRecord.branch_name),
        "institution_types": _distinct(db, CutoffRecord.college_type),
        "cities": _distinct(db, CutoffRecord.city),
    }
