"""
College Match API Routes

Exposes the match engine via REST API.
Endpoints: POST /college-matches, POST /college-matches/strategy,
GET /college-matches/filters
"""

import logging
from typing import Optional, List, Dict, Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError, field_validator
from sqlalchemy.orm import Session

from db import get_db
from .logic.adapter import fetch_filter_options
from .logic.constants import TIER_DETAILS
from .logic.contracts import MatchQuery, MatchPage, StrategyFilter, StrategyReport
from .logic.engine import MatchEngine
from .logic.runner import run_match_query, run_strategy_report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/college-matches", tags=["college-matches"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

def _as_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    return list(value)


class MatchRequest(BaseModel):
    """Request body for the browsing endpoint."""
    query: Dict[str, Any] = Field(
        ...,
        description="Browsing query: score, preferences, filters, sort and page",
        examples=[{
            "student_score": 82.5,
            "preferred_programs": ["Computer Engineering", "Information Technology"],
            "preferred_cities": ["Pune", "Mumbai"],
            "filters": {"eligible_only": True, "search_term": ""},
            "sort_mode": "eligible",
            "page": 1,
        }],
    )
    categories: List[str] = Field(
        default_factory=list,
        description="Admission categories to fetch; a single value or 'ALL' is accepted",
    )
    institution_types: List[str] = Field(default_factory=list)
    year: Optional[int] = None

    @field_validator("categories", "institution_types", mode="before")
    @classmethod
    def _wrap_single(cls, value):
        return _as_list(value)


class StrategyRequest(BaseModel):
    """Request body for the advisory endpoint."""
    student_score: float
    categories: List[str] = Field(default_factory=list)
    filters: Dict[str, Any] = Field(
        default_factory=dict,
        description="Optional cities / programs / institution_types",
    )
    year: Optional[int] = None

    @field_validator("categories", mode="before")
    @classmethod
    def _wrap_single(cls, value):
        return _as_list(value)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Get matching colleges for a score")
@router.post("/", summary="Get matching colleges for a score", include_in_schema=False)
def get_college_matches(
    request: MatchRequest,
    db: Session = Depends(get_db),
):
    """
    Rank, filter and paginate college matches for a student aggregate.

    **Request Body:**
    - `query`: score, preferred programs/cities, filters, sort mode, page
    - `categories`: admission categories to fetch ("ALL" for every category)
    - `institution_types`: college types to fetch
    - `year`: admission year

    **Response:**
    - One page of matches, eligible first by default
    - Pagination metadata and filter options
    """
    try:
        try:
            query = MatchQuery(**request.query)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=f"Invalid match query: {str(e)}")

        output = run_match_query(
            db,
            query,
            categories=request.categories,
            institution_types=request.institution_types,
            year=request.year,
        )
        return _serialize_page(output)

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("College match request failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.post("/strategy", summary="Get fit-tier strategy report")
def get_strategy_report(
    request: StrategyRequest,
    db: Session = Depends(get_db),
):
    """
    Group college matches into best-fit, safe, low-quality and dream tiers.
    """
    try:
        try:
            spec = StrategyFilter(**request.filters)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=f"Invalid strategy filters: {str(e)}")

        report = run_strategy_report(
            db,
            request.student_score,
            spec=spec,
            categories=request.categories,
            year=request.year,
        )
        return _serialize_report(report)

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Strategy report request failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("/filters", summary="Available filter options")
def get_filter_options(db: Session = Depends(get_db)):
    """List distinct categories, programs, college types and cities."""
    return fetch_filter_options(db)


def _serialize_page(output: MatchPage) -> Dict[str, Any]:
    """Convert MatchPage to a JSON-serializable dict."""
    page = output.page
    return {
        "matches": [m.model_dump(mode="json") for m in page.items],
        "pagination": {
            "current_page": page.current_page,
            "total_pages": page.total_pages,
            "total_count": page.total_count,
            "page_size": page.page_size,
            "first_index": page.first_index,
            "last_index": page.last_index,
        },
        "summary": {
            "total_matches": output.total_matches,
            "eligible_count": output.eligible_count,
            "sort_mode": output.sort_mode.value,
        },
        "facets": output.facets.model_dump(),
        "warnings": output.warnings,
    }


def _serialize_report(report: StrategyReport) -> Dict[str, Any]:
    """Convert StrategyReport to a JSON-serializable dict keyed by tier value."""
    return {
        "student_score": report.student_score,
        "total": report.total,
        "counts": {tier.value: count for tier, count in report.counts.items()},
        "groups": {
            tier.value: [m.model_dump(mode="json") for m in matches]
            for tier, matches in report.groups.items()
        },
        "tiers": {tier.value: details for tier, details in TIER_DETAILS.items()},
        "facets": report.facets.model_dump(),
        "warnings": report.warnings,
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Match engine health check")
def health_check():
    """Check if the match engine is operational."""
    return {"status": "ok", "engine": "college-match", "version": MatchEngine.version}
