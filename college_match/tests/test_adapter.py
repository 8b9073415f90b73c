"""
Tests for the cutoffs table adapter against in-memory SQLite.
"""

import logging

from college_match.logic.adapter import fetch_cutoff_rows, fetch_filter_options
from college_match.logic.canonicalizer import canonicalize


def test_fetch_all_rows_ordered_by_first_round(seeded_db) -> None:
    rows = fetch_cutoff_rows(seeded_db)

    assert len(rows) == 7
    assert [r.round1 for r in rows] == [70.0, 89.0, 91.0, 92.0, 93.0, 95.5, None]
    assert rows[0].institution == "VIT"
    assert rows[0].institution_type == "Private"
    assert rows[0].year == 2024


def test_duplicate_key_keeps_lowest_first_round(seeded_db) -> None:
    matches = canonicalize(fetch_cutoff_rows(seeded_db), 90)
    pict_ce = [
        m for m in matches
        if m.institution == "PICT" and m.program == "Computer Engineering"
    ]

    assert len(matches) == 6
    assert len(pict_ce) == 1
    assert pict_ce[0].round1 == 91.0


def test_all_category_means_no_filter(seeded_db) -> None:
    assert len(fetch_cutoff_rows(seeded_db, categories="ALL")) == 7
    assert len(fetch_cutoff_rows(seeded_db, categories=["ALL", ""])) == 7


def test_category_and_type_prefilters(seeded_db) -> None:
    obc = fetch_cutoff_rows(seeded_db, categories=["OBC"])
    assert {r.category for r in obc} == {"OBC"}
    assert len(obc) == 2

    government = fetch_cutoff_rows(seeded_db, institution_types=["Government"])
    assert {r.institution for r in government} == {"COEP Technological University", "SPPU"}

    mumbai_it = fetch_cutoff_rows(
        seeded_db, programs=["Information Technology"], cities=["Mumbai"],
    )
    assert [r.institution for r in mumbai_it] == ["VJTI"]


def test_year_filter_and_limit(seeded_db) -> None:
    assert fetch_cutoff_rows(seeded_db, year=2023) == []
    assert len(fetch_cutoff_rows(seeded_db, limit=3)) == 3


def test_filter_options(seeded_db) -> None:
    options = fetch_filter_options(seeded_db)

    assert options["categories"] == ["GOPEN", "OBC"]
    assert options["cities"] == ["Mumbai", "Pune"]
    assert options["institution_types"] == ["Autonomous", "Government", "Private"]
    assert options["programs"] == [
        "Computer Engineering", "Information Technology", "Mechanical Engineering",
    ]


def test_reaching_fetch_limit_logs_warning(seeded_db, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="college_match.logic.adapter"):
        fetch_cutoff_rows(seeded_db, limit=7)
    assert "Fetch limit of 7 rows reached" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger="college_match.logic.adapter"):
        fetch_cutoff_rows(seeded_db, limit=8)
    assert "Fetch limit" not in caplog.text
