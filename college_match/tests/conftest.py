"""
Shared fixtures: an in-memory cutoffs table seeded with a small catalog.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
from college_match.models import CutoffRecord


SEED_RECORDS = [
    # college, branch, category, cap1, cap2, cap3, city, type
    ("COEP Technological University", "Computer Engineering", "GOPEN", 95.5, 94.0, None, "Pune", "Government"),
    ("PICT", "Computer Engineering", "GOPEN", 92.0, 90.0, 88.0, "Pune", "Private"),
    ("VJTI", "Information Technology", "GOPEN", 93.0, None, None, "Mumbai", "Autonomous"),
    ("PICT", "Information Technology", "OBC", 89.0, 87.0, None, "Pune", "Private"),
    # duplicate key of the second row with a lower round 1 cutoff
    ("PICT", "Computer Engineering", "GOPEN", 91.0, None, None, "Pune", "Private"),
    ("SPPU", "Mechanical Engineering", "GOPEN", None, None, None, None, "Government"),
    ("VIT", "Mechanical Engineering", "OBC", 70.0, 60.0, None, "Pune", "Private"),
]


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def seeded_db(session_factory):
    db = session_factory()
    for college, branch, category, cap1, cap2, cap3, city, college_type in SEED_RECORDS:
        db.add(CutoffRecord(
            college_name=college,
            branch_name=branch,
            category=category,
            cap1_cutoff=cap1,
            cap2_cutoff=cap2,
            cap3_cutoff=cap3,
            city=city,
            college_type=college_type,
            year=2024,
        ))
    db.commit()
    try:
        yield db
    finally:
        db.close()
