from sqlalchemy import Column, Integer, String, Float, Index

from .base import Base


class CutoffRecord(Base):
    __tablename__ = "cutoffs"

    id = Column(Integer, primary_key=True)
    college_name = Column(String, nullable=False)
    branch_name = Column(String, nullable=False)
    category = Column(String, nullable=False)

    # Round cutoffs (percentages)
    cap1_cutoff = Column(Float)
    cap2_cutoff = Column(Float)
    cap3_cutoff = Column(Float)

    city = Column(String)
    college_type = Column(String)
    year = Column(Integer)

    __table_args__ = (
        Index("ix_cutoffs_category_branch", "category", "branch_name"),
    )
