# eduassess/models/submission.py
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Index,
    JSON,
)
from sqlalchemy.orm import relationship

from eduassess.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Submission(Base):
    """One attempt at an assessment. Rows are never updated after insert."""

    __tablename__ = "submissions"
    __table_args__ = (
        Index("ix_submissions_user_assessment_created", "user_id", "assessment_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    assessment_id = Column(
        Integer, ForeignKey("assessments.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # {"0": 1, "1": 3, ...}: question position -> selected option index
    answers = Column(JSON, nullable=False, default=dict)

    score = Column(Integer, nullable=False)  # 0-100
    # not_started / in_progress / completed / auto_submitted
    status = Column(String(20), nullable=False, default="not_started", index=True)
    time_spent = Column(Integer, nullable=False, default=0)  # seconds
    total_questions = Column(Integer, nullable=False)
    correct_answers = Column(Integer, nullable=False)

    # set in Python for sub-second ordering of repeated attempts
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    user = relationship("User", back_populates="submissions")
    assessment = relationship("Assessment", back_populates="submissions")
