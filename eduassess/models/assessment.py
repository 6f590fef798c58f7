# eduassess/models/assessment.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from eduassess.db.base import Base


class Assessment(Base):
    __tablename__ = "assessments"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    engineering_field = Column(String(100), nullable=False, index=True)
    level = Column(String(20), nullable=False, index=True)
    duration = Column(Integer, nullable=False)  # minutes
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    questions = relationship(
        "Question",
        back_populates="assessment",
        order_by="Question.position",
        cascade="all, delete-orphan",
    )
    submissions = relationship(
        "Submission",
        back_populates="assessment",
        cascade="all, delete-orphan",
    )
    resources = relationship(
        "Resource",
        back_populates="assessment",
        cascade="all, delete-orphan",
    )


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    assessment_id = Column(
        Integer, ForeignKey("assessments.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False)

    question_text = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)  # list of option strings
    correct_answer = Column(Integer, nullable=False)  # index into options

    assessment = relationship("Assessment", back_populates="questions")
