# eduassess/services/recommendation_service.py
"""
Learning-path recommendations derived from a student's score history.

High scores (>= PASS_MARK) point the student to the next level of the same
engineering field; low scores point back to the same level for reinforcement.
Each criterion is then matched against the category table.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eduassess.models.category import Category
from eduassess.models.enums import LEVEL_ORDER
from eduassess.models.submission import Submission
from eduassess.models.user import User
from eduassess.services import submission_service
from eduassess.services.scoring_service import is_passing

logger = logging.getLogger(__name__)

NO_HISTORY_MESSAGE = "Complete some assessments to get recommendations."
RECOMMENDATIONS_MESSAGE = "Here are your personalized learning recommendations:"


@dataclass(frozen=True)
class ScoredAttempt:
    score: int
    engineering_field: str
    level: str


@dataclass(frozen=True)
class RecommendationCriterion:
    field: str
    level: str
    reason: str


def next_level(level: str) -> Optional[str]:
    """Following difficulty level, or None at expert (or for unknown levels)."""
    try:
        index = LEVEL_ORDER.index(level.lower())
    except ValueError:
        return None
    if index + 1 < len(LEVEL_ORDER):
        return LEVEL_ORDER[index + 1]
    return None


def build_criteria(attempts: Sequence[ScoredAttempt]) -> List[RecommendationCriterion]:
    """High-score criteria first, then low-score ones, each in input order."""
    high = [a for a in attempts if is_passing(a.score)]
    low = [a for a in attempts if not is_passing(a.score)]

    criteria: List[RecommendationCriterion] = []
    for attempt in high:
        upcoming = next_level(attempt.level)
        if upcoming is None:
            continue
        criteria.append(
            RecommendationCriterion(
                field=attempt.engineering_field,
                level=upcoming,
                reason=(
                    f"Based on your excellent score of {attempt.score}% "
                    f"in {attempt.level} level"
                ),
            )
        )
    for attempt in low:
        criteria.append(
            RecommendationCriterion(
                field=attempt.engineering_field,
                level=attempt.level,
                reason=f"To improve your score of {attempt.score}%",
            )
        )
    return criteria


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def find_matching_categories(db: Session, criterion: RecommendationCriterion) -> List[Category]:
    """Categories whose name contains the field (any case) at the given level."""
    pattern = f"%{_escape_like(criterion.field)}%"
    return (
        db.query(Category)
        .filter(
            Category.name.ilike(pattern, escape="\\"),
            Category.level == criterion.level,
        )
        .order_by(Category.id)
        .all()
    )


def to_recommendation(category: Category, reason: str) -> dict:
    return {
        "id": category.id,
        "title": category.name,
        "description": category.description,
        "engineering_field": category.engineering_field,
        "level": category.level,
        "topics": category.topics or [],
        "duration": category.recommended_duration,
        "video_resources": category.video_resources or [],
        "reason": reason,
    }


def attempts_from_submissions(submissions: Iterable[Submission]) -> List[ScoredAttempt]:
    return [
        ScoredAttempt(
            score=sub.score,
            engineering_field=sub.assessment.engineering_field,
            level=sub.assessment.level,
        )
        for sub in submissions
        if sub.assessment is not None
    ]


def recommend_for_criteria(
    db: Session, criteria: Sequence[RecommendationCriterion]
) -> List[dict]:
    # the same category may be reached through several criteria; every match is kept
    recommendations: List[dict] = []
    for criterion in criteria:
        try:
            matches = find_matching_categories(db, criterion)
        except SQLAlchemyError:
            logger.exception(
                f"Category lookup failed for {criterion.field} / {criterion.level}"
            )
            db.rollback()
            continue
        recommendations.extend(to_recommendation(c, criterion.reason) for c in matches)
    return recommendations


def get_recommendations(db: Session, *, student: User) -> tuple[str, List[dict]]:
    """Return ``(message, recommendations)`` for the student's scored history."""
    submissions = submission_service.list_scored_submissions_for_student(db, student=student)
    if not submissions:
        return NO_HISTORY_MESSAGE, []

    criteria = build_criteria(attempts_from_submissions(submissions))
    logger.info(
        f"Recommendations for user {student.id}: "
        f"{len(submissions)} submissions, {len(criteria)} criteria"
    )

    recommendations = recommend_for_criteria(db, criteria)
    return RECOMMENDATIONS_MESSAGE, recommendations
