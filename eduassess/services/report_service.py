# eduassess/services/report_service.py
from datetime import datetime, timedelta, timezone

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from eduassess.models.assessment import Assessment
from eduassess.models.category import Category
from eduassess.models.enums import Role
from eduassess.models.submission import Submission
from eduassess.models.user import User
from eduassess.services.scoring_service import PASS_MARK, percentage

ACTIVE_USER_WINDOW = timedelta(days=30)


def _round(value) -> int | None:
    if value is None:
        return None
    return int(float(value) + 0.5)


def assessment_stats(db: Session) -> list[dict]:
    """Per-assessment submission count, mean score and pass rate."""
    passed = func.sum(case((Submission.score >= PASS_MARK, 1), else_=0))
    rows = (
        db.query(
            Assessment.id,
            Assessment.title,
            func.count(Submission.id).label("submissions"),
            func.avg(Submission.score).label("average_score"),
            passed.label("passed"),
        )
        .outerjoin(Submission, Submission.assessment_id == Assessment.id)
        .group_by(Assessment.id, Assessment.title)
        .order_by(Assessment.id)
        .all()
    )

    stats = []
    for row in rows:
        count = row.submissions or 0
        stats.append(
            {
                "id": row.id,
                "title": row.title,
                "submissions": count,
                "average_score": _round(row.average_score),
                # an assessment without submissions has a pass rate of 0
                "pass_rate": percentage(row.passed or 0, max(count, 1)),
            }
        )
    return stats


def platform_overview(db: Session) -> dict:
    total, average, highest, lowest = db.query(
        func.count(Submission.id),
        func.avg(Submission.score),
        func.max(Submission.score),
        func.min(Submission.score),
    ).one()

    return {
        "total_submissions": total or 0,
        "average_score": _round(average) or 0,
        "highest_score": highest or 0,
        "lowest_score": lowest or 0,
        "assessment_stats": assessment_stats(db),
    }


def platform_stats(db: Session, *, now: datetime | None = None) -> dict:
    now = now or datetime.now(timezone.utc)

    total_students = db.query(func.count(User.id)).filter(User.role == Role.STUDENT.value).scalar()
    active_courses = db.query(func.count(Category.id)).scalar()

    total_submissions, passed = db.query(
        func.count(Submission.id),
        func.sum(case((Submission.score >= PASS_MARK, 1), else_=0)),
    ).one()
    completion_rate = percentage(passed or 0, total_submissions) if total_submissions else 0

    active_users = (
        db.query(func.count(User.id))
        .filter(User.last_active >= now - ACTIVE_USER_WINDOW)
        .scalar()
    )

    return {
        "total_students": total_students or 0,
        "active_courses": active_courses or 0,
        "completion_rate": f"{completion_rate}%",
        "active_users": active_users or 0,
    }


def student_stats(db: Session, *, student: User) -> dict:
    count, average, seconds = (
        db.query(
            func.count(Submission.id),
            func.avg(Submission.score),
            func.sum(Submission.time_spent),
        )
        .filter(Submission.user_id == student.id)
        .one()
    )

    return {
        "total_assessments": db.query(func.count(Assessment.id)).scalar() or 0,
        "completed_assessments": count or 0,
        "average_score": _round(average) or 0,
        "time_spent": _round((seconds or 0) / 3600) or 0,
    }
