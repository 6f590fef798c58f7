# eduassess/services/submission_service.py
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from eduassess.models.assessment import Assessment
from eduassess.models.enums import SubmissionStatus
from eduassess.models.submission import Submission
from eduassess.models.user import User
from eduassess.schemas.submission import SubmissionCreate
from eduassess.services.scoring_service import compute_score, determine_status

logger = logging.getLogger(__name__)

SCORED_STATUSES = (
    SubmissionStatus.COMPLETED.value,
    SubmissionStatus.AUTO_SUBMITTED.value,
)


def create_submission(
    db: Session,
    *,
    student: User,
    assessment: Assessment,
    obj_in: SubmissionCreate,
) -> Submission:
    """
    Score the answers against the assessment and store one new submission.

    Every call inserts a new row; earlier attempts are never touched.
    """
    result = compute_score(
        [q.correct_answer for q in assessment.questions],
        obj_in.answers,
    )

    # the countdown runs client-side only; late submissions are accepted
    allowed_seconds = assessment.duration * 60
    if obj_in.time_spent > allowed_seconds:
        logger.warning(
            f"Late submission for assessment {assessment.id} by user {student.id}: "
            f"{obj_in.time_spent}s spent, limit {allowed_seconds}s"
        )

    submission = Submission(
        user_id=student.id,
        assessment_id=assessment.id,
        answers={str(k): v for k, v in obj_in.answers.items()},
        score=result.score,
        status=determine_status(obj_in.is_auto_submit),
        time_spent=obj_in.time_spent,
        total_questions=result.total_questions,
        correct_answers=result.correct_answers,
    )
    student.last_active = datetime.now(timezone.utc)

    db.add(submission)
    db.add(student)
    db.commit()
    db.refresh(submission)

    logger.info(
        f"Submission {submission.id}: user={student.id} assessment={assessment.id} "
        f"score={submission.score} status={submission.status}"
    )
    return submission


def list_submissions_for_student(
    db: Session,
    *,
    student: User,
    skip: int = 0,
    limit: int = 100,
) -> List[Submission]:
    return (
        db.query(Submission)
        .options(joinedload(Submission.assessment))
        .filter(Submission.user_id == student.id)
        .order_by(Submission.created_at.desc(), Submission.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def list_scored_submissions_for_student(db: Session, *, student: User) -> List[Submission]:
    """Completed and auto-submitted attempts, newest first."""
    return (
        db.query(Submission)
        .options(joinedload(Submission.assessment))
        .filter(
            Submission.user_id == student.id,
            Submission.status.in_(SCORED_STATUSES),
        )
        .order_by(Submission.created_at.desc(), Submission.id.desc())
        .all()
    )


def latest_submissions_for_student(db: Session, *, student: User) -> List[Submission]:
    """
    The most recent submission per assessment for one student.

    Resolved in a single query: rows are ranked per assessment by
    ``created_at`` (then ``id``) and only the first of each group is kept.
    """
    ranked = (
        select(
            Submission.id.label("submission_id"),
            func.row_number()
            .over(
                partition_by=Submission.assessment_id,
                order_by=(Submission.created_at.desc(), Submission.id.desc()),
            )
            .label("row_rank"),
        )
        .where(Submission.user_id == student.id)
        .subquery()
    )

    return (
        db.query(Submission)
        .options(joinedload(Submission.assessment))
        .join(ranked, ranked.c.submission_id == Submission.id)
        .filter(ranked.c.row_rank == 1)
        .order_by(Submission.created_at.desc(), Submission.id.desc())
        .all()
    )
