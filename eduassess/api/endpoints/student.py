# eduassess/api/endpoints/student.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eduassess.core.security import get_current_student
from eduassess.db.deps import get_db
from eduassess.models.user import User
from eduassess.schemas.assessment import AssessmentPublic
from eduassess.schemas.report import StudentStats
from eduassess.schemas.submission import (
    SubmissionCreate,
    SubmissionDetails,
    SubmissionPublic,
    SubmitResponse,
)
from eduassess.services import assessment_service, report_service, submission_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["student"])


@router.get("/assessments", response_model=List[AssessmentPublic])
def list_assessments(
    db: Session = Depends(get_db),
    current_student: User = Depends(get_current_student),
    skip: int = 0,
    limit: int = 100,
):
    """
    Available assessments; the answer key is stripped by the response model.
    """
    return assessment_service.list_assessments(db, skip=skip, limit=limit)


@router.get("/assessments/{assessment_id}/start", response_model=AssessmentPublic)
def start_assessment(
    assessment_id: int,
    db: Session = Depends(get_db),
    current_student: User = Depends(get_current_student),
):
    assessment = assessment_service.get_assessment(db, assessment_id)
    if not assessment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assessment not found")
    return assessment


@router.post("/assessments/{assessment_id}/submit", response_model=SubmitResponse)
def submit_assessment(
    assessment_id: int,
    obj_in: SubmissionCreate,
    db: Session = Depends(get_db),
    current_student: User = Depends(get_current_student),
):
    """
    Score the answers and store a new submission.

    Each call creates a new record, including repeat attempts.
    """
    assessment = assessment_service.get_assessment(db, assessment_id)
    if not assessment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assessment not found")

    try:
        sub = submission_service.create_submission(
            db, student=current_student, assessment=assessment, obj_in=obj_in
        )
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Error submitting assessment {assessment_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Error submitting assessment", "error": str(exc)},
        ) from exc

    return SubmitResponse(
        score=sub.score,
        status=sub.status,
        details=SubmissionDetails(
            total_questions=sub.total_questions,
            correct_answers=sub.correct_answers,
            time_spent=sub.time_spent,
            submission_id=sub.id,
        ),
    )


@router.get("/submissions", response_model=List[SubmissionPublic])
def list_my_submissions(
    db: Session = Depends(get_db),
    current_student: User = Depends(get_current_student),
    skip: int = 0,
    limit: int = 100,
):
    return submission_service.list_submissions_for_student(
        db, student=current_student, skip=skip, limit=limit
    )


@router.get("/submissions/latest", response_model=List[SubmissionPublic])
def list_my_latest_submissions(
    db: Session = Depends(get_db),
    current_student: User = Depends(get_current_student),
):
    """Most recent submission for each assessment the student has taken."""
    return submission_service.latest_submissions_for_student(db, student=current_student)


@router.get("/stats", response_model=StudentStats)
def my_stats(
    db: Session = Depends(get_db),
    current_student: User = Depends(get_current_student),
):
    return report_service.student_stats(db, student=current_student)
