# eduassess/services/assessment_service.py
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from eduassess.models.assessment import Assessment, Question
from eduassess.models.user import User
from eduassess.schemas.assessment import (
    AssessmentCreate,
    AssessmentUpdate,
    QuestionCreate,
)


def _build_questions(questions: List[QuestionCreate]) -> List[Question]:
    return [
        Question(
            position=position,
            question_text=q.question_text,
            options=list(q.options),
            correct_answer=q.correct_answer,
        )
        for position, q in enumerate(questions)
    ]


def create_assessment(
    db: Session,
    *,
    admin: User,
    obj_in: AssessmentCreate,
) -> Assessment:
    db_obj = Assessment(
        title=obj_in.title,
        engineering_field=obj_in.engineering_field.value,
        level=obj_in.level.value,
        duration=obj_in.duration,
        created_by=admin.id,
        questions=_build_questions(obj_in.questions),
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj


def get_assessment(db: Session, assessment_id: int) -> Optional[Assessment]:
    return db.get(Assessment, assessment_id)


def list_assessments(
    db: Session,
    *,
    skip: int = 0,
    limit: int = 100,
) -> List[Assessment]:
    return (
        db.query(Assessment)
        .options(selectinload(Assessment.questions))
        .order_by(Assessment.created_at.desc(), Assessment.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def update_assessment(
    db: Session,
    *,
    db_obj: Assessment,
    obj_in: AssessmentUpdate,
) -> Assessment:
    """
    Partial update. A new question list replaces the old one; submissions
    already stored keep the question count they were scored with.
    """
    update_data = obj_in.model_dump(exclude_unset=True, exclude={"questions"})
    for field, value in update_data.items():
        if value is None:
            continue
        setattr(db_obj, field, getattr(value, "value", value))

    if obj_in.questions is not None:
        db_obj.questions.clear()
        db.flush()
        db_obj.questions.extend(_build_questions(obj_in.questions))

    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj


def delete_assessment(db: Session, *, db_obj: Assessment) -> None:
    # questions, submissions and resources are removed with the assessment
    db.delete(db_obj)
    db.commit()
