# eduassess/schemas/submission.py
from datetime import datetime
from typing import Any

from pydantic import Field

from eduassess.schemas.assessment import AssessmentSummary
from eduassess.schemas.common import CamelModel


class SubmissionCreate(CamelModel):
    # question position -> selected option index. Values are kept as sent
    # (no coercion) so scoring can compare them strictly; null means unanswered.
    answers: dict[int, Any] = Field(default_factory=dict)
    time_spent: int = Field(default=0, ge=0)  # seconds
    is_auto_submit: bool = False


class SubmissionDetails(CamelModel):
    total_questions: int
    correct_answers: int
    time_spent: int
    submission_id: int


class SubmitResponse(CamelModel):
    success: bool = True
    message: str = "Assessment submitted successfully"
    score: int
    status: str
    details: SubmissionDetails


class SubmissionPublic(CamelModel):
    id: int
    assessment_id: int
    assessment: AssessmentSummary | None = None
    score: int
    status: str
    time_spent: int
    total_questions: int
    correct_answers: int
    created_at: datetime
