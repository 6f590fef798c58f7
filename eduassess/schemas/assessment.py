# eduassess/schemas/assessment.py
from datetime import datetime

from pydantic import Field, model_validator

from eduassess.models.enums import EngineeringField, Level
from eduassess.schemas.common import CamelModel

OPTIONS_PER_QUESTION = 4


class QuestionBase(CamelModel):
    question_text: str = Field(min_length=1)
    options: list[str] = Field(
        min_length=OPTIONS_PER_QUESTION, max_length=OPTIONS_PER_QUESTION
    )


class QuestionCreate(QuestionBase):
    correct_answer: int

    @model_validator(mode="after")
    def correct_answer_in_range(self):
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(
                f"correctAnswer must be an index between 0 and {len(self.options) - 1}"
            )
        return self


class QuestionPublic(QuestionBase):
    """Question as a student sees it: the answer key is never included."""

    id: int
    position: int


class QuestionDetail(QuestionPublic):
    correct_answer: int


class AssessmentBase(CamelModel):
    title: str = Field(min_length=1)
    engineering_field: EngineeringField
    level: Level
    duration: int = Field(gt=0)  # minutes


class AssessmentCreate(AssessmentBase):
    questions: list[QuestionCreate] = Field(min_length=1)


class AssessmentUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1)
    engineering_field: EngineeringField | None = None
    level: Level | None = None
    duration: int | None = Field(default=None, gt=0)
    questions: list[QuestionCreate] | None = Field(default=None, min_length=1)


class AssessmentSummary(CamelModel):
    id: int
    title: str
    engineering_field: str
    level: str
    duration: int


class AssessmentPublic(AssessmentSummary):
    created_at: datetime | None = None
    questions: list[QuestionPublic] = []


class AssessmentDetail(AssessmentSummary):
    created_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    questions: list[QuestionDetail] = []
