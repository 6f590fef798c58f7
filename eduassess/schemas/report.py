# eduassess/schemas/report.py
from eduassess.schemas.common import CamelModel


class AssessmentStat(CamelModel):
    id: int
    title: str
    submissions: int
    average_score: int | None = None
    pass_rate: int


class PlatformOverview(CamelModel):
    total_submissions: int
    average_score: int
    highest_score: int
    lowest_score: int
    assessment_stats: list[AssessmentStat]


class PlatformStats(CamelModel):
    total_students: int
    active_courses: int
    completion_rate: str  # e.g. "64%"
    active_users: int


class StudentStats(CamelModel):
    total_assessments: int
    completed_assessments: int
    average_score: int
    time_spent: int  # hours
