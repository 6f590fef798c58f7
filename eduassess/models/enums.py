# eduassess/models/enums.py
from enum import Enum


class Role(str, Enum):
    STUDENT = "student"
    ADMIN = "admin"


class Level(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


# difficulty order used for next-level recommendations and category sorting
LEVEL_ORDER = [Level.BEGINNER.value, Level.INTERMEDIATE.value, Level.EXPERT.value]


class EngineeringField(str, Enum):
    CIVIL = "Civil Engineering"
    MECHANICAL = "Mechanical Engineering"
    ELECTRICAL = "Electrical Engineering"
    ELECTRONICS = "Electronics and Communication"
    COMPUTER_SCIENCE = "Computer Science"
    INFORMATION_TECHNOLOGY = "Information Technology"
    CHEMICAL = "Chemical Engineering"


class SubmissionStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    AUTO_SUBMITTED = "auto_submitted"


class ResourceType(str, Enum):
    VIDEO = "video"
    ARTICLE = "article"
    BOOK = "book"
    EXERCISE = "exercise"
