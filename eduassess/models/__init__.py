# eduassess/models/__init__.py
# Import every model so Base.metadata knows all tables
from eduassess.models.user import User  # noqa
from eduassess.models.assessment import Assessment, Question  # noqa
from eduassess.models.submission import Submission  # noqa
from eduassess.models.category import Category  # noqa
from eduassess.models.resource import Resource  # noqa
