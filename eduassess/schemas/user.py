# eduassess/schemas/user.py
from datetime import datetime

from pydantic import EmailStr

from eduassess.schemas.common import CamelModel


class UserPublic(CamelModel):
    id: int
    name: str
    email: EmailStr
    role: str
    last_active: datetime | None = None
    created_at: datetime | None = None
