# eduassess/schemas/auth.py
from pydantic import BaseModel, EmailStr, field_validator

from eduassess.models.enums import Role
from eduassess.schemas.user import UserPublic


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RegisterRequest(BaseModel):
    username: str
    email: EmailStr
    password: str
    role: Role = Role.STUDENT

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username is required")
        return value

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError("Password must be at least 6 characters long")
        return value


class AuthResponse(BaseModel):
    success: bool = True
    user: UserPublic
    token: str
