# eduassess/services/user_service.py
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from eduassess.core.errors import ValidationFailed
from eduassess.core.security import get_password_hash
from eduassess.models.enums import Role
from eduassess.models.user import User
from eduassess.schemas.auth import RegisterRequest


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def register_user(db: Session, *, obj_in: RegisterRequest) -> User:
    if get_user_by_email(db, obj_in.email) is not None:
        raise ValidationFailed({"email": "Email already registered"})

    user = User(
        email=obj_in.email,
        password_hash=get_password_hash(obj_in.password),
        name=obj_in.username,
        role=obj_in.role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def touch_last_active(db: Session, *, user: User) -> User:
    user.last_active = datetime.now(timezone.utc)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def list_students(db: Session, *, skip: int = 0, limit: int = 100) -> List[User]:
    return (
        db.query(User)
        .filter(User.role == Role.STUDENT.value)
        .order_by(User.created_at.desc(), User.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def delete_user(db: Session, *, db_obj: User) -> None:
    # submissions go with the user (relationship cascade)
    db.delete(db_obj)
    db.commit()
