# eduassess/api/endpoints/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from eduassess.core.config import Settings
from eduassess.core.security import (
    authenticate_user,
    create_access_token,
    get_app_settings,
    get_current_user,
)
from eduassess.db.deps import get_db
from eduassess.models.user import User
from eduassess.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from eduassess.schemas.user import UserPublic
from eduassess.services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    user = user_service.register_user(db, obj_in=payload)
    logger.info(f"Registered user {user.id} with role {user.role}")
    return AuthResponse(
        user=UserPublic.model_validate(user),
        token=create_access_token(user, settings),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    user = authenticate_user(db, payload.email, payload.password)
    if not user:
        logger.info(f"Login failed for {payload.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = user_service.touch_last_active(db, user=user)
    logger.info(f"Login successful for user {user.id}")
    return AuthResponse(
        user=UserPublic.model_validate(user),
        token=create_access_token(user, settings),
    )


@router.get("/me", response_model=UserPublic)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
