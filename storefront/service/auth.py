import logging
from fastapi import HTTPException
from sqlalchemy.orm import Session
from storefront.auth.utils import build_session_claims, create_access_token, verify_password
from storefront.core.config import settings
from storefront.model.user import User
from storefront.model.user_schema import (
    ProfileUpdate,
    SessionResponse,
    SessionUser,
    TokenResponse,
    UserCreate,
)
from storefront.repository import user as user_repository

logger = logging.getLogger(__name__)

DEFAULT_ROLE_LEVELS = {"admin": 100, "manager": 50, "user": 10}


def authenticate(db: Session, email: str, password: str) -> TokenResponse:
    user = user_repository.get_user(db, email=email)
    if not user or not verify_password(password, user.password):
        logger.info("Failed login for %s", email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    claims = build_session_claims(user)
    token, expires_at = create_access_token(claims)
    return TokenResponse(
        access_token=token,
        expires_at=expires_at,
        user=SessionUser(id=user.id, email=user.email, role=claims["role"], profile=claims["profile"]),
    )


def register(db: Session, data: UserCreate) -> User:
    if user_repository.get_user(db, email=data.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    role_name = settings.DEFAULT_USER_ROLE
    role = user_repository.get_or_create_role(
        db, role_name, level=DEFAULT_ROLE_LEVELS.get(role_name, 0), description="Regular user with standard access"
    )
    return user_repository.create_user(db, data.email, data.password, role, profile=data.profile)


def session_response(session: dict) -> SessionResponse:
    return SessionResponse(
        user=SessionUser(
            id=session["id"],
            email=session["email"],
            role=session["role"],
            profile=session["profile"],
        ),
        expires=session["expires"],
    )


def get_user_or_401(db: Session, user_id: int) -> User:
    user = user_repository.get_user(db, id=user_id)
    if not user:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


def update_profile(db: Session, user_id: int, data: ProfileUpdate):
    user = get_user_or_401(db, user_id)
    return user_repository.update_profile(db, user, data)


def change_password(db: Session, user_id: int, current_password: str, new_password: str) -> None:
    user = get_user_or_401(db, user_id)
    if not verify_password(current_password, user.password):
        raise HTTPException(status_code=400, detail="Current password is incorrect")
    user_repository.update_password(db, user, new_password)
    logger.info("Password changed for user %s", user.id)
