from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from storefront.auth.utils import get_current_user
from storefront.core.error_handler import handle_error
from storefront.db.session import get_db
from storefront.model.base_schema import MessageResponse
from storefront.model.user_schema import (
    PasswordChange,
    SessionResponse,
    TokenResponse,
    UserCreate,
    UserLogin,
    UserResponse,
)
from storefront.service import auth as auth_service

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    try:
        return auth_service.register(db, user_data)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "register")
        raise HTTPException(status_code=500, detail="Failed to register user")


@router.post("/login", response_model=TokenResponse)
def login(data: UserLogin, db: Session = Depends(get_db)):
    try:
        return auth_service.authenticate(db, data.email, data.password)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "login")
        raise HTTPException(status_code=500, detail="Failed to sign in")


@router.get("/session", response_model=SessionResponse)
def get_session(user: dict = Depends(get_current_user)):
    return auth_service.session_response(user)


@router.post("/password", response_model=MessageResponse)
def change_password(
    data: PasswordChange,
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user),
):
    try:
        auth_service.change_password(db, user["id"], data.current_password, data.new_password)
        return {"message": "Password updated successfully"}
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "change password")
        raise HTTPException(status_code=500, detail="Failed to update password")
