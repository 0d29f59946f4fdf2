from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional
from storefront.auth.utils import get_current_user
from storefront.core.error_handler import handle_error
from storefront.db.session import get_db
from storefront.model.user_schema import ProfileResponse, ProfileUpdate
from storefront.service import auth as auth_service

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=Optional[ProfileResponse])
def get_profile(db: Session = Depends(get_db), user: dict = Depends(get_current_user)):
    """The caller's profile, or null before it was first saved."""
    return auth_service.get_user_or_401(db, user["id"]).profile


@router.put("", response_model=ProfileResponse)
def update_profile(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user),
):
    try:
        return auth_service.update_profile(db, user["id"], data)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "update profile")
        raise HTTPException(status_code=500, detail="Failed to update profile")
