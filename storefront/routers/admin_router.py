from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from storefront.auth.utils import require_admin
from storefront.core.error_handler import handle_error
from storefront.db.session import get_db
from storefront.model.admin_schema import AdminStats
from storefront.service import admin as admin_service

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/stats", response_model=AdminStats)
def get_stats(db: Session = Depends(get_db), _=Depends(require_admin)):
    try:
        return admin_service.get_stats(db)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "admin stats")
        raise HTTPException(status_code=500, detail="Failed to fetch statistics")
