from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from storefront.auth.utils import require_admin
from storefront.core.error_handler import handle_error
from storefront.db.session import get_db
from storefront.model.brand_schema import BrandCreate, BrandResponse
from storefront.service import catalog as catalog_service

router = APIRouter(prefix="/api/brands", tags=["Brand"])


@router.get("", response_model=List[BrandResponse])
def list_brands(is_active: Optional[str] = Query(None, alias="isActive"), db: Session = Depends(get_db)):
    try:
        return catalog_service.list_brands(db, is_active)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "list brands")
        raise HTTPException(status_code=500, detail="Failed to fetch brands")


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
def create_brand(data: BrandCreate, db: Session = Depends(get_db), _=Depends(require_admin)):
    try:
        return catalog_service.create_brand(db, data)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "create brand")
        raise HTTPException(status_code=500, detail="Failed to create brand")
