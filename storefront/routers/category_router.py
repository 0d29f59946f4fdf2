from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from storefront.auth.utils import require_admin
from storefront.core.error_handler import handle_error
from storefront.db.session import get_db
from storefront.model.category_schema import CategoryCreate, CategoryResponse
from storefront.service import catalog as catalog_service

router = APIRouter(prefix="/api/categories", tags=["Category"])


@router.get("", response_model=List[CategoryResponse])
def list_categories(is_active: Optional[str] = Query(None, alias="isActive"), db: Session = Depends(get_db)):
    try:
        return catalog_service.list_categories(db, is_active)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "list categories")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(data: CategoryCreate, db: Session = Depends(get_db), _=Depends(require_admin)):
    try:
        return catalog_service.create_category(db, data)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "create category")
        raise HTTPException(status_code=500, detail="Failed to create category")
