from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from storefront.auth.utils import get_current_user, require_admin
from storefront.core.config import settings
from storefront.core.error_handler import handle_error
from storefront.db.session import get_db
from storefront.model.base_schema import MessageResponse
from storefront.model.product_schema import (
    ProductCreate,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
    ReviewCreate,
    ReviewResponse,
    SortOption,
)
from storefront.service import product as product_service

router = APIRouter(prefix="/api/products", tags=["Product"])


@router.get("", response_model=ProductListResponse)
def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    search: Optional[str] = Query(None),
    category: Optional[List[str]] = Query(None),
    brand: Optional[List[str]] = Query(None),
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    sort: SortOption = Query(SortOption.NEWEST),
    db: Session = Depends(get_db),
):
    """Filtered, sorted and paginated listing of active products."""
    try:
        return product_service.list_products(
            db,
            page=page,
            limit=limit,
            search=search,
            categories=category,
            brands=brand,
            min_price=min_price,
            max_price=max_price,
            sort=sort,
        )
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "list products")
        raise HTTPException(status_code=500, detail="Failed to fetch products")


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(data: ProductCreate, db: Session = Depends(get_db), _=Depends(require_admin)):
    try:
        return product_service.create_product(db, data)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "create product")
        raise HTTPException(status_code=500, detail="Failed to create product")


@router.get("/slug/{slug}", response_model=ProductResponse)
def get_product_by_slug(slug: str, db: Session = Depends(get_db)):
    return product_service.get_product_or_404(db, slug=slug)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        return product_service.get_product_or_404(db, id=product_id)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "get product")
        raise HTTPException(status_code=500, detail="Failed to fetch product")


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    data: ProductUpdate,
    db: Session = Depends(get_db),
    _=Depends(require_admin),
):
    try:
        return product_service.update_product(db, product_id, data)
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "update product")
        raise HTTPException(status_code=500, detail="Failed to update product")


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: int, db: Session = Depends(get_db), _=Depends(require_admin)):
    try:
        product_service.delete_product(db, product_id)
        return {"message": "Product deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "delete product")
        raise HTTPException(status_code=500, detail="Failed to delete product")


@router.get("/{product_id}/related", response_model=List[ProductResponse])
def get_related_products(product_id: int, limit: int = Query(4, ge=1, le=20), db: Session = Depends(get_db)):
    return product_service.related_products(db, product_id, limit=limit)


@router.post("/{product_id}/reviews", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def add_review(
    product_id: int,
    data: ReviewCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user),
):
    try:
        return product_service.add_review(db, product_id, data, author=user.get("email"))
    except HTTPException:
        raise
    except Exception as e:
        handle_error(e, "add review")
        raise HTTPException(status_code=500, detail="Failed to add review")
