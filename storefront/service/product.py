import logging
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional, Sequence
from storefront.core.pagination import get_page_numbers, total_pages
from storefront.model.product import Product
from storefront.model.product_schema import (
    ProductCreate,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
    ReviewCreate,
    SortOption,
)
from storefront.repository import brand as brand_repository
from storefront.repository import category as category_repository
from storefront.repository import product as product_repository
from storefront.repository import review as review_repository

logger = logging.getLogger(__name__)


def list_products(
    db: Session,
    page: int,
    limit: int,
    search: Optional[str] = None,
    categories: Optional[Sequence[str]] = None,
    brands: Optional[Sequence[str]] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    sort: Optional[SortOption] = None,
) -> ProductListResponse:
    products, total = product_repository.get_products(
        db,
        page=page,
        limit=limit,
        search=search,
        categories=categories,
        brands=brands,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
    )
    pages = total_pages(total, limit)
    return ProductListResponse(
        products=[ProductResponse.model_validate(p) for p in products],
        total=total,
        page=page,
        limit=limit,
        total_pages=pages,
        page_numbers=get_page_numbers(page, pages),
    )


def get_product_or_404(db: Session, id: int = None, slug: str = None) -> Product:
    product = product_repository.get_product(db, id=id, slug=slug)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


def _check_references(db: Session, brand_id: Optional[int], category_id: Optional[int]):
    if brand_id is not None and not brand_repository.get_brand(db, id=brand_id):
        raise HTTPException(status_code=400, detail=f"Brand {brand_id} does not exist")
    if category_id is not None and not category_repository.get_category(db, id=category_id):
        raise HTTPException(status_code=400, detail=f"Category {category_id} does not exist")


def _check_sku(db: Session, sku: Optional[str], exclude_id: int = None):
    if sku and product_repository.sku_exists(db, sku, exclude_id=exclude_id):
        raise HTTPException(status_code=409, detail="Product with this SKU already exists")


def create_product(db: Session, data: ProductCreate) -> Product:
    _check_references(db, data.brand_id, data.category_id)
    _check_sku(db, data.sku)
    return product_repository.create_product(db, data)


def update_product(db: Session, id: int, data: ProductUpdate) -> Product:
    product = get_product_or_404(db, id=id)
    _check_references(db, data.brand_id, data.category_id)
    _check_sku(db, data.sku, exclude_id=product.id)
    return product_repository.update_product(db, product, data)


def delete_product(db: Session, id: int) -> None:
    product = get_product_or_404(db, id=id)
    product_repository.delete_product(db, product)


def related_products(db: Session, id: int, limit: int = 4) -> List[Product]:
    product = get_product_or_404(db, id=id)
    return product_repository.get_related_products(db, product, limit=limit)


def add_review(db: Session, id: int, data: ReviewCreate, author: Optional[str] = None):
    product = get_product_or_404(db, id=id)
    return review_repository.create_review(db, product, data, author=author)
