from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Optional
from storefront.core.helpers import parse_is_active, slugify
from storefront.model.brand_schema import BrandCreate
from storefront.model.category_schema import CategoryCreate
from storefront.repository import brand as brand_repository
from storefront.repository import category as category_repository


def _is_active_filter(value: Optional[str]) -> Optional[bool]:
    try:
        return parse_is_active(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid Request")


def list_categories(db: Session, is_active: Optional[str] = None):
    return category_repository.get_categories(db, _is_active_filter(is_active))


def create_category(db: Session, data: CategoryCreate):
    if category_repository.category_exists(db, data.name, slugify(data.name, fallback="category")):
        raise HTTPException(status_code=409, detail="Category already exists")
    return category_repository.create_category(db, data)


def list_brands(db: Session, is_active: Optional[str] = None):
    return brand_repository.get_brands(db, _is_active_filter(is_active))


def create_brand(db: Session, data: BrandCreate):
    if brand_repository.get_brand(db, name=data.name):
        raise HTTPException(status_code=409, detail="Brand already exists")
    return brand_repository.create_brand(db, data)
