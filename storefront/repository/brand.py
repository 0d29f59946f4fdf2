import logging
from sqlalchemy.orm import Session
from typing import Optional
from storefront.model.brand import Brand
from storefront.model.brand_schema import BrandCreate

logger = logging.getLogger(__name__)


def get_brands(db: Session, is_active: Optional[bool] = None):
    query = db.query(Brand)
    if is_active is not None:
        query = query.filter(Brand.is_active.is_(is_active))
    return query.order_by(Brand.name.asc()).all()


def get_brand(db: Session, id: int = None, name: str = None) -> Optional[Brand]:
    query = db.query(Brand)
    if id is not None:
        query = query.filter(Brand.id == id)
    if name:
        query = query.filter(Brand.name == name)
    return query.first()


def create_brand(db: Session, data: BrandCreate) -> Brand:
    new_brand = Brand(
        name=data.name,
        description=data.description,
        logo=data.logo,
        website=data.website,
        is_active=data.is_active,
    )
    db.add(new_brand)
    db.commit()
    db.refresh(new_brand)
    logger.info("Created brand %s", new_brand.name)
    return new_brand


def count_brands(db: Session, is_active: Optional[bool] = None) -> int:
    query = db.query(Brand)
    if is_active is not None:
        query = query.filter(Brand.is_active.is_(is_active))
    return query.count()
