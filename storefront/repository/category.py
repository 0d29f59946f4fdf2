import logging
from sqlalchemy.orm import Session
from typing import Optional
from storefront.core.helpers import slugify
from storefront.model.category import Category
from storefront.model.category_schema import CategoryCreate

logger = logging.getLogger(__name__)


def get_categories(db: Session, is_active: Optional[bool] = None):
    query = db.query(Category)
    if is_active is not None:
        query = query.filter(Category.is_active.is_(is_active))
    return query.order_by(Category.name.asc()).all()


def get_category(db: Session, id: int = None, slug: str = None) -> Optional[Category]:
    query = db.query(Category)
    if id is not None:
        query = query.filter(Category.id == id)
    if slug:
        query = query.filter(Category.slug == slug)
    return query.first()


def category_exists(db: Session, name: str, slug: str) -> bool:
    return (
        db.query(Category)
        .filter((Category.name == name) | (Category.slug == slug))
        .first()
        is not None
    )


def create_category(db: Session, data: CategoryCreate) -> Category:
    new_category = Category(
        name=data.name,
        slug=slugify(data.name, fallback="category"),
        description=data.description,
        image=data.image,
        is_active=data.is_active,
    )
    db.add(new_category)
    db.commit()
    db.refresh(new_category)
    logger.info("Created category %s (%s)", new_category.name, new_category.slug)
    return new_category


def count_categories(db: Session, is_active: Optional[bool] = None) -> int:
    query = db.query(Category)
    if is_active is not None:
        query = query.filter(Category.is_active.is_(is_active))
    return query.count()
