import logging
from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from typing import Callable, List, Optional, Sequence, Tuple
from storefront.core.helpers import slugify
from storefront.core.pagination import offset
from storefront.model.brand import Brand
from storefront.model.category import Category
from storefront.model.product import Product
from storefront.model.product_schema import ProductCreate, ProductUpdate, SortOption
from storefront.model.review import Review

logger = logging.getLogger(__name__)

# columns a PUT may explicitly clear with null
NULLABLE_FIELDS = {"thumbnail", "sku"}


def _reference_filter(values: Sequence[str], id_column, name_filter: Callable):
    """OR together id matches (all-digit values) and name substring matches."""
    conditions = []
    ids = []
    for raw in values or []:
        value = raw.strip()
        if not value:
            continue
        if value.isdigit():
            ids.append(int(value))
        else:
            conditions.append(name_filter(value))
    if ids:
        conditions.append(id_column.in_(ids))
    return or_(*conditions) if conditions else None


def build_product_filters(
    search: Optional[str] = None,
    categories: Optional[Sequence[str]] = None,
    brands: Optional[Sequence[str]] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    active_only: bool = True,
) -> List:
    conditions = []

    if search:
        conditions.append(or_(
            Product.title.icontains(search, autoescape=True),
            Product.description.icontains(search, autoescape=True),
            Product.brand.has(Brand.name.icontains(search, autoescape=True)),
            Product.category.has(Category.name.icontains(search, autoescape=True)),
        ))

    category_filter = _reference_filter(
        categories,
        Product.category_id,
        lambda name: Product.category.has(Category.name.icontains(name, autoescape=True)),
    )
    if category_filter is not None:
        conditions.append(category_filter)

    brand_filter = _reference_filter(
        brands,
        Product.brand_id,
        lambda name: Product.brand.has(Brand.name.icontains(name, autoescape=True)),
    )
    if brand_filter is not None:
        conditions.append(brand_filter)

    if min_price is not None:
        conditions.append(Product.price >= min_price)
    if max_price is not None:
        conditions.append(Product.price <= max_price)

    if active_only:
        conditions.append(Product.is_active.is_(True))

    return conditions


def _review_stats(db: Session):
    return (
        db.query(
            Review.product_id.label("product_id"),
            func.avg(Review.rating).label("avg_rating"),
            func.count(Review.id).label("review_count"),
        )
        .group_by(Review.product_id)
        .subquery()
    )


def build_order_by(sort: Optional[SortOption], stats) -> List:
    avg_rating = func.coalesce(stats.c.avg_rating, 0)
    review_count = func.coalesce(stats.c.review_count, 0)

    if sort == SortOption.OLDEST:
        return [Product.created_at.asc(), Product.id.asc()]
    if sort == SortOption.PRICE_ASC:
        return [Product.price.asc(), Product.id.asc()]
    if sort == SortOption.PRICE_DESC:
        return [Product.price.desc(), Product.id.desc()]
    if sort == SortOption.RATING_ASC:
        return [avg_rating.asc(), Product.id.asc()]
    if sort == SortOption.RATING_DESC:
        return [avg_rating.desc(), Product.id.desc()]
    if sort == SortOption.POPULAR:
        return [review_count.desc(), Product.id.desc()]
    return [Product.created_at.desc(), Product.id.desc()]


def get_products(
    db: Session,
    page: int = 1,
    limit: int = 12,
    search: Optional[str] = None,
    categories: Optional[Sequence[str]] = None,
    brands: Optional[Sequence[str]] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    sort: Optional[SortOption] = None,
) -> Tuple[List[Product], int]:
    conditions = build_product_filters(search, categories, brands, min_price, max_price)
    stats = _review_stats(db)

    products = (
        db.query(Product)
        .outerjoin(stats, stats.c.product_id == Product.id)
        .filter(*conditions)
        .order_by(*build_order_by(sort, stats))
        .offset(offset(page, limit))
        .limit(limit)
        .all()
    )
    total = db.query(func.count(Product.id)).filter(*conditions).scalar()
    return products, total


def get_product(db: Session, id: int = None, slug: str = None) -> Optional[Product]:
    query = db.query(Product)
    if id is not None:
        query = query.filter(Product.id == id)
    if slug:
        query = query.filter(Product.slug == slug)
    return query.first()


def slug_exists(db: Session, slug: str, exclude_id: int = None) -> bool:
    query = db.query(Product.id).filter(Product.slug == slug)
    if exclude_id is not None:
        query = query.filter(Product.id != exclude_id)
    return query.first() is not None


def sku_exists(db: Session, sku: str, exclude_id: int = None) -> bool:
    query = db.query(Product.id).filter(Product.sku == sku)
    if exclude_id is not None:
        query = query.filter(Product.id != exclude_id)
    return query.first() is not None


def unique_slug(db: Session, title: str, exclude_id: int = None) -> str:
    base = slugify(title, fallback="product")
    slug = base
    suffix = 2
    while slug_exists(db, slug, exclude_id):
        slug = f"{base}-{suffix}"
        suffix += 1
    return slug


def create_product(db: Session, data: ProductCreate) -> Product:
    new_product = Product(
        **data.model_dump(),
        slug=unique_slug(db, data.title),
    )
    db.add(new_product)
    db.commit()
    db.refresh(new_product)
    logger.info("Created product %s (%s)", new_product.id, new_product.slug)
    return new_product


def update_product(db: Session, product: Product, data: ProductUpdate) -> Product:
    values = {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None or key in NULLABLE_FIELDS
    }
    if "title" in values:
        values["slug"] = unique_slug(db, values["title"], exclude_id=product.id)

    for key, value in values.items():
        setattr(product, key, value)

    db.commit()
    db.refresh(product)
    logger.info("Updated product %s: %s", product.id, ", ".join(sorted(values)) or "no changes")
    return product


def delete_product(db: Session, product: Product) -> None:
    db.delete(product)
    db.commit()
    logger.info("Deleted product %s", product.id)


def get_related_products(db: Session, product: Product, limit: int = 4) -> List[Product]:
    return (
        db.query(Product)
        .filter(
            Product.category_id == product.category_id,
            Product.id != product.id,
            Product.is_active.is_(True),
        )
        .order_by(Product.created_at.desc(), Product.id.desc())
        .limit(limit)
        .all()
    )


def count_products(db: Session, is_active: Optional[bool] = None) -> int:
    query = db.query(func.count(Product.id))
    if is_active is not None:
        query = query.filter(Product.is_active.is_(is_active))
    return query.scalar()
