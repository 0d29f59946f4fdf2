from sqlalchemy.orm import Session
from storefront.model.admin_schema import ActiveStats, AdminStats, CartStats
from storefront.model.user_schema import UserStats
from storefront.repository import brand as brand_repository
from storefront.repository import cart as cart_repository
from storefront.repository import category as category_repository
from storefront.repository import product as product_repository
from storefront.repository import user as user_repository


def _active_stats(count) -> ActiveStats:
    return ActiveStats(total=count(), active=count(True), inactive=count(False))


def get_stats(db: Session) -> AdminStats:
    return AdminStats(
        products=_active_stats(lambda is_active=None: product_repository.count_products(db, is_active)),
        categories=_active_stats(lambda is_active=None: category_repository.count_categories(db, is_active)),
        brands=_active_stats(lambda is_active=None: brand_repository.count_brands(db, is_active)),
        users=UserStats(**user_repository.get_user_stats(db)),
        carts=CartStats(**cart_repository.get_cart_stats(db)),
    )
