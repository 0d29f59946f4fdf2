"""
Shared fixtures for the storefront test suite

The application runs against an in-memory SQLite database that lives for a
single test. ``get_db`` is overridden so every request opens its own session
on that database, the same way it does against PostgreSQL.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.auth.utils import build_session_claims, create_access_token
from storefront.db.session import get_db
from storefront.main import app
from storefront.model import entities  # noqa: F401
from storefront.model.base import Base
from storefront.model.brand_schema import BrandCreate
from storefront.model.category_schema import CategoryCreate
from storefront.model.product_schema import ProductCreate, ReviewCreate
from storefront.model.user_schema import ProfileUpdate
from storefront.repository import brand as brand_repository
from storefront.repository import category as category_repository
from storefront.repository import product as product_repository
from storefront.repository import review as review_repository
from storefront.repository import user as user_repository

ADMIN_EMAIL = "admin@storefront.dev"
ADMIN_PASSWORD = "admin123"
USER_EMAIL = "user@storefront.dev"
USER_PASSWORD = "password123"


# ==================== Database ====================

@pytest.fixture
def session_factory():
    """
    Fresh in-memory database per test.
    StaticPool keeps a single connection so every session sees the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    yield factory

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def test_client(session_factory) -> TestClient:
    """
    Test client bound to the per-test database.
    Not entered as a context manager, so the startup hook never touches the real engine.
    """
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==================== Users ====================

@pytest.fixture
def roles(db_session):
    return {
        "admin": user_repository.get_or_create_role(db_session, "admin", level=100),
        "manager": user_repository.get_or_create_role(db_session, "manager", level=50),
        "user": user_repository.get_or_create_role(db_session, "user", level=10),
    }


@pytest.fixture
def admin_user(db_session, roles):
    return user_repository.create_user(
        db_session, ADMIN_EMAIL, ADMIN_PASSWORD, roles["admin"],
        profile=ProfileUpdate(first_name="Admin", last_name="User", department="IT"),
    )


@pytest.fixture
def regular_user(db_session, roles):
    return user_repository.create_user(db_session, USER_EMAIL, USER_PASSWORD, roles["user"])


def auth_headers(user) -> dict:
    token, _ = create_access_token(build_session_claims(user))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_user) -> dict:
    return auth_headers(admin_user)


@pytest.fixture
def user_headers(regular_user) -> dict:
    return auth_headers(regular_user)


# ==================== Catalog ====================

@pytest.fixture
def catalog(db_session):
    """
    Seeded catalog, returned as ids keyed by name/title.

    Ratings: MacBook Pro 4.67 (3 reviews), iPhone 15 4.5 (2), Galaxy S24 3.0 (1),
    WH-1000XM5 none. The Walkman is inactive.
    """
    categories = {
        name: category_repository.create_category(db_session, CategoryCreate(name=name, is_active=active))
        for name, active in (("Electronics", True), ("Computers", True), ("Audio", True), ("Retro", False))
    }
    brands = {
        name: brand_repository.create_brand(db_session, BrandCreate(name=name, is_active=active))
        for name, active in (("Apple", True), ("Samsung", True), ("Sony", True), ("Nokia", False))
    }

    rows = [
        ("iPhone 15", "Titanium smartphone", 1000.0, 10, "Apple", "Electronics", "APL-IP15", True, [5, 4]),
        ("Galaxy S24", "Android smartphone with AI", 800.0, 0, "Samsung", "Electronics", "SAM-S24", True, [3]),
        ("MacBook Pro", "Laptop for professionals", 2500.0, 0, "Apple", "Computers", "APL-MBP", True, [5, 5, 4]),
        ("WH-1000XM5", "Noise canceling headphones", 400.0, 20, "Sony", "Audio", "SNY-XM5", True, []),
        ("Walkman", "Cassette player", 50.0, 0, "Sony", "Audio", "SNY-WM", False, []),
    ]
    products = {}
    for title, description, price, discount, brand, category, sku, active, ratings in rows:
        product = product_repository.create_product(db_session, ProductCreate(
            title=title,
            description=description,
            price=price,
            discount_percentage=discount,
            stock=10,
            brand_id=brands[brand].id,
            category_id=categories[category].id,
            sku=sku,
            is_active=active,
        ))
        for rating in ratings:
            review_repository.create_review(db_session, product, ReviewCreate(rating=rating))
        products[title] = product.id

    return {
        "categories": {name: c.id for name, c in categories.items()},
        "brands": {name: b.id for name, b in brands.items()},
        "products": products,
    }
