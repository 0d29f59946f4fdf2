"""Populate a development database with roles, demo users and a small catalog.

Run with ``python -m storefront.db.seed``. Every step looks rows up by their
unique key first, so running it twice leaves the data unchanged.
"""
import logging
from datetime import date
from sqlalchemy.orm import Session
from storefront.core.helpers import slugify
from storefront.core.logging_config import setup_logging
from storefront.db.session import SessionLocal, check_connection, create_tables
from storefront.model.brand_schema import BrandCreate
from storefront.model.category_schema import CategoryCreate
from storefront.model.product import Product
from storefront.model.product_schema import ProductCreate, ReviewCreate
from storefront.model.user_schema import ProfileUpdate
from storefront.repository import brand as brand_repository
from storefront.repository import category as category_repository
from storefront.repository import product as product_repository
from storefront.repository import review as review_repository
from storefront.repository import user as user_repository

logger = logging.getLogger(__name__)

ROLES = [
    ("admin", 100, "Administrator with full access"),
    ("manager", 50, "Manager with elevated permissions"),
    ("user", 10, "Regular user with standard access"),
]

USERS = [
    {
        "email": "admin@storefront.dev",
        "password": "admin123",
        "role": "admin",
        "profile": {
            "first_name": "Admin",
            "last_name": "User",
            "position": "System Administrator",
            "department": "IT",
            "phone": "+1-555-0100",
            "hire_date": date(2020, 1, 1),
        },
    },
    {
        "email": "manager@storefront.dev",
        "password": "password123",
        "role": "manager",
        "profile": {
            "first_name": "John",
            "last_name": "Manager",
            "position": "Store Manager",
            "department": "Operations",
            "phone": "+1-555-0101",
            "hire_date": date(2021, 3, 15),
        },
    },
    {
        "email": "user@storefront.dev",
        "password": "password123",
        "role": "user",
        "profile": {
            "first_name": "Jane",
            "last_name": "Customer",
            "position": "Customer",
            "department": "Retail",
            "phone": "+1-555-0102",
        },
    },
]

CATEGORIES = [
    {"name": "Electronics", "description": "Phones, tablets and gadgets"},
    {"name": "Computers", "description": "Laptops and desktops"},
    {"name": "Audio", "description": "Headphones and speakers"},
    {"name": "Wearables", "description": "Watches and fitness trackers"},
]

BRANDS = [
    {"name": "Apple", "website": "https://www.apple.com"},
    {"name": "Samsung", "website": "https://www.samsung.com"},
    {"name": "Dell", "website": "https://www.dell.com"},
    {"name": "Sony", "website": "https://www.sony.com"},
]

PRODUCTS = [
    {
        "title": "iPhone 15 Pro",
        "description": "The latest iPhone with titanium design and A17 Pro chip",
        "price": 999.99,
        "discount_percentage": 5,
        "stock": 50,
        "brand": "Apple",
        "category": "Electronics",
        "sku": "APL-IP15P",
        "tags": ["smartphone", "apple", "premium", "camera"],
        "reviews": [(5, "Fantastic camera"), (4, "Pricey but great")],
    },
    {
        "title": "Samsung Galaxy S24",
        "description": "Powerful Android smartphone with AI features",
        "price": 899.99,
        "discount_percentage": 10,
        "stock": 75,
        "brand": "Samsung",
        "category": "Electronics",
        "sku": "SAM-GS24",
        "tags": ["smartphone", "samsung", "android", "ai"],
        "reviews": [(4, "Great screen")],
    },
    {
        "title": "MacBook Pro 16-inch",
        "description": "Professional laptop with M3 Pro chip",
        "price": 2499.99,
        "stock": 25,
        "brand": "Apple",
        "category": "Computers",
        "sku": "APL-MBP16",
        "tags": ["laptop", "apple", "professional", "m3"],
        "reviews": [(5, "Blazing fast")],
    },
    {
        "title": "Dell XPS 15",
        "description": "Premium Windows laptop with stunning display",
        "price": 1899.99,
        "discount_percentage": 15,
        "stock": 40,
        "brand": "Dell",
        "category": "Computers",
        "sku": "DEL-XPS15",
        "tags": ["laptop", "dell", "windows", "premium"],
        "reviews": [(3, "Runs hot under load")],
    },
    {
        "title": "Sony WH-1000XM5",
        "description": "Industry-leading noise canceling headphones",
        "price": 399.99,
        "discount_percentage": 20,
        "stock": 100,
        "brand": "Sony",
        "category": "Audio",
        "sku": "SNY-WH1000XM5",
        "tags": ["headphones", "sony", "noise-canceling", "wireless"],
        "reviews": [],
    },
    {
        "title": "Galaxy Watch 6",
        "description": "Smartwatch with health tracking",
        "price": 299.99,
        "stock": 60,
        "brand": "Samsung",
        "category": "Wearables",
        "sku": "SAM-GW6",
        "tags": ["smartwatch", "samsung", "fitness"],
        "reviews": [(4, "Battery could be better")],
    },
]


def seed_roles(db: Session):
    return {
        name: user_repository.get_or_create_role(db, name, level=level, description=description)
        for name, level, description in ROLES
    }


def seed_users(db: Session, roles):
    for entry in USERS:
        if user_repository.get_user(db, email=entry["email"]):
            continue
        user_repository.create_user(
            db,
            entry["email"],
            entry["password"],
            roles[entry["role"]],
            profile=ProfileUpdate(**entry["profile"]),
        )


def seed_categories(db: Session):
    categories = {}
    for entry in CATEGORIES:
        data = CategoryCreate(**entry)
        existing = category_repository.get_category(db, slug=slugify(data.name, fallback="category"))
        categories[data.name] = existing or category_repository.create_category(db, data)
    return categories


def seed_brands(db: Session):
    brands = {}
    for entry in BRANDS:
        data = BrandCreate(**entry)
        brands[data.name] = brand_repository.get_brand(db, name=data.name) or brand_repository.create_brand(db, data)
    return brands


def seed_products(db: Session, categories, brands):
    for entry in PRODUCTS:
        if product_repository.sku_exists(db, entry["sku"]):
            continue

        fields = {k: v for k, v in entry.items() if k not in ("brand", "category", "reviews")}
        product: Product = product_repository.create_product(db, ProductCreate(
            **fields,
            brand_id=brands[entry["brand"]].id,
            category_id=categories[entry["category"]].id,
        ))
        for rating, comment in entry["reviews"]:
            review_repository.create_review(
                db, product, ReviewCreate(rating=rating, comment=comment), author="user@storefront.dev"
            )


def seed(db: Session):
    roles = seed_roles(db)
    seed_users(db, roles)
    categories = seed_categories(db)
    brands = seed_brands(db)
    seed_products(db, categories, brands)


def main():
    setup_logging()
    logger.info("🌱 Starting database seed...")
    if not check_connection():
        raise SystemExit(1)

    create_tables()
    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()

    logger.info("🎉 Database seeding completed!")
    logger.info("Admin: admin@storefront.dev / admin123")
    logger.info("User: user@storefront.dev / password123")


if __name__ == "__main__":
    main()
