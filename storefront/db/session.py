import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from storefront.core.config import settings

logger = logging.getLogger(__name__)


def get_database_url():
    """Build a full SQLAlchemy URL from granular env settings."""
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    return (
        f"postgresql+psycopg2://{settings.DB_USER}:{settings.DB_PASSWORD}"
        f"@{settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}"
        "?options=-csearch_path%3Dpublic"
    )


def build_engine(url: str):
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


engine = build_engine(get_database_url())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    # register every mapped class on Base.metadata before create_all
    from storefront.model import entities  # noqa: F401
    from storefront.model.base import Base

    Base.metadata.create_all(bind=bind or engine)


def check_connection() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("✅ Database connection successful (%s)", engine.url.render_as_string(hide_password=True))
        return True
    except Exception as e:
        logger.error("❌ Database connection failed: %s", e)
        return False
