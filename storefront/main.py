import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from storefront.core.config import settings
from storefront.core.logging_config import setup_logging
from storefront.db.session import check_connection, create_tables
from storefront.middleware.auth_middleware import AuthMiddleware
from storefront.routers.admin_router import router as admin_router
from storefront.routers.auth_router import router as auth_router
from storefront.routers.brand_router import router as brand_router
from storefront.routers.cart_router import router as cart_router
from storefront.routers.category_router import router as category_router
from storefront.routers.product_router import router as product_router
from storefront.routers.profile_router import router as profile_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("🚀 Starting server...")

    if check_connection() and settings.AUTO_CREATE_TABLES:
        create_tables()
        logger.info("Database tables are up to date")

    yield

    logger.info("Shutting down")


app = FastAPI(title="Storefront API", version="1.0.0", lifespan=lifespan)

app.add_middleware(AuthMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(product_router)
app.include_router(category_router)
app.include_router(brand_router)
app.include_router(cart_router)
app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(admin_router)


@app.get("/ping")
def ping():
    return {"ping": "pong"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("storefront.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
