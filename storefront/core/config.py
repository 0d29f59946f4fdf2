from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional


class Settings(BaseSettings):
    # Database
    DATABASE_URL: Optional[str] = Field(None)
    DB_HOST: str = Field("localhost")
    DB_PORT: int = Field(5432)
    DB_USER: str = Field("postgres")
    DB_PASSWORD: str = Field("postgres")
    DB_NAME: str = Field("storefront")
    AUTO_CREATE_TABLES: bool = Field(True)

    # App
    APP_HOST: str = Field("0.0.0.0")
    APP_PORT: int = Field(8000)
    CORS_ORIGINS: List[str] = Field(["http://localhost:3000"])
    LOG_LEVEL: str = Field("INFO")

    # Catalog
    DEFAULT_PAGE_SIZE: int = Field(12)
    MAX_PAGE_SIZE: int = Field(100)

    # JWT / Auth
    SECRET_KEY: str = Field("defaultsecret")
    ALGORITHM: str = Field("HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 24)
    ADMIN_ROLE: str = Field("admin")
    DEFAULT_USER_ROLE: str = Field("user")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow"
    )


settings = Settings()
