# app/config.py
"""
Service configuration, read from environment variables (and an optional
.env file in the working directory).

Usage:
    from app.config import settings
    print(settings.database_url)
"""

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------------------------------------------------------
    # Service identity
    # -------------------------------------------------------------------------

    SERVICE_NAME: str = Field(default="hayam-wiki-api")
    VERSION: str = Field(default="1.0.0")
    DOMAIN: str = Field(
        default="hayamwiki.org",
        description="Public domain name reported by /api/v1/status",
    )
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # -------------------------------------------------------------------------
    # Listening addresses
    # -------------------------------------------------------------------------

    API_HOST: str = "0.0.0.0"
    API_PORT: int = Field(default=3000, ge=1, le=65535)
    ROUTER_PORT: int = Field(default=8080, ge=1, le=65535)

    # -------------------------------------------------------------------------
    # Router
    # -------------------------------------------------------------------------

    API_UPSTREAM: str = Field(
        default="http://127.0.0.1:3000",
        description="Base URL the router forwards /api/ and /health to",
    )
    STATIC_DIR: str = Field(
        default="frontend",
        description="Directory holding the built single-page frontend",
    )
    UPSTREAM_TIMEOUT: float = Field(default=30.0, gt=0)

    # -------------------------------------------------------------------------
    # Database
    # -------------------------------------------------------------------------
    # DATABASE_URL wins when set; otherwise the URL is built from the parts.

    DATABASE_URL: Optional[str] = None
    DATABASE_HOST: str = "db"
    DATABASE_PORT: int = 5432
    DATABASE_NAME: str = "rubai"
    DATABASE_USERNAME: str = "postgres"
    DATABASE_PASSWORD: str = ""

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)",
    )
    # Not read by any endpoint yet; kept so deployments can provide it.
    JWT_SECRET: str = "secret"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        auth = self.DATABASE_USERNAME
        if self.DATABASE_PASSWORD:
            auth = f"{auth}:{self.DATABASE_PASSWORD}"
        return (
            f"postgresql+psycopg2://{auth}@{self.DATABASE_HOST}:"
            f"{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )

    @property
    def cors_origins_list(self) -> List[str]:
        """
        "http://a.org, https://b.org" -> ["http://a.org", "https://b.org"]
        """
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
