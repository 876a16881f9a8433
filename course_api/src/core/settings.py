from __future__ import annotations

import json
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application-level settings for the FastAPI service.

    Covers API metadata, CORS, startup seeding and query defaults.
    """

    # FastAPI metadata
    APP_NAME: str = Field(default="Course Catalog API")
    APP_DESCRIPTION: str = Field(
        default=(
            "In-memory catalog of course offerings with title and type filters, "
            "multi-field sorting and pagination."
        )
    )
    APP_VERSION: str = Field(default="0.1.0")
    API_PREFIX: str = Field(default="/api", description="Path prefix for all REST routes")

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="Comma-separated list or JSON array of allowed origins. Default: *",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=False)
    CORS_ALLOW_METHODS: List[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_HEADERS: List[str] = Field(default_factory=lambda: ["*"])

    # Startup behavior
    SEED_ON_STARTUP: bool = Field(
        default=True,
        description="If true, load the seed file into the course repository at app startup.",
    )
    SEED_FILE: Optional[str] = Field(
        default=None,
        description="Path to a JSON course file. Defaults to the bundled sample data.",
    )

    # Query defaults
    DEFAULT_PAGE_SIZE: int = Field(default=3, ge=1)
    MAX_PAGE_SIZE: int = Field(default=100, ge=1)
    DEFAULT_SORT: str = Field(default="id,desc", description="Sort used when the request gives none")

    LOG_LEVEL: str = Field(default="INFO")

    # Environment label
    ENVIRONMENT: Optional[str] = Field(
        default=None, description="Environment label (dev/test/prod)"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v):
        """
        Accept both JSON array format and comma-separated formats for CORS origins.
        """
        if v is None:
            return ["*"]
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v) or ["*"]
            parts = [p.strip() for p in v.split(",") if p.strip()]
            return parts or ["*"]
        if isinstance(v, list):
            return v or ["*"]
        return ["*"]


# PUBLIC_INTERFACE
def get_app_settings() -> AppSettings:
    """
    Return a new AppSettings instance populated from environment variables.
    """
    return AppSettings()
