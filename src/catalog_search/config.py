"""Centralized configuration for catalog search using Pydantic Settings."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Search engine
    search_max_results: int = Field(default=200, ge=1, description="Maximum items ranked per catalog search")
    search_cache_max_entries: int = Field(
        default=0,
        ge=0,
        description="Maximum cached queries before the oldest is evicted (0 = unbounded)",
    )
    search_cache_ttl_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="Lifetime of a cached query result in seconds (0 = never expires)",
    )

    # Paging
    default_page_size: int = Field(default=20, ge=1, description="Page size used when the requested one is invalid")
    max_page_size: int = Field(default=200, ge=1, description="Largest page size accepted")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "Settings":
        if self.default_page_size > self.max_page_size:
            raise ValueError("DEFAULT_PAGE_SIZE must not exceed MAX_PAGE_SIZE")
        return self

    def is_cache_bounded(self) -> bool:
        """True when either an entry cap or a TTL limits the search cache."""
        return bool(self.search_cache_max_entries or self.search_cache_ttl_seconds)
