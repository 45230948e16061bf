"""Configuration management for the Library Catalog engine.

Settings are read from the environment (``LIBRARY_CATALOG_`` prefix) or a
local ``.env`` file and validated with Pydantic v2:
1. Catalog Metadata - A name used in log records and summaries
2. Capacity - The fixed number of slots a catalog owns
3. Logging - Level and debug switches for the standard logging setup
"""

import logging
import sys
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CatalogConfig(BaseSettings):
    """Catalog engine configuration.

    Every value has a working default so an in-memory catalog can be built
    without any environment setup.
    """

    model_config = SettingsConfigDict(
        # Use LIBRARY_CATALOG_ prefix for all env vars
        env_prefix="LIBRARY_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Catalog Metadata ===

    catalog_name: str = Field(
        default="library-catalog",
        description="Name of the catalog used in logs and summaries",
        pattern=r"^[a-z0-9-]+$",
    )

    # === Capacity ===

    max_items: int = Field(
        default=100,
        description="Number of item slots a catalog holds",
        ge=1,
        le=10_000,
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging for catalog operations",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("catalog_name")
    @classmethod
    def validate_catalog_name(cls, v: str) -> str:
        """Keep catalog names short enough to read in a log line."""
        if len(v) < 3:
            raise ValueError("Catalog name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Catalog name must not exceed 50 characters")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    # === Computed Properties ===

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level, forced to DEBUG when debug is on."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


# === Global Configuration Instance ===


@lru_cache
def get_config() -> CatalogConfig:
    """Build the configuration once per process and reuse it."""
    return CatalogConfig()


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    get_config.cache_clear()


def configure_logging(config: CatalogConfig | None = None) -> logging.Logger:
    """
    Configure the root logger for applications embedding the catalog.

    Log records go to stderr so stdout stays free for whatever the caller
    renders. Calling this more than once does not add duplicate handlers.

    Args:
        config: Configuration to read the level from. Defaults to get_config().

    Returns:
        The configured root logger
    """
    if config is None:
        config = get_config()

    logging.basicConfig(
        level=config.effective_log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    root = logging.getLogger()
    root.setLevel(config.effective_log_level)
    return root
