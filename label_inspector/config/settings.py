"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

Configuration Priority (highest to lowest):
------------------------------------------
1. Command-line overrides (--catalog, --debug)
2. Environment variables
3. .env file
4. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name shown in the banner
        debug: Enable debug logging
        products_file: Path to the catalog JSON export
        similar_products_limit: Similar products listed for an unmatched code
        description_preview_length: Description characters shown in listings
        search_limit: Maximum results of a free-text search
        listing_preview_limit: Products shown per supplier in the listing

    Example:
        >>> settings = Settings()
        >>> print(settings.products_path)
        depra.json
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        # Load from .env file if present
        env_file=".env",
        env_file_encoding="utf-8",
        # Environment variables are case-insensitive
        case_sensitive=False,
        # Ignore extra environment variables
        extra="ignore",
        # Validate default values
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="FERRAMENTA DE DEBUG - Sistema de Inventário",
        description="Display name shown in the banner"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    products_file: str = Field(
        default="depra.json",
        description="Path to product catalog JSON"
    )

    # =========================================================================
    # REPORT SETTINGS
    # =========================================================================
    similar_products_limit: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Similar products listed for an unmatched code"
    )

    description_preview_length: int = Field(
        default=40,
        ge=10,
        le=200,
        description="Description characters shown in listings"
    )

    search_limit: int = Field(
        default=20,
        ge=1,
        le=500,
        description="Maximum results of a free-text search"
    )

    listing_preview_limit: int = Field(
        default=10,
        ge=1,
        le=500,
        description="Products shown per supplier in the catalog listing"
    )

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def products_path(self) -> Path:
        """Get products file as Path object."""
        return Path(self.products_file)

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(products_file={self.products_file!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.debug(f"Configuration loaded: {settings}")

    return settings
