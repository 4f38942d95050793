"""
Centralized configuration for graticule.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from graticule.core.config import settings

    # Access configuration
    print(settings.HTTP_TIMEOUT)
    print(settings.provider_names)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path.cwd() / ".env",  # Current working directory
    Path.home() / ".graticule.env",
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # API Keys
    # ==========================================================================
    GOOGLE_GEOCODING_API_KEY: str = field(
        default_factory=lambda: os.getenv("GOOGLE_GEOCODING_API_KEY", "")
    )

    # ==========================================================================
    # Provider Selection
    # ==========================================================================
    GEOCODING_PROVIDERS: str = field(
        default_factory=lambda: os.getenv("GEOCODING_PROVIDERS", "census,nominatim")
    )
    NOMINATIM_USER_AGENT: str = field(
        default_factory=lambda: os.getenv("NOMINATIM_USER_AGENT", "graticule/1.0")
    )

    # ==========================================================================
    # HTTP Settings
    # ==========================================================================
    HTTP_TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("HTTP_TIMEOUT", "10"))
    )
    MAX_RETRIES: int = field(
        default_factory=lambda: int(os.getenv("MAX_RETRIES", "3"))
    )
    RETRY_BACKOFF: float = field(
        default_factory=lambda: float(os.getenv("RETRY_BACKOFF", "0.5"))
    )

    # ==========================================================================
    # Distance Defaults
    # ==========================================================================
    DISTANCE_FORMULA: str = field(
        default_factory=lambda: os.getenv("DISTANCE_FORMULA", "haversine")
    )
    DISTANCE_UNITS: str = field(
        default_factory=lambda: os.getenv("DISTANCE_UNITS", "miles")
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    LOG_LEVEL: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO")
    )

    @property
    def provider_names(self) -> List[str]:
        """Configured fallback chain, in order."""
        return [
            name.strip().lower()
            for name in self.GEOCODING_PROVIDERS.split(",")
            if name.strip()
        ]

    def validate_google_geocoding(self) -> bool:
        """Check if Google Geocoding API key is configured."""
        return bool(self.GOOGLE_GEOCODING_API_KEY)


# Singleton settings instance
settings = Settings()
