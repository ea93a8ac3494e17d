"""
Application configuration using Pydantic Settings.
All configuration is loaded from environment variables.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Secrets that must never be used outside development
_DEV_ONLY_DEFAULTS = {
    "secret_key": "taskmatch-dev-secret-change-in-production",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "TaskMatch API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # API
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:8080"]

    # Session tokens
    secret_key: str = "taskmatch-dev-secret-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # Session storage: "memory://" or a redis:// URL
    session_storage_url: str = "memory://"
    session_key_prefix: str = "taskmatch:session"

    # Marketplace store
    simulated_latency_ms: int = 0  # delay before every mutation; 500 mimics a slow backend
    seed_demo_data: bool = True

    # Resumes
    max_resumes_per_user: int = 5
    max_resume_size_mb: int = 5

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit_storage_uri: str = "memory://"

    # Map
    mapbox_token: Optional[str] = None
    mapbox_geocoding_url: str = "https://api.mapbox.com/geocoding/v5/mapbox.places"
    geocoding_timeout_seconds: int = 10
    map_jitter_seed: Optional[int] = None

    @property
    def max_resume_size_bytes(self) -> int:
        return self.max_resume_size_mb * 1024 * 1024

    @property
    def simulated_latency_seconds(self) -> float:
        return self.simulated_latency_ms / 1000

    @model_validator(mode="after")
    def _reject_dev_secrets_in_production(self) -> "Settings":
        """Fail loud if production/staging still uses dev-only default secrets."""
        if self.environment in ("production", "staging"):
            for field_name, dev_default in _DEV_ONLY_DEFAULTS.items():
                actual = getattr(self, field_name)
                if actual == dev_default:
                    raise ValueError(
                        f"SECURITY: '{field_name}' is still set to its development default. "
                        f"Set a real value via environment variable in {self.environment}."
                    )
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
