"""Service configuration using pydantic-settings"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.provider_config import ProviderConfig


class Settings(BaseSettings):
    """Service configuration from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Identity Provider
    oauth_strapi_domain: Optional[str] = Field(
        default=None,
        description="Default Strapi API base URL (e.g., http://127.0.0.1:1337/api)",
    )
    provider_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for each call to the identity provider",
    )

    # Gateway Configuration
    gateway_host: str = Field(
        default="0.0.0.0",
        description="Gateway bind host",
    )
    gateway_port: int = Field(
        default=8080,
        description="Gateway bind port",
    )

    # CORS Configuration
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173,http://localhost:8080",
        description="Comma-separated list of allowed CORS origins",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into list"""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    def strapi_provider_config(self) -> ProviderConfig:
        """Process-wide default config for the Strapi provider"""
        return ProviderConfig(domain=self.oauth_strapi_domain)


# Singleton settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings singleton"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None


def default_provider_config() -> ProviderConfig:
    """Default Strapi provider config from the current settings"""
    return get_settings().strapi_provider_config()
