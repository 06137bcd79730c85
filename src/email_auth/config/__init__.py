"""Service configuration"""

from .settings import Settings, default_provider_config, get_settings, reset_settings

__all__ = ["Settings", "default_provider_config", "get_settings", "reset_settings"]
