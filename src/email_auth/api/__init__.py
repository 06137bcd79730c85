"""API layer - Routing and login endpoint factory"""

from .handlers import define_email_auth_strapi_handler
from .routes import router

__all__ = ["define_email_auth_strapi_handler", "router"]
