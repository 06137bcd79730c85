"""
Email Auth Gateway - Main Application

Logs users in against a Strapi identity provider:
- Email/password credential exchange (POST /auth/local)
- User profile resolution (GET /users/me)
- Outcome reporting through pluggable success/error callbacks
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .api import router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan manager for startup/shutdown events"""
    # Startup
    settings = get_settings()
    logger.info(f"Starting email-auth-gateway v{__version__}")
    if settings.oauth_strapi_domain:
        logger.info(f"Default Strapi domain: {settings.oauth_strapi_domain}")
    else:
        logger.warning("OAUTH_STRAPI_DOMAIN is not set; logins will fail until configured")
    logger.info(f"Gateway listening on {settings.gateway_host}:{settings.gateway_port}")

    yield

    # Shutdown
    logger.info("Shutting down email-auth-gateway")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    # Configure logging level from settings
    logging.getLogger().setLevel(settings.log_level.upper())

    app = FastAPI(
        title="Email Auth Gateway",
        description="Email/password login against a Strapi identity provider",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "email_auth.main:app",
        host=settings.gateway_host,
        port=settings.gateway_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
