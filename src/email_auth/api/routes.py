"""API routes for health checks and email/password login"""

from typing import Any, Dict

from fastapi import APIRouter

from .handlers import (
    define_email_auth_strapi_handler,
    respond_with_auth_error,
    respond_with_auth_result,
)

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.

    Only verifies the process is running and responsive. The identity
    provider is not contacted.

    Example Response:
        {
            "status": "healthy",
            "service": "email-auth-gateway",
            "version": "1.0.0"
        }
    """
    return {
        "status": "healthy",
        "service": "email-auth-gateway",
        "version": "1.0.0",
    }


router.add_api_route(
    "/auth/strapi",
    define_email_auth_strapi_handler(
        on_success=respond_with_auth_result,
        on_error=respond_with_auth_error,
    ),
    methods=["POST"],
    name="strapi_login",
)
