"""Endpoint factory and default outcome callbacks for the Strapi login"""

import logging
from typing import Any, Awaitable, Callable, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

from ..config import default_provider_config, get_settings
from ..core.auth_provider import ICredentialProvider
from ..core.auth_result import AuthResult
from ..core.errors import AuthError
from ..core.handler import (
    CredentialExchangeHandler,
    ErrorCallback,
    ProviderFactory,
    SuccessCallback,
)
from ..core.provider_config import ProviderConfig
from ..infrastructure import StrapiProvider

logger = logging.getLogger(__name__)


def _create_strapi_provider(config: ProviderConfig) -> ICredentialProvider:
    """Build the httpx-backed Strapi transport for a resolved config."""
    return StrapiProvider(
        domain=config.domain,
        timeout=get_settings().provider_timeout,
    )


def define_email_auth_strapi_handler(
    *,
    on_success: SuccessCallback,
    on_error: Optional[ErrorCallback] = None,
    config: Optional[ProviderConfig] = None,
    provider_factory: Optional[ProviderFactory] = None,
    default_config: Optional[Callable[[], ProviderConfig]] = None,
) -> Callable[[Request], Awaitable[Any]]:
    """
    Create a FastAPI endpoint that logs users in with Strapi email/password.

    Example:
        >>> async def on_success(request, result):
        ...     return JSONResponse(result.to_dict())
        >>> endpoint = define_email_auth_strapi_handler(on_success=on_success)
        >>> router.add_api_route("/auth/strapi", endpoint, methods=["POST"])

    Args:
        on_success: Awaited with (request, AuthResult) on success
        on_error: Awaited with (request, error) on failure; errors are raised
            as HTTP errors when omitted
        config: Call-site config merged over the settings default
        provider_factory: Transport builder (defaults to StrapiProvider)
        default_config: Process-wide config source (defaults to settings)

    Returns:
        Async endpoint taking the inbound Request
    """
    handler = CredentialExchangeHandler(
        provider_factory=provider_factory or _create_strapi_provider,
        default_config=default_config or default_provider_config,
        provider_name="strapi",
    )

    async def endpoint(request: Request) -> Any:
        return await handler.handle(request, config, on_success, on_error)

    return endpoint


async def respond_with_auth_result(request: Request, result: AuthResult) -> JSONResponse:
    """Default success callback: return the normalized result as JSON"""
    return JSONResponse(status_code=status.HTTP_200_OK, content=result.to_dict())


async def respond_with_auth_error(request: Request, error: Exception) -> JSONResponse:
    """
    Default error callback.

    AuthError subclasses keep their own status code. Anything else came from
    the transport and is reported as a bad gateway.
    """
    if isinstance(error, AuthError):
        return JSONResponse(
            status_code=error.status_code,
            content={
                "error": type(error).__name__,
                "message": error.message,
            },
        )

    logger.error(f"Identity provider request failed for {request.url.path}: {str(error)}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "error": "provider_error",
            "message": f"Failed to reach identity provider: {str(error)}",
        },
    )
