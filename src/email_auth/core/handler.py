"""Credential exchange handler: password grant against an identity provider"""

import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from fastapi import HTTPException, Request, status

from .auth_provider import ICredentialProvider
from .auth_result import AuthResult, AuthTokens, Credentials
from .errors import AccessTokenError, AuthError, MissingConfigurationError
from .provider_config import ProviderConfig, merge_config

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[Request, AuthResult], Awaitable[Any]]
ErrorCallback = Callable[[Request, Exception], Awaitable[Any]]
ProviderFactory = Callable[[ProviderConfig], ICredentialProvider]

ACCESS_TOKEN_FIELD = "jwt"
INVALID_REQUEST_MESSAGE = "Missing identifier or password"


class CredentialExchangeHandler:
    """
    Orchestrates the two-call password grant for one identity provider.

    Flow per request:
    1. Merge the process-wide default config with the call-site config
    2. Validate the request body (identifier + password)
    3. Exchange credentials for an access token
    4. Fetch the user profile with that token
    5. Report the outcome through on_success or on_error

    A malformed body is answered with a 400 directly and never reaches the
    callbacks. Every other failure is reported exactly once via on_error.
    The handler keeps no state between requests.
    """

    def __init__(
        self,
        provider_factory: ProviderFactory,
        default_config: Callable[[], ProviderConfig],
        provider_name: str = "strapi",
    ):
        """
        Initialize the handler.

        Args:
            provider_factory: Builds the transport for a resolved config
            default_config: Returns the process-wide config, read on every call
            provider_name: Provider name used in error messages
        """
        self.provider_factory = provider_factory
        self.default_config = default_config
        self.provider_name = provider_name

    async def handle(
        self,
        request: Request,
        config: Optional[ProviderConfig],
        on_success: SuccessCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> Any:
        """
        Authenticate the user in ``request`` and report the outcome.

        Args:
            request: Inbound login request with a JSON body
            config: Call-site config, overrides the default per field
            on_success: Awaited with (request, AuthResult) on success
            on_error: Awaited with (request, error) on failure. When None,
                the error is raised instead.

        Returns:
            Whatever the invoked callback returns

        Raises:
            HTTPException: 400 if identifier or password is missing
        """
        resolved = merge_config(self.default_config(), config)
        if not resolved.domain:
            logger.warning(f"{self.provider_name} provider is missing 'domain' configuration")
            return await self._fail(
                request, MissingConfigurationError(self.provider_name, ["domain"]), on_error
            )

        credentials = await self._read_credentials(request)
        provider = self.provider_factory(resolved)

        try:
            response = await provider.exchange_credentials(credentials)
        except Exception as e:
            logger.warning(f"Token exchange with {self.provider_name} failed: {str(e)}")
            return await self._fail(request, e, on_error)

        if not response or response.get("error"):
            logger.warning(f"{self.provider_name} rejected credentials for {credentials.identifier!r}")
            return await self._fail(
                request, AccessTokenError(self.provider_name, response), on_error
            )

        access_token = response.get(ACCESS_TOKEN_FIELD)

        try:
            user = await provider.fetch_user(access_token)
        except Exception as e:
            logger.warning(f"Profile fetch from {self.provider_name} failed: {str(e)}")
            return await self._fail(request, e, on_error)

        logger.info(f"Authenticated {credentials.identifier!r} via {self.provider_name}")
        result = AuthResult(tokens=AuthTokens(access_token=access_token), user=user)
        return await on_success(request, result)

    async def _read_credentials(self, request: Request) -> Credentials:
        """
        Extract credentials from the request body.

        Raises:
            HTTPException: 400 if the body is absent, unparsable, or lacks
                identifier/password
        """
        try:
            body = await request.json()
        except ValueError:
            body = None

        if (
            not isinstance(body, Mapping)
            or not body.get("identifier")
            or not body.get("password")
        ):
            logger.warning(f"Rejected login request to {request.url.path}: {INVALID_REQUEST_MESSAGE}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=INVALID_REQUEST_MESSAGE,
            )

        return Credentials(identifier=body["identifier"], password=body["password"])

    async def _fail(
        self,
        request: Request,
        error: Exception,
        on_error: Optional[ErrorCallback],
    ) -> Any:
        """Route ``error`` to on_error, or raise it when no callback is set."""
        if on_error is not None:
            return await on_error(request, error)

        if isinstance(error, AuthError):
            raise HTTPException(status_code=error.status_code, detail=error.message)
        raise error
