"""Strapi credential provider implementation"""

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from ..core.auth_provider import ICredentialProvider
from ..core.auth_result import Credentials

logger = logging.getLogger(__name__)


class StrapiProvider(ICredentialProvider):
    """
    Credential provider for Strapi's users-permissions plugin.

    Endpoints:
    - POST {domain}/auth/local: exchange identifier/password for a JWT
    - GET {domain}/users/me: fetch the profile owning the JWT

    Strapi answers bad credentials with HTTP 400 and a JSON body carrying an
    "error" object. That body is returned as-is so the caller can treat it as
    a provider rejection rather than a transport failure. Any other error
    status raises.
    """

    def __init__(self, domain: str, timeout: float = 10.0):
        """
        Initialize Strapi provider.

        Args:
            domain: Strapi API base URL (e.g., http://127.0.0.1:1337/api)
            timeout: Per-request timeout in seconds
        """
        self.domain = domain.rstrip("/")
        self.login_url = f"{self.domain}/auth/local"
        self.profile_url = f"{self.domain}/users/me"
        self.timeout = timeout

        logger.debug(f"Initialized StrapiProvider for {self.domain}")

    async def exchange_credentials(
        self, credentials: Credentials
    ) -> Optional[Dict[str, Any]]:
        """
        Exchange credentials for a JWT.

        Args:
            credentials: Identifier and password

        Returns:
            Strapi response body ({"jwt": ..., "user": ...} on success,
            {"error": {...}} on rejection), or None for an empty 2xx body

        Raises:
            httpx.HTTPError: On network errors, 5xx responses, or a 4xx
                response whose body is not a JSON object carrying "error"
        """
        async with httpx.AsyncClient() as client:
            response = await client.post(
                self.login_url,
                json=credentials.to_payload(),
                timeout=self.timeout,
            )

        logger.debug(f"POST {self.login_url} -> {response.status_code}")

        if response.status_code >= 500:
            response.raise_for_status()

        if not response.content:
            response.raise_for_status()
            return None

        try:
            data = response.json()
        except ValueError:
            data = None

        # Error statuses only count as a rejection when Strapi says why
        if isinstance(data, Mapping) and (response.is_success or data.get("error")):
            return dict(data)

        response.raise_for_status()
        return None

    async def fetch_user(self, access_token: str) -> Dict[str, Any]:
        """
        Fetch the authenticated user's profile.

        Args:
            access_token: JWT returned by exchange_credentials

        Returns:
            Strapi user object

        Raises:
            httpx.HTTPError: On network errors or any error status
        """
        async with httpx.AsyncClient() as client:
            response = await client.get(
                self.profile_url,
                headers={"Authorization": f"Bearer {access_token}"},
                timeout=self.timeout,
            )

        logger.debug(f"GET {self.profile_url} -> {response.status_code}")
        response.raise_for_status()
        return response.json()

    def get_provider_name(self) -> str:
        """Return the name of this identity provider"""
        return "strapi"
