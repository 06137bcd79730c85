"""Credential provider interface for pluggable identity backends"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from .auth_result import Credentials


class ICredentialProvider(ABC):
    """
    Interface for identity providers that support a password grant.

    Implementations own the transport. They must:
    1. Exchange user credentials for a token response
    2. Fetch the authenticated user's profile with an access token
    3. Let transport failures propagate as exceptions
    """

    @abstractmethod
    async def exchange_credentials(
        self, credentials: Credentials
    ) -> Optional[Mapping[str, Any]]:
        """
        Exchange credentials for a token response.

        Args:
            credentials: Identifier and password from the login request

        Returns:
            Provider response body (None if empty). Either carries an access
            token or an "error" field.

        Raises:
            Exception: Any transport-level failure
        """
        pass

    @abstractmethod
    async def fetch_user(self, access_token: str) -> Mapping[str, Any]:
        """
        Fetch the profile of the user owning ``access_token``.

        Args:
            access_token: Bearer token returned by exchange_credentials

        Returns:
            Provider-defined user profile

        Raises:
            Exception: Any transport-level failure
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the name of this identity provider"""
        pass
