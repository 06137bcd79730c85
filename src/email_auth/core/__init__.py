"""Core domain models, interfaces and the credential exchange handler"""

from .auth_provider import ICredentialProvider
from .auth_result import AuthResult, AuthTokens, Credentials
from .errors import AccessTokenError, AuthError, MissingConfigurationError
from .handler import CredentialExchangeHandler
from .provider_config import ProviderConfig, merge_config

__all__ = [
    "ICredentialProvider",
    "AuthResult",
    "AuthTokens",
    "Credentials",
    "AccessTokenError",
    "AuthError",
    "MissingConfigurationError",
    "CredentialExchangeHandler",
    "ProviderConfig",
    "merge_config",
]
