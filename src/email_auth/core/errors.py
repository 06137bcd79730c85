"""Error taxonomy for the credential exchange"""

from typing import Any, Iterable, List, Mapping, Optional


class AuthError(Exception):
    """
    Base class for errors reported through the error callback.

    Attributes:
        status_code: HTTP status an integrator would typically respond with
        message: Human readable description
        data: Optional raw payload that caused the error
    """

    status_code: int = 500

    def __init__(self, message: str, data: Any = None):
        super().__init__(message)
        self.message = message
        self.data = data


class MissingConfigurationError(AuthError):
    """Required provider configuration is absent after merging defaults"""

    status_code = 500

    def __init__(self, provider: str, missing_keys: Iterable[str]):
        self.provider = provider
        self.missing_keys: List[str] = list(missing_keys)
        env_names = ", ".join(
            f"OAUTH_{provider.upper()}_{key.upper()}" for key in self.missing_keys
        )
        super().__init__(f"Missing {env_names} env variables.")


class AccessTokenError(AuthError):
    """The provider answered the token exchange but rejected the credentials"""

    status_code = 401

    def __init__(self, provider: str, response: Optional[Mapping[str, Any]]):
        self.provider = provider
        super().__init__(
            f"{provider[:1].upper()}{provider[1:]} login failed: {_describe_rejection(response)}",
            data=response,
        )


def _describe_rejection(response: Optional[Mapping[str, Any]]) -> str:
    """Pick the most specific reason out of a provider error payload."""
    if not response:
        return "Unknown error"

    if response.get("error_description"):
        return str(response["error_description"])

    error = response.get("error")
    # Strapi nests {status, name, message} under "error"
    if isinstance(error, Mapping):
        return str(error.get("message") or error.get("name") or "Unknown error")
    if error:
        return str(error)
    return "Unknown error"
