"""Normalized authentication outcome handed to success callbacks"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Credentials:
    """User credentials read from the inbound request body"""

    identifier: str
    password: str

    def to_payload(self) -> Dict[str, str]:
        """Body sent to the provider's token exchange endpoint"""
        return {"identifier": self.identifier, "password": self.password}

    def __repr__(self) -> str:
        return f"Credentials(identifier={self.identifier!r}, password='***')"


@dataclass(frozen=True)
class AuthTokens:
    """Tokens granted by the identity provider"""

    access_token: str


@dataclass(frozen=True)
class AuthResult:
    """
    Provider-independent result of a successful credential exchange.

    The user profile is passed through exactly as the provider returned it.
    """

    tokens: AuthTokens
    user: Mapping[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the JSON-serializable shape integrators consume.

        Returns:
            {"tokens": {"access_token": ...}, "user": {...}}
        """
        return {
            "tokens": {"access_token": self.tokens.access_token},
            "user": self.user,
        }
