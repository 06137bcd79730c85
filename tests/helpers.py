"""Test doubles: fake identity provider and raw ASGI requests."""

import json
from typing import Any, Dict, List, Mapping, Optional

from starlette.requests import Request

from email_auth.core import Credentials, ICredentialProvider


class FakeProvider(ICredentialProvider):
    """In-memory provider recording every outbound call."""

    def __init__(
        self,
        token_response: Optional[Mapping[str, Any]] = None,
        user: Optional[Mapping[str, Any]] = None,
        exchange_error: Optional[Exception] = None,
        fetch_error: Optional[Exception] = None,
    ):
        self.token_response = token_response
        self.user = user
        self.exchange_error = exchange_error
        self.fetch_error = fetch_error
        self.exchanged: List[Credentials] = []
        self.fetched_with: List[str] = []

    async def exchange_credentials(self, credentials):
        self.exchanged.append(credentials)
        if self.exchange_error is not None:
            raise self.exchange_error
        return self.token_response

    async def fetch_user(self, access_token):
        self.fetched_with.append(access_token)
        if self.fetch_error is not None:
            raise self.fetch_error
        return self.user

    def get_provider_name(self) -> str:
        return "fake"


def make_request(body: Any = None, raw: Optional[bytes] = None) -> Request:
    """Build a POST /auth/strapi request carrying ``body`` as JSON."""
    if raw is None:
        raw = b"" if body is None else json.dumps(body).encode("utf-8")

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/auth/strapi",
        "query_string": b"",
        "headers": [(b"content-type", b"application/json")],
    }

    async def receive() -> Dict[str, Any]:
        return {"type": "http.request", "body": raw, "more_body": False}

    return Request(scope, receive)
