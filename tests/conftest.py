"""Shared fixtures for Auth0 client tests."""

from typing import Any

import pytest

from auth0_api import Auth0Config, Endpoint, IdToken, UserID


@pytest.fixture
def endpoint() -> Endpoint:
    """Provide a test tenant endpoint."""
    return Endpoint("https://my-app.auth0.com")


@pytest.fixture
def config(endpoint: Endpoint) -> Auth0Config:
    """Provide a test Auth0 configuration."""
    return Auth0Config(endpoint=endpoint, client_id="aBcD1234")


@pytest.fixture
def id_token() -> IdToken:
    """Provide a mock id token."""
    return IdToken("eyJhbGciOiJSUzI1NiIsInR5cCI6IkpXVCJ9.mock.token")


@pytest.fixture
def user_id() -> UserID:
    """Provide a consistent test user ID."""
    return UserID("google-oauth2|101234567890")


@pytest.fixture
def profile_payload(user_id: UserID) -> dict[str, Any]:
    """Provide a profile as returned by the tokeninfo endpoint."""
    return {
        "email": "jane@example.com",
        "email_verified": True,
        "name": "Jane Doe",
        "nickname": "jane",
        "picture": "https://example.com/jane.png",
        "user_id": user_id,
        "created_at": "2016-03-14T08:45:12.345Z",
        "identities": [
            {
                "connection": "google-oauth2",
                "isSocial": True,
                "provider": "google-oauth2",
                "user_id": "101234567890",
            },
            {
                "connection": "Username-Password-Authentication",
                "isSocial": False,
                "provider": "auth0",
                "user_id": "5f1a2b3c",
            },
        ],
        "family_name": "Doe",
        "given_name": "Jane",
        "global_client_id": "gLoBaL42",
        "locale": "en",
        "user_metadata": {"theme": "dark", "newsletter": False},
        "app_metadata": {"roles": ["admin"]},
        "last_login": "2016-03-15T10:00:00.000Z",
    }
