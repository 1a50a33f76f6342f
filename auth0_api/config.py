"""Configuration helpers for Auth0."""

import os

from .types import Auth0Config, Endpoint
from .urls import endpoint_url


def auth0_endpoint(service: str | None = None) -> Endpoint:
    """Construct an Auth0 tenant URL for a given service.

    Args:
        service: Path of the Auth0 service (e.g., 'authorize', 'tokeninfo').
                If None, returns the base tenant URL.

    Returns:
        The complete URL for the specified service.

    Raises:
        RuntimeError: If the AUTH0_ENDPOINT environment variable is not set.

    Example:
        >>> auth0_endpoint("tokeninfo")
        "https://my-app.auth0.com/tokeninfo"
    """
    endpoint = os.environ.get("AUTH0_ENDPOINT")
    if not endpoint:
        raise RuntimeError("AUTH0_ENDPOINT environment variable is not set.")
    if service is None:
        return Endpoint(endpoint)
    return Endpoint(endpoint_url(endpoint, "/" + service.lstrip("/")))


def client_id() -> str:
    """Get the Auth0 client ID from environment variables.

    Returns:
        The Auth0 client ID from the AUTH0_CLIENT_ID environment variable,
        or an empty string if not set.
    """
    return os.environ.get("AUTH0_CLIENT_ID", "")


def audience() -> str | None:
    """Get the API audience from the AUTH0_AUDIENCE environment variable, if set."""
    return os.environ.get("AUTH0_AUDIENCE") or None


def auth0_config() -> Auth0Config:
    """Build an Auth0Config from AUTH0_ENDPOINT and AUTH0_CLIENT_ID.

    Raises:
        RuntimeError: If the AUTH0_ENDPOINT environment variable is not set.
    """
    return Auth0Config(endpoint=auth0_endpoint(), client_id=client_id())
