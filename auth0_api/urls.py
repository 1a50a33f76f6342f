"""URL builders for the Auth0 authentication API."""

from urllib.parse import quote

from .types import Auth0Config, Endpoint

# Characters left literal in query values so plain URLs stay readable.
_URL_SAFE = ":/"


def endpoint_url(endpoint: Endpoint | str, path: str) -> str:
    """Join an Auth0 tenant endpoint and an API path."""
    return endpoint.rstrip("/") + path


def auth0_authorize_url(
    config: Auth0Config,
    response_type: str,
    redirect_url: str,
    scopes: list[str],
    connection: str | None = None,
    audience: str | None = None,
) -> str:
    """Construct the Auth0 ``/authorize`` URL that starts a login.

    Query parameters are emitted in a fixed order: ``response_type``,
    ``client_id``, ``connection``, ``audience``, ``redirect_uri``, ``scope``.
    ``connection`` and ``audience`` are left out entirely when not given.

    Args:
        config: The tenant endpoint and client ID.
        response_type: OAuth2 response type, e.g. "token" or "code".
        redirect_url: Where Auth0 sends the user after login.
        scopes: Requested scopes; joined by spaces and percent-encoded
            as one value, so a space is sent as ``%20``.
        connection: Auth0 connection to skip the provider picker with.
        audience: API identifier the access token is issued for.

    Returns:
        The complete authorization URL.

    Example:
        >>> auth0_authorize_url(config, "token", "https://my-app/", ["openid", "email"])
        "https://my-app.auth0.com/authorize?response_type=token&client_id=aBcD1234&redirect_uri=https://my-app/&scope=openid%20email"
    """
    params = [("response_type", response_type), ("client_id", config.client_id)]
    if connection is not None:
        params.append(("connection", connection))
    if audience is not None:
        params.append(("audience", audience))
    params.append(("redirect_uri", redirect_url))

    query = "&".join(f"{name}={quote(value, safe=_URL_SAFE)}" for name, value in params)
    scope = quote(" ".join(scopes), safe="")
    return f"{endpoint_url(config.endpoint, '/authorize')}?{query}&scope={scope}"
