"""Requests against the Auth0 token-info and management APIs.

The ``*_request`` builders are pure: they return an unsent
``httpx.Request`` that any httpx client can send. The async helpers
send those requests and decode the returned user profile.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from .decoders import decode_profile
from .types import Auth0Profile, Endpoint, IdToken, UserID
from .urls import endpoint_url

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = httpx.Timeout(10.0)


def get_auth0_profile_request(endpoint: Endpoint, id_token: IdToken) -> httpx.Request:
    """Describe the request that fetches the profile for an id token.

    The token is sent only in the JSON body; no Authorization header is set.
    """
    return httpx.Request(
        "POST",
        endpoint_url(endpoint, "/tokeninfo"),
        json={"id_token": id_token},
    )


def update_user_metadata_request(
    endpoint: Endpoint,
    id_token: IdToken,
    user_id: UserID,
    user_metadata: Any,
) -> httpx.Request:
    """Describe the request that replaces a user's ``user_metadata``.

    Args:
        endpoint: The Auth0 tenant base URL.
        id_token: Bearer token authorized for the management API.
        user_id: The Auth0 user identifier; percent-encoded into the path.
        user_metadata: Any JSON-serializable value, or a pydantic model.

    Returns:
        An unsent PATCH request to ``/api/v2/users/{user_id}``.
    """
    if isinstance(user_metadata, BaseModel):
        user_metadata = user_metadata.model_dump(mode="json")
    return httpx.Request(
        "PATCH",
        endpoint_url(endpoint, f"/api/v2/users/{quote(user_id, safe='')}"),
        headers={"Authorization": f"Bearer {id_token}"},
        json={"user_metadata": user_metadata},
    )


async def fetch_auth0_profile(
    endpoint: Endpoint,
    id_token: IdToken,
    user_metadata_type: Any = dict[str, Any],
    app_metadata_type: Any = dict[str, Any],
    client: httpx.AsyncClient | None = None,
) -> Auth0Profile:
    """Fetch and decode the profile of the user an id token belongs to.

    ``user_metadata_type`` and ``app_metadata_type`` are passed to
    ``decode_profile`` as the metadata types.

    Raises:
        httpx.HTTPStatusError: If Auth0 answers with a non-2xx status.
        httpx.HTTPError: On any other transport failure.
        DecodeError: If the response body is not a valid profile.
    """
    resp = await _send(get_auth0_profile_request(endpoint, id_token), client)
    return decode_profile(resp.content, user_metadata_type, app_metadata_type)


async def update_user_metadata(
    endpoint: Endpoint,
    id_token: IdToken,
    user_id: UserID,
    user_metadata: Any,
    user_metadata_type: Any = dict[str, Any],
    app_metadata_type: Any = dict[str, Any],
    client: httpx.AsyncClient | None = None,
) -> Auth0Profile:
    """Replace a user's ``user_metadata`` and return the updated profile.

    Raises:
        httpx.HTTPStatusError: If Auth0 answers with a non-2xx status.
        httpx.HTTPError: On any other transport failure.
        DecodeError: If the response body is not a valid profile.
    """
    request = update_user_metadata_request(endpoint, id_token, user_id, user_metadata)
    resp = await _send(request, client)
    return decode_profile(resp.content, user_metadata_type, app_metadata_type)


async def _send(request: httpx.Request, client: httpx.AsyncClient | None) -> httpx.Response:
    logger.debug(f"Sending {request.method} {request.url.path}")
    if client is None:
        async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as client:
            resp = await client.send(request)
    else:
        resp = await client.send(request)

    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError:
        logger.warning(
            f"Auth0 request failed: {request.method} {request.url.path} -> {resp.status_code}",
            extra={"status_code": resp.status_code},
        )
        raise
    return resp
