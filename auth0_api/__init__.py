"""Client helpers for the Auth0 authentication and management APIs."""

from .api import (
    fetch_auth0_profile,
    get_auth0_profile_request,
    update_user_metadata,
    update_user_metadata_request,
)
from .config import audience, auth0_config, auth0_endpoint, client_id
from .decoders import decode_identity, decode_profile
from .exceptions import DecodeError
from .types import Auth0Config, Auth0Profile, Endpoint, IdToken, OAuth2Identity, UserID
from .urls import auth0_authorize_url

__all__ = [
    "Auth0Config",
    "Auth0Profile",
    "DecodeError",
    "Endpoint",
    "IdToken",
    "OAuth2Identity",
    "UserID",
    "audience",
    "auth0_authorize_url",
    "auth0_config",
    "auth0_endpoint",
    "client_id",
    "decode_identity",
    "decode_profile",
    "fetch_auth0_profile",
    "get_auth0_profile_request",
    "update_user_metadata",
    "update_user_metadata_request",
]
