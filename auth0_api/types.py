"""Value types for Auth0 configuration and user profiles."""

import re
from datetime import datetime
from typing import Any, Generic, NewType, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

Endpoint = NewType("Endpoint", str)
IdToken = NewType("IdToken", str)
UserID = NewType("UserID", str)

# Extended calendar date at the start of an ISO-8601 timestamp.
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

M = TypeVar("M")
A = TypeVar("A")


class Auth0Config(BaseModel):
    """Connection settings for an Auth0 tenant.

    Attributes:
        endpoint: The tenant base URL, e.g. ``https://my-app.auth0.com``.
        client_id: The application's client ID.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: Endpoint
    client_id: str


class OAuth2Identity(BaseModel):
    """One external account linked to an Auth0 user.

    Attributes:
        connection: Name of the Auth0 connection, e.g. ``google-oauth2``.
        is_social: Whether the connection is a social provider.
        provider: The identity provider name.
        user_id: The user's ID at that provider.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    connection: StrictStr
    is_social: StrictBool = Field(alias="isSocial")
    provider: StrictStr
    user_id: StrictStr


class Auth0Profile(BaseModel, Generic[M, A]):
    """Normalized Auth0 user profile.

    The two type parameters describe the application-defined
    ``user_metadata`` and ``app_metadata`` objects. Optional fields are
    ``None`` when the payload omits them.

    Attributes:
        email: The user's email address.
        email_verified: Whether the email address has been verified.
        name: The user's full name.
        nickname: The user's nickname.
        picture: URL to the user's profile picture.
        user_id: The Auth0 user identifier.
        identities: Linked identities, in the order Auth0 returns them.
        created_at: When the user was created.
        family_name: The user's last name.
        given_name: The user's first name.
        global_client_id: Auth0 global client ID.
        locale: The user's locale preference.
        user_metadata: Data the user can read and edit.
        app_metadata: Data the user can read but not edit.
    """

    model_config = ConfigDict(frozen=True)

    email: StrictStr
    email_verified: StrictBool
    name: StrictStr
    nickname: StrictStr
    picture: StrictStr
    user_id: StrictStr
    identities: list[OAuth2Identity]
    created_at: datetime
    family_name: StrictStr | None = None
    given_name: StrictStr | None = None
    global_client_id: StrictStr | None = None
    locale: StrictStr | None = None
    user_metadata: M | None = None
    app_metadata: A | None = None

    @field_validator("created_at", mode="before")
    @classmethod
    def _timestamp_string(cls, value: Any) -> Any:
        # Auth0 sends ISO-8601 strings; pydantic would read digits as epoch time.
        if isinstance(value, datetime):
            return value
        if isinstance(value, str) and _ISO_DATE.match(value):
            return value
        raise ValueError(f"expected an ISO-8601 timestamp string, got {value!r}")
