"""Decoding of Auth0 profile payloads."""

import logging
from typing import Any

from pydantic import ValidationError

from .exceptions import DecodeError
from .types import Auth0Profile, OAuth2Identity

logger = logging.getLogger(__name__)

JSONPayload = dict[str, Any] | str | bytes


def decode_profile(
    payload: JSONPayload,
    user_metadata: Any = dict[str, Any],
    app_metadata: Any = dict[str, Any],
) -> Auth0Profile:
    """Validate a profile payload returned by Auth0.

    Args:
        payload: The decoded JSON object, or the raw JSON text/bytes.
        user_metadata: Type used to validate ``user_metadata`` when present.
            Any type pydantic can validate, such as a ``BaseModel`` subclass.
        app_metadata: Type used to validate ``app_metadata`` when present.

    Returns:
        The validated profile.

    Raises:
        DecodeError: If a required field is missing or mistyped,
            ``created_at`` is not an ISO-8601 timestamp, or a metadata
            object is rejected by its type.

    Example:
        >>> profile = decode_profile(resp.json(), user_metadata=Preferences)
        >>> profile.user_metadata.theme
        "dark"
    """
    model = Auth0Profile[user_metadata, app_metadata]
    return _validate(model, payload)


def decode_identity(payload: JSONPayload) -> OAuth2Identity:
    """Validate a single linked identity object."""
    return _validate(OAuth2Identity, payload)


def _validate(model, payload):
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return model.model_validate_json(payload)
        return model.model_validate(payload)
    except ValidationError as e:
        error = DecodeError.from_validation_error(e)
        logger.debug(
            f"Failed to decode {model.__name__}: {error}",
            extra={"field": error.field, "error_count": len(error.errors)},
        )
        raise error from e
