"""Exceptions raised by the Auth0 client."""

from pydantic import ValidationError


class DecodeError(ValueError):
    """Raised when a server response does not match the expected schema.

    Attributes:
        field: Dotted path of the first failing field (e.g.
            ``identities.0.isSocial``), or None when the payload as a
            whole was rejected.
        errors: Every ``(path, message)`` pair reported by the parser.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[tuple[str, str]] | None = None,
    ):
        super().__init__(message)
        self.field = field
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "DecodeError":
        """Build a DecodeError from a pydantic validation failure."""
        errors = [
            (".".join(str(part) for part in error["loc"]), error["msg"])
            for error in exc.errors()
        ]
        path, reason = errors[0]
        message = f"{path}: {reason}" if path else reason
        extra = len(errors) - 1
        if extra:
            message += f" (and {extra} more error{'s' if extra > 1 else ''})"
        return cls(message, field=path or None, errors=errors)
