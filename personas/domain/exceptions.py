"""Domain exceptions."""

from typing import Any, Optional


class PersonasException(Exception):
    """Base exception for the personas package."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(PersonasException):
    """Domain validation error."""

    def __init__(self, field: str, value: Any, reason: Optional[str] = None):
        message = f"Invalid {field}: {value!r}"
        if reason:
            message += f" - {reason}"

        self.field = field
        super().__init__(
            message=message,
            code="VALIDATION_ERROR"
        )


class InvalidPersonalityError(PersonasException):
    """Personality aggregate could not be built from the given parts."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid personality: {reason}",
            code="INVALID_PERSONALITY"
        )


class PersonalityNotFoundError(PersonasException):
    """Personality not found error."""

    def __init__(self, name: str):
        super().__init__(
            message=f'Personality "{name}" not found',
            code="PERSONALITY_NOT_FOUND"
        )


class PersonalityAlreadyExistsError(PersonasException):
    """Personality name or alias already taken."""

    def __init__(self, name: str, details: Optional[str] = None):
        message = f'Personality "{name}" already exists'
        if details:
            message += f": {details}"

        super().__init__(
            message=message,
            code="PERSONALITY_EXISTS"
        )


class PermissionDeniedError(PersonasException):
    """Requester is not allowed to change the personality."""

    def __init__(self, action: str, user_id: str):
        super().__init__(
            message=f"User {user_id} is not allowed to {action}",
            code="PERMISSION_DENIED"
        )


class PersistenceError(PersonasException):
    """Repository failure."""

    def __init__(self, operation: str, details: Optional[str] = None):
        message = f"Persistence error during {operation}"
        if details:
            message += f": {details}"

        super().__init__(
            message=message,
            code="PERSISTENCE_ERROR"
        )
