class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Malformed input: seat label, attendee count, username, page number."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class FormatError(ValidationError):
    """Seat label does not match <letter><digits>."""


class CapacityError(DomainError):
    """Seat cap exceeded or slot sold out."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class InvalidTransitionError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class RecoverableParseWarning(DomainError):
    """Malformed recurrence time string - the offending rule is skipped, never fatal."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 422)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)
