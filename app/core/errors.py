"""Error taxonomy shared by services and the HTTP boundary."""


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class ValidationError(ServiceError):
    """Malformed or out-of-range input detected before persistence."""


class ConflictError(ServiceError):
    """A unique constraint (name, email, username) would be violated."""


class NotFoundError(ServiceError):
    """A referenced entity does not exist."""


class AuthenticationError(ServiceError):
    """Credentials are missing or do not match a stored user."""


class AuthorizationError(ServiceError):
    """Authenticated, but the role may not invoke the operation."""


class UnexpectedError(ServiceError):
    """Anything else, e.g. the store is unavailable."""
