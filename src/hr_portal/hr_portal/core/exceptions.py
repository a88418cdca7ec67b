class DomainError(Exception):
    """Base exception for business rule violations.

    `status_code` is the HTTP status the API layer answers with.
    """

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or a required field is missing."""


class InvalidStatusError(ValidationError):
    """Raised when a leave decision is neither Approved nor Rejected."""


class NotFoundError(DomainError):
    status_code = 404


class UserNotFoundError(NotFoundError):
    def __init__(self, message: str = "User not found."):
        super().__init__(message)


class RequestNotFoundError(NotFoundError):
    def __init__(self, message: str = "Leave request not found."):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when the current state forbids the requested transition."""


class AlreadyCheckedInError(ConflictError):
    def __init__(self, message: str = "You have already checked in today."):
        super().__init__(message)


class NotCheckedInError(ConflictError):
    def __init__(self, message: str = "You have not checked in today."):
        super().__init__(message)


class AlreadyCheckedOutError(ConflictError):
    def __init__(self, message: str = "You have already checked out today."):
        super().__init__(message)


class EmailTakenError(ConflictError):
    def __init__(self, message: str = "An account with this email already exists."):
        super().__init__(message)


class AlreadyDecidedError(ConflictError):
    def __init__(self, message: str = "This leave request has already been decided."):
        super().__init__(message)


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401


class ServiceUnavailableError(DomainError):
    """Raised when a collaborator (database, AI service) cannot be reached."""

    status_code = 503
