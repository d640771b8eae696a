class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class StoreError(DomainError):
    """Raised when a query/insert/delete against the database fails."""


class PartialWriteError(StoreError):
    """Raised when a day was wiped but its replacement rows were not written.

    The day is left with no attendance records; callers must re-run the save.
    """


class NotConfiguredError(DomainError):
    """Raised when required backend settings (DB credentials, secret key) are missing."""
