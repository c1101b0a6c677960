"""Errors raised by the user store."""


class UserStoreError(Exception):
    """Base class for user store failures."""


class DuplicateEmailError(UserStoreError):
    """A user with the same email address is already registered."""

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


class StoreUnavailableError(UserStoreError):
    """The backing store could not complete the operation."""

    def __init__(self, operation: str, reason: str | None = None):
        message = f"User store unavailable during '{operation}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.operation = operation
