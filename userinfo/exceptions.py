"""Custom exceptions for the user info recorder."""


class UserInfoError(Exception):
    """Base exception for user info errors."""
    pass


class ValidationError(UserInfoError):
    """
    Raised when console input cannot form a UserRecord.

    Attributes:
        field: Name of the offending field ("first_name", "surname" or "age").
        message: User-facing text explaining the rejection.
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message
