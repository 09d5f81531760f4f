"""Domain exceptions."""


class UserControlError(Exception):
    """Base exception for user control."""

    pass


class InvalidConstructionArgument(UserControlError, ValueError):
    """Entity constructed with a missing or malformed required field."""

    pass


class ValidationError(UserControlError):
    """Validation failed for input data."""

    pass


class NotFound(UserControlError):
    """Requested resource was not found."""

    def __init__(self, resource: str, key: str) -> None:
        super().__init__(f"{resource} not found: {key}")
        self.resource = resource
        self.key = key
