"""Exceptions raised by flexver."""


class FlexverError(Exception):
    """Base exception for all flexver errors."""


class InvalidVersionError(FlexverError, ValueError):
    """Raised when a string or set of components is not a valid version."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        """Initialize the error.

        Args:
            value: The rejected input.
            reason: Optional explanation appended to the message.
        """
        self.value = value
        self.reason = reason
        message = f"Invalid version format: {value}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ConfigError(FlexverError):
    """Raised when configuration cannot be loaded or is invalid."""
