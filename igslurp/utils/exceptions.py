"""Custom exceptions for igslurp."""

from typing import Optional


class IgSlurpError(Exception):
    """Base exception for all igslurp operations."""

    exit_code = 1


class ConfigurationError(IgSlurpError):
    """Raised when no API key can be found or configuration is invalid."""
    pass


class ValidationError(IgSlurpError):
    """Raised when a command is missing its required value."""
    pass


class UnknownCommandError(IgSlurpError):
    """Raised when the command name is not recognized."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unknown command: {command}")


class ApiError(IgSlurpError):
    """Raised when the API response declares an ``error`` field."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Instagram API returned: {message}")


class ResolutionError(IgSlurpError):
    """Raised when a username cannot be resolved to a user ID."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Could not resolve username '{value}' to user ID")


class TransportError(IgSlurpError):
    """Raised when the request fails below the API level."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
