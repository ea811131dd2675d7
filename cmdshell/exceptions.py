"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class UnrecognizedOptionError(BaseAppError):
    """Exception raised when an option token names no known command."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
