#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for md_video_embed.

Only setup-time problems raise. Anything that goes wrong while handling an
individual video block is reported as a rejected result instead, and the
block is left as ordinary code.

Exception Hierarchy
-------------------
- VideoEmbedError (base exception)

  - ValidationError (parameter/option validation, also a ValueError)
    - InvalidConfigurationError (provider options rejected at attach time)

  - ConfigFileError (CLI configuration file could not be loaded)

"""

from typing import Any


class VideoEmbedError(Exception):
    """Base exception class for all md_video_embed errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(VideoEmbedError, ValueError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidConfigurationError(ValidationError):
    """Raised when a recognised provider rejects its attach-time options.

    The message always reads ``Invalid configuration for <provider>: <reason>``.

    Parameters
    ----------
    provider : str
        Identifier of the provider whose options were rejected
    reason : str
        Reason reported by the provider's validator
    options : any, optional
        The rejected options

    """

    def __init__(self, provider: str, reason: str, options: Any = None):
        """Initialize with the provider name and its rejection reason."""
        super().__init__(
            f"Invalid configuration for {provider}: {reason}",
            parameter_name=provider,
            parameter_value=options,
        )
        self.provider = provider
        self.reason = reason


class ConfigFileError(VideoEmbedError):
    """Raised when a CLI configuration file cannot be read or parsed.

    Parameters
    ----------
    message : str
        Description of the problem
    file_path : str, optional
        Path of the offending file
    original_error : Exception, optional
        Underlying parse or I/O error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the error with the offending file path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path
