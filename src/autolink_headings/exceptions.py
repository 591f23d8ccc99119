#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the autolink_headings library.

This module defines the exception classes raised while configuring and
applying the heading autolink transform. All errors are raised synchronously
and propagate to the caller; nothing is caught or retried internally.

Exception Hierarchy
-------------------
- AutolinkError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigurationError (unknown behavior, wrong template shape, bad test)

  - CloneError (static template holds a value that cannot be deep-copied)

  - FileError (config or input file could not be read)

"""

from typing import Any


class AutolinkError(Exception):
    """Base exception class for all autolink_headings errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(AutolinkError):
    """Exception raised for invalid input parameters, options or trees.

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class ConfigurationError(ValidationError):
    """Exception raised when transform options cannot be resolved.

    Raised at configuration time, before any tree is touched, for:

    - an unrecognized ``behavior`` value
    - a static ``content``, ``group`` or ``properties`` template of the wrong shape
    - a ``test`` that cannot be compiled into a heading predicate
    - unknown keys in configuration data

    """


class CloneError(AutolinkError):
    """Exception raised when a static template cannot be deep-copied.

    A static template containing a non-data value (a function, an open file,
    an arbitrary object) is a caller bug. The error aborts the transform for
    the whole tree; headings processed before the failure keep their links.

    Parameters
    ----------
    message : str
        Description of the clone failure
    value_type : str, optional
        Type name of the offending value
    original_error : Exception, optional
        The underlying exception, if any

    """

    def __init__(self, message: str, value_type: str | None = None, original_error: Exception | None = None):
        """Initialize the clone error."""
        super().__init__(message, original_error)
        self.value_type = value_type


class FileError(AutolinkError):
    """Exception raised when a configuration or input file cannot be read.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path
