#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the shortcode parser.

Malformed markup is never an error: unmatched openers, orphan closers and
stray brackets are absorbed into a best-effort tree. The exceptions below
cover misuse of the API and resource limits.

Exception Hierarchy
-------------------
- ShortcodeError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for the parser)

  - ParsingError (parsing could not complete)
    - NestingDepthError (nesting deeper than the configured limit)

  - InputError (CLI input could not be read)

"""

from typing import Any


class ShortcodeError(Exception):
    """Base exception class for all shortcode-parser errors.

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


class ValidationError(ShortcodeError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options object is given to the parser.

    Parameters
    ----------
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(self, expected_type: type, received_type: type, message: str | None = None):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"ShortcodeParser expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(ShortcodeError):
    """Exception raised when parsing cannot complete.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    position : int, optional
        Character offset in the parsed string where the failure occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, position: int | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.position = position


class NestingDepthError(ParsingError):
    """Exception raised when shortcodes nest deeper than the configured limit.

    Parameters
    ----------
    depth : int
        Nesting depth that was reached
    limit : int
        Configured maximum nesting depth
    position : int, optional
        Offset of the opening tag that exceeded the limit

    """

    def __init__(self, depth: int, limit: int, position: int | None = None):
        """Initialize the nesting depth error."""
        super().__init__(f"Shortcode nesting depth {depth} exceeds limit of {limit}", position=position)
        self.depth = depth
        self.limit = limit


class InputError(ShortcodeError):
    """Exception raised when command-line input cannot be read.

    Parameters
    ----------
    message : str
        Description of the input problem
    input_path : str, optional
        Path that could not be read

    """

    def __init__(self, message: str, input_path: str | None = None, original_error: Exception | None = None):
        """Initialize the input error."""
        super().__init__(message, original_error=original_error)
        self.input_path = input_path
