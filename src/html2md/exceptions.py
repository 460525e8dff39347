#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2md library.

This module defines the exception classes raised while configuring,
reading and rendering HTML documents. They carry more context than the
generic built-ins they usually wrap.

Exception Hierarchy
-------------------
- Html2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidNodeError (tree node without the expected shape)

  - InputError (HTML source cannot be read)

  - RenderingError (Markdown generation failures)

"""

from typing import Any


class Html2MdError(Exception):
    """Base exception class for all html2md-specific errors.

    Catching this will catch every error raised by the library.

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


class ValidationError(Html2MdError):
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


class InvalidNodeError(ValidationError):
    """Exception raised when a tree node lacks the shape the renderer expects.

    The renderer accepts BeautifulSoup elements and strings only. Anything
    else is a caller error and is reported immediately instead of being
    rendered as empty text.

    Parameters
    ----------
    node : any
        The offending object
    message : str, optional
        Custom error message. If not provided, one is generated from the node type

    Attributes
    ----------
    node_type : type
        Type of the rejected object

    """

    def __init__(self, node: Any, message: str | None = None):
        """Initialize the invalid node error."""
        if message is None:
            message = (
                f"Cannot render object of type '{type(node).__name__}': "
                f"expected a BeautifulSoup Tag or NavigableString"
            )
        super().__init__(message, parameter_name="node", parameter_value=node)
        self.node_type = type(node)


class InputError(Html2MdError):
    """Exception raised when the HTML source cannot be read.

    Parameters
    ----------
    message : str
        Description of the input failure
    input_type : str, optional
        Kind of input that failed ("path", "file", "bytes", ...)
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, input_type: str | None = None, original_error: Exception | None = None):
        """Initialize the input error."""
        super().__init__(message, original_error)
        self.input_type = input_type


class RenderingError(Html2MdError):
    """Exception raised when Markdown rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage
