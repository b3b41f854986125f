#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the atlwiki library.

This module defines specialized exception classes for the error conditions
that can occur while configuring a renderer or converting a document tree
to Atlassian wiki markup.

Exception Hierarchy
-------------------
- AtlWikiError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - RenderingError (output generation failures)
    - OutputWriteError (sink or destination write failures)

"""

from typing import Any


class AtlWikiError(Exception):
    """Base exception class for all atlwiki-specific errors.

    Catching this will catch every error raised by the library itself.

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


class ValidationError(AtlWikiError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(AtlWikiError):
    """Exception raised when output rendering fails.

    A rendering error means the conversion did not complete. Whatever was
    written before the failure is kept in ``partial_output`` for inspection,
    but it is not guaranteed to be well-formed markup.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure
    partial_output : str, optional
        Text accumulated before the failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred
    partial_output : str or None
        Output written before the walk was aborted

    """

    def __init__(
        self,
        message: str,
        rendering_stage: str | None = None,
        original_error: Exception | None = None,
        partial_output: str | None = None,
    ):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage
        self.partial_output = partial_output


class OutputWriteError(RenderingError):
    """Exception raised when writing rendered output fails.

    Raised both for in-memory sink failures (the configured size limit was
    exceeded) and for failures writing the flushed text to its destination.

    Parameters
    ----------
    message : str, optional
        Custom error message. If not provided, a default message is built
        from ``file_path``
    file_path : str, optional
        Path of the destination, when the destination is a file
    rendering_stage : str, default "file_write"
        Either ``"sink_write"`` or ``"file_write"``
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that failed to write

    """

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        rendering_stage: str = "file_write",
        original_error: Exception | None = None,
    ):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}" if file_path else "Failed to write output"
        super().__init__(message, rendering_stage=rendering_stage, original_error=original_error)
        self.file_path = file_path

