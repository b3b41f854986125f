#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/renderers/base.py
"""Base classes for tree renderers.

This module defines the abstract base class that renderers inherit from.
The BaseRenderer provides a consistent interface for converting a document
tree, together with the source its segments refer to, into an output format.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import IO, Union

from atlwiki.ast.nodes import Node
from atlwiki.exceptions import InvalidOptionsError
from atlwiki.options.base import BaseRendererOptions

SourceInput = Union[bytes, bytearray, str]


class BaseRenderer(ABC):
    """Abstract base class for all tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from atlwiki.utils.io_utils import write_content
        >>> class MyCustomRenderer(BaseRenderer):
        ...     def render(self, doc, output, source=b""):
        ...         write_content(self.render_to_string(doc, source), output)
        ...
        ...     def render_to_string(self, doc, source=b""):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]], source: SourceInput = b"") -> None:
        """Render the tree to the specified output.

        Parameters
        ----------
        doc : Node
            Root of the tree to render, usually a Document
        output : str, Path, IO[bytes] or IO[str]
            Output destination
        source : bytes or str, default = b""
            Source document the tree's segments refer to

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If output cannot be written

        """
        pass

    def render_to_string(self, doc: Node, source: SourceInput = b"") -> str:
        """Render the tree to a string (if applicable).

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    def render_to_bytes(self, doc: Node, source: SourceInput = b"") -> bytes:
        """Render the tree to UTF-8 encoded bytes.

        Creates a BytesIO buffer, calls ``render()`` with it and returns the
        buffer contents.

        Parameters
        ----------
        doc : Node
            Root of the tree to render
        source : bytes or str, default = b""
            Source document the tree's segments refer to

        Returns
        -------
        bytes
            Rendered document as bytes

        """
        buffer = BytesIO()
        self.render(doc, buffer, source)
        return buffer.getvalue()

    def _encode_source(self, source: SourceInput) -> bytes:
        if isinstance(source, str):
            encoding = self.options.source_encoding if self.options else "utf-8"
            return source.encode(encoding)
        return bytes(source)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
