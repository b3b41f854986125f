#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/utils/io_utils.py
"""I/O utilities for rendered output.

This module provides the in-memory ``OutputSink`` that emission routines
write to during a conversion, and ``write_content``, the single place where
finished text is handed to a destination (file path or file-like object).

"""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from atlwiki.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

OutputDestination = Union[str, Path, IO[bytes], IO[str]]


class OutputSink:
    """Append-only text buffer written to by emission routines.

    Parameters
    ----------
    max_size : int or None, default = None
        Maximum number of characters the sink accepts. ``None`` means
        unlimited.

    Raises
    ------
    OutputWriteError
        From ``write`` when the size limit would be exceeded; the rejected
        text is not written

    """

    def __init__(self, max_size: int | None = None) -> None:
        """Initialize an empty sink."""
        self.max_size = max_size
        self._parts: list[str] = []
        self._size = 0

    def write(self, text: str) -> None:
        if not text:
            return
        new_size = self._size + len(text)
        if self.max_size is not None and new_size > self.max_size:
            raise OutputWriteError(
                f"Rendered output exceeds the configured limit of {self.max_size} characters",
                rendering_stage="sink_write",
            )
        self._parts.append(text)
        self._size = new_size

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)

    def __len__(self) -> int:
        return self._size

    def flush_to(self, output: OutputDestination, encoding: str = "utf-8") -> None:
        """Write the accumulated text to ``output`` in one operation.

        Raises
        ------
        OutputWriteError
            If the destination cannot be written

        """
        try:
            write_content(self.getvalue(), output, encoding=encoding)
        except OSError as e:
            file_path = str(output) if isinstance(output, (str, Path)) else None
            raise OutputWriteError(file_path=file_path, original_error=e) from e


def _is_binary_stream(output: IO) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: OutputDestination, encoding: str = "utf-8") -> None:
    """Write rendered text to an output destination.

    Parameters
    ----------
    content : str
        Content to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Can be:
        - str or Path: Writes content to file at that path
        - IO[bytes]: Writes encoded content to binary file-like object
        - IO[str]: Writes content to text file-like object
    encoding : str, default = "utf-8"
        Encoding used for paths and binary streams

    Raises
    ------
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("h1.Title", buffer)
        >>> buffer.getvalue()
        b'h1.Title'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        output_path.write_text(content, encoding=encoding)
        logger.debug("Wrote %d characters to %s", len(content), output_path)
        return

    if hasattr(output, "write"):
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode(encoding))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")
