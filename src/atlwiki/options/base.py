#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/options/base.py
"""Base classes for renderer options.

This module defines the foundation classes for renderer configuration.
Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from __future__ import annotations

import codecs
import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from atlwiki.constants import DEFAULT_MAX_OUTPUT_SIZE, DEFAULT_SOURCE_ENCODING


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    source_encoding : str, default "utf-8"
        Encoding used to decode source segments and to encode ``str`` sources
    max_output_size : int or None, default None
        Maximum number of characters a single conversion may produce.
        ``None`` means unlimited.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    source_encoding: str = field(
        default=DEFAULT_SOURCE_ENCODING,
        metadata={"help": "Encoding of the source document the tree's segments refer to", "importance": "core"},
    )
    max_output_size: int | None = field(
        default=DEFAULT_MAX_OUTPUT_SIZE,
        metadata={
            "help": "Maximum number of characters of rendered output (None for unlimited)",
            "type": int,
            "importance": "security",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if not self.source_encoding:
            raise ValueError("source_encoding must not be empty")
        try:
            codecs.lookup(self.source_encoding)
        except LookupError as e:
            raise ValueError(f"Unknown source_encoding: {self.source_encoding!r}") from e

        if self.max_output_size is not None and self.max_output_size <= 0:
            raise ValueError(f"max_output_size must be positive, got {self.max_output_size}")
