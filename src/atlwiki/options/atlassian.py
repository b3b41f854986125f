#  Copyright (c) 2025 Tom Villani, Ph.D.

# atlwiki/options/atlassian.py
"""Configuration options for Atlassian wiki markup rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from atlwiki.constants import (
    DEFAULT_FOOTNOTE_RESOLUTION,
    DEFAULT_HTML_BLOCK_LANGUAGE,
    FOOTNOTE_RESOLUTION_MODES,
    FootnoteResolution,
)
from atlwiki.options.base import BaseRendererOptions


@dataclass(frozen=True)
class AtlassianRendererOptions(BaseRendererOptions):
    """Configuration options for tree-to-Atlassian-wiki rendering.

    Parameters
    ----------
    footnote_resolution : {"index", "scan"}, default "index"
        How footnote links find their definitions:
        - "index": Build an index-to-label table once per conversion
        - "scan": Search the document's footnote lists for every link
        Both give the same output.
    html_block_language : str, default "html"
        Language annotation of the ``{code:...}`` macro wrapping raw HTML
        blocks. An empty string emits a plain ``{code}`` macro.

    Examples
    --------
    Basic usage:
        >>> options = AtlassianRendererOptions()
        >>> renderer = AtlassianWikiRenderer(options)

    Plain code macro for HTML blocks:
        >>> options = AtlassianRendererOptions(html_block_language="")

    """

    footnote_resolution: FootnoteResolution = field(
        default=DEFAULT_FOOTNOTE_RESOLUTION,
        metadata={
            "help": "Footnote lookup strategy: index (precomputed) or scan (per reference)",
            "choices": FOOTNOTE_RESOLUTION_MODES,
            "importance": "advanced",
        },
    )
    html_block_language: str = field(
        default=DEFAULT_HTML_BLOCK_LANGUAGE,
        metadata={"help": "Language annotation of the code macro wrapping HTML blocks", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()

        if self.footnote_resolution not in FOOTNOTE_RESOLUTION_MODES:
            raise ValueError(
                f"Invalid footnote_resolution: {self.footnote_resolution!r}. "
                f"Must be one of: {', '.join(FOOTNOTE_RESOLUTION_MODES)}"
            )
        if any(ch in self.html_block_language for ch in "{}\n"):
            raise ValueError(f"html_block_language must not contain braces or newlines: {self.html_block_language!r}")
