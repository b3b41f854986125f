#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the atlwiki library.

This module centralizes the literal markup fragments of the Atlassian wiki
dialect and the default configuration values used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Wiki Markup Fragments - Markers written by the renderer
3. Renderer Defaults - Default option values
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

FootnoteResolution = Literal["index", "scan"]
FOOTNOTE_RESOLUTION_MODES: tuple[str, ...] = ("index", "scan")

# =============================================================================
# Wiki Markup Fragments
# =============================================================================

NEWLINE = "\n"

# Inline formatting
EMPHASIS = "_"
STRONG = "*"
CITATION = "??"
INSERTED = "+"
DELETED = "-"
MONOSPACE_START = "{{"
MONOSPACE_END = "}}"
SUBSCRIPT = "~"
SUPERSCRIPT = "^"
QUOTATION = '"'

# Block formatting
HORIZONTAL_LINE = "----"
QUOTE_MARKER = "{quote}"
CODE_MARKER = "{code}"
CODE_LANGUAGE_TEMPLATE = "{{code:{language}}}"
HEADING_TEMPLATE = "h{level}."

# Lists
UNORDERED_LIST_MARKER = "*"
ORDERED_LIST_MARKER = "#"

# Tables
TABLE_CELL_SEPARATOR = "|"
TABLE_HEADER_SEPARATOR = "||"

# Task lists
TASK_CHECKED = "[x] "
TASK_UNCHECKED = "[  ] "

# Definition lists
DEFINITION_TERM_MARKER = "-  "
DEFINITION_DESCRIPTION_MARKER = "--  "

# Links and footnotes
MAILTO_PREFIX = "mailto:"
FOOTNOTE_ANCHOR_TEMPLATE = "{{anchor:{ref}}}{ref}: "
FOOTNOTE_REFERENCE_TEMPLATE = "[#{ref}]"

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_FOOTNOTE_RESOLUTION: FootnoteResolution = "index"
DEFAULT_HTML_BLOCK_LANGUAGE = "html"
DEFAULT_SOURCE_ENCODING = "utf-8"
DEFAULT_MAX_OUTPUT_SIZE: int | None = None
