"""atlwiki - Render parsed Markdown trees as Atlassian wiki markup.

atlwiki converts a CommonMark/GFM document tree, as produced by a Markdown
parser, into the wiki markup used by Jira and Confluence. The package does
not parse Markdown itself: callers hand over the tree together with the
source bytes its text segments refer to.

Supported elements include headings, paragraphs, emphasis, code spans and
code blocks, block quotes, nested ordered and unordered lists, task lists,
tables, links, autolinks, images, footnotes, definition lists, raw HTML
blocks and a fixed set of inline HTML tags.

Examples
--------
Build a tree and convert it:

    >>> from atlwiki import convert
    >>> from atlwiki.ast import DocumentBuilder
    >>> builder = DocumentBuilder()
    >>> doc = builder.add_heading(1, "Heading 1").get_document()
    >>> convert(doc, builder.get_source())
    'h1.Heading 1\\n\\n'

Write the markup to a file:

    >>> from atlwiki import render
    >>> render(doc, "page.wiki", builder.get_source())

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from atlwiki.api import convert, render
from atlwiki.exceptions import (
    AtlWikiError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from atlwiki.options import AtlassianRendererOptions, BaseRendererOptions
from atlwiki.renderers import AtlassianWikiRenderer

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "convert",
    "render",
    "AtlassianWikiRenderer",
    "AtlassianRendererOptions",
    "BaseRendererOptions",
    "AtlWikiError",
    "InvalidOptionsError",
    "OutputWriteError",
    "RenderingError",
    "ValidationError",
]
