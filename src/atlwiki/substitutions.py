#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/substitutions.py
"""Inline HTML to wiki markup substitutions.

Raw inline HTML reaches the renderer one tag at a time (``<i>``, ``</i>``, ...).
Only a closed set of simple formatting tags has a wiki equivalent; any other
fragment, including tags such as ``<strike>``, is written out unchanged.

"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from atlwiki.constants import (
    CITATION,
    DELETED,
    EMPHASIS,
    INSERTED,
    MONOSPACE_END,
    MONOSPACE_START,
    NEWLINE,
    QUOTATION,
    STRONG,
    SUBSCRIPT,
    SUPERSCRIPT,
)

HTML_WIKI_MAPPING: Mapping[str, str] = MappingProxyType(
    {
        "<br>": NEWLINE,
        "<cite>": CITATION,
        "</cite>": CITATION,
        "<code>": MONOSPACE_START,
        "</code>": MONOSPACE_END,
        "<del>": DELETED,
        "</del>": DELETED,
        "<s>": DELETED,
        "</s>": DELETED,
        "<ins>": INSERTED,
        "</ins>": INSERTED,
        "<em>": EMPHASIS,
        "</em>": EMPHASIS,
        "<dfn>": EMPHASIS,
        "</dfn>": EMPHASIS,
        "<i>": EMPHASIS,
        "</i>": EMPHASIS,
        "<kbd>": MONOSPACE_START,
        "</kbd>": MONOSPACE_END,
        "<q>": QUOTATION,
        "</q>": QUOTATION,
        "<strong>": STRONG,
        "</strong>": STRONG,
        "<sub>": SUBSCRIPT,
        "</sub>": SUBSCRIPT,
        "<sup>": SUPERSCRIPT,
        "</sup>": SUPERSCRIPT,
    }
)


def substitute_html_fragment(fragment: str) -> str:
    """Return the wiki equivalent of an inline HTML fragment.

    Parameters
    ----------
    fragment : str
        A single raw HTML fragment, matched exactly (case and whitespace
        sensitive)

    Returns
    -------
    str
        The mapped wiki markup, or ``fragment`` itself when it is not one of
        the known tags

    Examples
    --------
    >>> substitute_html_fragment("<strong>")
    '*'
    >>> substitute_html_fragment("<strike>")
    '<strike>'

    """
    return HTML_WIKI_MAPPING.get(fragment, fragment)
