#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/frontmatter.py
"""YAML frontmatter generation and splitting.

The generated block has the exact shape static-site tooling expects::

    ---
    title: My Notes
    description: Generated from Org-mode
    ---

followed by a blank line before the body.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

_FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


def generate_frontmatter(keywords: Mapping[str, Any]) -> str:
    """Serialize a keyword map into a delimited YAML block.

    Key order is preserved. Values containing YAML-significant characters
    are quoted by the dumper, and long values are never folded.

    Parameters
    ----------
    keywords : Mapping[str, Any]
        Metadata to serialize

    Returns
    -------
    str
        Frontmatter including ``---`` delimiters and a trailing blank line

    Examples
    --------
    >>> print(generate_frontmatter({"title": "a: b"}), end="")
    ---
    title: 'a: b'
    ---
    <BLANKLINE>

    """
    if not keywords:
        return "---\n---\n\n"

    content = yaml.safe_dump(
        dict(keywords),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=float("inf"),
    )
    if not content.endswith("\n"):
        content += "\n"
    return f"---\n{content}---\n\n"


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Separate a leading YAML block from the document body.

    Parameters
    ----------
    text : str
        MDX or Markdown document

    Returns
    -------
    tuple[dict[str, Any], str]
        Parsed frontmatter (empty when absent or invalid) and the remaining body

    """
    match = _FRONTMATTER_PATTERN.match(text)
    if not match:
        return {}, text

    body = text[match.end() :]
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.warning("Failed to parse YAML frontmatter: %s", e)
        return {}, body

    if not isinstance(data, dict):
        return {}, body
    return data, body
