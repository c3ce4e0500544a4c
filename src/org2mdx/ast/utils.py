#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes

Examples
--------
    >>> from org2mdx.ast import TableCell, Text
    >>> from org2mdx.ast.utils import extract_text
    >>>
    >>> extract_text(TableCell(content=[Text(content="<l>")]), joiner="")
    '<l>'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from org2mdx.ast.nodes import Code, Text, get_node_children

if TYPE_CHECKING:
    from org2mdx.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = " ") -> str:
    """Extract plain text from a node or list of nodes.

    Text and inline code contents are concatenated recursively, joining the
    parts found at each level of the tree with ``joiner``.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = " "
        String to use for joining text parts. Use "" to keep the text
        exactly as written.

    Returns
    -------
    str
        Concatenated text content

    """
    if isinstance(node_or_nodes, list):
        text_parts = []
        for node in node_or_nodes:
            extracted = extract_text(node, joiner=joiner)
            if extracted:
                text_parts.append(extracted)
        return joiner.join(text_parts)

    node = node_or_nodes
    if isinstance(node, (Text, Code)):
        return node.content

    text_parts = []
    for child in get_node_children(node):
        extracted = extract_text(child, joiner=joiner)
        if extracted:
            text_parts.append(extracted)

    return joiner.join(text_parts)


__all__ = [
    "extract_text",
]
