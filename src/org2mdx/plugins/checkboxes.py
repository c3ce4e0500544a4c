#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/plugins/checkboxes.py
"""Checkbox pass: carry the three Org checkbox states through the pipeline.

GFM task lists only know checked and unchecked, so the HTML round trip
would collapse ``[-]``. Each task item instead gets a plain-text marker at
the start of its first paragraph; :func:`restore_checkboxes` swaps the
markers for ``[ ]``, ``[x]`` and ``[-]`` in the final Markdown.
"""

from __future__ import annotations

import re

from org2mdx.ast import ListItem, Node, NodeTransformer, Paragraph, Text
from org2mdx.constants import CHECKBOX_MARKERS, CHECKBOX_SYNTAX

_MARKER_STATES = {marker: status for status, marker in CHECKBOX_MARKERS.items()}
_MARKER_PATTERN = re.compile("(" + "|".join(CHECKBOX_MARKERS.values()) + ")( ?)")


class CheckboxTransform(NodeTransformer):
    """Replace ``ListItem.task_status`` with a leading inline marker."""

    def visit_list_item(self, node: ListItem) -> ListItem:
        """Prefix the first paragraph of a task item with its checkbox marker."""
        children: list[Node] = self._transform_children(node.children)
        if node.task_status is None:
            return ListItem(children=children, metadata=node.metadata.copy())

        marker = Text(content=f"{CHECKBOX_MARKERS[node.task_status]} ")
        if children and isinstance(children[0], Paragraph):
            first = children[0]
            children[0] = Paragraph(content=[marker, *first.content], metadata=first.metadata.copy())
        else:
            children.insert(0, Paragraph(content=[marker]))
        return ListItem(children=children, task_status=None, metadata=node.metadata.copy())


def restore_checkboxes(markdown: str) -> str:
    """Turn checkbox markers back into ``[ ]``, ``[x]`` and ``[-]``.

    Examples
    --------
    >>> restore_checkboxes("- CHECKBOXINDETERMINATEMARKER c")
    '- [-] c'

    """
    return _MARKER_PATTERN.sub(lambda m: CHECKBOX_SYNTAX[_MARKER_STATES[m.group(1)]] + m.group(2), markdown)
