#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tree passes run by the structural transform.

Org-tree passes are :class:`~org2mdx.ast.NodeTransformer` subclasses that
record information in a :class:`PluginContext`; HTML-tree passes are
functions that read it back while mutating the BeautifulSoup tree.
"""

from org2mdx.plugins.captions import CaptionTransform
from org2mdx.plugins.checkboxes import CheckboxTransform, restore_checkboxes
from org2mdx.plugins.context import CaptionRecord, PluginContext, TableAlignmentRecord
from org2mdx.plugins.html_passes import flatten_figures, make_literal, normalize_tables, rewrite_math, wrap_figures
from org2mdx.plugins.table_alignment import TableAlignmentTransform

__all__ = [
    "CaptionRecord",
    "CaptionTransform",
    "CheckboxTransform",
    "PluginContext",
    "TableAlignmentRecord",
    "TableAlignmentTransform",
    "flatten_figures",
    "make_literal",
    "normalize_tables",
    "restore_checkboxes",
    "rewrite_math",
    "wrap_figures",
]
