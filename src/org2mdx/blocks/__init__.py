#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Protected-region handling for the Org to MDX pipeline.

Regions that generic Markdown formatting would mangle (source code, raw
HTML/JSX, LaTeX, callouts, drawers) are swapped for placeholder tokens before
the structural transform and restored afterwards.
"""

from org2mdx.blocks.context import PLACEHOLDER_PATTERN, BlockContext, Region
from org2mdx.blocks.extract import extract_regions
from org2mdx.blocks.restore import drawer_title, restore_regions
from org2mdx.blocks.scanner import Fence, find_fences

__all__ = [
    "PLACEHOLDER_PATTERN",
    "BlockContext",
    "Fence",
    "Region",
    "drawer_title",
    "extract_regions",
    "find_fences",
    "restore_regions",
]
