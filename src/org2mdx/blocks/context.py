#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/blocks/context.py
"""Block Context: the per-conversion side table of extracted regions.

Each extracted region is replaced in the text by a placeholder token made of
an all-caps prefix and a decimal index (``CODEBLOCKMARKER0``). The context
keeps one ordered list per region kind so the restorer can map every token
back to its region.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal, Optional

from org2mdx.constants import (
    CALLOUT_MARKER,
    CODE_BLOCK_MARKER,
    DRAWER_MARKER,
    EXAMPLE_BLOCK_MARKER,
    EXPORT_BLOCK_MARKER,
    EXPORT_HTML_MARKER,
    EXPORT_JSX_MARKER,
    HTML_MARKER,
    JSX_MARKER,
    LATEX_MARKER,
    NESTED_CODE_MARKER,
)

RegionKind = Literal[
    "code",
    "nested_code",
    "example",
    "html",
    "jsx",
    "export_html",
    "export_jsx",
    "export_block",
    "latex",
    "callout",
    "drawer",
]

KIND_PREFIXES: dict[RegionKind, str] = {
    "code": CODE_BLOCK_MARKER,
    "nested_code": NESTED_CODE_MARKER,
    "example": EXAMPLE_BLOCK_MARKER,
    "html": HTML_MARKER,
    "jsx": JSX_MARKER,
    "export_html": EXPORT_HTML_MARKER,
    "export_jsx": EXPORT_JSX_MARKER,
    "export_block": EXPORT_BLOCK_MARKER,
    "latex": LATEX_MARKER,
    "callout": CALLOUT_MARKER,
    "drawer": DRAWER_MARKER,
}

PREFIX_KINDS: dict[str, RegionKind] = {prefix: kind for kind, prefix in KIND_PREFIXES.items()}

# Longest prefixes first so EXPORTHTMLMARKER never matches as HTMLMARKER.
# The look-ahead keeps MARKER1 from matching inside MARKER12.
PLACEHOLDER_PATTERN = re.compile(
    "(" + "|".join(sorted(KIND_PREFIXES.values(), key=len, reverse=True)) + r")(\d+)(?!\d)"
)


@dataclass
class Region:
    """One extracted region.

    Parameters
    ----------
    source : str
        The exact slice removed from the document
    body : str
        Content between the fence lines (or the directive payload)
    language : str, optional
        Source block language, empty when none was given
    args : str
        Remaining header arguments of a source block
    callout_type : str, optional
        Mapped callout type
    drawer_name : str, optional
        Drawer name as written
    backend : str, optional
        Export backend of an export block

    """

    source: str
    body: str
    language: Optional[str] = None
    args: str = ""
    callout_type: Optional[str] = None
    drawer_name: Optional[str] = None
    backend: Optional[str] = None


@dataclass
class BlockContext:
    """Ordered region lists for one conversion call.

    A new context must be created for every conversion; the lists are filled
    during extraction and only read during restoration.
    """

    code: list[Region] = field(default_factory=list)
    nested_code: list[Region] = field(default_factory=list)
    example: list[Region] = field(default_factory=list)
    html: list[Region] = field(default_factory=list)
    jsx: list[Region] = field(default_factory=list)
    export_html: list[Region] = field(default_factory=list)
    export_jsx: list[Region] = field(default_factory=list)
    export_block: list[Region] = field(default_factory=list)
    latex: list[Region] = field(default_factory=list)
    callout: list[Region] = field(default_factory=list)
    drawer: list[Region] = field(default_factory=list)

    def add(self, kind: RegionKind, region: Region) -> str:
        """Record a region and return its placeholder token."""
        regions: list[Region] = getattr(self, kind)
        regions.append(region)
        return f"{KIND_PREFIXES[kind]}{len(regions) - 1}"

    def get(self, kind: RegionKind, index: int) -> Optional[Region]:
        """Return the region for ``kind`` and ``index``, or None when absent."""
        regions: list[Region] = getattr(self, kind)
        if 0 <= index < len(regions):
            return regions[index]
        return None

    def __len__(self) -> int:
        return sum(len(getattr(self, kind)) for kind in KIND_PREFIXES)
