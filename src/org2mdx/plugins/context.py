#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/plugins/context.py
"""Plugin Context: side-channel records passed from Org-tree to HTML-tree passes.

Some information is only available on the Org tree (captions, alignment
cookie rows) but has to be applied to the HTML tree. The Org passes record
it here keyed by the document-order ordinal of the table or image, and the
HTML passes look it up by the same ordinal. Both sides must therefore walk
their trees in document order.

A new context is created for every structural-transform run, including
each recursive callout run, and is never shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from org2mdx.constants import AlignmentType


@dataclass(frozen=True)
class TableAlignmentRecord:
    """Column alignments for the ``index``-th table of the document."""

    index: int
    alignments: tuple[AlignmentType, ...]


@dataclass(frozen=True)
class CaptionRecord:
    """Rendered caption HTML for the ``index``-th image of the document."""

    index: int
    caption_html: str


@dataclass
class PluginContext:
    """Records produced by the Org-tree passes for one conversion run.

    Parameters
    ----------
    table_alignments : list of TableAlignmentRecord
        Alignments recorded by the table alignment pass
    captions : list of CaptionRecord
        Captions recorded by the caption pass

    """

    table_alignments: list[TableAlignmentRecord] = field(default_factory=list)
    captions: list[CaptionRecord] = field(default_factory=list)

    def alignment_for(self, table_index: int) -> Optional[TableAlignmentRecord]:
        """Return the alignment record of the ``table_index``-th table, if any."""
        for record in self.table_alignments:
            if record.index == table_index:
                return record
        return None

    def caption_for(self, image_index: int) -> Optional[CaptionRecord]:
        """Return the caption record of the ``image_index``-th image, if any."""
        for record in self.captions:
            if record.index == image_index:
                return record
        return None
