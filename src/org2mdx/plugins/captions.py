#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/plugins/captions.py
"""Caption pass: record ``#+CAPTION:`` text for captioned images.

The Org parser attaches a ``#+CAPTION:`` line to the following paragraph or
table as ``metadata["org_affiliated"]["caption"]``. For a paragraph that
contains an image, this pass renders the caption's inline markup to HTML
and records it under the ordinal of the paragraph's first image. The
figure pass on the HTML tree picks the record up again.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from org2mdx.ast import Image, NodeTransformer, Paragraph, Table, extract_nodes
from org2mdx.parsers.org import OrgParser
from org2mdx.plugins.context import CaptionRecord, PluginContext
from org2mdx.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)


def _pop_caption(metadata: dict[str, Any]) -> tuple[dict[str, Any], Optional[str]]:
    """Return a copy of ``metadata`` without the caption annotation, and the caption."""
    metadata = metadata.copy()
    affiliated = dict(metadata.pop("org_affiliated", None) or {})
    caption = affiliated.pop("caption", None)
    if affiliated:
        metadata["org_affiliated"] = affiliated
    return metadata, caption


class CaptionTransform(NodeTransformer):
    """Record image captions in the Plugin Context and strip the annotation.

    Parameters
    ----------
    context : PluginContext
        Context receiving the caption records
    parser : OrgParser, optional
        Parser used for the caption's inline markup
    renderer : HtmlRenderer, optional
        Renderer used to turn the caption into HTML

    """

    def __init__(
        self,
        context: PluginContext,
        parser: OrgParser | None = None,
        renderer: HtmlRenderer | None = None,
    ):
        self.context = context
        self._parser = parser or OrgParser()
        self._renderer = renderer or HtmlRenderer()
        self._image_count = 0

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        """Record the caption of a paragraph holding an image."""
        metadata, caption = _pop_caption(node.metadata)
        if caption and extract_nodes(node, Image):
            caption_html = self._renderer.render_inline(self._parser.parse_inline(caption))
            self.context.captions.append(CaptionRecord(index=self._image_count, caption_html=caption_html))
            logger.debug("Recorded caption for image %d", self._image_count)
        return Paragraph(content=self._transform_children(node.content), metadata=metadata)

    def visit_table(self, node: Table) -> Table:
        """Strip the caption annotation from a table."""
        table = super().visit_table(node)
        table.metadata, _ = _pop_caption(table.metadata)
        return table

    def visit_image(self, node: Image) -> Image:
        """Count images so records line up with ``<img>`` elements in document order."""
        self._image_count += 1
        return super().visit_image(node)
