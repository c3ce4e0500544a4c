#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/pipeline.py
"""Structural transform: Org text (with placeholders) to GFM Markdown.

The transform runs in two tree stages. The Org tree is annotated by the
caption, checkbox and table-alignment passes, rendered to HTML and loaded
with BeautifulSoup; the HTML tree is then rewritten by the math, figure and
table passes before being parsed into the Markdown tree and serialized.

Every call creates its own :class:`~org2mdx.plugins.PluginContext`, so
callout bodies rendered recursively never see records from the enclosing
document.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from org2mdx.options.conversion import ConversionOptions
from org2mdx.parsers.html import HtmlParser
from org2mdx.parsers.org import OrgParser
from org2mdx.plugins import (
    CaptionTransform,
    CheckboxTransform,
    PluginContext,
    TableAlignmentTransform,
    flatten_figures,
    normalize_tables,
    restore_checkboxes,
    rewrite_math,
    wrap_figures,
)
from org2mdx.renderers.html import HtmlRenderer
from org2mdx.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)


def transform_structure(text: str, options: ConversionOptions | None = None) -> str:
    """Convert placeholder-bearing Org text into GFM Markdown.

    Parameters
    ----------
    text : str
        Org body after region extraction
    options : ConversionOptions, optional
        Supplies the Org parser and Markdown renderer options

    Returns
    -------
    str
        Markdown body, stripped of surrounding whitespace

    Examples
    --------
    >>> transform_structure("* Hello\\n\\nSome *bold* text.")
    '# Hello\\n\\nSome **bold** text.'

    """
    options = options or ConversionOptions()
    context = PluginContext()

    parser = OrgParser(options.org)
    org_tree = parser.parse(text)

    html_renderer = HtmlRenderer()
    org_tree = CaptionTransform(context, parser=parser, renderer=html_renderer).transform(org_tree)
    org_tree = CheckboxTransform().transform(org_tree)
    org_tree = TableAlignmentTransform(context).transform(org_tree)
    logger.debug(
        "Org passes recorded %d caption(s) and %d table alignment(s)",
        len(context.captions),
        len(context.table_alignments),
    )

    soup = BeautifulSoup(html_renderer.render_to_string(org_tree), "html.parser")
    rewrite_math(soup)
    wrap_figures(soup, context)
    normalize_tables(soup, context)
    flatten_figures(soup)

    markdown_tree = HtmlParser().parse(soup)
    renderer_options = options.markdown
    if options.unescape_angle_brackets:
        # Escaped brackets would be undone afterwards and skew table padding
        renderer_options = renderer_options.create_updated(escape_angle_brackets=False)
    markdown = MarkdownRenderer(renderer_options).render_to_string(markdown_tree)
    return restore_checkboxes(markdown).strip()
