#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning the shared AST into text."""

from org2mdx.renderers.base import BaseRenderer, InlineContentMixin
from org2mdx.renderers.html import HtmlRenderer
from org2mdx.renderers.markdown import MarkdownRenderer
from org2mdx.renderers.org import OrgRenderer

__all__ = ["BaseRenderer", "HtmlRenderer", "InlineContentMixin", "MarkdownRenderer", "OrgRenderer"]
