#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for org2mdx conversion.

Using frozen dataclasses provides type safety, default values, and a clean
API for configuring conversion behavior. Use ``create_updated`` to derive a
modified copy.
"""

from __future__ import annotations

from org2mdx.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from org2mdx.options.conversion import ConversionOptions
from org2mdx.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from org2mdx.options.org import OrgParserOptions, OrgRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ConversionOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "OrgParserOptions",
    "OrgRendererOptions",
]
