"""org2mdx - convert Org-mode documents into MDX for static documentation sites.

The conversion keeps the parts of a document that generic Markdown
formatting would mangle (source blocks, raw HTML and JSX, LaTeX, callouts,
drawers) out of the structural transform by swapping them for placeholder
tokens, converts the remaining Org structure through an AST pipeline, and
restores the protected regions as MDX markup afterwards.

Examples
--------
Basic usage:

    >>> from org2mdx import convert_to_mdx
    >>> print(convert_to_mdx("#+TITLE: Hello\\n\\n* Intro\\nSome /text/.", "hello.org"))
    ---
    title: Hello
    description: Generated from Org-mode
    ---
    <BLANKLINE>
    # Intro
    <BLANKLINE>
    Some *text*.
    <BLANKLINE>

Converting back (lossy):

    >>> from org2mdx import convert_back
    >>> convert_back("# Intro\\n\\nSome *text*.").org
    '* Intro\\n\\nSome /text/.\\n\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "org2mdx requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from org2mdx.api import (
    ConversionResult,
    OrgConversionResult,
    compose_mdx,
    convert,
    convert_back,
    convert_file,
    convert_to_mdx,
)
from org2mdx.exceptions import (
    FrontmatterValidationError,
    InvalidOptionsError,
    Org2MdxError,
    ValidationError,
)
from org2mdx.logging_utils import configure_logging
from org2mdx.options import ConversionOptions, MarkdownRendererOptions, OrgParserOptions
from org2mdx.pipeline import transform_structure

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "FrontmatterValidationError",
    "InvalidOptionsError",
    "MarkdownRendererOptions",
    "Org2MdxError",
    "OrgConversionResult",
    "OrgParserOptions",
    "ValidationError",
    "__version__",
    "compose_mdx",
    "configure_logging",
    "convert",
    "convert_back",
    "convert_file",
    "convert_to_mdx",
    "transform_structure",
]
