#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/constants.py
"""Constants and default values for the org2mdx library.

This module centralizes the marker vocabulary, keyword tables, and default
configuration values shared across the conversion pipeline.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Placeholder Markers - Tokens substituted for extracted regions
3. Keywords and Frontmatter - Metadata extraction defaults
4. Region Tables - Callouts, language remapping, drawers
5. Markdown Formatting - Renderer defaults
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

EmphasisSymbol = Literal["*", "_"]
BulletSymbol = Literal["-", "*", "+"]
TaskStatus = Literal["checked", "unchecked", "indeterminate"]
AlignmentType = Literal["left", "center", "right"]

# =============================================================================
# Placeholder Markers
# =============================================================================

# Each placeholder is PREFIX + decimal index. Prefixes are all-caps letters only,
# so "MARKER1" followed by a digit is never a complete token.
CODE_BLOCK_MARKER = "CODEBLOCKMARKER"
NESTED_CODE_MARKER = "NESTEDCODEMARKER"
EXAMPLE_BLOCK_MARKER = "EXAMPLEBLOCKMARKER"
HTML_MARKER = "HTMLMARKER"
JSX_MARKER = "JSXMARKER"
EXPORT_HTML_MARKER = "EXPORTHTMLMARKER"
EXPORT_JSX_MARKER = "EXPORTJSXMARKER"
EXPORT_BLOCK_MARKER = "EXPORTBLOCKMARKER"
LATEX_MARKER = "LATEXMARKER"
CALLOUT_MARKER = "CALLOUTMARKER"
DRAWER_MARKER = "DRAWERMARKER"

CHECKBOX_MARKERS: dict[TaskStatus, str] = {
    "unchecked": "CHECKBOXUNCHECKEDMARKER",
    "checked": "CHECKBOXCHECKEDMARKER",
    "indeterminate": "CHECKBOXINDETERMINATEMARKER",
}

CHECKBOX_SYNTAX: dict[TaskStatus, str] = {
    "unchecked": "[ ]",
    "checked": "[x]",
    "indeterminate": "[-]",
}

# =============================================================================
# Keywords and Frontmatter
# =============================================================================

# Keywords dropped during extraction (they break downstream YAML consumers)
DEFAULT_SKIP_KEYWORDS = frozenset({"options", "latex_header"})

DATE_KEYWORD = "date"
DEFAULT_TODO_KEYWORDS = ("TODO", "DONE")
DEFAULT_DESCRIPTION = "Generated from Org-mode"

# =============================================================================
# Region Tables
# =============================================================================

CALLOUT_TYPE_MAP: dict[str, str] = {
    "warning": "warning",
    "error": "error",
    "info": "info",
    "note": "note",
    "tip": "tip",
    "caution": "caution",
}

LANGUAGE_MAPPINGS: dict[str, str] = {
    "math": "latex",
    "org": "text",
}

RESERVED_DRAWERS = frozenset({"properties", "logbook", "clock", "effort"})

# Fence names the Org parser understands natively once regions are extracted
NATIVE_BLOCK_NAMES = frozenset({"quote", "center", "verse"})

TABLE_ALIGNMENT_TOKENS: dict[str, AlignmentType] = {
    "<l>": "left",
    "<c>": "center",
    "<r>": "right",
}

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".bmp", ".avif")

# =============================================================================
# Markdown Formatting
# =============================================================================

DEFAULT_BULLET_SYMBOL: BulletSymbol = "-"
DEFAULT_EMPHASIS_SYMBOL: EmphasisSymbol = "*"
DEFAULT_CODE_FENCE_MIN = 3
DEFAULT_PAD_TABLE_CELLS = True
DEFAULT_ESCAPE_SPECIAL = True
DEFAULT_ESCAPE_ANGLE_BRACKETS = True
DEFAULT_COLLAPSE_BLANK_LINES = True

# Mistune plugins enabled for the MDX to Org direction
MARKDOWN_PARSER_PLUGINS = ("table", "strikethrough", "task_lists", "math")

# Attribute marking an HTML span whose text is emitted verbatim in Markdown
LITERAL_ATTRIBUTE = "data-literal"
