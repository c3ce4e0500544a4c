#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing and rendering.

The renderer options shape the GFM body of the generated MDX; the parser
options drive the MDX to Org reverse path.
"""
# src/org2mdx/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from org2mdx.constants import (
    DEFAULT_BULLET_SYMBOL,
    DEFAULT_CODE_FENCE_MIN,
    DEFAULT_COLLAPSE_BLANK_LINES,
    DEFAULT_EMPHASIS_SYMBOL,
    DEFAULT_ESCAPE_ANGLE_BRACKETS,
    DEFAULT_ESCAPE_SPECIAL,
    DEFAULT_PAD_TABLE_CELLS,
    MARKDOWN_PARSER_PLUGINS,
    BulletSymbol,
    EmphasisSymbol,
)
from org2mdx.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    plugins : tuple of str, default ("table", "strikethrough", "task_lists", "math")
        Mistune plugins to enable when tokenizing the MDX body.

    """

    plugins: tuple[str, ...] = field(
        default=MARKDOWN_PARSER_PLUGINS,
        metadata={"help": "Mistune plugins enabled while parsing", "importance": "advanced"},
    )


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown rendering options for converting AST to Markdown text.

    Parameters
    ----------
    bullet_symbol : {"-", "\*", "+"}, default "-"
        Marker used for unordered list items at every depth.
    emphasis_symbol : {"\*", "\_"}, default "\*"
        Symbol to use for emphasis/italic formatting in Markdown.
    pad_table_cells : bool, default True
        Whether to pad table cells so columns line up.
    escape_special : bool, default True
        Whether to escape special Markdown characters in text content.
        When True, characters like \*, \_, #, [, ], <, > are escaped
        to prevent unintended formatting.
    escape_angle_brackets : bool, default True
        Whether < and > are escaped along with the other special
        characters. Off when the output is unescaped afterwards, so padded
        table columns are measured on the final text.
    collapse_blank_lines : bool, default True
        Collapse runs of three or more newlines into one blank line.
    code_fence_min : int, default 3
        Minimum number of backticks in a code fence.

    """

    bullet_symbol: BulletSymbol = field(
        default=DEFAULT_BULLET_SYMBOL,
        metadata={
            "help": "Bullet marker for unordered lists",
            "choices": ["-", "*", "+"],
            "importance": "core",
        },
    )
    emphasis_symbol: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_SYMBOL,
        metadata={
            "help": "Symbol to use for emphasis/italic formatting",
            "choices": ["*", "_"],
            "importance": "core",
        },
    )
    pad_table_cells: bool = field(
        default=DEFAULT_PAD_TABLE_CELLS,
        metadata={"help": "Pad table cells to align columns", "importance": "advanced"},
    )
    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={"help": "Escape special Markdown characters in text content", "importance": "core"},
    )
    escape_angle_brackets: bool = field(
        default=DEFAULT_ESCAPE_ANGLE_BRACKETS,
        metadata={"help": "Escape < and > in text content", "importance": "advanced"},
    )
    collapse_blank_lines: bool = field(
        default=DEFAULT_COLLAPSE_BLANK_LINES,
        metadata={"help": "Collapse multiple blank lines into one", "importance": "advanced"},
    )
    code_fence_min: int = field(
        default=DEFAULT_CODE_FENCE_MIN,
        metadata={"help": "Minimum number of backticks in a code fence", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If a field value is outside its valid range.

        """
        super().__post_init__()

        if self.bullet_symbol not in ("-", "*", "+"):
            raise ValueError(f"bullet_symbol must be one of '-', '*', '+', got {self.bullet_symbol!r}")
        if self.emphasis_symbol not in ("*", "_"):
            raise ValueError(f"emphasis_symbol must be '*' or '_', got {self.emphasis_symbol!r}")
        if self.code_fence_min < 3:
            raise ValueError(f"code_fence_min must be at least 3, got {self.code_fence_min}")
