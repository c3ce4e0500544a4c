#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Org-mode parsing and rendering."""
# src/org2mdx/options/org.py

from __future__ import annotations

from dataclasses import dataclass, field

from org2mdx.constants import DEFAULT_TODO_KEYWORDS, IMAGE_EXTENSIONS
from org2mdx.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class OrgParserOptions(BaseParserOptions):
    """Configuration options for Org-to-AST parsing.

    Parameters
    ----------
    todo_keywords : tuple of str, default ("TODO", "DONE")
        Heading keywords recorded as ``org_todo`` metadata.
    image_extensions : tuple of str
        Link targets with these suffixes (and no description) parse as images.

    """

    todo_keywords: tuple[str, ...] = field(
        default=DEFAULT_TODO_KEYWORDS,
        metadata={"help": "Recognized TODO keywords on headings", "importance": "core"},
    )
    image_extensions: tuple[str, ...] = field(
        default=IMAGE_EXTENSIONS,
        metadata={"help": "File suffixes treated as inline images", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If a TODO keyword is empty or contains whitespace.

        """
        super().__post_init__()
        for keyword in self.todo_keywords:
            if not keyword or any(ch.isspace() for ch in keyword):
                raise ValueError(f"todo_keywords entries must be non-empty words, got {keyword!r}")


@dataclass(frozen=True)
class OrgRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Org rendering.

    Parameters
    ----------
    heading_blank_line : bool, default True
        Emit a blank line after each heading.

    """

    heading_blank_line: bool = field(
        default=True,
        metadata={"help": "Emit a blank line after headings", "importance": "advanced"},
    )
