#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/options/conversion.py
"""Top-level options for a single Org to MDX conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from org2mdx.constants import (
    CALLOUT_TYPE_MAP,
    DEFAULT_DESCRIPTION,
    DEFAULT_SKIP_KEYWORDS,
    LANGUAGE_MAPPINGS,
)
from org2mdx.options.base import CloneFrozenMixin
from org2mdx.options.markdown import MarkdownRendererOptions
from org2mdx.options.org import OrgParserOptions


@dataclass(frozen=True)
class ConversionOptions(CloneFrozenMixin):
    """Configuration for converting one Org document to MDX.

    Parameters
    ----------
    default_title : str, optional
        Title used when the document has no ``#+TITLE:`` keyword. When unset,
        a title is derived from the filename.
    default_description : str, default "Generated from Org-mode"
        Description used when the document has no ``#+DESCRIPTION:`` keyword.
    base_path : str or Path, optional
        Directory that ``#+INCLUDE:`` paths resolve against. Defaults to the
        current working directory.
    resolve_includes : bool, default True
        Inline ``#+INCLUDE:`` directives before region extraction.
    skip_keywords : frozenset of str
        Lower-cased keyword names dropped from the frontmatter.
    language_mappings : Mapping[str, str]
        Source block languages renamed on restore (``math`` to ``latex``).
    callout_types : Mapping[str, str]
        Block names converted to ``<Callout>`` components, and their type.
    unescape_angle_brackets : bool, default True
        Remove backslash escapes before ``<`` and ``>`` in the final body.
    markdown : MarkdownRendererOptions
        Options for the Markdown serializer.
    org : OrgParserOptions
        Options for the Org parser.

    """

    default_title: Optional[str] = field(
        default=None,
        metadata={"help": "Title used when #+TITLE is missing", "importance": "core"},
    )
    default_description: str = field(
        default=DEFAULT_DESCRIPTION,
        metadata={"help": "Description used when #+DESCRIPTION is missing", "importance": "core"},
    )
    base_path: Optional[str | Path] = field(
        default=None,
        metadata={"help": "Directory for resolving #+INCLUDE paths", "importance": "core"},
    )
    resolve_includes: bool = field(
        default=True,
        metadata={"help": "Inline #+INCLUDE directives", "importance": "core"},
    )
    skip_keywords: frozenset[str] = field(
        default=DEFAULT_SKIP_KEYWORDS,
        metadata={"help": "Keywords excluded from frontmatter", "importance": "advanced"},
    )
    language_mappings: Mapping[str, str] = field(
        default_factory=lambda: dict(LANGUAGE_MAPPINGS),
        metadata={"help": "Source block language renames", "importance": "advanced"},
    )
    callout_types: Mapping[str, str] = field(
        default_factory=lambda: dict(CALLOUT_TYPE_MAP),
        metadata={"help": "Block names rendered as Callout components", "importance": "advanced"},
    )
    unescape_angle_brackets: bool = field(
        default=True,
        metadata={"help": "Strip backslash escapes before < and > in the body", "importance": "advanced"},
    )
    markdown: MarkdownRendererOptions = field(
        default_factory=MarkdownRendererOptions,
        metadata={"help": "Markdown serializer options", "importance": "advanced"},
    )
    org: OrgParserOptions = field(
        default_factory=OrgParserOptions,
        metadata={"help": "Org parser options", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Normalize keyword and callout tables.

        Raises
        ------
        ValueError
            If a nested options object has the wrong type.

        """
        object.__setattr__(self, "skip_keywords", frozenset(k.lower() for k in self.skip_keywords))
        object.__setattr__(self, "callout_types", {k.lower(): v for k, v in self.callout_types.items()})

        if not isinstance(self.markdown, MarkdownRendererOptions):
            raise ValueError(f"markdown must be MarkdownRendererOptions, got {type(self.markdown).__name__}")
        if not isinstance(self.org, OrgParserOptions):
            raise ValueError(f"org must be OrgParserOptions, got {type(self.org).__name__}")

    def resolved_base_path(self) -> Path:
        """Return the include base directory, defaulting to the working directory."""
        return Path(self.base_path) if self.base_path is not None else Path.cwd()
