#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for the options dataclasses.

Tests cover:
- Default values
- Validation in ``__post_init__``
- ``create_updated`` cloning
- Options type checks in parsers and renderers

"""

from pathlib import Path

import pytest

from org2mdx.exceptions import InvalidOptionsError
from org2mdx.options import (
    ConversionOptions,
    MarkdownParserOptions,
    MarkdownRendererOptions,
    OrgParserOptions,
    OrgRendererOptions,
)
from org2mdx.parsers import MarkdownParser, OrgParser
from org2mdx.renderers import MarkdownRenderer, OrgRenderer


@pytest.mark.unit
class TestConversionOptions:
    """Tests for ConversionOptions."""

    def test_defaults(self) -> None:
        """Test default option values."""
        options = ConversionOptions()
        assert options.resolve_includes is True
        assert options.skip_keywords == frozenset({"options", "latex_header"})
        assert options.language_mappings["math"] == "latex"
        assert options.callout_types["warning"] == "warning"
        assert isinstance(options.markdown, MarkdownRendererOptions)
        assert isinstance(options.org, OrgParserOptions)

    def test_tables_lowercased(self) -> None:
        """Test that skip and callout tables are normalized to lower case."""
        options = ConversionOptions(skip_keywords=frozenset({"AUTHOR"}), callout_types={"Important": "warning"})
        assert options.skip_keywords == frozenset({"author"})
        assert options.callout_types == {"important": "warning"}

    def test_wrong_nested_options(self) -> None:
        """Test that nested options must have the right type."""
        with pytest.raises(ValueError):
            ConversionOptions(markdown=OrgParserOptions())  # type: ignore[arg-type]

    def test_create_updated(self) -> None:
        """Test that create_updated returns a modified copy."""
        options = ConversionOptions()
        updated = options.create_updated(default_title="Home")
        assert updated.default_title == "Home"
        assert options.default_title is None

    def test_frozen(self) -> None:
        """Test that options cannot be mutated."""
        options = ConversionOptions()
        with pytest.raises(AttributeError):
            options.default_title = "x"  # type: ignore[misc]

    def test_resolved_base_path(self, tmp_path: Path) -> None:
        """Test base path resolution."""
        assert ConversionOptions(base_path=tmp_path).resolved_base_path() == tmp_path
        assert ConversionOptions().resolved_base_path() == Path.cwd()


@pytest.mark.unit
class TestMarkdownRendererOptions:
    """Tests for MarkdownRendererOptions validation."""

    def test_invalid_bullet(self) -> None:
        """Test an unsupported bullet symbol."""
        with pytest.raises(ValueError, match="bullet_symbol"):
            MarkdownRendererOptions(bullet_symbol="x")  # type: ignore[arg-type]

    def test_invalid_emphasis(self) -> None:
        """Test an unsupported emphasis symbol."""
        with pytest.raises(ValueError, match="emphasis_symbol"):
            MarkdownRendererOptions(emphasis_symbol="~")  # type: ignore[arg-type]

    def test_short_code_fence(self) -> None:
        """Test a fence shorter than three backticks."""
        with pytest.raises(ValueError, match="code_fence_min"):
            MarkdownRendererOptions(code_fence_min=2)


@pytest.mark.unit
class TestOrgParserOptions:
    """Tests for OrgParserOptions validation."""

    def test_invalid_todo_keyword(self) -> None:
        """Test that TODO keywords must be single words."""
        with pytest.raises(ValueError, match="todo_keywords"):
            OrgParserOptions(todo_keywords=("IN PROGRESS",))


@pytest.mark.unit
class TestOptionsTypeChecks:
    """Tests for options type validation in parsers and renderers."""

    def test_org_parser_rejects_wrong_options(self) -> None:
        """Test OrgParser with renderer options."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            OrgParser(MarkdownRendererOptions())  # type: ignore[arg-type]
        assert exc_info.value.expected_type is OrgParserOptions

    def test_markdown_renderer_rejects_wrong_options(self) -> None:
        """Test MarkdownRenderer with Org renderer options."""
        with pytest.raises(InvalidOptionsError):
            MarkdownRenderer(OrgRendererOptions())  # type: ignore[arg-type]

    def test_markdown_parser_rejects_wrong_options(self) -> None:
        """Test MarkdownParser with Org parser options."""
        with pytest.raises(InvalidOptionsError):
            MarkdownParser(OrgParserOptions())  # type: ignore[arg-type]

    def test_org_renderer_accepts_own_options(self) -> None:
        """Test OrgRenderer with its own options."""
        renderer = OrgRenderer(OrgRendererOptions(heading_blank_line=False))
        assert renderer.options.heading_blank_line is False

    def test_markdown_parser_default_plugins(self) -> None:
        """Test the default mistune plugin list."""
        assert "table" in MarkdownParserOptions().plugins
