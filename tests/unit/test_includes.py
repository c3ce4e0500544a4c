#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_includes.py
"""Unit tests for ``#+INCLUDE:`` resolution.

Tests cover:
- Inlining relative to the base path
- Recursive includes relative to the included file
- Missing files and circular includes
- Repeated includes from sibling locations

"""

import logging
from pathlib import Path

import pytest

from org2mdx.includes import resolve_includes


@pytest.mark.unit
class TestResolveIncludes:
    """Tests for resolve_includes."""

    def test_inline_file(self, org_dir: Path) -> None:
        """Test that an include line is replaced by the file content."""
        (org_dir / "part.org").write_text("Included text", encoding="utf-8")
        result = resolve_includes('Before\n#+INCLUDE: "part.org"\nAfter', org_dir)
        assert result == "Before\nIncluded text\nAfter"

    def test_case_insensitive_directive(self, org_dir: Path) -> None:
        """Test a lower-case directive."""
        (org_dir / "part.org").write_text("X", encoding="utf-8")
        assert resolve_includes('#+include: "part.org"', org_dir) == "X"

    def test_nested_relative_to_included_file(self, org_dir: Path) -> None:
        """Test that nested includes resolve against the including file."""
        sub = org_dir / "sub"
        sub.mkdir()
        (sub / "a.org").write_text('A\n#+INCLUDE: "b.org"', encoding="utf-8")
        (sub / "b.org").write_text("B", encoding="utf-8")
        assert resolve_includes('#+INCLUDE: "sub/a.org"', org_dir) == "A\nB"

    def test_missing_file(self, org_dir: Path, caplog) -> None:
        """Test that a missing file becomes an HTML comment."""
        with caplog.at_level(logging.WARNING, logger="org2mdx.includes"):
            result = resolve_includes('#+INCLUDE: "nope.org"', org_dir)
        assert result == "<!-- Include file not found: nope.org -->"
        assert "not found" in caplog.text

    def test_circular_include(self, org_dir: Path) -> None:
        """Test that a cycle is broken with a comment."""
        (org_dir / "a.org").write_text('A\n#+INCLUDE: "b.org"', encoding="utf-8")
        (org_dir / "b.org").write_text('B\n#+INCLUDE: "a.org"', encoding="utf-8")
        result = resolve_includes('#+INCLUDE: "a.org"', org_dir)
        assert result == "A\nB\n<!-- Circular include skipped: a.org -->"

    def test_self_include(self, org_dir: Path) -> None:
        """Test a file that includes itself."""
        (org_dir / "self.org").write_text('S\n#+INCLUDE: "self.org"', encoding="utf-8")
        result = resolve_includes('#+INCLUDE: "self.org"', org_dir)
        assert result == "S\n<!-- Circular include skipped: self.org -->"

    def test_sibling_repeats_allowed(self, org_dir: Path) -> None:
        """Test that the same file may be included twice from siblings."""
        (org_dir / "part.org").write_text("P", encoding="utf-8")
        text = '#+INCLUDE: "part.org"\n#+INCLUDE: "part.org"'
        assert resolve_includes(text, org_dir) == "P\nP"

    def test_no_includes(self, org_dir: Path) -> None:
        """Test text without directives is returned unchanged."""
        assert resolve_includes("* Heading\nText", org_dir) == "* Heading\nText"
