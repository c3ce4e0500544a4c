#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_keywords.py
"""Unit tests for Org keyword extraction.

Tests cover:
- ``#+KEY: value`` collection, ordering and repeated keys
- Skipped keywords
- Date normalization
- Title and description defaults

"""

import logging

import pytest

from org2mdx.keywords import (
    apply_keyword_defaults,
    extract_keywords,
    generate_default_title,
    get_callout_type,
    normalize_date,
)
from org2mdx.options import ConversionOptions


@pytest.mark.unit
class TestExtractKeywords:
    """Tests for extract_keywords."""

    def test_keys_lowercased_and_values_trimmed(self) -> None:
        """Test that keys are lower-cased and values stripped."""
        keywords = extract_keywords("#+TITLE:   Hello World  \n#+Author: Ann\n")
        assert keywords == {"title": "Hello World", "author": "Ann"}

    def test_last_value_wins_first_position_kept(self) -> None:
        """Test that a repeated key keeps its first position with the last value."""
        keywords = extract_keywords("#+title: One\n#+author: Ann\n#+title: Two")
        assert list(keywords) == ["title", "author"]
        assert keywords["title"] == "Two"

    def test_default_skip_keywords(self) -> None:
        """Test that options and latex_header are dropped."""
        text = "#+OPTIONS: toc:nil\n#+LATEX_HEADER: \\usepackage{x}\n#+TITLE: T"
        assert extract_keywords(text) == {"title": "T"}

    def test_custom_skip_keywords(self) -> None:
        """Test a caller-provided skip set."""
        keywords = extract_keywords("#+TITLE: T\n#+AUTHOR: A", skip_keywords=frozenset({"author"}))
        assert keywords == {"title": "T"}

    def test_non_keyword_lines_ignored(self) -> None:
        """Test that body text and malformed lines are ignored."""
        text = "* Heading\nSome text\n#+begin_src python\n#+ not a keyword\n"
        assert extract_keywords(text) == {}

    def test_crlf_line_endings(self) -> None:
        """Test that CRLF line endings split correctly."""
        assert extract_keywords("#+TITLE: A\r\n#+AUTHOR: B\r\n") == {"title": "A", "author": "B"}

    def test_empty_value(self) -> None:
        """Test that a keyword with no value is kept as an empty string."""
        assert extract_keywords("#+SUBTITLE:") == {"subtitle": ""}

    def test_date_normalized_in_place(self) -> None:
        """Test that the date is normalized without moving its key."""
        keywords = extract_keywords("#+DATE: <2024-01-15 Mon>\n#+TITLE: T")
        assert list(keywords) == ["date", "title"]
        assert keywords["date"] == "2024-01-15"

    def test_unparseable_date_dropped(self, caplog) -> None:
        """Test that an unparseable date is removed with a warning."""
        with caplog.at_level(logging.WARNING, logger="org2mdx.keywords"):
            keywords = extract_keywords("#+DATE: sometime soon\n#+TITLE: T")
        assert "date" not in keywords
        assert "sometime soon" in caplog.text


@pytest.mark.unit
class TestNormalizeDate:
    """Tests for normalize_date."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-01-15", "2024-01-15"),
            ("<2024-01-15 Mon>", "2024-01-15"),
            ("[2024-01-15 Mon]", "2024-01-15"),
            ("<2024-01-15 Mon 10:30>", "2024-01-15T10:30:00"),
            ("2024-01-15 Mon 09:05", "2024-01-15T09:05:00"),
            ("<2024-01-15 Mon 10:00-11:30>", "2024-01-15T10:00:00"),
            ("[2024-01-15 Mon]--[2024-01-17 Wed]", "2024-01-15"),
        ],
    )
    def test_valid_dates(self, value: str, expected: str) -> None:
        """Test Org timestamps and plain dates."""
        assert normalize_date(value) == expected

    @pytest.mark.parametrize("value", ["", "tomorrow", "2024-13-45", "15/01/2024"])
    def test_invalid_dates(self, value: str) -> None:
        """Test values that cannot be parsed."""
        assert normalize_date(value) is None


@pytest.mark.unit
class TestDefaults:
    """Tests for title and description defaults."""

    def test_generate_default_title(self) -> None:
        """Test title generation from a file name."""
        assert generate_default_title("my-org_notes.org") == "My Org Notes"
        assert generate_default_title("docs/getting-started.org") == "Getting Started"

    def test_defaults_added(self) -> None:
        """Test that missing title and description are filled in."""
        keywords = apply_keyword_defaults({"author": "Ann"}, "my-page.org")
        assert keywords == {"author": "Ann", "title": "My Page", "description": "Generated from Org-mode"}

    def test_existing_values_kept(self) -> None:
        """Test that present title and description are not touched."""
        keywords = apply_keyword_defaults({"title": "T", "description": "D"}, "x.org")
        assert keywords == {"title": "T", "description": "D"}

    def test_empty_values_replaced(self) -> None:
        """Test that empty title and description count as missing."""
        keywords = apply_keyword_defaults({"title": "", "description": ""}, "x.org")
        assert keywords["title"] == "X"
        assert keywords["description"] == "Generated from Org-mode"

    def test_option_defaults(self) -> None:
        """Test explicit defaults from ConversionOptions."""
        options = ConversionOptions(default_title="Home", default_description="Landing page")
        keywords = apply_keyword_defaults({}, "index.org", options)
        assert keywords == {"title": "Home", "description": "Landing page"}


@pytest.mark.unit
class TestCalloutType:
    """Tests for get_callout_type."""

    def test_known_names(self) -> None:
        """Test case-insensitive callout lookup."""
        assert get_callout_type("warning") == "warning"
        assert get_callout_type("TIP") == "tip"

    def test_unknown_name(self) -> None:
        """Test that unknown block names are not callouts."""
        assert get_callout_type("bogus") is None
