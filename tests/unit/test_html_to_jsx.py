#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_to_jsx.py
"""Unit tests for HTML to JSX translation.

Tests cover:
- class/for renaming and camel-cased attributes
- Inline style strings to object literals
- Void elements, boolean attributes, comments
- Text-only fragments passed through unchanged

"""

import pytest

from org2mdx.html_to_jsx import html_to_jsx, jsx_attribute_name, style_to_object


@pytest.mark.unit
class TestHtmlToJsx:
    """Tests for html_to_jsx."""

    def test_class_and_style(self) -> None:
        """Test the common div case."""
        result = html_to_jsx('<div class="a" style="color: red; font-size: 14px;">t</div>')
        assert result == '<div className="a" style={{ color: "red", fontSize: 14 }}>t</div>'

    def test_void_element_self_closed(self) -> None:
        """Test that void elements are self-closed."""
        assert html_to_jsx('<img src="a.png" alt="A">') == '<img src="a.png" alt="A" />'
        assert html_to_jsx("line<br>next") == "line<br />next"

    def test_boolean_attribute(self) -> None:
        """Test attributes without a value."""
        assert html_to_jsx('<input type="checkbox" checked>') == '<input type="checkbox" checked />'

    def test_comment(self) -> None:
        """Test that HTML comments become JSX comments."""
        assert html_to_jsx("<!-- note --><p>x</p>") == "{/* note */}<p>x</p>"

    def test_nested_elements(self) -> None:
        """Test attribute conversion on nested elements."""
        result = html_to_jsx('<table cellpadding="2"><tr><td colspan="2">x</td></tr></table>')
        assert result == '<table cellPadding="2"><tr><td colSpan="2">x</td></tr></table>'

    def test_plain_text_unchanged(self) -> None:
        """Test a fragment without markup."""
        assert html_to_jsx("just text & more") == "just text & more"

    def test_data_and_aria_kept(self) -> None:
        """Test that data- and aria- attributes keep their names."""
        result = html_to_jsx('<span data-id="1" aria-label="L">x</span>')
        assert result == '<span data-id="1" aria-label="L">x</span>'


@pytest.mark.unit
class TestAttributeNames:
    """Tests for jsx_attribute_name."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("class", "className"),
            ("for", "htmlFor"),
            ("tabindex", "tabIndex"),
            ("onclick", "onClick"),
            ("accept-charset", "acceptCharset"),
            ("stroke-width", "strokeWidth"),
            ("data-foo", "data-foo"),
            ("id", "id"),
        ],
    )
    def test_names(self, name: str, expected: str) -> None:
        """Test attribute renaming."""
        assert jsx_attribute_name(name) == expected


@pytest.mark.unit
class TestStyleToObject:
    """Tests for style_to_object."""

    def test_numeric_px_stripped(self) -> None:
        """Test that pixel values become numbers."""
        assert style_to_object("width: 100px") == "{{ width: 100 }}"

    def test_string_values_quoted(self) -> None:
        """Test that other values are quoted strings."""
        assert style_to_object("margin: 0 auto") == '{{ margin: "0 auto" }}'

    def test_vendor_prefix(self) -> None:
        """Test that vendor prefixes are capitalized."""
        assert style_to_object("-webkit-transition: none") == '{{ WebkitTransition: "none" }}'

    def test_custom_property(self) -> None:
        """Test that CSS custom properties are quoted keys."""
        assert style_to_object("--accent: blue") == '{{ "--accent": "blue" }}'

    def test_empty(self) -> None:
        """Test an empty style string."""
        assert style_to_object("") == "{{}}"
