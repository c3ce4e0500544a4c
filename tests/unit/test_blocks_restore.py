#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_blocks_restore.py
"""Unit tests for placeholder restoration.

Tests cover:
- Code fences with language remapping and adaptive fence length
- Nested source blocks inlined verbatim
- Examples, raw HTML/JSX and export blocks
- Callouts rendered through the structural transform
- Drawer accordions and drawer titles
- Unknown placeholders and empty contexts
- Indentation of multi-line restorations

"""

import pytest

from org2mdx.blocks import BlockContext, Region, drawer_title, extract_regions, restore_regions
from org2mdx.blocks.context import KIND_PREFIXES
from org2mdx.blocks.restore import code_fence
from org2mdx.options import ConversionOptions, MarkdownRendererOptions


def _roundtrip(text: str, options: ConversionOptions | None = None) -> str:
    context = BlockContext()
    return restore_regions(extract_regions(text, context), context, options)


@pytest.mark.unit
class TestCodeFence:
    """Tests for code_fence."""

    def test_basic(self) -> None:
        """Test a plain fence."""
        assert code_fence("x = 1", "python") == "```python\nx = 1\n```"

    def test_longer_than_backtick_runs(self) -> None:
        """Test that the fence outgrows backtick runs in the body."""
        assert code_fence("````\ninner\n````") == "`````\n````\ninner\n````\n`````"

    def test_minimum(self) -> None:
        """Test a custom minimum fence length."""
        assert code_fence("x", minimum=4) == "````\nx\n````"


@pytest.mark.unit
class TestRestoreCode:
    """Tests for source and LaTeX block restoration."""

    def test_source_block(self) -> None:
        """Test a source block becomes a fenced code block."""
        assert _roundtrip("#+begin_src python\nprint(1)\n#+end_src") == "```python\nprint(1)\n```"

    def test_language_mapping(self) -> None:
        """Test the default math to latex remapping."""
        assert _roundtrip("#+begin_src math\nx^2\n#+end_src") == "```latex\nx^2\n```"

    def test_custom_language_mapping(self) -> None:
        """Test a caller-provided language table."""
        options = ConversionOptions(language_mappings={"elisp": "lisp"})
        assert _roundtrip("#+begin_src elisp\n(+ 1 2)\n#+end_src", options) == "```lisp\n(+ 1 2)\n```"

    def test_latex_block(self) -> None:
        """Test that LaTeX blocks become latex code fences."""
        assert _roundtrip("#+begin_latex\n\\frac{a}{b}\n#+end_latex") == "```latex\n\\frac{a}{b}\n```"

    def test_nested_source_inlined(self) -> None:
        """Test that an inner source block is restored verbatim inside the outer fence."""
        text = "#+begin_src org\n#+begin_src python\nx = 1\n#+end_src\n#+end_src"
        assert _roundtrip(text) == "```text\n#+begin_src python\nx = 1\n#+end_src\n```"

    def test_configured_fence_length(self) -> None:
        """Test the minimum fence option."""
        options = ConversionOptions(markdown=MarkdownRendererOptions(code_fence_min=4))
        assert _roundtrip("#+begin_src c\nint x;\n#+end_src", options) == "````c\nint x;\n````"


@pytest.mark.unit
class TestRestoreRaw:
    """Tests for examples, HTML, JSX and export blocks."""

    def test_example_trimmed(self) -> None:
        """Test that example blocks lose surrounding blank lines only."""
        text = "#+begin_example\n\n  keep indent\n\n#+end_example"
        assert _roundtrip(text) == "```\n  keep indent\n```"

    def test_html_directive_to_jsx(self) -> None:
        """Test that #+HTML: content is converted to JSX."""
        assert _roundtrip('#+HTML: <label for="x" class="y">L</label>') == '<label htmlFor="x" className="y">L</label>'

    def test_jsx_directive_verbatim(self) -> None:
        """Test that #+JSX: content is kept verbatim."""
        assert _roundtrip('#+JSX: <Chart data={data} class="x" />') == '<Chart data={data} class="x" />'

    def test_export_html_to_jsx(self) -> None:
        """Test that html export blocks are converted to JSX."""
        text = '#+begin_export html\n<div style="margin-top: 4px">x</div>\n#+end_export'
        assert _roundtrip(text) == "<div style={{ marginTop: 4 }}>x</div>"

    def test_export_other_backend_raw(self) -> None:
        """Test that other backends are emitted as raw content."""
        assert _roundtrip("#+begin_export md\n**raw**\n#+end_export") == "**raw**"


@pytest.mark.unit
class TestRestoreCallouts:
    """Tests for callout restoration."""

    def test_callout(self) -> None:
        """Test that a callout body is transformed and wrapped."""
        text = "#+begin_warning\nBe *careful*.\n#+end_warning"
        assert _roundtrip(text) == '<Callout type="warning">\nBe **careful**.\n</Callout>'

    def test_nested_callout(self) -> None:
        """Test a callout nested in a callout."""
        text = "#+begin_note\nOuter\n#+begin_tip\nInner\n#+end_tip\n#+end_note"
        expected = '<Callout type="note">\nOuter\n\n<Callout type="tip">\nInner\n</Callout>\n</Callout>'
        assert _roundtrip(text) == expected

    def test_code_inside_callout(self) -> None:
        """Test a source block inside a callout."""
        text = "#+begin_tip\nRun:\n#+begin_src sh\nls\n#+end_src\n#+end_tip"
        expected = '<Callout type="tip">\nRun:\n\n```sh\nls\n```\n</Callout>'
        assert _roundtrip(text) == expected


@pytest.mark.unit
class TestRestoreDrawers:
    """Tests for drawer restoration."""

    def test_accordion(self) -> None:
        """Test the accordion markup for a drawer."""
        result = _roundtrip(":my_notes:\nRaw *text*\n:END:")
        assert result == (
            '<Accordion type="single" collapsible className="w-full">\n'
            '  <AccordionItem value="drawer-0">\n'
            "    <AccordionTrigger>My Notes</AccordionTrigger>\n"
            "    <AccordionContent>\n"
            "Raw *text*\n"
            "    </AccordionContent>\n"
            "  </AccordionItem>\n"
            "</Accordion>"
        )

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("details", "Details"),
            ("my_custom-drawer", "My Custom Drawer"),
            ("MyDrawer", "My Drawer"),
            ("NOTES", "Notes"),
        ],
    )
    def test_drawer_title(self, name: str, expected: str) -> None:
        """Test Title Case drawer labels."""
        assert drawer_title(name) == expected


@pytest.mark.unit
class TestRestoreEdgeCases:
    """Tests for unknown tokens, empty contexts and indentation."""

    def test_empty_context_empty_text(self) -> None:
        """Test that an empty input with no regions gives an empty string."""
        assert restore_regions("", BlockContext()) == ""

    def test_text_without_placeholders(self) -> None:
        """Test that plain Markdown is untouched."""
        assert restore_regions("# Title\n\nText", BlockContext()) == "# Title\n\nText"

    def test_unknown_placeholder_removed(self, caplog) -> None:
        """Test that a token without a region resolves to an empty string."""
        assert restore_regions("a CODEBLOCKMARKER7 b", BlockContext()) == "a  b"
        assert "CODEBLOCKMARKER7" in caplog.text

    @pytest.mark.parametrize("prefix", sorted(KIND_PREFIXES.values()))
    def test_every_kind_without_region(self, prefix: str) -> None:
        """Test that a token of any kind resolves to an empty string in an empty context."""
        assert restore_regions(f"{prefix}0", BlockContext()) == ""

    def test_indented_placeholder(self) -> None:
        """Test that continuation lines inherit the placeholder's indentation."""
        context = BlockContext()
        token = context.add("code", Region(source="", body="a\nb", language="sh"))
        result = restore_regions(f"- item\n\n  {token}", context)
        assert result == "- item\n\n  ```sh\n  a\n  b\n  ```"
