#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for the Markdown parser used by the reverse conversion.

Tests cover:
- Headings, paragraphs and inline formatting
- Fenced code blocks and their info strings
- Lists, task lists and block quotes
- GFM tables with alignment
- Math and raw HTML

"""

import pytest

from org2mdx.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    Heading,
    HTMLBlock,
    Image,
    Link,
    List,
    MathBlock,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    Text,
    ThematicBreak,
)
from org2mdx.parsers import MarkdownParser


def _parse(text: str):
    return MarkdownParser().parse(text).children


@pytest.mark.unit
class TestBlocks:
    """Tests for block parsing."""

    def test_heading_and_paragraph(self) -> None:
        """Test a heading followed by a paragraph."""
        heading, paragraph = _parse("## Title\n\nBody text\n")
        assert isinstance(heading, Heading)
        assert heading.level == 2
        assert heading.content == [Text(content="Title")]
        assert isinstance(paragraph, Paragraph)

    def test_code_block_language(self) -> None:
        """Test that the first word of the info string is the language."""
        (block,) = _parse("```python title=x\nprint(1)\n```\n")
        assert isinstance(block, CodeBlock)
        assert block.language == "python"
        assert block.content == "print(1)\n"

    def test_code_block_without_language(self) -> None:
        """Test a fence without an info string."""
        (block,) = _parse("```\nraw\n```\n")
        assert block.language is None

    def test_block_quote(self) -> None:
        """Test a block quote."""
        (quote,) = _parse("> quoted\n")
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)

    def test_thematic_break(self) -> None:
        """Test a horizontal rule."""
        assert isinstance(_parse("---\n")[0], ThematicBreak)

    def test_block_html(self) -> None:
        """Test raw HTML blocks."""
        (block,) = _parse("<div>\nhi\n</div>\n")
        assert isinstance(block, HTMLBlock)
        assert "<div>" in block.content

    def test_math_block(self) -> None:
        """Test a display math block."""
        (block,) = _parse("$$\na+b\n$$\n")
        assert isinstance(block, MathBlock)
        assert block.content == "a+b"


@pytest.mark.unit
class TestLists:
    """Tests for list parsing."""

    def test_bullets(self) -> None:
        """Test a tight bullet list."""
        (lst,) = _parse("- a\n- b\n")
        assert isinstance(lst, List)
        assert not lst.ordered
        assert len(lst.items) == 2
        assert lst.items[0].children[0].content == [Text(content="a")]

    def test_ordered(self) -> None:
        """Test an ordered list."""
        (lst,) = _parse("1. a\n2. b\n")
        assert lst.ordered

    def test_task_list(self) -> None:
        """Test task list items."""
        (lst,) = _parse("- [x] done\n- [ ] todo\n")
        assert [item.task_status for item in lst.items] == ["checked", "unchecked"]


@pytest.mark.unit
class TestTables:
    """Tests for table parsing."""

    def test_table_with_alignment(self) -> None:
        """Test header, body and alignments."""
        (table,) = _parse("| a | b |\n| :- | -: |\n| 1 | 2 |\n")
        assert isinstance(table, Table)
        assert table.header is not None
        assert len(table.header.cells) == 2
        assert table.alignments == ["left", "right"]
        assert len(table.rows) == 1


@pytest.mark.unit
class TestInline:
    """Tests for inline parsing."""

    def test_formatting(self) -> None:
        """Test strong, emphasis, code and strikethrough."""
        (paragraph,) = _parse("**b** *i* `c` ~~s~~\n")
        kinds = [type(node) for node in paragraph.content if not isinstance(node, Text)]
        assert kinds == [Strong, Emphasis, Code, Strikethrough]

    def test_link_and_image(self) -> None:
        """Test link and image attributes."""
        (paragraph,) = _parse('[site](https://x.org "T") ![alt](a.png)\n')
        link = paragraph.content[0]
        image = paragraph.content[2]
        assert isinstance(link, Link)
        assert link.url == "https://x.org"
        assert link.title == "T"
        assert isinstance(image, Image)
        assert image.alt_text == "alt"
