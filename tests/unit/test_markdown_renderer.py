#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_renderer.py
"""Unit tests for the Markdown renderer.

Tests cover:
- Headings, paragraphs and escaping
- Inline formatting, links, images and code spans
- Lists: bullets, ordered starts, nesting, tight and loose
- GFM tables with alignment
- Code blocks, block quotes, math and footnotes
- Renderer options

"""

import pytest

from org2mdx.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    MathBlock,
    MathInline,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    Underline,
)
from org2mdx.options import MarkdownRendererOptions
from org2mdx.renderers import MarkdownRenderer


def _render(*children, options: MarkdownRendererOptions | None = None) -> str:
    return MarkdownRenderer(options).render_to_string(Document(children=list(children)))


def _para(*content) -> Paragraph:
    return Paragraph(content=list(content))


def _item(text: str, *extra) -> ListItem:
    return ListItem(children=[_para(Text(content=text)), *extra])


@pytest.mark.unit
class TestBlocks:
    """Tests for block rendering."""

    def test_heading_and_paragraph(self) -> None:
        """Test blocks are separated by blank lines."""
        result = _render(Heading(level=2, content=[Text(content="Title")]), _para(Text(content="Body")))
        assert result == "## Title\n\nBody"

    def test_code_block(self) -> None:
        """Test a fenced code block."""
        assert _render(CodeBlock(content="x = 1\n", language="python")) == "```python\nx = 1\n```"

    def test_block_quote(self) -> None:
        """Test block quote prefixes."""
        quote = BlockQuote(children=[_para(Text(content="one")), _para(Text(content="two"))])
        assert _render(quote) == "> one\n>\n> two"

    def test_thematic_break(self) -> None:
        """Test a horizontal rule."""
        assert _render(ThematicBreak()) == "---"

    def test_math_block(self) -> None:
        """Test a display math block."""
        assert _render(MathBlock(content="a+b")) == "$$\na+b\n$$"

    def test_footnote(self) -> None:
        """Test footnote reference and definition."""
        result = _render(
            _para(Text(content="Text"), FootnoteReference(identifier="1")),
            FootnoteDefinition(identifier="1", content=[Text(content="Note.")]),
        )
        assert result == "Text[^1]\n\n[^1]: Note."


@pytest.mark.unit
class TestInline:
    """Tests for inline rendering."""

    def test_emphasis_and_strong(self) -> None:
        """Test emphasis markers."""
        result = _render(_para(Emphasis(content=[Text(content="i")]), Text(content=" "), Strong(content=[Text(content="b")])))
        assert result == "*i* **b**"

    def test_underscore_emphasis_option(self) -> None:
        """Test the emphasis symbol option."""
        options = MarkdownRendererOptions(emphasis_symbol="_")
        assert _render(_para(Emphasis(content=[Text(content="i")])), options=options) == "_i_"

    def test_code_span_backticks(self) -> None:
        """Test that code spans outgrow backticks in their content."""
        assert _render(_para(Code(content="a`b"))) == "``a`b``"
        assert _render(_para(Code(content="`x"))) == "`` `x ``"

    def test_link_and_image(self) -> None:
        """Test link and image syntax."""
        result = _render(
            _para(
                Link(url="https://example.com", content=[Text(content="site")], title="Home"),
                Text(content=" "),
                Image(url="a.png", alt_text="A [pic]"),
            )
        )
        assert result == '[site](https://example.com "Home") ![A \\[pic\\]](a.png)'

    def test_strikethrough_and_underline(self) -> None:
        """Test GFM strikethrough and HTML underline."""
        result = _render(_para(Strikethrough(content=[Text(content="s")]), Underline(content=[Text(content="u")])))
        assert result == "~~s~~<u>u</u>"

    def test_line_breaks(self) -> None:
        """Test hard and soft breaks."""
        result = _render(_para(Text(content="a"), LineBreak(soft=False), Text(content="b"), LineBreak(soft=True), Text(content="c")))
        assert result == "a\\\nb\nc"

    def test_math_inline(self) -> None:
        """Test inline and display-flagged inline math."""
        result = _render(_para(MathInline(content="x"), MathInline(content="y", metadata={"display": True})))
        assert result == "$x$$$y$$"

    def test_html_inline_verbatim(self) -> None:
        """Test that raw inline HTML is not escaped."""
        assert _render(_para(HTMLInline(content="<b>{x}</b>"))) == "<b>{x}</b>"


@pytest.mark.unit
class TestEscaping:
    """Tests for context-aware escaping."""

    def test_always_escaped(self) -> None:
        """Test characters that are always escaped."""
        assert _render(_para(Text(content="a*b [c] {d} <e>"))) == "a\\*b \\[c\\] \\{d\\} \\<e\\>"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("# not heading", "\\# not heading"),
            ("a\n## b", "a\n\\## b"),
            ("#", "\\#"),
            ("#1 and #2", "#1 and #2"),
            ("#+begin_bogus", "#+begin_bogus"),
            ("####### seven", "####### seven"),
        ],
    )
    def test_hash_only_where_heading_could_open(self, text: str, expected: str) -> None:
        """Test that # is escaped only where it would start an ATX heading."""
        assert _render(_para(Text(content=text))) == expected

    def test_angle_brackets_left_when_disabled(self) -> None:
        """Test the escape_angle_brackets option."""
        options = MarkdownRendererOptions(escape_angle_brackets=False)
        assert _render(_para(Text(content="a <b> *c*")), options=options) == "a <b> \\*c\\*"

    def test_underscore_inside_word(self) -> None:
        """Test that intraword underscores are left alone."""
        assert _render(_para(Text(content="snake_case _x"))) == "snake_case \\_x"

    def test_escaping_disabled(self) -> None:
        """Test the escape_special option."""
        options = MarkdownRendererOptions(escape_special=False)
        assert _render(_para(Text(content="a*b")), options=options) == "a*b"


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_tight_bullets(self) -> None:
        """Test a tight bullet list."""
        assert _render(List(ordered=False, items=[_item("a"), _item("b")])) == "- a\n- b"

    def test_loose_bullets(self) -> None:
        """Test a loose bullet list."""
        assert _render(List(ordered=False, items=[_item("a"), _item("b")], tight=False)) == "- a\n\n- b"

    def test_ordered_start(self) -> None:
        """Test that ordered lists keep their start number."""
        assert _render(List(ordered=True, start=3, items=[_item("a"), _item("b")])) == "3. a\n4. b"

    def test_nested(self) -> None:
        """Test a nested list indented under its parent marker."""
        inner = List(ordered=False, items=[_item("b")])
        outer = List(ordered=False, items=[_item("a", inner), _item("c")])
        assert _render(outer) == "- a\n  - b\n- c"

    def test_nested_under_ordered(self) -> None:
        """Test nesting under a wider ordered marker."""
        inner = List(ordered=False, items=[_item("b")])
        outer = List(ordered=True, items=[_item("a", inner)])
        assert _render(outer) == "1. a\n   - b"

    def test_bullet_option(self) -> None:
        """Test the bullet symbol option."""
        options = MarkdownRendererOptions(bullet_symbol="*")
        assert _render(List(ordered=False, items=[_item("a")]), options=options) == "* a"

    def test_task_status(self) -> None:
        """Test checkboxes rendered from task status."""
        items = [
            ListItem(children=[_para(Text(content="a"))], task_status="unchecked"),
            ListItem(children=[_para(Text(content="b"))], task_status="checked"),
        ]
        assert _render(List(ordered=False, items=items)) == "- [ ] a\n- [x] b"

    def test_paragraph_continuation_indented(self) -> None:
        """Test that a second paragraph in an item is indented."""
        item = ListItem(children=[_para(Text(content="a")), _para(Text(content="more"))])
        assert _render(List(ordered=False, items=[item])) == "- a\n\n  more"


@pytest.mark.unit
class TestTables:
    """Tests for table rendering."""

    def _table(self, alignments=None) -> Table:
        def row(*texts, header=False):
            return TableRow(cells=[TableCell(content=[Text(content=t)]) for t in texts], is_header=header)

        return Table(
            header=row("Name", "Age", header=True),
            rows=[row("Bob", "42")],
            alignments=alignments or [],
        )

    def test_padded_table(self) -> None:
        """Test a padded GFM table."""
        assert _render(self._table()) == "| Name | Age |\n| ---- | --- |\n| Bob  | 42  |"

    def test_alignment_row(self) -> None:
        """Test alignment markers."""
        result = _render(self._table(["left", "right"]))
        assert result == "| Name | Age |\n| :--- | --: |\n| Bob  | 42  |"

    def test_center_alignment(self) -> None:
        """Test center alignment marker."""
        result = _render(self._table(["center", None]))
        assert result.split("\n")[1] == "| :--: | --- |"

    def test_pipe_escaped(self) -> None:
        """Test that pipes in cells are escaped."""
        table = Table(
            header=TableRow(cells=[TableCell(content=[Code(content="a|b")])], is_header=True),
            rows=[],
        )
        assert _render(table).split("\n")[0] == "| `a\\|b` |"

    def test_unpadded_table(self) -> None:
        """Test the pad_table_cells option."""
        options = MarkdownRendererOptions(pad_table_cells=False)
        assert _render(self._table(), options=options) == "| Name | Age |\n| --- | --- |\n| Bob | 42 |"
