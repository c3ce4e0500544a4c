#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts the Org tree to
an HTML string. The string is loaded back with BeautifulSoup so that the
HTML-tree passes (math, figures, table headers) can run on it before it is
parsed into the Markdown tree.

The markup is plain: no ids, no CSS classes except the ones
the passes look for (``math math-inline``, ``math math-display``).

"""

from __future__ import annotations

import html
import logging

from org2mdx.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    MathBlock,
    MathInline,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    Underline,
)
from org2mdx.ast.visitors import NodeVisitor
from org2mdx.options.base import BaseRendererOptions
from org2mdx.renderers.base import BaseRenderer, InlineContentMixin

logger = logging.getLogger(__name__)


def escape_html(text: str) -> str:
    """Escape text content for HTML (quotes are left alone)."""
    return html.escape(text, quote=False)


def escape_attribute(value: str) -> str:
    """Escape a value for a double-quoted HTML attribute."""
    return html.escape(value, quote=True)


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render the AST to an HTML fragment.

    Org table separator rows (``org_rule`` metadata) are emitted as ordinary
    rows whose cells hold dashes; the table pass on the HTML tree uses them
    to build ``<thead>``.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Rendering options

    Examples
    --------
    >>> from org2mdx.ast import Document, Paragraph, Text
    >>> HtmlRenderer().render_to_string(Document(children=[Paragraph(content=[Text(content="a < b")])]))
    '<p>a &lt; b</p>\\n'

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, BaseRendererOptions, "html")
        options = options or BaseRendererOptions()
        BaseRenderer.__init__(self, options)
        self._output: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render the document to an HTML fragment string.

        Parameters
        ----------
        doc : Document
            Document to render

        Returns
        -------
        str
            HTML fragment

        """
        self._output = []
        doc.accept(self)
        return "".join(self._output)

    def render_inline(self, nodes: list[Node]) -> str:
        """Render a list of inline nodes to an HTML string."""
        self._output = []
        return self._render_inline_content(nodes)

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for child in node.children:
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        level = min(6, max(1, node.level))
        content = self._render_inline_content(node.content)
        self._output.append(f"<h{level}>{content}</h{level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<p>{content}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node."""
        class_attr = f' class="language-{escape_attribute(node.language)}"' if node.language else ""
        self._output.append(f"<pre><code{class_attr}>{escape_html(node.content)}</code></pre>\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node."""
        self._output.append("<blockquote>\n")
        for child in node.children:
            child.accept(self)
        self._output.append("</blockquote>\n")

    def visit_list(self, node: List) -> None:
        """Render a List node."""
        tag = "ol" if node.ordered else "ul"
        start_attr = f' start="{node.start}"' if node.ordered and node.start != 1 else ""
        loose_attr = "" if node.tight else ' data-loose=""'
        self._output.append(f"<{tag}{start_attr}{loose_attr}>\n")
        for item in node.items:
            item.accept(self)
        self._output.append(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        Task items get a disabled checkbox input; the checkbox pass normally
        replaces ``task_status`` with an inline marker before rendering.
        """
        self._output.append("<li>")
        if node.task_status:
            checked = ' checked=""' if node.task_status == "checked" else ""
            indeterminate = ' data-indeterminate=""' if node.task_status == "indeterminate" else ""
            self._output.append(f'<input type="checkbox" disabled=""{checked}{indeterminate} />')
        for child in node.children:
            child.accept(self)
        self._output.append("</li>\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table node."""
        self._output.append("<table>\n")
        if node.header:
            self._output.append("<thead>\n")
            self._render_row(node.header, node, "th")
            self._output.append("</thead>\n")
        if node.rows:
            self._output.append("<tbody>\n")
            for row in node.rows:
                self._render_row(row, node, "th" if row.is_header else "td")
            self._output.append("</tbody>\n")
        self._output.append("</table>\n")

    def _render_row(self, row: TableRow, table: Table, tag: str) -> None:
        self._output.append("<tr>")
        for i, cell in enumerate(row.cells):
            alignment = cell.alignment
            if alignment is None and i < len(table.alignments):
                alignment = table.alignments[i]
            align = f' align="{alignment}"' if alignment else ""
            content = self._render_inline_content(cell.content)
            self._output.append(f"<{tag}{align}>{content}</{tag}>")
        self._output.append("</tr>\n")

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node."""
        pass  # Handled by visit_table

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node."""
        pass  # Handled by visit_table

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("<hr />\n")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node."""
        self._output.append(node.content)
        if not node.content.endswith("\n"):
            self._output.append("\n")

    def visit_math_block(self, node: MathBlock) -> None:
        """Render a MathBlock node."""
        self._output.append(f'<div class="math math-display">{escape_html(node.content)}</div>\n')

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Render a FootnoteDefinition node."""
        content = self._render_inline_content(node.content)
        identifier = escape_attribute(node.identifier)
        self._output.append(f'<div class="footnote-definition" data-footnote="{identifier}"><p>{content}</p></div>\n')

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(escape_html(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(f"<em>{self._render_inline_content(node.content)}</em>")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(f"<strong>{self._render_inline_content(node.content)}</strong>")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._output.append(f"<code>{escape_html(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        title_attr = f' title="{escape_attribute(node.title)}"' if node.title else ""
        content = self._render_inline_content(node.content)
        self._output.append(f'<a href="{escape_attribute(node.url)}"{title_attr}>{content}</a>')

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        title_attr = f' title="{escape_attribute(node.title)}"' if node.title else ""
        self._output.append(
            f'<img src="{escape_attribute(node.url)}" alt="{escape_attribute(node.alt_text)}"{title_attr} />'
        )

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        self._output.append("\n" if node.soft else "<br />")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._output.append(f"<del>{self._render_inline_content(node.content)}</del>")

    def visit_underline(self, node: Underline) -> None:
        """Render an Underline node."""
        self._output.append(f"<u>{self._render_inline_content(node.content)}</u>")

    def visit_superscript(self, node: Superscript) -> None:
        """Render a Superscript node."""
        self._output.append(f"<sup>{self._render_inline_content(node.content)}</sup>")

    def visit_subscript(self, node: Subscript) -> None:
        """Render a Subscript node."""
        self._output.append(f"<sub>{self._render_inline_content(node.content)}</sub>")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node."""
        self._output.append(node.content)

    def visit_math_inline(self, node: MathInline) -> None:
        """Render a MathInline node."""
        kind = "math-display" if node.metadata.get("display") else "math-inline"
        self._output.append(f'<span class="math {kind}">{escape_html(node.content)}</span>')

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Render a FootnoteReference node."""
        identifier = escape_attribute(node.identifier)
        self._output.append(f'<sup class="footnote-ref" data-footnote="{identifier}">{escape_html(node.identifier)}</sup>')
