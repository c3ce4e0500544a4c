#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/renderers/markdown.py
"""Markdown rendering from AST.

This module provides the MarkdownRenderer class which converts the Markdown
tree produced by the HTML parser into GitHub-flavored Markdown text. The
output is the body of an MDX document, so raw HTML and literal spans
(math, flattened figures) are emitted verbatim while ordinary text is
escaped.

"""

from __future__ import annotations

import logging
import re

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
from org2mdx.blocks.restore import code_fence
from org2mdx.options.markdown import MarkdownRendererOptions
from org2mdx.renderers.base import BaseRenderer, InlineContentMixin

logger = logging.getLogger(__name__)

_ALWAYS_ESCAPE = "\\`*{}[]<>"
_ATX_OPENING = re.compile(r"#{1,6}(?:[ \t\n]|$)")


class MarkdownRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to Markdown text.

    This class implements the visitor pattern to traverse an AST and
    generate GFM output for the MDX body.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
    Basic usage:

        >>> from org2mdx.ast import Document, Heading, Text
        >>> from org2mdx.renderers.markdown import MarkdownRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> print(MarkdownRenderer().render_to_string(doc))
        # Title

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._marker_width_stack: list[int] = []
        self._list_marker_stack: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a Markdown string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Markdown text

        """
        self._output = []
        self._marker_width_stack = []
        self._list_marker_stack = []

        doc.accept(self)

        result = "".join(self._output)
        self._output.clear()
        return self._cleanup_output(result)

    def _cleanup_output(self, text: str) -> str:
        """Clean up the final output.

        Parameters
        ----------
        text : str
            Raw markdown text

        Returns
        -------
        str
            Cleaned markdown text

        """
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        # Whitespace-only lines count as blank
        text = re.sub(r"\n[ \t]+\n", "\n\n", text)
        if self.options.collapse_blank_lines:
            text = re.sub(r"\n{3,}", "\n\n", text)
        return text.rstrip()

    def _escape_markdown(self, text: str) -> str:
        """Escape special Markdown characters with context awareness.

        Backslash, backticks, asterisks, braces and brackets are always
        escaped, and angle brackets unless ``escape_angle_brackets`` is off.
        ``#`` is escaped only where it could open an ATX heading (one to six
        at the start of a line, then whitespace or the end of the line) and ``_``
        only where it is not surrounded by word characters, so
        ``snake_case``, ``#1`` and ``#+begin_x`` stay readable.

        Parameters
        ----------
        text : str
            Text to escape

        Returns
        -------
        str
            Escaped text

        """
        if not self.options.escape_special:
            return text

        escaped_chars = []
        for i, char in enumerate(text):
            if char in _ALWAYS_ESCAPE and (self.options.escape_angle_brackets or char not in "<>"):
                escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char == "#":
                at_line_start = i == 0 or text[i - 1] == "\n"
                if at_line_start and _ATX_OPENING.match(text, i):
                    escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char == "_":
                prev_alnum = i > 0 and text[i - 1].isalnum()
                next_alnum = i < len(text) - 1 and text[i + 1].isalnum()
                if not (prev_alnum and next_alnum):
                    escaped_chars.append("\\")
                escaped_chars.append(char)
            else:
                escaped_chars.append(char)

        return "".join(escaped_chars)

    def _current_indent(self) -> str:
        """Get the indentation for blocks nested in list items."""
        return " " * sum(self._marker_width_stack)

    def _render_block(self, node) -> str:
        saved_output = self._output
        self._output = []
        node.accept(self)
        rendered = "".join(self._output)
        self._output = saved_output
        return rendered

    def _indent_lines(self, text: str, indent: str) -> str:
        """Prefix every non-empty line after the first with ``indent``."""
        if not indent or "\n" not in text:
            return text
        lines = text.split("\n")
        return lines[0] + "\n" + "\n".join(indent + line if line else line for line in lines[1:])

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for i, child in enumerate(node.children):
            child.accept(self)
            if i < len(node.children) - 1:
                self._output.append("\n\n")

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node as an ATX heading.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        content = self._render_inline_content(node.content).replace("\n", " ")
        level = max(1, min(6, node.level))
        self._output.append(f"{'#' * level} {content}".rstrip())

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        Parameters
        ----------
        node : Paragraph
            Paragraph to render

        """
        content = self._render_inline_content(node.content)
        indent = self._current_indent()
        self._output.append(indent + self._indent_lines(content, indent))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node with a fence longer than any backtick run inside it.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        body = node.content[:-1] if node.content.endswith("\n") else node.content
        fenced = code_fence(body, node.language or "", self.options.code_fence_min)
        indent = self._current_indent()
        self._output.append(indent + self._indent_lines(fenced, indent))

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node.

        Parameters
        ----------
        node : BlockQuote
            Block quote to render

        """
        saved_stack = self._marker_width_stack
        self._marker_width_stack = []
        parts = [self._render_block(child) for child in node.children]
        self._marker_width_stack = saved_stack

        lines = "\n\n".join(parts).split("\n")
        quoted = "\n".join(f"> {line}" if line else ">" for line in lines)
        indent = self._current_indent()
        self._output.append(indent + self._indent_lines(quoted, indent))

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Ordered lists keep their starting number; tight lists put items on
        consecutive lines and loose lists separate them with a blank line.

        Parameters
        ----------
        node : List
            List to render

        """
        for i, item in enumerate(node.items):
            if node.ordered:
                marker = f"{node.start + i}. "
            else:
                marker = f"{self.options.bullet_symbol} "

            self._list_marker_stack.append(marker)
            item.accept(self)
            self._list_marker_stack.pop()

            if i < len(node.items) - 1:
                self._output.append("\n" if node.tight else "\n\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        The first child is written on the marker line; later children are
        indented by the marker width.

        Parameters
        ----------
        node : ListItem
            List item to render

        """
        indent = self._current_indent()
        marker = self._list_marker_stack[-1] if self._list_marker_stack else f"{self.options.bullet_symbol} "

        if node.task_status:
            checkbox = {"checked": "[x]", "indeterminate": "[-]"}.get(node.task_status, "[ ]")
            marker = f"{marker}{checkbox} "

        self._output.append(f"{indent}{marker}")
        self._marker_width_stack.append(len(marker))

        for i, child in enumerate(node.children):
            if i == 0:
                # First child renders on the marker line without leading indent
                rendered = self._render_block(child)
                prefix = self._current_indent()
                self._output.append(rendered[len(prefix) :] if rendered.startswith(prefix) else rendered)
            else:
                separator = "\n" if isinstance(child, List) else "\n\n"
                self._output.append(separator)
                child.accept(self)

        self._marker_width_stack.pop()

    def _render_cells_to_strings(self, rows: list[TableRow]) -> list[list[str]]:
        """Convert table cells to rendered strings with escaped pipes."""
        rendered_rows: list[list[str]] = []
        for row in rows:
            cells: list[str] = []
            for cell in row.cells:
                content = self._render_inline_content(cell.content).replace("\n", " ")
                cells.append(content.replace("|", "\\|"))
            rendered_rows.append(cells)
        return rendered_rows

    @staticmethod
    def _calculate_column_widths(rendered_rows: list[list[str]], num_cols: int) -> list[int]:
        col_widths: list[int] = [3] * num_cols
        for row_cells in rendered_rows:
            for i, cell_content in enumerate(row_cells[:num_cols]):
                col_widths[i] = max(col_widths[i], len(cell_content))
        return col_widths

    def _generate_alignment_row(self, node: Table, num_cols: int, col_widths: list[int] | None) -> str:
        """Generate the alignment separator row.

        Parameters
        ----------
        node : Table
            Table node with alignment info
        num_cols : int
            Number of columns
        col_widths : list[int] or None
            Column widths (None for minimal mode)

        Returns
        -------
        str
            Alignment row string

        """
        alignments = []
        for j in range(num_cols):
            alignment = node.alignments[j] if j < len(node.alignments) else None
            if node.header is not None and j < len(node.header.cells) and node.header.cells[j].alignment:
                alignment = node.header.cells[j].alignment
            width = col_widths[j] if col_widths else 3
            if alignment == "center":
                alignments.append(":" + "-" * max(1, width - 2) + ":")
            elif alignment == "right":
                alignments.append("-" * max(2, width - 1) + ":")
            elif alignment == "left":
                alignments.append(":" + "-" * max(2, width - 1))
            else:
                alignments.append("-" * width)
        return "| " + " | ".join(alignments) + " |"

    def visit_table(self, node: Table) -> None:
        """Render a Table node as a GFM pipe table.

        Parameters
        ----------
        node : Table
            Table to render

        """
        rows_to_render = [node.header] if node.header else []
        rows_to_render.extend(node.rows)
        if not rows_to_render:
            return

        num_cols = max(len(row.cells) for row in rows_to_render)
        rendered_rows = self._render_cells_to_strings(rows_to_render)
        for row_cells in rendered_rows:
            row_cells.extend([""] * (num_cols - len(row_cells)))

        col_widths = self._calculate_column_widths(rendered_rows, num_cols) if self.options.pad_table_cells else None
        indent = self._current_indent()
        lines = []
        for i, row_cells in enumerate(rendered_rows):
            if col_widths:
                row_cells = [cell.ljust(col_widths[j]) for j, cell in enumerate(row_cells)]
            lines.append("| " + " | ".join(row_cells) + " |")
            if i == 0 and node.header:
                lines.append(self._generate_alignment_row(node, num_cols, col_widths))
        self._output.append("\n".join(indent + line for line in lines))

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node."""
        pass  # Handled by visit_table

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node."""
        pass  # Handled by visit_table

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append(f"{self._current_indent()}---")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node verbatim."""
        indent = self._current_indent()
        self._output.append(indent + self._indent_lines(node.content.strip("\n"), indent))

    def visit_math_block(self, node: MathBlock) -> None:
        """Render a MathBlock node as a ``$$`` block."""
        indent = self._current_indent()
        self._output.append(indent + self._indent_lines(f"$$\n{node.content.strip()}\n$$", indent))

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Render a FootnoteDefinition node.

        Parameters
        ----------
        node : FootnoteDefinition
            Footnote definition to render

        """
        self._output.append(f"[^{node.identifier}]: ")
        for i, child in enumerate(node.content):
            child_content = self._render_block(child)
            if i == 0 or not isinstance(child, (Paragraph, CodeBlock, List, BlockQuote, Table)):
                self._output.append(child_content)
            else:
                self._output.append("\n\n    " + "\n    ".join(child_content.split("\n")))

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(self._escape_markdown(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        content = self._render_inline_content(node.content)
        symbol = self.options.emphasis_symbol
        self._output.append(f"{symbol}{content}{symbol}")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"**{content}**")

    def visit_code(self, node: Code) -> None:
        """Render a Code node.

        The backtick run is one longer than the longest run in the content.
        """
        longest = max((len(run) for run in re.findall(r"`+", node.content)), default=0)
        backticks = "`" * (longest + 1)
        padding = " " if node.content.startswith("`") or node.content.endswith("`") else ""
        self._output.append(f"{backticks}{padding}{node.content}{padding}{backticks}")

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        content = self._render_inline_content(node.content)
        if node.title:
            title = node.title.replace('"', '\\"')
            self._output.append(f'[{content}]({node.url} "{title}")')
        else:
            self._output.append(f"[{content}]({node.url})")

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        alt = node.alt_text.replace("[", "\\[").replace("]", "\\]")
        if node.title:
            self._output.append(f'![{alt}]({node.url} "{node.title}")')
        else:
            self._output.append(f"![{alt}]({node.url})")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        self._output.append("\n" if node.soft else "\\\n")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._output.append(f"~~{self._render_inline_content(node.content)}~~")

    def visit_underline(self, node: Underline) -> None:
        """Render an Underline node as raw HTML."""
        self._output.append(f"<u>{self._render_inline_content(node.content)}</u>")

    def visit_superscript(self, node: Superscript) -> None:
        """Render a Superscript node as raw HTML."""
        self._output.append(f"<sup>{self._render_inline_content(node.content)}</sup>")

    def visit_subscript(self, node: Subscript) -> None:
        """Render a Subscript node as raw HTML."""
        self._output.append(f"<sub>{self._render_inline_content(node.content)}</sub>")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node verbatim."""
        self._output.append(node.content)

    def visit_math_inline(self, node: MathInline) -> None:
        """Render a MathInline node."""
        delimiter = "$$" if node.metadata.get("display") else "$"
        self._output.append(f"{delimiter}{node.content}{delimiter}")

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Render a FootnoteReference node."""
        self._output.append(f"[^{node.identifier}]")
