#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/renderers/org.py
"""Org-mode rendering from AST.

This module provides the OrgRenderer class used by the MDX to Org reverse
conversion. The mapping is small and lossy: constructs without
an Org counterpart here (footnotes, underline, sub/superscript, inline HTML)
render to an empty string instead of raising.

"""

from __future__ import annotations

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
from org2mdx.options.org import OrgRendererOptions
from org2mdx.renderers.base import BaseRenderer, InlineContentMixin

logger = logging.getLogger(__name__)

_CHECKBOXES = {"checked": "[X] ", "unchecked": "[ ] ", "indeterminate": "[-] "}


class OrgRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to Org-mode text.

    Parameters
    ----------
    options : OrgRendererOptions or None, default = None
        Org formatting options

    Examples
    --------
    >>> from org2mdx.ast import Document, Heading, Text
    >>> OrgRenderer().render_to_string(Document(children=[Heading(level=2, content=[Text(content="Usage")])]))
    '** Usage\\n\\n'

    """

    def __init__(self, options: OrgRendererOptions | None = None):
        """Initialize the Org renderer with options."""
        BaseRenderer._validate_options_type(options, OrgRendererOptions, "org")
        options = options or OrgRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: OrgRendererOptions = options
        self._output: list[str] = []
        self._list_depth = 0

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to Org text.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Org text

        """
        self._output = []
        self._list_depth = 0
        doc.accept(self)
        return "".join(self._output)

    def _render_block(self, node: Node) -> str:
        saved_output = self._output
        self._output = []
        node.accept(self)
        rendered = "".join(self._output)
        self._output = saved_output
        return rendered

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for child in node.children:
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node as a star line."""
        separator = "\n\n" if self.options.heading_blank_line else "\n"
        self._output.append(f"{'*' * node.level} {self._render_inline_content(node.content)}{separator}")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.content) + "\n\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a source block, or an example block when it has no language."""
        body = node.content[:-1] if node.content.endswith("\n") else node.content
        if node.language:
            self._output.append(f"#+begin_src {node.language}\n{body}\n#+end_src\n\n")
        else:
            self._output.append(f"#+begin_example\n{body}\n#+end_example\n\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node."""
        content = "".join(self._render_block(child) for child in node.children).strip("\n")
        self._output.append(f"#+begin_quote\n{content}\n#+end_quote\n\n")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Items are written as ``- `` lines; nested lists are indented two
        spaces per level.
        """
        self._list_depth += 1
        for item in node.items:
            item.accept(self)
        self._list_depth -= 1
        if self._list_depth == 0:
            self._output.append("\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        indent = "  " * (self._list_depth - 1)
        checkbox = _CHECKBOXES.get(node.task_status or "", "")
        parts = []
        nested = []
        for child in node.children:
            if isinstance(child, List):
                nested.append(self._render_block(child))
            else:
                parts.append(self._render_block(child).rstrip())
        text = " ".join(part for part in parts if part).replace("\n", "\n" + indent + "  ")
        self._output.append(f"{indent}- {checkbox}{text}\n")
        self._output.extend(nested)

    def visit_table(self, node: Table) -> None:
        """Render a Table node with a rule after the header row."""
        rows = [node.header] if node.header else []
        rows.extend(node.rows)
        if not rows:
            return

        rendered = [[self._render_inline_content(cell.content) for cell in row.cells] for row in rows]
        lines = ["| " + " | ".join(cells) + " |" for cells in rendered]
        rule = "|" + "|".join("-" * (len(cell) + 2) for cell in rendered[0]) + "|"
        lines.insert(1, rule)
        self._output.append("\n".join(lines) + "\n\n")

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node."""
        pass  # Handled by visit_table

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node."""
        pass  # Handled by visit_table

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("-----\n\n")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render raw HTML or JSX as a JSX export block."""
        self._output.append(f"#+begin_export jsx\n{node.content.strip()}\n#+end_export\n\n")

    def visit_math_block(self, node: MathBlock) -> None:
        """Render a MathBlock node."""
        self._output.append(f"\\[\n{node.content.strip()}\n\\]\n\n")

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Footnotes are not carried back to Org."""
        pass

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(f"/{self._render_inline_content(node.content)}/")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(f"*{self._render_inline_content(node.content)}*")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._output.append(f"={node.content}=")

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"[[{node.url}][{content}]]" if content else f"[[{node.url}]]")

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        self._output.append(f"[[{node.url}]]")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        self._output.append("\n" if node.soft else "\\\\\n")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._output.append(f"+{self._render_inline_content(node.content)}+")

    def visit_underline(self, node: Underline) -> None:
        """Underline has no reverse mapping."""
        pass

    def visit_superscript(self, node: Superscript) -> None:
        """Superscript has no reverse mapping."""
        pass

    def visit_subscript(self, node: Subscript) -> None:
        """Subscript has no reverse mapping."""
        pass

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Inline HTML has no reverse mapping."""
        pass

    def visit_math_inline(self, node: MathInline) -> None:
        """Render a MathInline node."""
        self._output.append(f"\\({node.content}\\)")

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Footnote references have no reverse mapping."""
        pass
