#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/parsers/html.py
"""HTML to AST parser.

This module turns the intermediate HTML tree (after the HTML-tree passes)
into the AST consumed by the Markdown renderer. It understands exactly the
markup :class:`~org2mdx.renderers.html.HtmlRenderer` produces plus the
literal spans (``<span data-literal="">``) the passes insert; unknown
elements are treated as generic block or inline containers.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Union

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from org2mdx.ast import (
    Alignment,
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
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    TaskStatus,
    Text,
    ThematicBreak,
    Underline,
)
from org2mdx.constants import LITERAL_ATTRIBUTE
from org2mdx.options.base import BaseParserOptions
from org2mdx.parsers.base import BaseParser

logger = logging.getLogger(__name__)

_HORIZONTAL_SPACE = re.compile(r"[ \t\r\f\v]+")
_NEWLINE_RUN = re.compile(r" ?\n[ \n]*")


class HtmlParser(BaseParser):
    """Convert an HTML tree to the org2mdx AST.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser options

    """

    BLOCK_ELEMENTS = frozenset(
        {
            "div",
            "p",
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            "section",
            "article",
            "ul",
            "ol",
            "pre",
            "blockquote",
            "table",
            "hr",
            "figure",
        }
    )

    _ELEMENT_HANDLERS = {
        # Block elements
        "p": "_process_block_to_ast",
        "div": "_process_div_to_ast",
        "h1": "_process_heading_to_ast",
        "h2": "_process_heading_to_ast",
        "h3": "_process_heading_to_ast",
        "h4": "_process_heading_to_ast",
        "h5": "_process_heading_to_ast",
        "h6": "_process_heading_to_ast",
        "ul": "_process_list_to_ast",
        "ol": "_process_list_to_ast",
        "pre": "_process_code_block_to_ast",
        "blockquote": "_process_blockquote_to_ast",
        "figure": "_process_figure_to_ast",
        "table": "_process_table_to_ast",
        # Inline elements
        "strong": "_process_strong_to_ast",
        "b": "_process_strong_to_ast",
        "em": "_process_emphasis_to_ast",
        "i": "_process_emphasis_to_ast",
        "del": "_process_strikethrough_to_ast",
        "s": "_process_strikethrough_to_ast",
        "u": "_process_underline_to_ast",
        "sup": "_process_superscript_to_ast",
        "sub": "_process_subscript_to_ast",
        "a": "_process_link_to_ast",
        "img": "_process_image_to_ast",
        "span": "_process_span_to_ast",
    }

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the HTML parser with options."""
        BaseParser._validate_options_type(options, BaseParserOptions, "html")
        super().__init__(options or BaseParserOptions())

    def parse(self, input_data: Union[str, BeautifulSoup, Tag]) -> Document:
        """Parse HTML into an AST.

        Parameters
        ----------
        input_data : str, BeautifulSoup or Tag
            HTML markup or an already parsed tree

        Returns
        -------
        Document
            AST document node

        """
        root = BeautifulSoup(input_data, "html.parser") if isinstance(input_data, str) else input_data
        return Document(children=self._process_block_container(root))

    def _process_node_to_ast(self, node: Any) -> Node | list[Node] | None:
        """Process a BeautifulSoup node to AST nodes.

        Parameters
        ----------
        node : Any
            BeautifulSoup node to process

        Returns
        -------
        Node, list of Node, or None
            Resulting AST node(s)

        """
        if isinstance(node, Comment):
            return None

        if isinstance(node, NavigableString):
            text = _normalize_whitespace(str(node))
            return Text(content=text) if text else None

        if not isinstance(node, Tag):
            return None

        if node.name in ("script", "style", "input"):
            return None

        if node.name == "br":
            return LineBreak(soft=False)

        if node.name == "hr":
            return ThematicBreak()

        if node.name == "code":
            return Code(content=node.get_text())

        handler_name = self._ELEMENT_HANDLERS.get(node.name)
        if handler_name:
            handler = getattr(self, handler_name)
            return handler(node)

        # Unknown elements are routed by whether they are block or inline
        if self._is_block_element(node):
            return self._process_block_to_ast(node)
        return self._process_children_to_inline(node)

    def _is_block_element(self, node: Any) -> bool:
        return isinstance(node, Tag) and node.name in self.BLOCK_ELEMENTS

    def _has_block_children(self, node: Any) -> bool:
        return any(self._is_block_element(child) for child in getattr(node, "children", []))

    def _process_block_container(self, node: Any) -> list[Node]:
        """Process a block container element.

        Direct block children become block nodes; runs of inline content
        between them are wrapped in a Paragraph. Whitespace-only text between
        blocks is ignored.

        Parameters
        ----------
        node : Any
            Block container element

        Returns
        -------
        list of Node
            List of block nodes

        """
        children: list[Node] = []
        inline_buffer: list[Node] = []

        def flush() -> None:
            content = _trim_inline(inline_buffer)
            if content:
                children.append(Paragraph(content=content))
            inline_buffer.clear()

        for child in node.children:
            if self._is_block_element(child):
                flush()
                block_node = self._process_node_to_ast(child)
                if isinstance(block_node, list):
                    children.extend(block_node)
                elif block_node is not None:
                    children.append(block_node)
                continue

            if isinstance(child, NavigableString) and not isinstance(child, Comment) and not str(child).strip():
                if inline_buffer:
                    inline_buffer.append(Text(content=" "))
                continue

            inline_nodes = self._process_node_to_ast(child)
            if isinstance(inline_nodes, list):
                inline_buffer.extend(inline_nodes)
            elif inline_nodes is not None:
                inline_buffer.append(inline_nodes)

        flush()
        return children

    def _process_block_to_ast(self, node: Any) -> Paragraph | list[Node] | None:
        """Process a block element (p, section) to a Paragraph or a list of block nodes."""
        if self._has_block_children(node):
            return self._process_block_container(node)
        content = _trim_inline(self._process_children_to_inline(node))
        if content:
            return Paragraph(content=content)
        return None

    def _process_div_to_ast(self, node: Any) -> Node | list[Node] | None:
        """Process a div, recognizing footnote definitions."""
        identifier = node.get("data-footnote")
        if identifier is not None:
            content: list[Node] = []
            for block in self._process_block_container(node):
                if isinstance(block, Paragraph):
                    if content:
                        content.append(Text(content=" "))
                    content.extend(block.content)
            return FootnoteDefinition(identifier=identifier, content=content)
        return self._process_block_to_ast(node)

    def _process_heading_to_ast(self, node: Any) -> Heading:
        """Process heading element to Heading node."""
        level = int(node.name[1])
        content = _trim_inline(self._process_children_to_inline(node))
        return Heading(level=level, content=content)

    def _process_list_to_ast(self, node: Any) -> List:
        """Process list element to List node."""
        ordered = node.name == "ol"
        start = 1
        if ordered and node.get("start"):
            try:
                start = int(node["start"])
            except ValueError:
                logger.debug("Ignoring non-numeric list start %r", node["start"])
        tight = node.get("data-loose") is None

        items = [self._process_list_item_to_ast(li) for li in node.find_all("li", recursive=False)]
        return List(ordered=ordered, items=items, start=start, tight=tight)

    def _process_list_item_to_ast(self, node: Any) -> ListItem:
        """Process list item element to ListItem node."""
        task_status: TaskStatus | None = None
        checkbox = node.find("input", attrs={"type": "checkbox"}, recursive=False)
        if checkbox is not None:
            if checkbox.get("data-indeterminate") is not None:
                task_status = "indeterminate"
            elif checkbox.get("checked") is not None:
                task_status = "checked"
            else:
                task_status = "unchecked"

        return ListItem(children=self._process_block_container(node), task_status=task_status)

    def _process_code_block_to_ast(self, node: Any) -> CodeBlock:
        """Process pre element to CodeBlock node."""
        code = node.get_text()
        language = None
        code_tag = node.find("code")
        if code_tag is not None:
            for css_class in code_tag.get("class") or []:
                if css_class.startswith("language-"):
                    language = css_class[len("language-") :]
                    break
        return CodeBlock(content=code, language=language)

    def _process_blockquote_to_ast(self, node: Any) -> BlockQuote:
        """Process blockquote element to BlockQuote node."""
        return BlockQuote(children=self._process_block_container(node))

    def _process_figure_to_ast(self, node: Any) -> HTMLBlock:
        """Keep a figure that escaped flattening as raw HTML."""
        return HTMLBlock(content=str(node))

    def _process_table_to_ast(self, node: Any) -> Table:
        """Process table element to Table node.

        The first ``<thead>`` row is the header; without one, the first row
        is promoted so the Markdown table always has a header row.
        """
        header: TableRow | None = None
        rows: list[TableRow] = []
        alignments: list[Alignment | None] = []

        thead = node.find("thead")
        if thead is not None:
            thead_rows = thead.find_all("tr", recursive=False)
            if thead_rows:
                header, alignments = self._process_header_row(thead_rows[0])
                for header_tr in thead_rows[1:]:
                    rows.append(self._process_table_row(header_tr))

        for tr in node.find_all("tr"):
            if tr.find_parent("thead") is not None:
                continue
            rows.append(self._process_table_row(tr))

        if header is None and rows:
            first = rows.pop(0)
            header = TableRow(cells=first.cells, is_header=True)
            alignments = [cell.alignment for cell in header.cells]

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_header_row(self, tr: Any) -> tuple[TableRow, list[Alignment | None]]:
        cells = []
        alignments: list[Alignment | None] = []
        for th in tr.find_all(["th", "td"], recursive=False):
            alignment = self._get_alignment(th)
            alignments.append(alignment)
            cells.append(TableCell(content=self._process_table_cell_content(th), alignment=alignment))
        return TableRow(cells=cells, is_header=True), alignments

    def _process_table_row(self, tr: Any) -> TableRow:
        cells = [
            TableCell(content=self._process_table_cell_content(td), alignment=self._get_alignment(td))
            for td in tr.find_all(["td", "th"], recursive=False)
        ]
        return TableRow(cells=cells)

    def _process_table_cell_content(self, cell_node: Any) -> list[Node]:
        """Flatten cell content to inline nodes (Markdown cells are single-line)."""
        content: list[Node] = []
        for block in self._process_block_container(cell_node):
            if content:
                content.append(Text(content=" "))
            if isinstance(block, Paragraph):
                content.extend(block.content)
            elif isinstance(block, CodeBlock):
                content.append(Code(content=block.content))
        return content

    @staticmethod
    def _get_alignment(cell: Any) -> Alignment | None:
        """Get table cell alignment from its ``align`` attribute or CSS style."""
        align = (cell.get("align") or "").lower()
        if align in ("left", "center", "right"):
            return align  # type: ignore[return-value]

        style = (cell.get("style") or "").lower()
        if "text-align" in style:
            for candidate in ("left", "center", "right"):
                if candidate in style:
                    return candidate  # type: ignore[return-value]
        return None

    def _process_children_to_inline(self, node: Any) -> list[Node]:
        """Process node children to inline nodes only; block children are skipped."""
        result: list[Node] = []
        for child in node.children:
            if self._is_block_element(child):
                logger.debug("Block element <%s> found in inline context - skipping", child.name)
                continue
            ast_nodes = self._process_node_to_ast(child)
            if isinstance(ast_nodes, list):
                result.extend(ast_nodes)
            elif ast_nodes is not None:
                result.append(ast_nodes)
        return result

    def _process_strong_to_ast(self, node: Any) -> Strong:
        return Strong(content=self._process_children_to_inline(node))

    def _process_emphasis_to_ast(self, node: Any) -> Emphasis:
        return Emphasis(content=self._process_children_to_inline(node))

    def _process_underline_to_ast(self, node: Any) -> Underline:
        return Underline(content=self._process_children_to_inline(node))

    def _process_strikethrough_to_ast(self, node: Any) -> Strikethrough:
        return Strikethrough(content=self._process_children_to_inline(node))

    def _process_superscript_to_ast(self, node: Any) -> Superscript | FootnoteReference:
        identifier = node.get("data-footnote")
        if identifier is not None:
            return FootnoteReference(identifier=identifier)
        return Superscript(content=self._process_children_to_inline(node))

    def _process_subscript_to_ast(self, node: Any) -> Subscript:
        return Subscript(content=self._process_children_to_inline(node))

    def _process_link_to_ast(self, node: Any) -> Link:
        """Process anchor element to Link node."""
        return Link(
            url=node.get("href", ""),
            content=self._process_children_to_inline(node),
            title=node.get("title"),
        )

    def _process_image_to_ast(self, node: Any) -> Image:
        """Process img element to Image node."""
        return Image(url=node.get("src", ""), alt_text=node.get("alt", ""), title=node.get("title"))

    def _process_span_to_ast(self, node: Any) -> Node | list[Node]:
        """Literal spans become raw inline content; other spans are transparent."""
        if node.get(LITERAL_ATTRIBUTE) is not None:
            return HTMLInline(content=node.get_text())
        return self._process_children_to_inline(node)


def _normalize_whitespace(text: str) -> str:
    """Collapse horizontal whitespace and blank-line runs, keeping single newlines."""
    return _NEWLINE_RUN.sub("\n", _HORIZONTAL_SPACE.sub(" ", text))


def _trim_inline(nodes: list[Node]) -> list[Node]:
    """Strip leading and trailing whitespace from a run of inline nodes."""
    nodes = list(nodes)
    while nodes and isinstance(nodes[0], Text) and not nodes[0].content.strip():
        nodes.pop(0)
    while nodes and isinstance(nodes[-1], Text) and not nodes[-1].content.strip():
        nodes.pop()
    if nodes and isinstance(nodes[0], Text):
        nodes[0] = Text(content=nodes[0].content.lstrip(), metadata=nodes[0].metadata)
    if nodes and isinstance(nodes[-1], Text):
        nodes[-1] = Text(content=nodes[-1].content.rstrip(), metadata=nodes[-1].metadata)
    return nodes
