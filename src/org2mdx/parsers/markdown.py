#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/parsers/markdown.py
"""Markdown to AST parser.

This module parses the Markdown body of an MDX document into the AST for
the MDX to Org reverse conversion, using mistune's token stream. Frontmatter
is split off by the caller (:func:`org2mdx.frontmatter.split_frontmatter`)
before the body reaches this parser.

"""

from __future__ import annotations

import logging
from typing import Any, Callable

import mistune

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
    Table,
    TableCell,
    TableRow,
    TaskStatus,
    Text,
    ThematicBreak,
)
from org2mdx.options.markdown import MarkdownParserOptions
from org2mdx.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class MarkdownParser(BaseParser):
    """Convert Markdown text to the AST.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    >>> doc = MarkdownParser().parse("# Title\\n\\nSome **bold** text.")
    >>> type(doc.children[0]).__name__
    'Heading'

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self._footnote_definitions: dict[str, list[Node]] = {}

    def parse(self, input_data: str) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str
            Markdown text without frontmatter

        Returns
        -------
        Document
            AST document node

        """
        self._footnote_definitions = {}

        markdown = mistune.create_markdown(plugins=list(self.options.plugins), renderer=None)
        tokens, _state = markdown.parse(input_data)

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        for identifier, content in self._footnote_definitions.items():
            children.append(FootnoteDefinition(identifier=identifier, content=content))
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if isinstance(node, list):
                nodes.extend(node)
            elif node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node, list of Node, or None
            Resulting AST node(s); unknown tokens give None

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))
        elif token_type == "block_math":
            return MathBlock(content=token.get("raw", "").strip())
        elif token_type == "footnote_item":
            identifier = (token.get("attrs") or {}).get("key", "")
            self._footnote_definitions[identifier] = self._process_tokens(token.get("children", []))
            return None
        elif token_type == "footnotes":
            return self._process_tokens(token.get("children", []))

        if token_type not in ("blank_line", ""):
            logger.debug("Skipping unsupported Markdown token %r", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs") or {}
        level = attrs.get("level", 1)
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process a code block token, keeping the first word of the info string as language."""
        info = ((token.get("attrs") or {}).get("info") or "").strip()
        language = info.split(maxsplit=1)[0] if info else None
        return CodeBlock(content=token.get("raw", ""), language=language)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs") or {}
        items = [
            self._process_list_item(child)
            for child in token.get("children", [])
            if child.get("type") in ("list_item", "task_list_item")
        ]
        return List(
            ordered=bool(attrs.get("ordered", False)),
            items=items,
            start=attrs.get("start", 1) or 1,
            tight=token.get("tight", attrs.get("tight", True)),
        )

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        task_status: TaskStatus | None = None
        attrs = token.get("attrs") or {}
        if token.get("type") == "task_list_item" or "checked" in attrs:
            task_status = "checked" if attrs.get("checked") else "unchecked"
        return ListItem(children=self._process_tokens(token.get("children", [])), task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        Parameters
        ----------
        token : dict
            Table token with 'children' (head and body)

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        rows = []
        alignments = []

        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                cells = self._process_table_cells(part.get("children", []))
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif part_type == "table_body":
                for row_token in part.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        cells = []
        for cell_token in cell_tokens:
            alignment = (cell_token.get("attrs") or {}).get("align")
            cells.append(
                TableCell(content=self._process_inline_tokens(cell_token.get("children", [])), alignment=alignment)
            )
        return cells

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        handler_map: dict[str, Callable[[dict[str, Any]], Node]] = {
            "text": lambda t: Text(content=t.get("raw", "")),
            "strong": lambda t: Strong(content=self._process_inline_tokens(t.get("children", []))),
            "emphasis": lambda t: Emphasis(content=self._process_inline_tokens(t.get("children", []))),
            "strikethrough": lambda t: Strikethrough(content=self._process_inline_tokens(t.get("children", []))),
            "codespan": lambda t: Code(content=t.get("raw", "")),
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": lambda t: LineBreak(soft=False),
            "softbreak": lambda t: LineBreak(soft=True),
            "inline_html": lambda t: HTMLInline(content=t.get("raw", "")),
            "inline_math": lambda t: MathInline(content=t.get("raw", "")),
            "footnote_ref": lambda t: FootnoteReference(identifier=t.get("raw", "")),
        }

        nodes: list[Node] = []
        for token in tokens:
            handler = handler_map.get(token.get("type", ""))
            if handler is not None:
                nodes.append(handler(token))
        return nodes

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs") or {}
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs") or {}
        alt_text = "".join(
            child.get("raw", "") for child in token.get("children", []) if child.get("type") == "text"
        )
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))
