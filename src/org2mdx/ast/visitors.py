#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Renderers and tree passes subclass :class:`NodeVisitor` so every node kind
has an explicit handler; adding a node type without a handler fails at
instantiation time instead of silently dropping content.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from org2mdx.ast.nodes import (
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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a visit_* method for each node type. All visit
    methods accept a node and return Any (typically None for side-effect
    visitors such as renderers, or a new node for transformers).

    Examples
    --------
    >>> class TextCounter(NodeTransformer):
    ...     def __init__(self):
    ...         self.count = 0
    ...
    ...     def visit_text(self, node):
    ...         self.count += 1
    ...         return node

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any:
        """Visit a HTMLBlock node."""
        pass

    @abstractmethod
    def visit_math_block(self, node: MathBlock) -> Any:
        """Visit a MathBlock node."""
        pass

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any:
        """Visit a FootnoteDefinition node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit a Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit a Image node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_underline(self, node: Underline) -> Any:
        """Visit a Underline node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""
        pass

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any:
        """Visit a HTMLInline node."""
        pass

    @abstractmethod
    def visit_math_inline(self, node: MathInline) -> Any:
        """Visit a MathInline node."""
        pass

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference) -> Any:
        """Visit a FootnoteReference node."""
        pass

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for unhandled node types.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
