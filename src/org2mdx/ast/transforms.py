#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/ast/transforms.py
"""AST transformation utilities.

The Org-tree passes (captions, checkboxes, table alignment) are
:class:`NodeTransformer` subclasses. A transformer walks the tree in
document order and builds a new tree, so the ordinal of every table and
image it sees matches the order in which the HTML renderer later emits them.

Examples
--------
Extract all headings from a document:

    >>> headings = extract_nodes(doc, Heading)

"""

from __future__ import annotations

import copy
from typing import Type, TypeVar

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
    get_node_children,
    replace_node_children,
)
from org2mdx.ast.visitors import NodeVisitor

NodeT = TypeVar("NodeT", bound=Node)


class NodeTransformer(NodeVisitor):
    """Base class for transforming AST nodes.

    Subclasses override visit_* methods that return modified nodes or None
    to remove nodes. The transformer creates a new AST with the
    transformations applied.

    Examples
    --------
    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper())
    >>>
    >>> new_doc = UppercaseTransformer().transform(doc)

    """

    def transform(self, node: Node) -> Node | None:
        """Transform an AST node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node or None
            Transformed node or None to remove

        """
        return node.accept(self)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        """Transform a list of child nodes, dropping removed ones."""
        result = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Node) -> Node:
        """Transform nodes generically using the traversal helpers.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node
            Transformed node with children replaced

        """
        children = get_node_children(node)
        if not children:
            # Leaf node - return a copy
            return copy.copy(node)

        transformed_children = self._transform_children(children)
        return replace_node_children(node, transformed_children)

    def visit_document(self, node: Document) -> Document:
        """Transform a Document node."""
        return Document(children=self._transform_children(node.children), metadata=node.metadata.copy())

    def visit_heading(self, node: Heading) -> Heading:
        """Transform a Heading node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        """Transform a Paragraph node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code_block(self, node: CodeBlock) -> CodeBlock:
        """Transform a CodeBlock node."""
        return CodeBlock(content=node.content, language=node.language, metadata=node.metadata.copy())

    def visit_block_quote(self, node: BlockQuote) -> BlockQuote:
        """Transform a BlockQuote node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_list(self, node: List) -> List:
        """Transform a List node."""
        return List(
            ordered=node.ordered,
            items=self._transform_children(node.items),  # type: ignore
            start=node.start,
            tight=node.tight,
            metadata=node.metadata.copy(),
        )

    def visit_list_item(self, node: ListItem) -> ListItem:
        """Transform a ListItem node."""
        return ListItem(
            children=self._transform_children(node.children),
            task_status=node.task_status,
            metadata=node.metadata.copy(),
        )

    def visit_table(self, node: Table) -> Table:
        """Transform a Table node."""
        return Table(
            header=self.transform(node.header) if node.header else None,  # type: ignore
            rows=self._transform_children(node.rows),  # type: ignore
            alignments=node.alignments.copy(),
            metadata=node.metadata.copy(),
        )

    def visit_table_row(self, node: TableRow) -> TableRow:
        """Transform a TableRow node."""
        return TableRow(
            cells=self._transform_children(node.cells),  # type: ignore
            is_header=node.is_header,
            metadata=node.metadata.copy(),
        )

    def visit_table_cell(self, node: TableCell) -> TableCell:
        """Transform a TableCell node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_thematic_break(self, node: ThematicBreak) -> ThematicBreak:
        """Transform a ThematicBreak node."""
        return ThematicBreak(metadata=node.metadata.copy())

    def visit_html_block(self, node: HTMLBlock) -> HTMLBlock:
        """Transform an HTMLBlock node."""
        return HTMLBlock(content=node.content, metadata=node.metadata.copy())

    def visit_math_block(self, node: MathBlock) -> MathBlock:
        """Transform a MathBlock node."""
        return MathBlock(content=node.content, metadata=node.metadata.copy())

    def visit_footnote_definition(self, node: FootnoteDefinition) -> FootnoteDefinition:
        """Transform a FootnoteDefinition node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_text(self, node: Text) -> Text:
        """Transform a Text node."""
        return Text(content=node.content, metadata=node.metadata.copy())

    def visit_emphasis(self, node: Emphasis) -> Emphasis:
        """Transform an Emphasis node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strong(self, node: Strong) -> Strong:
        """Transform a Strong node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code(self, node: Code) -> Code:
        """Transform a Code node."""
        return Code(content=node.content, metadata=node.metadata.copy())

    def visit_link(self, node: Link) -> Link:
        """Transform a Link node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_image(self, node: Image) -> Image:
        """Transform an Image node."""
        return Image(url=node.url, alt_text=node.alt_text, title=node.title, metadata=node.metadata.copy())

    def visit_line_break(self, node: LineBreak) -> LineBreak:
        """Transform a LineBreak node."""
        return LineBreak(soft=node.soft, metadata=node.metadata.copy())

    def visit_strikethrough(self, node: Strikethrough) -> Strikethrough:
        """Transform a Strikethrough node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_underline(self, node: Underline) -> Underline:
        """Transform an Underline node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_superscript(self, node: Superscript) -> Superscript:
        """Transform a Superscript node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_subscript(self, node: Subscript) -> Subscript:
        """Transform a Subscript node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_html_inline(self, node: HTMLInline) -> HTMLInline:
        """Transform an HTMLInline node."""
        return HTMLInline(content=node.content, metadata=node.metadata.copy())

    def visit_math_inline(self, node: MathInline) -> MathInline:
        """Transform a MathInline node."""
        return MathInline(content=node.content, metadata=node.metadata.copy())

    def visit_footnote_reference(self, node: FootnoteReference) -> FootnoteReference:
        """Transform a FootnoteReference node."""
        return FootnoteReference(identifier=node.identifier, metadata=node.metadata.copy())


def extract_nodes(node: Node, node_type: Type[NodeT]) -> list[NodeT]:
    """Collect every node of ``node_type`` in document order.

    Parameters
    ----------
    node : Node
        Root of the subtree to search (included in the search)
    node_type : type
        Node class to collect

    Returns
    -------
    list of Node
        Matching nodes, parents before their descendants

    """
    found: list[NodeT] = []
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, node_type):
            found.append(current)
        stack.extend(reversed(get_node_children(current)))
    return found
