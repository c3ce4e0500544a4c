#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/ast/nodes.py
"""AST node classes for document representation.

The same closed node set describes three trees in the pipeline: the Org tree
produced by the Org parser, the Markdown tree produced from HTML, and the
tree the reverse path builds from MDX. Org-only properties that have no
Markdown equivalent travel in ``metadata``.

Node Hierarchy
--------------
Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, HTMLBlock, MathBlock, FootnoteDefinition

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Code
    - Link, Image, LineBreak
    - Strikethrough, Underline, Superscript, Subscript
    - HTMLInline, MathInline, FootnoteReference

Metadata keys used by the Org parser
------------------------------------
- ``org_todo``, ``org_priority``, ``org_tags`` on headings
- ``org_affiliated`` (e.g. ``{"caption": "..."}``) on paragraphs and tables
- ``org_rule`` on table separator rows

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Literal, Optional

Alignment = Literal["left", "center", "right"]
TaskStatus = Literal["checked", "unchecked", "indeterminate"]


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Org allows deeper outlines; the parser clamps those to level 6.

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata (``org_todo``, ``org_priority``, ``org_tags``)

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Code block node with optional language.

    Parameters
    ----------
    content : str
        Code content, without the fence lines
    language : str or None, default = None
        Language identifier used for syntax highlighting

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing block content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    task_status : {'checked', 'unchecked', 'indeterminate'} or None, default = None
        Checkbox state; Org's ``[-]`` maps to ``'indeterminate'``

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[TaskStatus] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """Table node with optional header and alignment.

    Org tables keep every row, separator rows included, in ``rows`` and leave
    ``header`` unset. Tables built from HTML carry a header row.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Table rows (excluding header)
    header : TableRow or None, default = None
        Header row
    alignments : list of {'left', 'center', 'right', None}, default = empty list
        Column alignments

    """

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    alignments: list[Alignment | None] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row node containing cells."""

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node containing inline content."""

    content: list[Node] = field(default_factory=list)
    alignment: Alignment | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break (horizontal rule)."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML or JSX block emitted verbatim."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this HTML block."""
        return visitor.visit_html_block(self)


@dataclass
class MathBlock(Node):
    """Display math block holding LaTeX source."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math block."""
        return visitor.visit_math_block(self)


@dataclass
class FootnoteDefinition(Node):
    """Footnote definition node.

    Parameters
    ----------
    identifier : str
        Footnote label (``x`` in ``[fn:x]``)
    content : list of Node, default = empty list
        Block content of the footnote

    """

    identifier: str
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote definition."""
        return visitor.visit_footnote_definition(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong node."""
        return visitor.visit_strong(self)


@dataclass
class Code(Node):
    """Inline code node (Org ``=code=`` and ``~verbatim~``)."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline code."""
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str
        Link target
    content : list of Node, default = empty list
        Inline nodes representing the link text
    title : str or None, default = None
        Optional link title

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source
    alt_text : str, default = ""
        Alternative text
    title : str or None, default = None
        Optional image title

    """

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class LineBreak(Node):
    """Line break node; ``soft`` breaks render as a plain newline."""

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class Underline(Node):
    """Underline node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this underline."""
        return visitor.visit_underline(self)


@dataclass
class Superscript(Node):
    """Superscript node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this superscript."""
        return visitor.visit_superscript(self)


@dataclass
class Subscript(Node):
    """Subscript node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this subscript."""
        return visitor.visit_subscript(self)


@dataclass
class HTMLInline(Node):
    """Inline raw markup emitted verbatim (figures, math literals)."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline HTML."""
        return visitor.visit_html_inline(self)


@dataclass
class MathInline(Node):
    """Inline math holding LaTeX source."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline math."""
        return visitor.visit_math_inline(self)


@dataclass
class FootnoteReference(Node):
    """Footnote reference node (``[fn:x]``)."""

    identifier: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote reference."""
        return visitor.visit_footnote_reference(self)


_BLOCK_CONTAINERS = (Document, BlockQuote, ListItem)
_INLINE_CONTAINERS = (
    Heading,
    Paragraph,
    Emphasis,
    Strong,
    Strikethrough,
    Underline,
    Superscript,
    Subscript,
    Link,
    TableCell,
    FootnoteDefinition,
)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, _BLOCK_CONTAINERS):
        return list(node.children)

    if isinstance(node, _INLINE_CONTAINERS):
        return list(node.content)

    if isinstance(node, List):
        return list(node.items)

    if isinstance(node, Table):
        children: list[Node] = []
        if node.header:
            children.append(node.header)
        children.extend(node.rows)
        return children

    if isinstance(node, TableRow):
        return list(node.cells)

    # Leaf nodes
    return []


def replace_node_children(node: Node, new_children: list[Node]) -> Node:
    """Create a copy of a node with replaced children.

    Parameters
    ----------
    node : Node
        The node to copy and modify
    new_children : list of Node
        New children to use in the copy

    Returns
    -------
    Node
        New node with replaced children

    Raises
    ------
    ValueError
        If a Table receives children that are not TableRow instances

    Notes
    -----
    For Table nodes the first TableRow with ``is_header=True`` becomes the
    header and all other rows become body rows.

    """
    if isinstance(node, _BLOCK_CONTAINERS):
        return replace(node, children=new_children)

    if isinstance(node, _INLINE_CONTAINERS):
        return replace(node, content=new_children)

    if isinstance(node, List):
        return replace(node, items=new_children)  # type: ignore[arg-type]

    if isinstance(node, Table):
        header_row: TableRow | None = None
        body_rows: list[TableRow] = []
        for child in new_children:
            if not isinstance(child, TableRow):
                raise ValueError(f"Table children must be TableRow instances, got {type(child).__name__}.")
            if child.is_header and header_row is None:
                header_row = child
            else:
                body_rows.append(child)
        return replace(node, header=header_row, rows=body_rows)

    if isinstance(node, TableRow):
        return replace(node, cells=new_children)  # type: ignore[arg-type]

    return node
