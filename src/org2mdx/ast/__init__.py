#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Abstract syntax tree shared by the parsers, renderers and tree passes."""

from org2mdx.ast.nodes import (
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
    TaskStatus,
    Text,
    ThematicBreak,
    Underline,
    get_node_children,
    replace_node_children,
)
from org2mdx.ast.transforms import NodeTransformer, extract_nodes
from org2mdx.ast.utils import extract_text
from org2mdx.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "FootnoteDefinition",
    "FootnoteReference",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "MathBlock",
    "MathInline",
    "Node",
    "NodeTransformer",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    "TableCell",
    "TableRow",
    "TaskStatus",
    "Text",
    "ThematicBreak",
    "Underline",
    "extract_nodes",
    "extract_text",
    "get_node_children",
    "replace_node_children",
]
