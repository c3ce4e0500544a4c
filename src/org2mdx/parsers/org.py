#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/parsers/org.py
"""Org-mode to AST parser.

This module parses the Org text left after region extraction into the
org2mdx AST. Headings are read with orgparse; section bodies go through
a line-oriented block parser. Protected regions (source, example, export
and callout blocks, drawers, raw HTML/JSX lines) have already been
replaced by placeholder tokens, so the parser only deals with the
structural subset of Org:
headings, paragraphs, plain lists, tables, quotes, rules, display math,
fixed-width lines and footnote definitions, plus the inline markup inside
them.

Org-specific information that has no generic node attribute travels in
``metadata``:

- ``org_todo``, ``org_priority`` and ``org_tags`` on headings
- ``org_affiliated`` (``{"caption": ...}``) on paragraphs and tables
- ``org_rule`` on table separator rows

"""

from __future__ import annotations

import logging
import re
import textwrap
from typing import Any, Optional

import orgparse
from orgparse import OrgEnv

from org2mdx.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
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
from org2mdx.blocks.context import PLACEHOLDER_PATTERN
from org2mdx.constants import NATIVE_BLOCK_NAMES, RESERVED_DRAWERS, TaskStatus
from org2mdx.options.org import OrgParserOptions
from org2mdx.parsers.base import BaseParser

logger = logging.getLogger(__name__)

_KEYWORD_PATTERN = re.compile(r"^\s*#\+(\w+):\s*(.*?)\s*$")
_COMMENT_PATTERN = re.compile(r"^\s*#(?:\s.*)?$")
_BEGIN_PATTERN = re.compile(r"^\s*#\+begin_(\w+)\b", re.IGNORECASE)
_RULE_PATTERN = re.compile(r"^\s*-{5,}\s*$")
_FIXED_WIDTH_PATTERN = re.compile(r"^\s*:(?: (.*)|)$")
_FOOTNOTE_DEF_PATTERN = re.compile(r"^\[fn:([^\]\s:]+)\]\s*(.*)$")
_LIST_ITEM_PATTERN = re.compile(r"^(\s*)([-+*]|\d+[.)])(?:\s+(.*)|)$")
_CHECKBOX_PATTERN = re.compile(r"^\[([ xX-])\](?:\s+|$)")
_TABLE_PATTERN = re.compile(r"^\s*\|")
_TABLE_RULE_PATTERN = re.compile(r"^\s*\|-")
_DRAWER_START_PATTERN = re.compile(r"^\s*:([A-Za-z][\w-]*):\s*$")
_DRAWER_END_PATTERN = re.compile(r"^\s*:end:\s*$", re.IGNORECASE)
_PLANNING_PATTERN = re.compile(r"^\s*(?:(?:SCHEDULED|DEADLINE|CLOSED):\s*[<\[][^>\]]*[>\]]\s*)+$")
_MATH_BRACKET_START = re.compile(r"^\s*\\\[")
_MATH_DOLLAR_START = re.compile(r"^\s*\$\$")

# orgparse reads every timestamp and Effort property eagerly and raises on
# impossible values (<2024-02-30>). A masked retry hides them from it.
_ORGPARSE_MASK = "\x00"
_TIMESTAMP_OPEN = re.compile(r"([<\[])(?=\d{4}-\d{2}-\d{2})")
_EFFORT_PROPERTY = re.compile(r"^(\s*:)(Effort:)", re.MULTILINE)

_CHECKBOX_STATES: dict[str, TaskStatus] = {
    " ": "unchecked",
    "x": "checked",
    "X": "checked",
    "-": "indeterminate",
}

# Org emphasis: the opening marker follows start-of-text, whitespace or one
# of -({'" and the closing marker precedes end-of-text, whitespace or
# punctuation. Contents may not start or end with whitespace.
_PRE = r"(?<![^\s\-({'\"])"
_POST = r"(?=[\s\-.,:;!?'\")}\[\\]|$)"


def _emphasis(marker: str, name: str) -> str:
    m = re.escape(marker)
    return rf"{_PRE}{m}(?P<{name}>[^\s{m}]|[^\s{m}][\s\S]*?[^\s])(?<!\\){m}{_POST}"


_INLINE_PATTERN = re.compile(
    r"(?P<linebreak>\\\\[ \t]*(?=\n|$))|"  # \\ at end of line
    r"\[\[(?P<target>[^\]]+)\](?:\[(?P<desc>[^\]]*)\])?\]|"  # [[target]] or [[target][desc]]
    r"\[fn:(?P<footnote>[^\]\s:]+)\]|"  # [fn:id]
    r"\\\((?P<math_paren>.+?)\\\)|"  # \(...\)
    r"\\\[(?P<math_bracket>.+?)\\\]|"  # \[...\] inside a paragraph
    r"\$\$(?P<math_dollars>[^$]+?)\$\$|"  # $$...$$ inside a paragraph
    r"(?<![\w$])\$(?P<math_dollar>[^\s$](?:[^$\n]*?[^\s$])?)\$(?![\w$])|"  # $...$
    r"\^\{(?P<sup>[^}]*)\}|"  # ^{super}
    r"_\{(?P<sub>[^}]*)\}|"  # _{sub}
    + _emphasis("*", "bold")
    + "|"
    + _emphasis("/", "italic")
    + "|"
    + _emphasis("_", "underline")
    + "|"
    + _emphasis("+", "strike")
    + "|"
    + _emphasis("=", "code")
    + "|"
    + _emphasis("~", "verbatim")
    + "|"
    r"(?P<url>(?:https?|ftp)://[^\s<>\"{}|\\^`\[\]]+|mailto:[^\s<>\"\[\]]+)"  # plain URLs
)

_URL_TRAILING_PUNCTUATION = ".,;:!?)'\""


class OrgParser(BaseParser):
    r"""Convert Org-mode text to the org2mdx AST.

    The heading outline comes from orgparse, which also supplies TODO
    states, priorities and tags. Each section body is then parsed line by
    line: blocks are recognized by their first line and paragraphs run
    until a blank line or the start of another block. Inline
    markup is tokenized with a single alternation pattern and nested markup
    (``*bold /italic/*``) is parsed recursively.

    Parameters
    ----------
    options : OrgParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    >>> doc = OrgParser().parse("* TODO Write docs :work:\n\nSome /text/.")
    >>> doc.children[0].metadata["org_tags"]
    ['work']

    """

    def __init__(self, options: OrgParserOptions | None = None):
        """Initialize the Org parser with options."""
        BaseParser._validate_options_type(options, OrgParserOptions, "org")
        options = options or OrgParserOptions()
        super().__init__(options)
        self.options: OrgParserOptions = options
        self._footnotes: list[FootnoteDefinition] = []

    def parse(self, input_data: str) -> Document:
        """Parse Org text into an AST.

        Parameters
        ----------
        input_data : str
            Org text with protected regions already replaced by placeholders

        Returns
        -------
        Document
            AST document node. Footnote definitions are collected at the end.

        """
        self._footnotes = []
        root = self._load_outline(input_data.replace("\r\n", "\n"))

        # Root body first (text before the first heading)
        children = self._process_body(root.get_body(format="raw"))

        for node in root.children:
            children.extend(self._process_node(node))

        children.extend(self._footnotes)
        logger.debug("Parsed Org text into %d top-level blocks", len(children))
        return Document(children=children)

    def _load_outline(self, text: str) -> Any:
        """Build the orgparse heading tree for ``text``.

        TODO keywords come from the options unless the document declares
        its own with ``#+TODO:`` / ``#+SEQ_TODO:``.
        """
        try:
            return orgparse.loads(text, env=self._make_env())
        except ValueError as e:
            logger.warning("Ignoring unreadable Org timestamps or Effort values: %s", e)

        masked = _TIMESTAMP_OPEN.sub(rf"\1{_ORGPARSE_MASK}", text)
        masked = _EFFORT_PROPERTY.sub(rf"\1{_ORGPARSE_MASK}\2", masked)
        return orgparse.loads(masked, env=self._make_env())

    def _make_env(self) -> OrgEnv:
        return OrgEnv(todos=list(self.options.todo_keywords), dones=[], filename="<string>")

    def _process_node(self, node: Any) -> list[Node]:
        """Convert an orgparse node and its subtree into a flat list of blocks."""
        result: list[Node] = [self._process_headline(node)]
        result.extend(self._process_body(node.get_body(format="raw")))
        for child in node.children:
            result.extend(self._process_node(child))
        return result

    def _process_headline(self, node: Any) -> Heading:
        """Build a Heading from an orgparse node, keeping TODO, priority and tags as metadata."""
        metadata: dict[str, Any] = {}
        if node.todo:
            metadata["org_todo"] = node.todo
        if node.priority:
            metadata["org_priority"] = node.priority
        if node.tags:
            metadata["org_tags"] = sorted(node.tags)

        title = node.get_heading(format="raw").replace(_ORGPARSE_MASK, "").strip()
        # The TODO keyword stays visible in the heading text
        text = f"{node.todo} {title}".strip() if node.todo else title
        # Markdown stops at six levels
        level = min(node.level, 6)
        return Heading(level=level, content=self._parse_inline(text), metadata=metadata)

    def _process_body(self, body: str) -> list[Node]:
        if not body.strip():
            return []
        return self._parse_blocks(body.replace(_ORGPARSE_MASK, "").split("\n"))

    def parse_inline(self, text: str) -> list[Node]:
        """Parse a run of inline Org markup (for captions and similar fragments)."""
        return self._parse_inline(text)

    # ------------------------------------------------------------------
    # Block level
    # ------------------------------------------------------------------

    def _parse_blocks(self, lines: list[str], nested: bool = False) -> list[Node]:
        """Parse a sequence of lines into block nodes.

        Parameters
        ----------
        lines : list of str
            Lines to parse
        nested : bool, default False
            True inside list items and quote blocks, where a leading star
            starts a list item rather than a heading

        Returns
        -------
        list of Node
            Block nodes in source order

        """
        children: list[Node] = []
        caption: Optional[str] = None
        i = 0

        while i < len(lines):
            line = lines[i]
            stripped = line.strip()

            if not stripped:
                caption = None
                i += 1
                continue

            keyword = _KEYWORD_PATTERN.match(line)
            if keyword:
                if keyword.group(1).lower() == "caption":
                    caption = keyword.group(2)
                i += 1
                continue

            if _COMMENT_PATTERN.match(line) or _PLANNING_PATTERN.match(line):
                i += 1
                continue

            if PLACEHOLDER_PATTERN.fullmatch(stripped):
                children.append(Paragraph(content=[Text(content=stripped)]))
                i += 1
                continue

            drawer = _DRAWER_START_PATTERN.match(line)
            if drawer and drawer.group(1).lower() in RESERVED_DRAWERS:
                end = self._find_drawer_end(lines, i + 1)
                if end is not None:
                    i = end + 1
                    continue

            begin = _BEGIN_PATTERN.match(line)
            if begin and begin.group(1).lower() in NATIVE_BLOCK_NAMES:
                end = self._find_block_end(lines, i, begin.group(1).lower())
                if end is not None:
                    children.extend(self._parse_native_block(begin.group(1).lower(), lines[i + 1 : end]))
                    caption = None
                    i = end + 1
                    continue

            if _RULE_PATTERN.match(line):
                children.append(ThematicBreak())
                i += 1
                continue

            if _MATH_BRACKET_START.match(line) or _MATH_DOLLAR_START.match(line):
                parsed = self._parse_display_math(lines, i)
                if parsed is not None:
                    math_node, i = parsed
                    children.append(math_node)
                    continue

            if _TABLE_PATTERN.match(line):
                start = i
                while i < len(lines) and _TABLE_PATTERN.match(lines[i]):
                    i += 1
                table = self._parse_table(lines[start:i])
                if caption is not None:
                    table.metadata["org_affiliated"] = {"caption": caption}
                    caption = None
                children.append(table)
                continue

            if _FIXED_WIDTH_PATTERN.match(line):
                collected = []
                while i < len(lines):
                    fixed = _FIXED_WIDTH_PATTERN.match(lines[i])
                    if not fixed:
                        break
                    collected.append(fixed.group(1) or "")
                    i += 1
                children.append(CodeBlock(content="\n".join(collected)))
                continue

            footnote = _FOOTNOTE_DEF_PATTERN.match(line)
            if footnote:
                i = self._parse_footnote_definition(lines, i, footnote)
                continue

            if self._match_list_item(line, nested):
                list_node, i = self._parse_list(lines, i, nested)
                children.append(list_node)
                caption = None
                continue

            # Paragraph: runs until a blank line or another block starts
            collected = [stripped]
            i += 1
            while i < len(lines) and lines[i].strip() and not self._starts_block(lines[i], nested):
                collected.append(lines[i].strip())
                i += 1
            paragraph = Paragraph(content=self._parse_inline("\n".join(collected)))
            if caption is not None:
                paragraph.metadata["org_affiliated"] = {"caption": caption}
                caption = None
            children.append(paragraph)

        return children

    def _starts_block(self, line: str, nested: bool) -> bool:
        """Return True when ``line`` would start a new block and so ends a paragraph."""
        stripped = line.strip()
        begin = _BEGIN_PATTERN.match(line)
        return bool(
            _KEYWORD_PATTERN.match(line)
            or _COMMENT_PATTERN.match(line)
            or PLACEHOLDER_PATTERN.fullmatch(stripped)
            or (begin and begin.group(1).lower() in NATIVE_BLOCK_NAMES)
            or _RULE_PATTERN.match(line)
            or _TABLE_PATTERN.match(line)
            or _FIXED_WIDTH_PATTERN.match(line)
            or _FOOTNOTE_DEF_PATTERN.match(line)
            or _MATH_BRACKET_START.match(line)
            or _MATH_DOLLAR_START.match(line)
            or self._match_list_item(line, nested)
        )

    @staticmethod
    def _find_block_end(lines: list[str], start: int, name: str) -> Optional[int]:
        """Find the line index closing the ``#+begin_<name>`` at ``start``, honoring nesting."""
        end_pattern = re.compile(rf"^\s*#\+end_{re.escape(name)}\s*$", re.IGNORECASE)
        depth = 0
        for index in range(start, len(lines)):
            begin = _BEGIN_PATTERN.match(lines[index])
            if begin and begin.group(1).lower() == name:
                depth += 1
            elif end_pattern.match(lines[index]):
                depth -= 1
                if depth == 0:
                    return index
        return None

    @staticmethod
    def _find_drawer_end(lines: list[str], start: int) -> Optional[int]:
        for index in range(start, len(lines)):
            if _DRAWER_END_PATTERN.match(lines[index]):
                return index
        return None

    def _parse_native_block(self, name: str, body: list[str]) -> list[Node]:
        """Parse the body of a quote, center or verse block."""
        if name == "quote":
            return [BlockQuote(children=self._parse_blocks(body, nested=True))]
        if name == "verse":
            content: list[Node] = []
            for index, line in enumerate(body):
                if index:
                    content.append(LineBreak(soft=False))
                content.extend(self._parse_inline(line.rstrip()))
            return [Paragraph(content=content)] if content else []
        # center has no Markdown counterpart; keep its content
        return self._parse_blocks(body, nested=True)

    def _parse_display_math(self, lines: list[str], start: int) -> Optional[tuple[MathBlock, int]]:
        """Parse ``\\[...\\]`` or ``$$...$$`` display math starting at ``start``.

        Returns None when the delimiter is never closed, in which case the
        text is treated as a paragraph.
        """
        first = lines[start].strip()
        opener, closer = ("\\[", "\\]") if first.startswith("\\[") else ("$$", "$$")
        remainder = first[len(opener) :]

        if closer in remainder:
            content, _, trailing = remainder.partition(closer)
            if trailing.strip():
                return None
            return MathBlock(content=content.strip()), start + 1

        collected = [remainder] if remainder.strip() else []
        for index in range(start + 1, len(lines)):
            line = lines[index]
            if closer in line:
                before, _, trailing = line.partition(closer)
                if trailing.strip():
                    return None
                if before.strip():
                    collected.append(before)
                return MathBlock(content=textwrap.dedent("\n".join(collected)).strip()), index + 1
            collected.append(line)
        return None

    def _parse_footnote_definition(self, lines: list[str], start: int, match: re.Match[str]) -> int:
        """Collect a ``[fn:id] text`` definition and its continuation lines."""
        collected = [match.group(2).strip()] if match.group(2).strip() else []
        i = start + 1
        while i < len(lines) and lines[i].strip() and not self._starts_block(lines[i], nested=False):
            collected.append(lines[i].strip())
            i += 1
        content = self._parse_inline("\n".join(collected)) if collected else []
        self._footnotes.append(FootnoteDefinition(identifier=match.group(1), content=content))
        return i

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    @staticmethod
    def _match_list_item(line: str, nested: bool = False) -> Optional[re.Match[str]]:
        match = _LIST_ITEM_PATTERN.match(line)
        if not match:
            return None
        # A star at column 0 is a heading outside nested content
        if match.group(2) == "*" and not match.group(1) and not nested:
            return None
        return match

    @staticmethod
    def _is_ordered(match: re.Match[str]) -> bool:
        return match.group(2)[0].isdigit()

    def _parse_list(self, lines: list[str], start: int, nested: bool = False) -> tuple[List, int]:
        """Parse a plain list starting at ``start``.

        Items belong to the list while they share the first item's
        indentation and kind (ordered or unordered). Lines indented deeper
        than the bullet are the item's body; two consecutive blank lines end
        the list.

        Returns
        -------
        tuple of (List, int)
            The list node and the index of the first line after it

        """
        first = self._match_list_item(lines[start], nested)
        assert first is not None
        indent = len(first.group(1))
        ordered = self._is_ordered(first)
        items: list[ListItem] = []
        loose = False
        i = start

        while i < len(lines):
            match = self._match_list_item(lines[i], nested)
            if not match or len(match.group(1)) != indent or self._is_ordered(match) != ordered:
                break

            body = [match.group(3) or ""]
            i += 1
            while i < len(lines):
                line = lines[i]
                if not line.strip():
                    following = self._skip_blank(lines, i)
                    if following - i >= 2 or following >= len(lines):
                        break
                    if _indentation(lines[following]) > indent:
                        body.extend(lines[i:following])
                        i = following
                        continue
                    break
                if _indentation(line) <= indent:
                    break
                body.append(line)
                i += 1

            items.append(self._parse_list_item(body))

            following = self._skip_blank(lines, i)
            if following > i:
                if following - i >= 2 or following >= len(lines):
                    break
                next_item = self._match_list_item(lines[following], nested)
                if (
                    next_item
                    and len(next_item.group(1)) == indent
                    and self._is_ordered(next_item) == ordered
                ):
                    loose = True
                    i = following
                    continue
                break

        start_number = int(re.match(r"\d+", first.group(2)).group()) if ordered else 1  # type: ignore[union-attr]
        return List(ordered=ordered, items=items, start=start_number, tight=not loose), i

    @staticmethod
    def _skip_blank(lines: list[str], index: int) -> int:
        while index < len(lines) and not lines[index].strip():
            index += 1
        return index

    def _parse_list_item(self, body: list[str]) -> ListItem:
        """Build a ListItem from its first-line text and indented continuation lines."""
        first = body[0]
        task_status: Optional[TaskStatus] = None
        checkbox = _CHECKBOX_PATTERN.match(first)
        if checkbox:
            task_status = _CHECKBOX_STATES[checkbox.group(1)]
            first = first[checkbox.end() :]

        rest = textwrap.dedent("\n".join(body[1:])).split("\n") if len(body) > 1 else []
        children = self._parse_blocks([first] + rest, nested=True)
        return ListItem(children=children, task_status=task_status)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _parse_table(self, lines: list[str]) -> Table:
        """Parse table lines into a Table.

        Every line becomes a row. Separator lines (``|---+---|``) stay in the
        tree as rows flagged ``org_rule`` whose cells hold dashes, so the
        passes that run later can count them. Header detection happens on
        the HTML tree.
        """
        parsed: list[Optional[list[str]]] = []
        for line in lines:
            if _TABLE_RULE_PATTERN.match(line):
                parsed.append(None)
            else:
                parsed.append(_split_cells(line))

        width = max((len(cells) for cells in parsed if cells is not None), default=0)
        rows: list[TableRow] = []
        for cells in parsed:
            if cells is None:
                rule_cells = [TableCell(content=[Text(content="---")]) for _ in range(width)]
                rows.append(TableRow(cells=rule_cells, metadata={"org_rule": True}))
                continue
            cells = cells + [""] * (width - len(cells))
            rows.append(TableRow(cells=[TableCell(content=self._parse_inline(cell)) for cell in cells]))

        return Table(rows=rows)

    # ------------------------------------------------------------------
    # Inline
    # ------------------------------------------------------------------

    def _parse_inline(self, text: str) -> list[Node]:
        r"""Parse inline formatting in text.

        Handles Org-Mode inline formatting:
        - *bold* -> Strong
        - /italic/ -> Emphasis
        - =code= or ~verbatim~ -> Code
        - _underline_ -> Underline
        - +strikethrough+ -> Strikethrough
        - [[url][description]] -> Link
        - [[file:image.png]] -> Image (image target, no description)
        - [fn:id] -> FootnoteReference
        - \(...\) or $...$ -> MathInline
        - ^{text} -> Superscript
        - _{text} -> Subscript
        - \\ -> LineBreak

        Parameters
        ----------
        text : str
            Text with inline formatting

        Returns
        -------
        list[Node]
            List of inline AST nodes

        """
        result: list[Node] = []
        pos = 0

        for match in _INLINE_PATTERN.finditer(text):
            if match.start() > pos:
                result.append(Text(content=text[pos : match.start()]))
            groups = match.groupdict()
            end = match.end()

            if groups["linebreak"] is not None:
                result.append(LineBreak(soft=False))
                # The newline after \\ belongs to the break
                if text.startswith("\n", end):
                    end += 1
            elif groups["target"] is not None:
                result.append(self._make_link(groups["target"], groups["desc"]))
            elif groups["footnote"] is not None:
                result.append(FootnoteReference(identifier=groups["footnote"]))
            elif groups["math_paren"] is not None:
                result.append(MathInline(content=groups["math_paren"]))
            elif groups["math_bracket"] is not None:
                result.append(MathInline(content=groups["math_bracket"], metadata={"display": True}))
            elif groups["math_dollars"] is not None:
                result.append(MathInline(content=groups["math_dollars"], metadata={"display": True}))
            elif groups["math_dollar"] is not None:
                result.append(MathInline(content=groups["math_dollar"]))
            elif groups["sup"] is not None:
                result.append(Superscript(content=self._parse_inline(groups["sup"])))
            elif groups["sub"] is not None:
                result.append(Subscript(content=self._parse_inline(groups["sub"])))
            elif groups["bold"] is not None:
                result.append(Strong(content=self._parse_inline(groups["bold"])))
            elif groups["italic"] is not None:
                result.append(Emphasis(content=self._parse_inline(groups["italic"])))
            elif groups["underline"] is not None:
                result.append(Underline(content=self._parse_inline(groups["underline"])))
            elif groups["strike"] is not None:
                result.append(Strikethrough(content=self._parse_inline(groups["strike"])))
            elif groups["code"] is not None:
                result.append(Code(content=groups["code"]))
            elif groups["verbatim"] is not None:
                result.append(Code(content=groups["verbatim"]))
            else:  # Plain URL
                url = groups["url"].rstrip(_URL_TRAILING_PUNCTUATION)
                end = match.start() + len(url)
                if self._is_image(url):
                    result.append(Image(url=url, alt_text=url))
                else:
                    result.append(Link(url=url, content=[Text(content=url)]))

            pos = end

        if pos < len(text):
            result.append(Text(content=text[pos:]))

        return _merge_text(result)

    def _make_link(self, target: str, description: Optional[str]) -> Node:
        """Build a Link or Image for ``[[target]]`` / ``[[target][description]]``."""
        url = target[5:] if target.startswith("file:") else target
        if not description and self._is_image(url):
            return Image(url=url, alt_text=url)
        if description:
            content = self._parse_inline(description)
        else:
            content = [Text(content=url)]
        return Link(url=url, content=content)

    def _is_image(self, url: str) -> bool:
        path = url.split("?", 1)[0].split("#", 1)[0].lower()
        return path.endswith(tuple(ext.lower() for ext in self.options.image_extensions))


def _indentation(line: str) -> int:
    return len(line) - len(line.lstrip())


def _split_cells(line: str) -> list[str]:
    """Split a ``| a | b |`` table line into stripped cell strings."""
    content = line.strip()
    if content.startswith("|"):
        content = content[1:]
    if content.endswith("|"):
        content = content[:-1]
    return [cell.strip() for cell in content.split("|")]


def _merge_text(nodes: list[Node]) -> list[Node]:
    """Join adjacent Text nodes produced by split matches."""
    merged: list[Node] = []
    for node in nodes:
        if isinstance(node, Text) and merged and isinstance(merged[-1], Text) and not merged[-1].metadata:
            merged[-1] = Text(content=merged[-1].content + node.content)
        else:
            merged.append(node)
    return merged
