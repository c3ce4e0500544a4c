#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/blocks/extract.py
"""Region extraction: replace protected Org regions with placeholder tokens.

Regions are processed in a fixed order so placeholder indices are
reproducible for a given input:

1. source blocks
2. LaTeX blocks
3. ``#+HTML:`` directives
4. ``#+JSX:`` directives
5. export blocks
6. comment blocks (removed)
7. example blocks
8. callout blocks
9. drawers
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Mapping, Optional

from org2mdx.blocks.context import BlockContext, Region
from org2mdx.blocks.scanner import Fence, find_fences, replace_fences
from org2mdx.constants import CALLOUT_TYPE_MAP, RESERVED_DRAWERS

logger = logging.getLogger(__name__)

_DIRECTIVE_TEMPLATE = r"^([ \t]*)#\+{name}:[ \t]*(.*?)[ \t]*$"
_HTML_DIRECTIVE = re.compile(_DIRECTIVE_TEMPLATE.format(name="html"), re.IGNORECASE | re.MULTILINE)
_JSX_DIRECTIVE = re.compile(_DIRECTIVE_TEMPLATE.format(name="jsx"), re.IGNORECASE | re.MULTILINE)

_DRAWER_START = re.compile(r"^[ \t]*:([A-Za-z][\w-]*):[ \t]*$")
_DRAWER_END = re.compile(r"^[ \t]*:end:[ \t]*$", re.IGNORECASE)

_NOEXPORT = ":noexport:"


def extract_regions(
    text: str,
    context: BlockContext,
    callout_types: Mapping[str, str] = CALLOUT_TYPE_MAP,
) -> str:
    """Replace every protected region in ``text`` with a placeholder.

    Parameters
    ----------
    text : str
        Org source after include resolution
    context : BlockContext
        Fresh context that receives the extracted regions
    callout_types : Mapping[str, str]
        Block names that become callouts, mapped to their callout type

    Returns
    -------
    str
        Text with placeholders in place of the extracted regions

    """
    text = extract_source_blocks(text, context)
    text = extract_latex_blocks(text, context)
    text = extract_directives(text, context)
    text = extract_export_blocks(text, context)
    text = remove_comment_blocks(text)
    text = extract_example_blocks(text, context)
    text = extract_callouts(text, context, callout_types)
    text = extract_drawers(text, context)

    logger.debug(
        "Extracted regions: code=%d latex=%d html=%d jsx=%d export=%d example=%d callout=%d drawer=%d",
        len(context.code),
        len(context.latex),
        len(context.html),
        len(context.jsx),
        len(context.export_html) + len(context.export_jsx) + len(context.export_block),
        len(context.example),
        len(context.callout),
        len(context.drawer),
    )
    return text


def _substitute(text: str, names: set[str], handler: Callable[[str, Fence], Optional[str]]) -> str:
    fences = find_fences(text, names)
    return replace_fences(text, fences, [handler(text, fence) for fence in fences])


def extract_source_blocks(text: str, context: BlockContext) -> str:
    """Placehold ``#+begin_src`` blocks.

    Complete src fences nested in a block body are placeheld separately and
    inlined verbatim on restore, so they are never converted on their own.
    """

    def handle(source: str, fence: Fence) -> str:
        language, _, args = fence.args.partition(" ")
        body = _substitute(_dedent_body(source, fence), {"src"}, _nested_source_handler(context))
        region = Region(
            source=source[fence.start : fence.end],
            body=body,
            language=language.strip(),
            args=args.strip(),
        )
        return context.add("code", region)

    return _substitute(text, {"src"}, handle)


def _dedent_body(source: str, fence: Fence) -> str:
    """Strip the begin line's indentation from each body line.

    A block inside a list item is indented with the item; the restored
    fence gets that indentation back from the placeholder's line prefix.
    """
    line_start = source.rfind("\n", 0, fence.start) + 1
    width = len(source[line_start : fence.start])
    if not width:
        return fence.body
    lines = fence.body.split("\n")
    return "\n".join(line[min(width, len(line) - len(line.lstrip(" \t"))) :] for line in lines)


def _nested_source_handler(context: BlockContext) -> Callable[[str, Fence], str]:
    def handle(source: str, fence: Fence) -> str:
        slice_ = source[fence.start : fence.end]
        return context.add("nested_code", Region(source=slice_, body=slice_))

    return handle


def extract_latex_blocks(text: str, context: BlockContext) -> str:
    """Placehold ``#+begin_latex`` blocks as math code."""

    def handle(source: str, fence: Fence) -> str:
        region = Region(source=source[fence.start : fence.end], body=fence.body, language="math")
        return context.add("latex", region)

    return _substitute(text, {"latex"}, handle)


def extract_directives(text: str, context: BlockContext) -> str:
    """Placehold single-line ``#+HTML:`` and ``#+JSX:`` directives."""

    def html(match: re.Match[str]) -> str:
        return match.group(1) + context.add("html", Region(source=match.group(0), body=match.group(2)))

    def jsx(match: re.Match[str]) -> str:
        return match.group(1) + context.add("jsx", Region(source=match.group(0), body=match.group(2)))

    text = _HTML_DIRECTIVE.sub(html, text)
    return _JSX_DIRECTIVE.sub(jsx, text)


def extract_export_blocks(text: str, context: BlockContext) -> str:
    """Placehold or drop ``#+begin_export`` blocks.

    A header tagged ``:noexport:`` removes the block. ``html`` and ``jsx``
    backends get their own region kinds; every other backend is kept raw.
    A header without a backend is left as literal text.
    """

    def handle(source: str, fence: Fence) -> Optional[str]:
        if _NOEXPORT in fence.args.lower():
            return ""
        backend = fence.args.split()[0].lower() if fence.args.split() else ""
        if not backend:
            return None
        region = Region(source=source[fence.start : fence.end], body=fence.body, backend=backend)
        if backend == "html":
            return context.add("export_html", region)
        if backend == "jsx":
            return context.add("export_jsx", region)
        return context.add("export_block", region)

    return _substitute(text, {"export"}, handle)


def remove_comment_blocks(text: str) -> str:
    """Drop ``#+begin_comment`` blocks entirely."""
    return _substitute(text, {"comment"}, lambda source, fence: "")


def extract_example_blocks(text: str, context: BlockContext) -> str:
    """Placehold ``#+begin_example`` blocks."""

    def handle(source: str, fence: Fence) -> str:
        region = Region(source=source[fence.start : fence.end], body=_dedent_body(source, fence))
        return context.add("example", region)

    return _substitute(text, {"example"}, handle)


def extract_callouts(
    text: str,
    context: BlockContext,
    callout_types: Mapping[str, str] = CALLOUT_TYPE_MAP,
) -> str:
    """Placehold callout blocks such as ``#+begin_warning``.

    The body is trimmed, and nested callouts and drawers inside it are
    placeheld too.
    Block names without a callout mapping are left untouched.
    """
    names = {name.lower() for name in callout_types}
    if not names:
        return text

    def handle(source: str, fence: Fence) -> Optional[str]:
        callout_type = callout_types.get(fence.name)
        if callout_type is None:
            return None
        body = extract_callouts(fence.body.strip(), context, callout_types)
        body = extract_drawers(body, context)
        region = Region(source=source[fence.start : fence.end], body=body, callout_type=callout_type)
        return context.add("callout", region)

    return _substitute(text, names, handle)


def extract_drawers(text: str, context: BlockContext) -> str:
    """Placehold ``:name:`` ... ``:end:`` drawers with non-reserved names.

    The drawer content is kept raw. A start line without a later ``:end:``
    is left as-is.
    """
    lines = text.split("\n")
    output: list[str] = []
    index = 0

    while index < len(lines):
        line = lines[index]
        match = _DRAWER_START.match(line)
        if not match or match.group(1).lower() in RESERVED_DRAWERS or match.group(1).lower() == "end":
            output.append(line)
            index += 1
            continue

        end = next((j for j in range(index + 1, len(lines)) if _DRAWER_END.match(lines[j])), None)
        if end is None:
            output.append(line)
            index += 1
            continue

        content = "\n".join(lines[index + 1 : end])
        region = Region(
            source="\n".join(lines[index : end + 1]),
            body=content,
            drawer_name=match.group(1),
        )
        indent = line[: len(line) - len(line.lstrip(" \t"))]
        output.append(indent + context.add("drawer", region))
        index = end + 1

    return "\n".join(output)
