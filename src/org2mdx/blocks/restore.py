#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/blocks/restore.py
"""Region restoration: resolve placeholder tokens into final MDX markup.

Restoration runs repeatedly until no placeholder is left, so placeholders
nested inside restored content (a code block inside a callout, a callout
inside a callout) resolve as well. A token with no matching region resolves
to an empty string.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from org2mdx.blocks.context import PLACEHOLDER_PATTERN, PREFIX_KINDS, BlockContext, Region
from org2mdx.constants import DEFAULT_CODE_FENCE_MIN, NESTED_CODE_MARKER
from org2mdx.html_to_jsx import html_to_jsx
from org2mdx.options.conversion import ConversionOptions

logger = logging.getLogger(__name__)

_NESTED_PATTERN = re.compile(rf"{NESTED_CODE_MARKER}(\d+)(?!\d)")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

DRAWER_TEMPLATE = """<Accordion type="single" collapsible className="w-full">
  <AccordionItem value="drawer-{index}">
    <AccordionTrigger>{title}</AccordionTrigger>
    <AccordionContent>
{content}
    </AccordionContent>
  </AccordionItem>
</Accordion>"""


def restore_regions(
    text: str,
    context: BlockContext,
    options: ConversionOptions | None = None,
    transform: Optional[Callable[[str, ConversionOptions], str]] = None,
) -> str:
    """Replace every placeholder in ``text`` with its rendered region.

    Parameters
    ----------
    text : str
        Markdown produced by the structural transform
    context : BlockContext
        Context populated during extraction
    options : ConversionOptions, optional
        Supplies language mappings and Markdown options for callout bodies
    transform : callable, optional
        Structural transform used to render callout bodies. Defaults to
        :func:`org2mdx.pipeline.transform_structure`.

    Returns
    -------
    str
        Fully restored Markdown

    """
    options = options or ConversionOptions()
    if transform is None:
        from org2mdx.pipeline import transform_structure

        transform = transform_structure

    restorer = _Restorer(context, options, transform)
    # Each pass resolves at least one nesting level
    for _ in range(len(context) + 1):
        if not PLACEHOLDER_PATTERN.search(text):
            break
        text = PLACEHOLDER_PATTERN.sub(restorer, text)
    return text


def drawer_title(name: str) -> str:
    """Turn a drawer name into a Title Case label.

    Examples
    --------
    >>> drawer_title("my_custom-drawer")
    'My Custom Drawer'
    >>> drawer_title("MyDrawer")
    'My Drawer'

    """
    words = re.split(r"[-_\s]+", _CAMEL_BOUNDARY.sub(" ", name))
    return " ".join(word.capitalize() for word in words if word)


def code_fence(body: str, language: str = "", minimum: int = DEFAULT_CODE_FENCE_MIN) -> str:
    """Wrap ``body`` in a backtick fence longer than any backtick run inside it."""
    longest = max((len(run) for run in re.findall(r"`+", body)), default=0)
    fence = "`" * max(minimum, longest + 1)
    return f"{fence}{language}\n{body}\n{fence}"


class _Restorer:
    """Callable used with ``re.sub`` to render one placeholder."""

    def __init__(
        self,
        context: BlockContext,
        options: ConversionOptions,
        transform: Callable[[str, ConversionOptions], str],
    ):
        self.context = context
        self.options = options
        self.transform = transform
        self._renderers: dict[str, Callable[[Region, int], str]] = {
            "code": self._render_code,
            "latex": self._render_code,
            "nested_code": self._render_raw,
            "example": self._render_example,
            "html": self._render_html,
            "export_html": self._render_html,
            "jsx": self._render_raw_body,
            "export_jsx": self._render_raw_body,
            "export_block": self._render_raw_body,
            "callout": self._render_callout,
            "drawer": self._render_drawer,
        }

    def __call__(self, match: re.Match[str]) -> str:
        kind = PREFIX_KINDS[match.group(1)]
        index = int(match.group(2))
        region = self.context.get(kind, index)
        if region is None:
            logger.warning("No region recorded for placeholder %s", match.group(0))
            return ""

        rendered = self._renderers[kind](region, index)
        return _indent_continuation(rendered, _line_prefix(match))

    def _render_code(self, region: Region, index: int) -> str:
        language = region.language or ""
        language = self.options.language_mappings.get(language, language)
        body = _NESTED_PATTERN.sub(self._inline_nested, region.body)
        return code_fence(body, language, self.options.markdown.code_fence_min)

    def _inline_nested(self, match: re.Match[str]) -> str:
        region = self.context.get("nested_code", int(match.group(1)))
        return region.body if region is not None else ""

    def _render_raw(self, region: Region, index: int) -> str:
        return region.source

    def _render_raw_body(self, region: Region, index: int) -> str:
        return region.body

    def _render_example(self, region: Region, index: int) -> str:
        return code_fence(region.body.strip("\n"), minimum=self.options.markdown.code_fence_min)

    def _render_html(self, region: Region, index: int) -> str:
        return html_to_jsx(region.body)

    def _render_callout(self, region: Region, index: int) -> str:
        content = self.transform(region.body, self.options)
        return f'<Callout type="{region.callout_type}">\n{content}\n</Callout>'

    def _render_drawer(self, region: Region, index: int) -> str:
        return DRAWER_TEMPLATE.format(
            index=index,
            title=drawer_title(region.drawer_name or ""),
            content=region.body,
        )


def _line_prefix(match: re.Match[str]) -> str:
    """Return the whitespace preceding a placeholder that starts its line."""
    text = match.string
    line_start = text.rfind("\n", 0, match.start()) + 1
    prefix = text[line_start : match.start()]
    return prefix if prefix and not prefix.strip() else ""


def _indent_continuation(rendered: str, prefix: str) -> str:
    if not prefix or "\n" not in rendered:
        return rendered
    lines = rendered.split("\n")
    return lines[0] + "\n" + "\n".join(prefix + line if line else line for line in lines[1:])
