#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/plugins/html_passes.py
"""Passes over the intermediate HTML tree.

Each pass mutates a BeautifulSoup tree in place. They run in this order:

1. :func:`rewrite_math` - math spans become literal ``$...$`` / ``$$...$$``
2. :func:`wrap_figures` - captioned images are wrapped in ``<figure>``
3. :func:`normalize_tables` - header synthesis and column alignment
4. :func:`flatten_figures` - figures become literal HTML strings

Literal content is carried in ``<span data-literal="">`` elements, which the
HTML parser turns into raw inline nodes that the Markdown renderer emits
without escaping.
"""

from __future__ import annotations

import html
import logging
import re

from bs4 import BeautifulSoup, NavigableString, Tag

from org2mdx.constants import LITERAL_ATTRIBUTE
from org2mdx.plugins.context import PluginContext

logger = logging.getLogger(__name__)

_DASHES = re.compile(r"-+")


def make_literal(soup: BeautifulSoup, text: str) -> Tag:
    """Create a ``<span data-literal>`` holding ``text``."""
    literal = soup.new_tag("span", attrs={LITERAL_ATTRIBUTE: ""})
    literal.string = text
    return literal


def rewrite_math(soup: BeautifulSoup) -> None:
    """Replace math elements with literal TeX delimited for remark-math.

    An element is display math when its class says so or when the text
    right before it ends with a newline. Block-level display math is
    written on its own lines.
    """
    for element in soup.find_all(class_=["math-inline", "math-display"]):
        content = element.get_text()
        classes = element.get("class") or []
        is_block = element.name == "div"
        display = "math-display" in classes or _preceded_by_newline(element)

        if is_block:
            literal = make_literal(soup, f"$$\n{content.strip()}\n$$")
            paragraph = soup.new_tag("p")
            paragraph.append(literal)
            element.replace_with(paragraph)
        else:
            delimiter = "$$" if display else "$"
            element.replace_with(make_literal(soup, f"{delimiter}{content}{delimiter}"))


def _preceded_by_newline(element: Tag) -> bool:
    previous = element.previous_sibling
    return isinstance(previous, NavigableString) and str(previous).endswith("\n")


def wrap_figures(soup: BeautifulSoup, context: PluginContext) -> None:
    """Wrap the i-th image in ``<figure>`` when a caption was recorded for it."""
    for index, image in enumerate(soup.find_all("img")):
        record = context.caption_for(index)
        if record is None:
            continue
        figure = image.wrap(soup.new_tag("figure"))
        figcaption = soup.new_tag("figcaption")
        fragment = BeautifulSoup(record.caption_html, "html.parser")
        for child in list(fragment.contents):
            figcaption.append(child.extract())
        figure.append(figcaption)


def normalize_tables(soup: BeautifulSoup, context: PluginContext) -> None:
    """Build table headers from Org separator rows and apply recorded alignments.

    When the second row is a separator, the first row becomes the header;
    every other separator row is dropped.
    """
    for index, table in enumerate(soup.find_all("table")):
        rows = table.find_all("tr")
        if len(rows) >= 2 and _is_separator(rows[1]):
            header_row = rows[0].extract()
            for cell in header_row.find_all(["td", "th"], recursive=False):
                cell.name = "th"
            thead = soup.new_tag("thead")
            thead.append(header_row)
            table.insert(0, thead)
            rows[1].decompose()

        for row in table.find_all("tr"):
            if _is_separator(row):
                row.decompose()

        record = context.alignment_for(index)
        if record is None:
            continue
        thead = table.find("thead")
        target = thead.find("tr") if thead else table.find("tr")
        if target is None:
            continue
        for cell, alignment in zip(target.find_all(["th", "td"], recursive=False), record.alignments):
            cell["align"] = alignment


def _is_separator(row: Tag) -> bool:
    cells = row.find_all(["td", "th"], recursive=False)
    return bool(cells) and all(_DASHES.fullmatch(cell.get_text(strip=True)) for cell in cells)


def flatten_figures(soup: BeautifulSoup) -> None:
    """Replace every ``<figure>`` with its markup as a literal string.

    The output is ``<figure><img src="..." alt="..." /><figcaption>...</figcaption></figure>``,
    which is valid JSX and survives the Markdown renderer unescaped.
    """
    for figure in soup.find_all("figure"):
        image = figure.find("img")
        caption = figure.find("figcaption")
        src = image.get("src", "") if image else ""
        alt = image.get("alt", "") if image else ""

        caption_html = ""
        if caption is not None:
            # Captions are inserted after the math pass ran
            if caption.find(class_=["math-inline", "math-display"]):
                rewrite_math(soup)
            for literal in caption.find_all("span", attrs={LITERAL_ATTRIBUTE: True}):
                literal.unwrap()
            caption_html = caption.decode_contents()

        markup = (
            f'<figure><img src="{html.escape(src)}" alt="{html.escape(alt)}" />'
            f"<figcaption>{caption_html}</figcaption></figure>"
        )
        figure.replace_with(make_literal(soup, markup))
