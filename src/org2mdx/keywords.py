#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/keywords.py
"""Org keyword extraction and frontmatter defaults.

Org documents carry their metadata in ``#+KEY: value`` lines. This module
collects those lines into an ordered keyword map, normalizes dates, and
fills in the ``title`` and ``description`` defaults required downstream.
"""

from __future__ import annotations

import logging
import re
from pathlib import PurePath
from typing import Mapping, Optional

from orgparse.date import OrgDate

from org2mdx.constants import CALLOUT_TYPE_MAP, DATE_KEYWORD, DEFAULT_DESCRIPTION, DEFAULT_SKIP_KEYWORDS
from org2mdx.options.conversion import ConversionOptions

logger = logging.getLogger(__name__)

_KEYWORD_PATTERN = re.compile(r"^#\+(\w+):\s*(.*)$", re.IGNORECASE)
_LINE_SPLIT = re.compile(r"\r?\n")


def extract_keywords(text: str, skip_keywords: frozenset[str] = DEFAULT_SKIP_KEYWORDS) -> dict[str, str]:
    """Collect ``#+KEY: value`` lines into an ordered mapping.

    Keys are lower-cased and values trimmed. When a key repeats, the last
    value wins but the key keeps its first position. Lines that do not
    match the keyword syntax are ignored.

    Parameters
    ----------
    text : str
        Raw Org source
    skip_keywords : frozenset of str
        Lower-cased keys to drop entirely

    Returns
    -------
    dict[str, str]
        Keyword map in first-occurrence order

    Examples
    --------
    >>> extract_keywords("#+TITLE: Hello\\n#+options: toc:nil\\nBody")
    {'title': 'Hello'}

    """
    keywords: dict[str, str] = {}
    for line in _LINE_SPLIT.split(text):
        match = _KEYWORD_PATTERN.match(line)
        if not match:
            continue
        key = match.group(1).lower()
        if key in skip_keywords:
            continue
        keywords[key] = match.group(2).strip()

    if DATE_KEYWORD in keywords:
        raw_date = keywords[DATE_KEYWORD]
        normalized = normalize_date(raw_date)
        if normalized is None:
            logger.warning("Dropping unparseable #+DATE value: %r", raw_date)
            del keywords[DATE_KEYWORD]
        else:
            keywords[DATE_KEYWORD] = normalized

    return keywords


def normalize_date(value: str) -> Optional[str]:
    """Convert an Org timestamp or plain date into ISO-8601.

    Parameters
    ----------
    value : str
        Raw ``#+DATE`` value, e.g. ``<2024-01-15 Mon>`` or ``2024-01-15 10:30``

    Returns
    -------
    str or None
        ``YYYY-MM-DD`` for dates, ``YYYY-MM-DDTHH:MM:SS`` when a time is
        present, or None when the value cannot be parsed

    """
    value = value.strip()
    try:
        # Bracketed timestamps first, then a bare date with optional HH:MM
        timestamps = OrgDate.list_from_str(value)
        org_date = timestamps[0] if timestamps else OrgDate.from_str(value)
    except ValueError:
        return None

    if org_date.start is None:
        return None
    return org_date.start.isoformat()


def generate_default_title(filename: str) -> str:
    """Derive a display title from a file name.

    Examples
    --------
    >>> generate_default_title("notes/my-org_notes.org")
    'My Org Notes'

    """
    stem = PurePath(filename).stem
    spaced = re.sub(r"[-_]", " ", stem)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), spaced)


def apply_keyword_defaults(
    keywords: dict[str, str],
    filename: str,
    options: ConversionOptions | None = None,
) -> dict[str, str]:
    """Ensure ``title`` and ``description`` are present.

    Only those two keys are touched; every other entry is left as-is.

    Parameters
    ----------
    keywords : dict[str, str]
        Keyword map, modified in place
    filename : str
        Source file name used for the generated title
    options : ConversionOptions, optional
        Supplies explicit title and description defaults

    Returns
    -------
    dict[str, str]
        The same mapping, for chaining

    """
    options = options or ConversionOptions()
    if not keywords.get("title"):
        keywords["title"] = options.default_title or generate_default_title(filename)
    if not keywords.get("description"):
        keywords["description"] = options.default_description or DEFAULT_DESCRIPTION
    return keywords


def get_callout_type(name: str, callout_types: Mapping[str, str] = CALLOUT_TYPE_MAP) -> Optional[str]:
    """Return the callout type for a block name, or None when it is not a callout."""
    return callout_types.get(name.lower())
