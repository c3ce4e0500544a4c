#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/includes.py
"""Resolution of ``#+INCLUDE:`` directives.

Included files are read as UTF-8 and inlined in place of the directive line.
Their own includes resolve relative to their directory. Failures degrade to
an HTML comment so conversion always continues.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import AbstractSet, Optional

logger = logging.getLogger(__name__)

_INCLUDE_PATTERN = re.compile(r'^#\+INCLUDE:\s*"([^"]+)"', re.IGNORECASE)
_LINE_SPLIT = re.compile(r"\r?\n")


def resolve_includes(
    text: str,
    base_path: str | Path,
    visited: Optional[AbstractSet[Path]] = None,
) -> str:
    """Inline every ``#+INCLUDE: "path"`` line in ``text``.

    Parameters
    ----------
    text : str
        Org source
    base_path : str or Path
        Directory that relative include paths resolve against
    visited : set of Path, optional
        Absolute paths of the files currently being included. A directive
        pointing at one of them is a cycle and is skipped.

    Returns
    -------
    str
        Text with include directives replaced by file contents or by
        ``<!-- Circular include skipped: X -->`` /
        ``<!-- Include file not found: X -->`` comments

    Notes
    -----
    Only the chain of ancestors counts as visited, so the same file may be
    included more than once from sibling locations.

    """
    visited = frozenset(visited or ())
    base = Path(base_path)
    lines: list[str] = []

    for line in _LINE_SPLIT.split(text):
        match = _INCLUDE_PATTERN.match(line)
        if not match:
            lines.append(line)
            continue

        include_file = match.group(1)
        include_path = (base / include_file).resolve()

        if include_path in visited:
            logger.warning("Circular include detected: %s", include_path)
            lines.append(f"<!-- Circular include skipped: {include_file} -->")
            continue

        try:
            content = include_path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Include file not found: %s (%s)", include_path, e)
            lines.append(f"<!-- Include file not found: {include_file} -->")
            continue

        logger.debug("Inlining include %s", include_path)
        lines.append(resolve_includes(content, include_path.parent, visited | {include_path}))

    return "\n".join(lines)
