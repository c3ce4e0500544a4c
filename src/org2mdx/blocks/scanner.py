#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/blocks/scanner.py
"""Stack-based scanner for ``#+begin_<name>`` / ``#+end_<name>`` fences.

The scanner tokenizes fence lines and matches them with an explicit stack,
so a nested fence of the same name can never close its parent early and
arbitrary nesting depth needs no special casing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Collection, Optional

_BEGIN_PATTERN = re.compile(r"^[ \t]*#\+begin_(\w+)(?:[ \t]+(.*?))?[ \t]*$", re.IGNORECASE | re.MULTILINE)
_END_PATTERN = re.compile(r"^[ \t]*#\+end_(\w+)[ \t]*$", re.IGNORECASE | re.MULTILINE)
_FENCE_PATTERN = re.compile(f"{_BEGIN_PATTERN.pattern}|{_END_PATTERN.pattern}", re.IGNORECASE | re.MULTILINE)


@dataclass(frozen=True)
class Fence:
    """A matched outermost fence.

    Parameters
    ----------
    start : int
        Offset of ``#+begin`` (leading indentation is not part of the fence)
    end : int
        Offset just past the end line, excluding its newline
    name : str
        Lower-cased block name
    args : str
        Text following the block name on the begin line
    body : str
        Lines between the fence lines, without the surrounding newlines

    """

    start: int
    end: int
    name: str
    args: str
    body: str


def find_fences(text: str, names: Optional[Collection[str]] = None) -> list[Fence]:
    """Return the outermost matched fences in document order.

    Parameters
    ----------
    text : str
        Org source
    names : collection of str, optional
        Lower-cased block names to consider. Fence lines of other names are
        ignored. When omitted every name is considered.

    Returns
    -------
    list[Fence]
        Non-overlapping outermost fences. A begin line without a matching end
        is not reported and stays literal text.

    """
    wanted = {name.lower() for name in names} if names is not None else None
    fences: list[Fence] = []
    # (name, begin offset, args, body offset)
    stack: list[tuple[str, int, str, int]] = []

    for match in _FENCE_PATTERN.finditer(text):
        begin_name, begin_args, end_name = match.group(1), match.group(2), match.group(3)
        name = (begin_name or end_name).lower()
        if wanted is not None and name not in wanted:
            continue

        if begin_name is not None:
            marker = match.start() + (len(match.group(0)) - len(match.group(0).lstrip(" \t")))
            stack.append((name, marker, (begin_args or "").strip(), match.end() + 1))
            continue

        depth = _find_open(stack, name)
        if depth is None:
            # Stray end line
            continue
        open_name, start, args, body_start = stack[depth]
        # Unclosed inner begins are abandoned and stay literal
        del stack[depth:]
        if stack:
            continue

        body_end = max(body_start, _line_start(text, match.start()) - 1)
        body = text[body_start:body_end] if body_start <= len(text) else ""
        fences.append(Fence(start=start, end=match.end(), name=open_name, args=args, body=body))

    return fences


def replace_fences(text: str, fences: list[Fence], replacements: list[Optional[str]]) -> str:
    """Splice replacement strings over fences; None keeps the fence as-is."""
    parts: list[str] = []
    position = 0
    for fence, replacement in zip(fences, replacements):
        if replacement is None:
            continue
        parts.append(text[position : fence.start])
        parts.append(replacement)
        position = fence.end
    parts.append(text[position:])
    return "".join(parts)


def _find_open(stack: list[tuple[str, int, str, int]], name: str) -> Optional[int]:
    for depth in range(len(stack) - 1, -1, -1):
        if stack[depth][0] == name:
            return depth
    return None


def _line_start(text: str, offset: int) -> int:
    return text.rfind("\n", 0, offset) + 1
