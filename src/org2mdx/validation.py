#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/validation.py
"""Frontmatter validation against a caller-supplied schema.

org2mdx does not ship a schema library. Any object that follows one of these
common protocols is accepted:

- ``schema.validate(data)`` returning a result with ``issues`` (failure) or
  ``value`` (success), as Standard Schema implementations do;
- ``schema.model_validate(data)`` (pydantic v2 model classes) or
  ``schema.parse(data)`` (zod-style parsers) returning the value or raising
  an exception that carries ``errors`` or ``issues``.

The schema may also be a factory that receives ``{"source", "path"}`` and
returns the schema for that document.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from org2mdx.exceptions import FrontmatterValidationError

logger = logging.getLogger(__name__)

_MISSING = object()
_PROTOCOL_METHODS = ("model_validate", "validate", "parse")


def validate_keywords(keywords: Mapping[str, Any], schema: Any, context: Optional[Mapping[str, Any]] = None) -> Any:
    """Validate a keyword map and return the (possibly transformed) value.

    Parameters
    ----------
    keywords : Mapping[str, Any]
        Defaulted keyword map
    schema : Any
        Schema object, or a callable returning one when given ``context``
    context : Mapping[str, Any], optional
        ``{"source": ..., "path": ...}`` passed to schema factories

    Returns
    -------
    Any
        The validated value reported by the schema, or ``keywords`` when the
        schema reports none

    Raises
    ------
    FrontmatterValidationError
        If the schema reports issues

    """
    context = dict(context or {})
    title = f"Invalid frontmatter in {context['path']}" if context.get("path") else "Invalid frontmatter"

    if _is_factory(schema):
        schema = schema(context)

    if hasattr(schema, "model_validate"):
        model = _call_raising(schema.model_validate, keywords, title)
        # Frontmatter is dumped from a plain mapping
        return model.model_dump() if hasattr(model, "model_dump") else model

    if hasattr(schema, "validate"):
        result = _call_raising(schema.validate, keywords, title)
        issues = _get(result, "issues")
        if issues:
            raise FrontmatterValidationError(title, [normalize_issue(issue) for issue in issues])
        value = _get(result, "value", _MISSING)
        if value is not _MISSING:
            return value
        return keywords if result is None else result

    if hasattr(schema, "parse"):
        return _call_raising(schema.parse, keywords, title)

    logger.warning("Schema %r has neither model_validate(), validate() nor parse(); frontmatter left unvalidated", schema)
    return keywords


def normalize_issue(issue: Any) -> dict[str, Any]:
    """Normalize a schema issue to ``{"path": list[str] | None, "message": str}``.

    Parameters
    ----------
    issue : Any
        Mapping or object exposing ``path``/``loc`` and ``message``/``msg``

    Returns
    -------
    dict
        Normalized issue

    Examples
    --------
    >>> normalize_issue({"loc": ("title",), "msg": "field required"})
    {'path': ['title'], 'message': 'field required'}

    """
    path = _get(issue, "path")
    if path is None:
        path = _get(issue, "loc")
    message = _get(issue, "message")
    if message is None:
        message = _get(issue, "msg")

    if path is not None:
        if isinstance(path, (str, int)):
            path = [path]
        path = [str(_get(part, "key", part)) for part in path] or None
    return {"path": path, "message": str(message) if message is not None else str(issue)}


def _is_factory(schema: Any) -> bool:
    return callable(schema) and not any(hasattr(schema, name) for name in _PROTOCOL_METHODS)


def _call_raising(method: Any, keywords: Mapping[str, Any], title: str) -> Any:
    """Call a schema method, turning an exception that lists issues into FrontmatterValidationError."""
    try:
        return method(dict(keywords))
    except Exception as exc:
        issues = _issues_from_exception(exc)
        if issues is None:
            raise
        raise FrontmatterValidationError(title, issues, original_error=exc) from exc


def _issues_from_exception(exc: Exception) -> Optional[list[dict[str, Any]]]:
    for attribute in ("errors", "issues"):
        raw = getattr(exc, attribute, None)
        if raw is None:
            continue
        if callable(raw):
            raw = raw()
        if isinstance(raw, (list, tuple)):
            return [normalize_issue(issue) for issue in raw]
    return None


def _get(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)
