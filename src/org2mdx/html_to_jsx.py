#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/html_to_jsx.py
"""Translate raw HTML fragments into JSX-compatible markup.

Only attribute syntax changes: ``class`` becomes ``className``, ``for``
becomes ``htmlFor``, other hyphenated or lower-cased DOM attributes are
camel-cased, and an inline ``style`` string becomes an object literal. Text
and element structure pass through unchanged.

Examples
--------
>>> html_to_jsx('<div class="a" style="color: red; font-size: 14px;">t</div>')
'<div className="a" style={{ color: "red", fontSize: 14 }}>t</div>'

"""

from __future__ import annotations

import html
import logging
import re

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, ParserRejectedMarkup, Tag

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

# DOM attributes whose React name is not a plain camel-casing of the HTML name
ATTRIBUTE_NAMES: dict[str, str] = {
    "class": "className",
    "for": "htmlFor",
    "tabindex": "tabIndex",
    "readonly": "readOnly",
    "maxlength": "maxLength",
    "minlength": "minLength",
    "colspan": "colSpan",
    "rowspan": "rowSpan",
    "cellpadding": "cellPadding",
    "cellspacing": "cellSpacing",
    "contenteditable": "contentEditable",
    "crossorigin": "crossOrigin",
    "srcset": "srcSet",
    "autocomplete": "autoComplete",
    "autofocus": "autoFocus",
    "autoplay": "autoPlay",
    "enctype": "encType",
    "frameborder": "frameBorder",
    "allowfullscreen": "allowFullScreen",
    "usemap": "useMap",
    "datetime": "dateTime",
    "accesskey": "accessKey",
    "spellcheck": "spellCheck",
    "novalidate": "noValidate",
    "playsinline": "playsInline",
    "referrerpolicy": "referrerPolicy",
    "http-equiv": "httpEquiv",
    "accept-charset": "acceptCharset",
}

_NUMERIC_VALUE = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)(?:px)?$")
_EVENT_ATTRIBUTE = re.compile(r"^on([a-z]+)$")


def html_to_jsx(fragment: str) -> str:
    """Convert an HTML fragment to JSX.

    Parameters
    ----------
    fragment : str
        HTML markup, typically one ``#+HTML:`` line or an export block body

    Returns
    -------
    str
        Equivalent JSX markup, or the input unchanged when it holds no
        elements or cannot be parsed

    """
    if "<" not in fragment:
        return fragment

    try:
        soup = BeautifulSoup(fragment, "html.parser", multi_valued_attributes=None)
    except ParserRejectedMarkup as e:
        logger.warning("Leaving unparseable HTML unchanged: %s", e)
        return fragment

    if soup.find() is None:
        return fragment

    return "".join(_serialize(child) for child in soup.contents)


def jsx_attribute_name(name: str) -> str:
    """Return the JSX spelling of an HTML attribute name."""
    lowered = name.lower()
    if lowered in ATTRIBUTE_NAMES:
        return ATTRIBUTE_NAMES[lowered]
    if lowered.startswith(("data-", "aria-")):
        return lowered
    event = _EVENT_ATTRIBUTE.match(lowered)
    if event:
        return "on" + event.group(1).capitalize()
    return _camel_case(lowered)


def style_to_object(style: str) -> str:
    """Turn an inline CSS declaration list into a JSX style object literal.

    Examples
    --------
    >>> style_to_object("color: red; font-size: 14px;")
    '{{ color: "red", fontSize: 14 }}'

    """
    entries: list[str] = []
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        prop, value = prop.strip(), value.strip()
        if not sep or not prop:
            continue
        key = f'"{prop}"' if prop.startswith("--") else _camel_case(prop, capitalize_prefix=prop.startswith("-"))
        entries.append(f"{key}: {_style_value(value)}")

    if not entries:
        return "{{}}"
    return "{{ " + ", ".join(entries) + " }}"


def _style_value(value: str) -> str:
    if _NUMERIC_VALUE.match(value):
        number = value[:-2] if value.endswith("px") else value
        return number
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _camel_case(name: str, capitalize_prefix: bool = False) -> str:
    parts = [part for part in name.split("-") if part]
    if not parts:
        return name
    head = parts[0].capitalize() if capitalize_prefix else parts[0]
    return head + "".join(part.capitalize() for part in parts[1:])


def _serialize(node) -> str:
    if isinstance(node, Comment):
        return "{/*" + str(node) + "*/}"
    if isinstance(node, Doctype):
        return ""
    if isinstance(node, NavigableString):
        return html.escape(str(node), quote=False)
    if not isinstance(node, Tag):
        return ""

    attributes = "".join(_serialize_attribute(name, value) for name, value in node.attrs.items())
    if node.name in VOID_ELEMENTS:
        return f"<{node.name}{attributes} />"

    children = "".join(_serialize(child) for child in node.contents)
    return f"<{node.name}{attributes}>{children}</{node.name}>"


def _serialize_attribute(name: str, value) -> str:
    jsx_name = jsx_attribute_name(name)
    if name.lower() == "style":
        return f" style={style_to_object(value or '')}"
    if value is None or (value == "" and name.lower() not in ("value", "alt")):
        # Boolean attribute
        return f" {jsx_name}"
    escaped = str(value).replace("&", "&amp;").replace('"', "&quot;")
    return f' {jsx_name}="{escaped}"'
