#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers producing the shared AST.

- :class:`OrgParser` reads Org-mode text (forward path)
- :class:`HtmlParser` reads the intermediate BeautifulSoup tree (forward path)
- :class:`MarkdownParser` reads MDX bodies with mistune (reverse path)
"""

from org2mdx.parsers.base import BaseParser
from org2mdx.parsers.html import HtmlParser
from org2mdx.parsers.markdown import MarkdownParser
from org2mdx.parsers.org import OrgParser

__all__ = ["BaseParser", "HtmlParser", "MarkdownParser", "OrgParser"]
