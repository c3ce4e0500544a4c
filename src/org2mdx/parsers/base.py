#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that all parsers must inherit from.
A parser turns one input representation (Org text, an HTML tree, Markdown
text) into the org2mdx AST.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from org2mdx.ast import Document
from org2mdx.exceptions import InvalidOptionsError
from org2mdx.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from org2mdx.parsers.base import BaseParser
        >>> from org2mdx.ast import Document
        >>>
        >>> class MyCustomParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return Document(children=[])

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration.

        Parameters
        ----------
        options : BaseParserOptions or None, default = None
            Format-specific parsing options. If None, default options will be used.

        """
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Any) -> Document:
        """Parse the input into an AST.

        Parameters
        ----------
        input_data : Any
            Parser-specific input (text or a parsed tree)

        Returns
        -------
        Document
            AST Document node representing the parsed document structure

        """
        raise NotImplementedError
