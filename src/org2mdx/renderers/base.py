#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that all AST renderers must inherit from.
Renderers in org2mdx are text-only: they turn a Document into a string and
never write files.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from org2mdx.ast import Document
from org2mdx.ast.nodes import Node
from org2mdx.exceptions import InvalidOptionsError
from org2mdx.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from org2mdx.renderers.base import BaseRenderer
        >>>
        >>> class MyCustomRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document as a string

        """
        raise NotImplementedError

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class InlineContentMixin:
    """Mixin providing inline content rendering pattern for text-based renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes to text.

        Parameters
        ----------
        content : list of Node
            Inline nodes to render

        Returns
        -------
        str
            Rendered inline content as a string

        """
        # Save current output state
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)  # type: ignore[arg-type]

        result = "".join(self._output)
        self._output = saved_output
        return result
