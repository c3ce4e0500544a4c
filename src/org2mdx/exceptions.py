#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2mdx/exceptions.py
"""Custom exceptions for the org2mdx library.

The conversion pipeline degrades gracefully on imperfect input, so very few
conditions raise. The exceptions below cover the cases that reflect caller or
author intent rather than parser robustness.

Exception Hierarchy
-------------------
- Org2MdxError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)

  - FrontmatterValidationError (schema rejected the extracted keywords)

"""

from typing import Any, Optional


class Org2MdxError(Exception):
    """Base exception class for all org2mdx-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Org2MdxError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    component_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class FrontmatterValidationError(Org2MdxError):
    """Exception raised when a frontmatter schema rejects the keyword map.

    The error aggregates every issue reported by the schema so callers can
    show all of them at once.

    Parameters
    ----------
    title : str
        Summary line, usually naming the offending document
    issues : list of dict
        Normalized issues, each ``{"path": list[str] | None, "message": str}``
    original_error : Exception, optional
        The schema library's own exception, when one was raised

    Attributes
    ----------
    title : str
        Summary line
    issues : list of dict
        Normalized issues

    """

    def __init__(
        self,
        title: str,
        issues: list[dict[str, Any]],
        original_error: Exception | None = None,
    ):
        """Initialize the error and build an aggregated message."""
        lines = [f"  {_issue_path(issue) or '*'}: {issue.get('message', '')}" for issue in issues]
        super().__init__(f"{title}:\n" + "\n".join(lines), original_error=original_error)
        self.title = title
        self.issues = issues

    def format_issues(self) -> str:
        """Return a log-friendly listing of the issues.

        Returns
        -------
        str
            ``[ORG] title:`` followed by one ``- path: message`` line per issue

        """
        lines = [f"[ORG] {self.title}:"]
        lines.extend(f"  - {_issue_path(issue) or '*'}: {issue.get('message', '')}" for issue in self.issues)
        return "\n".join(lines)


def _issue_path(issue: dict[str, Any]) -> Optional[str]:
    path = issue.get("path")
    if not path:
        return None
    return ".".join(str(part) for part in path)
