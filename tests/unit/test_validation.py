#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_validation.py
"""Unit tests for frontmatter schema validation.

Tests cover:
- ``validate()`` style schemas returning issues or a value
- ``parse()`` style schemas raising exceptions with issue lists
- ``model_validate()`` model classes
- Schema factories receiving the document context
- Issue normalization and error formatting

"""

from types import SimpleNamespace

import pytest

from org2mdx.exceptions import FrontmatterValidationError
from org2mdx.validation import normalize_issue, validate_keywords


class RequiredKeysSchema:
    """Schema with a ``validate`` method that requires certain keys."""

    def __init__(self, *required: str):
        self.required = required

    def validate(self, data: dict) -> dict:
        issues = [{"path": [key], "message": "Required"} for key in self.required if key not in data]
        if issues:
            return {"issues": issues}
        return {"value": {**data, "validated": True}}


class ParseError(Exception):
    def __init__(self, errors):
        super().__init__("parse failed")
        self._errors = errors

    def errors(self):
        return self._errors


class ArticleModel:
    """Model class in the pydantic v2 shape: ``model_validate`` plus a legacy ``validate``."""

    def __init__(self, title: str, author: str):
        self.title = title
        self.author = author

    @classmethod
    def model_validate(cls, data: dict) -> "ArticleModel":
        if "author" not in data:
            raise ParseError([{"loc": ("author",), "msg": "Field required", "type": "missing"}])
        return cls(data["title"], data["author"])

    @classmethod
    def validate(cls, data: dict) -> "ArticleModel":
        raise AssertionError("legacy validate() must not be called")

    def model_dump(self) -> dict:
        return {"title": self.title, "author": self.author}


class ParsingSchema:
    """Schema with a ``parse`` method raising on invalid data."""

    def parse(self, data: dict) -> dict:
        if "author" not in data:
            raise ParseError([{"loc": ("author",), "msg": "field required"}])
        return data


@pytest.mark.unit
class TestValidateKeywords:
    """Tests for validate_keywords."""

    def test_validate_success_returns_value(self) -> None:
        """Test that the schema's value replaces the keywords."""
        result = validate_keywords({"title": "T"}, RequiredKeysSchema("title"))
        assert result == {"title": "T", "validated": True}

    def test_validate_failure_aggregates_issues(self) -> None:
        """Test that every issue is reported."""
        with pytest.raises(FrontmatterValidationError) as exc_info:
            validate_keywords({}, RequiredKeysSchema("title", "author"), {"path": "doc.org"})
        error = exc_info.value
        assert error.title == "Invalid frontmatter in doc.org"
        assert error.issues == [
            {"path": ["title"], "message": "Required"},
            {"path": ["author"], "message": "Required"},
        ]
        assert "title: Required" in str(error)

    def test_validate_result_object(self) -> None:
        """Test a result object with attributes instead of keys."""

        class Schema:
            def validate(self, data):
                return SimpleNamespace(issues=None, value="ok")

        assert validate_keywords({"title": "T"}, Schema()) == "ok"

    def test_model_class_success_dumped(self) -> None:
        """Test that a model class is validated through model_validate and dumped to a dict."""
        result = validate_keywords({"title": "T", "author": "Ann"}, ArticleModel)
        assert result == {"title": "T", "author": "Ann"}

    def test_model_class_failure(self) -> None:
        """Test that a model validation error becomes FrontmatterValidationError."""
        with pytest.raises(FrontmatterValidationError) as exc_info:
            validate_keywords({"title": "T"}, ArticleModel, {"path": "doc.org"})
        assert exc_info.value.issues == [{"path": ["author"], "message": "Field required"}]
        assert exc_info.value.title == "Invalid frontmatter in doc.org"
        assert isinstance(exc_info.value.original_error, ParseError)

    def test_validate_raising_issues_wrapped(self) -> None:
        """Test that a validate() raising an exception with errors() is wrapped."""

        class Schema:
            def validate(self, data):
                raise ParseError([{"loc": ("date",), "msg": "bad date"}])

        with pytest.raises(FrontmatterValidationError) as exc_info:
            validate_keywords({"date": "x"}, Schema())
        assert exc_info.value.issues == [{"path": ["date"], "message": "bad date"}]

    def test_parse_success(self) -> None:
        """Test a parse-style schema that accepts the data."""
        data = {"title": "T", "author": "A"}
        assert validate_keywords(data, ParsingSchema()) == data

    def test_parse_failure(self) -> None:
        """Test that parse errors are converted to a validation error."""
        with pytest.raises(FrontmatterValidationError) as exc_info:
            validate_keywords({"title": "T"}, ParsingSchema())
        assert exc_info.value.issues == [{"path": ["author"], "message": "field required"}]
        assert isinstance(exc_info.value.original_error, ParseError)
        assert exc_info.value.title == "Invalid frontmatter"

    def test_parse_unrelated_exception_propagates(self) -> None:
        """Test that exceptions without issue data are re-raised."""

        class Schema:
            def parse(self, data):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            validate_keywords({}, Schema())

    def test_factory_receives_context(self) -> None:
        """Test that a callable schema is called with source and path."""
        seen = {}

        def factory(context):
            seen.update(context)
            return RequiredKeysSchema()

        validate_keywords({"title": "T"}, factory, {"source": "#+TITLE: T", "path": "a.org"})
        assert seen == {"source": "#+TITLE: T", "path": "a.org"}

    def test_schema_without_protocol(self, caplog) -> None:
        """Test that an unusable schema leaves the keywords unvalidated."""
        keywords = {"title": "T"}
        assert validate_keywords(keywords, object()) is keywords
        assert "neither model_validate(), validate() nor parse()" in caplog.text


@pytest.mark.unit
class TestNormalizeIssue:
    """Tests for normalize_issue."""

    def test_mapping_with_path(self) -> None:
        """Test a mapping issue with path and message."""
        assert normalize_issue({"path": ["a", 0], "message": "bad"}) == {"path": ["a", "0"], "message": "bad"}

    def test_path_segments_with_keys(self) -> None:
        """Test path segments that are objects with a key attribute."""
        issue = {"path": [{"key": "tags"}, {"key": 1}], "message": "bad"}
        assert normalize_issue(issue)["path"] == ["tags", "1"]

    def test_object_issue(self) -> None:
        """Test an attribute-style issue."""
        issue = SimpleNamespace(path="title", message="too short")
        assert normalize_issue(issue) == {"path": ["title"], "message": "too short"}

    def test_missing_path(self) -> None:
        """Test an issue without a path."""
        assert normalize_issue({"message": "bad"}) == {"path": None, "message": "bad"}

    def test_format_issues(self) -> None:
        """Test the log-friendly issue listing."""
        error = FrontmatterValidationError("Invalid frontmatter", [{"path": None, "message": "bad"}])
        assert error.format_issues() == "[ORG] Invalid frontmatter:\n  - *: bad"
