#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_blocks_scanner.py
"""Unit tests for the ``#+begin``/``#+end`` fence scanner.

Tests cover:
- Body and argument capture
- Nesting of same-name fences
- Unclosed and stray fence lines
- Name filtering
- Splicing replacements

"""

import pytest

from org2mdx.blocks.scanner import find_fences, replace_fences


@pytest.mark.unit
class TestFindFences:
    """Tests for find_fences."""

    def test_single_fence(self) -> None:
        """Test a simple source block."""
        text = "before\n#+begin_src python :results output\nprint(1)\n#+end_src\nafter"
        fences = find_fences(text)
        assert len(fences) == 1
        fence = fences[0]
        assert fence.name == "src"
        assert fence.args == "python :results output"
        assert fence.body == "print(1)"
        assert text[fence.start : fence.end] == "#+begin_src python :results output\nprint(1)\n#+end_src"

    def test_case_insensitive_names(self) -> None:
        """Test upper-case fence lines."""
        fences = find_fences("#+BEGIN_SRC sh\nls\n#+END_SRC")
        assert fences[0].name == "src"
        assert fences[0].body == "ls"

    def test_empty_body(self) -> None:
        """Test a fence with no lines between begin and end."""
        fences = find_fences("#+begin_example\n#+end_example")
        assert fences[0].body == ""

    def test_nested_same_name_outermost_only(self) -> None:
        """Test that only the outermost of nested same-name fences is reported."""
        text = "#+begin_src org\n#+begin_src python\nx\n#+end_src\n#+end_src"
        fences = find_fences(text)
        assert len(fences) == 1
        assert fences[0].args == "org"
        assert fences[0].body == "#+begin_src python\nx\n#+end_src"

    def test_unclosed_begin_ignored(self) -> None:
        """Test that a begin without an end is not reported."""
        assert find_fences("#+begin_src python\nx = 1\n") == []

    def test_stray_end_ignored(self) -> None:
        """Test that an end without a begin is skipped."""
        text = "#+end_src\n#+begin_src c\nint x;\n#+end_src"
        fences = find_fences(text)
        assert len(fences) == 1
        assert fences[0].body == "int x;"

    def test_indented_fence_start(self) -> None:
        """Test that leading indentation is not part of the fence."""
        text = "- item\n  #+begin_src sh\n  ls\n  #+end_src"
        fence = find_fences(text)[0]
        assert text[fence.start :].startswith("#+begin_src")
        assert fence.body == "  ls"

    def test_name_filter(self) -> None:
        """Test that other block names are ignored."""
        text = "#+begin_quote\nq\n#+end_quote\n#+begin_example\ne\n#+end_example"
        fences = find_fences(text, {"example"})
        assert [fence.name for fence in fences] == ["example"]

    def test_multiple_fences_in_order(self) -> None:
        """Test document order of sibling fences."""
        text = "#+begin_src a\n1\n#+end_src\ntext\n#+begin_src b\n2\n#+end_src"
        assert [fence.args for fence in find_fences(text)] == ["a", "b"]


@pytest.mark.unit
class TestReplaceFences:
    """Tests for replace_fences."""

    def test_replace_and_keep(self) -> None:
        """Test that None keeps a fence while strings replace it."""
        text = "#+begin_src a\n1\n#+end_src\nmid\n#+begin_src b\n2\n#+end_src"
        fences = find_fences(text)
        result = replace_fences(text, fences, ["X", None])
        assert result == "X\nmid\n#+begin_src b\n2\n#+end_src"
