"""Tests for line classification and file scoring."""

import pytest

from code_overview.scanning.lines import counts_toward_weight, score_file
from code_overview.scanning.models import SourceFile


class TestCountsTowardWeight:
    """Which lines carry weight."""

    @pytest.mark.parametrize("line", ["", "   ", "\t", "\r", "// comment", "   // indented comment"])
    def test_blank_and_comment_lines_do_not_count(self, line):
        assert counts_toward_weight(line) is False

    @pytest.mark.parametrize("line", ["int x = 1;", "  int x = 1;", "}", "int x = 1; // trailing"])
    def test_code_lines_count(self, line):
        assert counts_toward_weight(line) is True

    def test_doc_comment_is_a_comment(self):
        """/// starts with //, so XML doc comments carry no weight."""
        assert counts_toward_weight("    /// <summary>") is False

    def test_block_comment_lines_count(self):
        """Only line comments are recognised."""
        assert counts_toward_weight("/* block */") is True
        assert counts_toward_weight(" * continued") is True

    def test_custom_marker(self):
        assert counts_toward_weight("# note", comment_marker="#") is False
        assert counts_toward_weight("// not a comment here", comment_marker="#") is True


class TestScoreFile:
    """Weight and editor flag of a whole file."""

    def test_empty_file(self):
        assert score_file(SourceFile("Empty", "")) == (0, False)

    def test_missing_content_scores_as_empty(self):
        assert score_file(SourceFile("Missing", None)) == (0, False)

    def test_counts_only_code_lines(self):
        content = "// header\n\nusing System;\n\nclass A\n{\n    // note\n    int x;\n}\n"
        weight, is_editor = score_file(SourceFile("A", content))
        assert weight == 5
        assert is_editor is False

    def test_last_line_without_newline_counts(self):
        weight, _ = score_file(SourceFile("A", "int a;\nint b;"))
        assert weight == 2

    def test_crlf_line_endings(self):
        weight, _ = score_file(SourceFile("A", "int a;\r\n\r\n// c\r\nint b;\r\n"))
        assert weight == 2

    def test_editor_marker_anywhere(self):
        content = "class A\n{\n#if UNITY_EDITOR\nusing UnityEditor;\n#endif\n}\n"
        _, is_editor = score_file(SourceFile("A", content))
        assert is_editor is True

    def test_editor_marker_in_comment_still_matches(self):
        """The check is a substring search, not an import analysis."""
        _, is_editor = score_file(SourceFile("A", "// using UnityEditor;\nclass A {}\n"))
        assert is_editor is True

    def test_custom_editor_marker(self):
        _, is_editor = score_file(SourceFile("A", "import tooling\n"), editor_marker="import tooling")
        assert is_editor is True
