"""Tests for error objects: codes, snippets and compact formatting."""

from __future__ import annotations

import pytest

from curlyplate import (
    ErrorCode,
    TemplateError,
    TemplateSyntaxError,
    UndefinedError,
    build_source_snippet,
    parse,
)
from curlyplate.environment import terminal
from curlyplate.environment.exceptions import (
    describe_value,
    inline_snippet,
    offset_to_location,
)


@pytest.fixture(autouse=True)
def _no_colors(monkeypatch):
    monkeypatch.setattr(terminal, "_USE_COLORS", False)


class TestErrorCodes:
    def test_codes_are_unique(self) -> None:
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (ErrorCode.UNMATCHED_OPEN, "parser"),
            (ErrorCode.MALFORMED_DIRECTIVE, "parser"),
            (ErrorCode.MISSING_VARIABLE, "runtime"),
            (ErrorCode.NOT_ITERABLE, "runtime"),
        ],
    )
    def test_category(self, code: ErrorCode, category: str) -> None:
        assert code.category == category

    def test_hierarchy(self) -> None:
        with pytest.raises(TemplateError):
            parse("{{")


class TestInlineSnippet:
    def test_short_source_quoted_whole(self) -> None:
        assert inline_snippet("Hello {{name", 6) == '"Hello {{name"'

    def test_window_is_clamped(self) -> None:
        source = "a" * 20 + "{{" + "b" * 20
        snippet = inline_snippet(source, 20)
        assert snippet == '"' + "a" * 12 + "{{" + "b" * 10 + '"'

    def test_non_ascii_kept(self) -> None:
        assert inline_snippet("héllo", 0) == '"héllo"'


class TestLocations:
    @pytest.mark.parametrize(
        ("index", "location"),
        [(0, (1, 0)), (3, (1, 3)), (4, (2, 0)), (6, (2, 2)), (99, (2, 3))],
    )
    def test_offset_to_location(self, index: int, location: tuple[int, int]) -> None:
        assert offset_to_location("abc\ndef", index) == location


class TestSourceSnippet:
    def test_context_lines(self) -> None:
        snippet = build_source_snippet("one\ntwo\nthree\nfour", 3)
        assert snippet.lines == ((2, "two"), (3, "three"), (4, "four"))

    def test_first_line(self) -> None:
        snippet = build_source_snippet("one\ntwo", 1)
        assert snippet.lines == ((1, "one"), (2, "two"))

    def test_format_with_caret(self) -> None:
        text = build_source_snippet("a {{b", 1, column=2).format()
        assert text.splitlines() == ["   |", ">  1 | a {{b", "   |     ^", "   |"]

    def test_empty_source(self) -> None:
        assert build_source_snippet("", 1).lines == ((1, ""),)


class TestDescribeValue:
    def test_json(self) -> None:
        assert describe_value({"a": [1, None, True]}) == '{"a": [1, null, true]}'

    def test_unserializable_falls_back_to_repr(self) -> None:
        assert describe_value({"s": {1}}) == '{"s": "{1}"}'

    def test_truncated(self) -> None:
        assert len(describe_value("x" * 500)) == 80


class TestSyntaxErrorFormatting:
    def test_format_compact(self) -> None:
        with pytest.raises(TemplateSyntaxError) as exc_info:
            parse("Hello {{name", name="greet.txt")
        text = exc_info.value.format_compact()
        assert text.splitlines()[0] == (
            "C-PAR-001: Unmatched '{{' at position 6. Snippet: \"Hello {{name\""
        )
        assert "  --> greet.txt:1:6" in text
        assert ">  1 | Hello {{name" in text

    def test_message_attribute_has_snippet(self) -> None:
        with pytest.raises(TemplateSyntaxError) as exc_info:
            parse("{{/loop}}")
        err = exc_info.value
        assert err.message == str(err)
        assert err.snippet == '"{{/loop}}"'

    def test_render_error_without_location(self) -> None:
        err = UndefinedError("boom", name="x", code=ErrorCode.MISSING_VARIABLE)
        assert "Location: <template>" in err.format_compact()
