"""Tests for curlyplate strict mode.

Strict mode (default) raises for missing, null and wrongly-typed data
instead of silently rendering nothing. This catches typos and incomplete
contexts early. Lenient mode renders the same cases as empty text.

Key behaviors:
1. Missing or null variables raise UndefinedError
2. Missing or null path segments raise UndefinedError
3. Non-scalar substitutions and non-sequence loop targets raise TemplateTypeError
4. Errors carry a code, the failing name and the template location
5. Lenient mode never raises for data problems
"""

from __future__ import annotations

import pytest

from curlyplate import (
    Environment,
    ErrorCode,
    TemplateRenderError,
    TemplateTypeError,
    UndefinedError,
)


class TestUndefinedError:
    """Test UndefinedError behavior in strict mode."""

    def test_missing_variable(self, env: Environment) -> None:
        """A missing variable names itself in the message."""
        with pytest.raises(UndefinedError) as exc_info:
            env.from_string("{{ undefined_var }}").render()
        err = exc_info.value
        assert str(err) == 'Variable "undefined_var" is missing/null/undefined.'
        assert err.code is ErrorCode.MISSING_VARIABLE
        assert err.name == "undefined_var"

    def test_null_variable(self, env: Environment) -> None:
        """A variable bound to None is treated like a missing one."""
        with pytest.raises(UndefinedError) as exc_info:
            env.from_string("{{ name }}").render(name=None)
        assert exc_info.value.code is ErrorCode.MISSING_VARIABLE

    def test_missing_property(self, env: Environment) -> None:
        """A missing key reports the key and the value it was looked up on."""
        with pytest.raises(UndefinedError) as exc_info:
            env.from_string("{{ user.age }}").render(user={"name": "Ada"})
        err = exc_info.value
        assert err.code is ErrorCode.MISSING_PROPERTY
        assert str(err) == 'Property "age" does not exist on: {"name": "Ada"}'
        assert err.expression == "user.age"

    def test_missing_root_of_path(self, env: Environment) -> None:
        """The first path segment is looked up on the context itself."""
        with pytest.raises(UndefinedError) as exc_info:
            env.from_string("{{ user.name }}").render()
        assert exc_info.value.code is ErrorCode.MISSING_PROPERTY
        assert exc_info.value.name == "user"

    def test_null_property(self, env: Environment) -> None:
        """A None in the middle of a path stops the walk."""
        with pytest.raises(UndefinedError) as exc_info:
            env.from_string("{{ user.profile.name }}").render(user={"profile": None})
        err = exc_info.value
        assert err.code is ErrorCode.NULL_PROPERTY
        assert str(err) == 'Property "profile" is null/undefined.'

    def test_null_final_property(self, env: Environment) -> None:
        """A None at the end of a path is an error too."""
        with pytest.raises(UndefinedError, match='Property "name" is null/undefined.'):
            env.from_string("{{ user.name }}").render(user={"name": None})

    def test_null_if_condition(self, env: Environment) -> None:
        """If conditions resolve strictly, so a None condition raises."""
        with pytest.raises(UndefinedError) as exc_info:
            env.from_string("{{#if user.flag}}x{{/if}}").render(user={"flag": None})
        assert exc_info.value.code is ErrorCode.NULL_PROPERTY

    def test_missing_if_condition(self, env: Environment) -> None:
        with pytest.raises(UndefinedError):
            env.from_string("{{#if flag}}x{{/if}}").render()

    def test_error_includes_template_location(self, env: Environment) -> None:
        """Errors are stamped with the template name and directive line."""
        template = env.from_string("line one\nline two {{ missing }}", name="page.txt")
        with pytest.raises(UndefinedError) as exc_info:
            template.render()
        err = exc_info.value
        assert err.template_name == "page.txt"
        assert err.lineno == 2
        assert err.source_snippet is not None
        assert err.source_snippet.error_line == 2
        assert err.source_snippet.column == 9

    def test_innermost_directive_wins(self, env: Environment) -> None:
        """An error inside a loop body points at the body directive."""
        template = env.from_string("{{#loop items as item}}\n{{ item.name }}{{/loop}}")
        with pytest.raises(UndefinedError) as exc_info:
            template.render(items=[{"title": "x"}])
        assert exc_info.value.lineno == 2


class TestTypeErrors:
    """TemplateTypeError for values of the wrong shape."""

    @pytest.mark.parametrize(
        ("value", "kind"),
        [({"a": 1}, "mapping"), ([1, 2], "sequence"), (object(), "object")],
    )
    def test_unsupported_substitution(self, env: Environment, value, kind: str) -> None:
        with pytest.raises(TemplateTypeError) as exc_info:
            env.from_string("{{ thing }}").render(thing=value)
        err = exc_info.value
        assert err.code is ErrorCode.UNSUPPORTED_TYPE
        assert str(err) == f'Variable "thing" must be string|number|boolean. Got: {kind}'
        assert err.value is value

    def test_unsupported_accessor(self, env: Environment) -> None:
        with pytest.raises(TemplateTypeError, match='Accessor path "a.b"'):
            env.from_string("{{ a.b }}").render(a={"b": {"c": 1}})

    @pytest.mark.parametrize("value", ["abc", 3, True, {"k": "v"}])
    def test_loop_target_not_sequence(self, env: Environment, value) -> None:
        with pytest.raises(TemplateTypeError) as exc_info:
            env.from_string("{{#loop a.items as x}}{{x}}{{/loop}}").render(a={"items": value})
        err = exc_info.value
        assert err.code is ErrorCode.NOT_ITERABLE
        assert str(err) == 'Loop target "a.items" is not an array.'

    def test_null_loop_target(self, env: Environment) -> None:
        with pytest.raises(UndefinedError) as exc_info:
            env.from_string("{{#loop items as x}}{{/loop}}").render(items=None)
        assert exc_info.value.code is ErrorCode.NULL_PROPERTY

    def test_render_errors_share_base(self, env: Environment) -> None:
        with pytest.raises(TemplateRenderError):
            env.from_string("{{ x }}").render(x=[1])


class TestLenientMode:
    """strict_var_mode=False renders data problems as empty text."""

    @pytest.mark.parametrize(
        ("source", "context"),
        [
            ("{{ missing }}", {}),
            ("{{ name }}", {"name": None}),
            ("{{ user.age }}", {"user": {}}),
            ("{{ user.profile.name }}", {"user": {"profile": None}}),
            ("{{ a.b.c }}", {"a": "scalar"}),
            ("{{#loop items as x}}{{x}}{{/loop}}", {}),
            ("{{#loop items as x}}{{x}}{{/loop}}", {"items": "abc"}),
            ("{{#if flag}}yes{{/if}}", {}),
            ("{{#if flag}}yes{{/if}}", {"flag": None}),
        ],
    )
    def test_renders_empty(self, env_lenient: Environment, source: str, context) -> None:
        assert env_lenient.from_string(source).render(context) == ""

    def test_surrounding_text_kept(self, env_lenient: Environment) -> None:
        assert env_lenient.from_string("Hello {{name}}!").render() == "Hello !"

    def test_non_scalar_rendered_best_effort(self, env_lenient: Environment) -> None:
        assert env_lenient.from_string("{{ xs }}").render(xs=["a", 1, True]) == "a,1,true"

    def test_self_referencing_list(self, env_lenient: Environment) -> None:
        """A list nested inside itself renders the inner reference empty."""
        xs: list = ["a"]
        xs.append(xs)
        assert env_lenient.from_string("[{{ xs }}]").render(xs=xs) == "[a,]"

    def test_shared_list_is_not_a_cycle(self, env_lenient: Environment) -> None:
        inner = ["x"]
        result = env_lenient.from_string("{{ xs }}").render(xs=[inner, inner])
        assert result == "x,x"

    def test_partial_path_never_leaks(self, env_lenient: Environment) -> None:
        """A broken path renders empty, not the last value reached."""
        result = env_lenient.from_string("[{{ user.name.first }}]").render(user={"name": "Ada"})
        assert result == "[]"


class TestErrorFormatting:
    """format_compact() diagnostics for render errors."""

    def test_format_compact(self, env: Environment, monkeypatch) -> None:
        from curlyplate.environment import terminal

        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        template = env.from_string("Hi {{ who }}", name="greet.txt")
        with pytest.raises(UndefinedError) as exc_info:
            template.render()
        text = exc_info.value.format_compact()
        assert text.startswith('C-RUN-001: Variable "who" is missing/null/undefined.')
        assert "Location: greet.txt:1" in text
        assert ">  1 | Hi {{ who }}" in text
        assert "Expression: {{ who }}" in text
        assert "strict_var_mode=False" in text
