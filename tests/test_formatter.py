import pytest

from core.errors import DirectiveEvaluationError
from core.formatter import FormatDirective, directive_map, render


class CountingExpression:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


def test_template_without_percent_is_returned_unchanged():
    expression = CountingExpression("x")
    assert render("no directives here", {"h": expression}) == "no directives here"
    assert expression.calls == 0


def test_empty_directive_set_leaves_plain_text():
    assert render("no directives here", {}) == "no directives here"


def test_substitutes_known_directives():
    directives = {"h": lambda: "Write spec", "c": lambda: "25m"}
    assert render("Task: %h for %c", directives) == "Task: Write spec for 25m"


def test_unknown_directive_passes_through():
    assert render("value %z here", {}) == "value %z here"


def test_trailing_percent_passes_through():
    assert render("100%", {"h": lambda: "x"}) == "100%"


def test_repeated_directive_is_evaluated_once():
    expression = CountingExpression("deep work")
    result = render("%h, still %h?", {"h": expression})
    assert result == "deep work, still deep work?"
    assert expression.calls == 1


def test_unused_directives_are_not_evaluated():
    used = CountingExpression("a")
    unused = CountingExpression("b")
    assert render("%a only", {"a": used, "b": unused}) == "a only"
    assert unused.calls == 0


def test_each_render_evaluates_fresh():
    expression = CountingExpression(1)
    render("%n", {"n": expression})
    render("%n", {"n": expression})
    assert expression.calls == 2


def test_values_are_stringified():
    assert render("%m minutes", {"m": lambda: 42}) == "42 minutes"


def test_substituted_values_are_not_rescanned():
    directives = {"a": lambda: "%b", "b": lambda: "nope"}
    assert render("%a", directives) == "%b"


def test_failing_expression_raises_evaluation_error():
    def broken():
        raise LookupError("nothing clocked in")

    with pytest.raises(DirectiveEvaluationError) as info:
        render("Working on %h", {"h": broken})
    assert info.value.char == "h"
    assert isinstance(info.value.__cause__, LookupError)


def test_failing_expression_not_referenced_is_harmless():
    def broken():
        raise LookupError("nothing clocked in")

    assert render("Take a break", {"h": broken}) == "Take a break"


def test_directive_list_last_registration_wins():
    directives = [
        FormatDirective("h", lambda: "first"),
        FormatDirective("h", lambda: "second"),
    ]
    assert render("%h", directives) == "second"
    assert list(directive_map(directives)) == ["h"]


def test_directive_keys_must_be_single_characters():
    with pytest.raises(ValueError):
        directive_map({"hh": lambda: "x"})
