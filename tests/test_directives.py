import pytest

from core.directives import default_directives, format_duration
from core.errors import DirectiveEvaluationError
from core.formatter import render


@pytest.mark.parametrize(
    "minutes, expected",
    [(0, "0:00"), (25, "0:25"), (65, "1:05"), (125.9, "2:05"), (-3, "0:00")],
)
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


def test_default_directives_render_active_task(activity):
    activity.label = "Write report"
    activity.minutes = 75
    text = render("You are working on %h for %c (%m min)", default_directives(activity))
    assert text == "You are working on Write report for 1:15 (75 min)"


def test_default_directives_fail_without_active_task(activity):
    with pytest.raises(DirectiveEvaluationError):
        render("You are working on %h", default_directives(activity))
