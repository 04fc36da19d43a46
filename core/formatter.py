"""
Template rendering for reminder messages.

Templates use ``%<char>`` directives. Each directive character is bound to a
zero-argument callable that is only evaluated when the character actually
appears in the template.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, Mapping, NamedTuple, Union

from core.errors import DirectiveEvaluationError

Expression = Callable[[], object]

_DIRECTIVE_PATTERN = re.compile(r"%(.)", re.DOTALL)


class FormatDirective(NamedTuple):
    char: str
    expression: Expression


DirectiveSet = Union[Mapping[str, Expression], Iterable[FormatDirective]]


def directive_map(directives: DirectiveSet) -> Dict[str, Expression]:
    """Normalise a directive set into a dict; the last registration for a character wins."""
    if isinstance(directives, Mapping):
        items = directives.items()
    else:
        items = ((d.char, d.expression) for d in directives)

    result: Dict[str, Expression] = {}
    for char, expression in items:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Directive key must be a single character, got {char!r}")
        result.pop(char, None)
        result[char] = expression
    return result


def render(template: str, directives: DirectiveSet) -> str:
    """
    Substitute every ``%<char>`` in *template* with its directive's value.

    Only directives whose character appears in the template are evaluated,
    each at most once per call. Unknown directives are left as-is. A failing
    expression raises DirectiveEvaluationError.
    """
    if "%" not in template:
        return template

    expressions = directive_map(directives)
    wanted = {match.group(1) for match in _DIRECTIVE_PATTERN.finditer(template)}

    values: Dict[str, str] = {}
    for char, expression in expressions.items():
        if char not in wanted:
            continue
        try:
            values[char] = str(expression())
        except Exception as exc:
            raise DirectiveEvaluationError(char, str(exc) or type(exc).__name__) from exc

    def _substitute(match: re.Match) -> str:
        char = match.group(1)
        if char in values:
            return values[char]
        return match.group(0)

    return _DIRECTIVE_PATTERN.sub(_substitute, template)
