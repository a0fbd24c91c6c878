# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Predicate language for feedback rule conditions.

A condition is a comparison of a payload field against a literal, or several
comparisons joined by ``and`` / ``or`` (``and`` binds tighter)::

    confidence < 0.5
    occurrences > 10 and source == "ui"
    verified == false or confidence <= 0.2

Fields:
    Identifiers, optionally dotted to reach into nested mappings
    (``metrics.accuracy``).

Operators:
    ``<``, ``<=``, ``>``, ``>=``, ``==``, ``!=``

Literals:
    Numbers (``10``, ``-0.5``, ``1e-3``), quoted strings (single or double
    quotes), ``true``, ``false``, ``null``.

Semantics:
    A comparison whose field is missing from the payload is False. Comparing
    values that cannot be ordered (a string against a number with ``<``)
    raises RuleEvaluationError, so a bad rule fails loudly instead of never
    matching.

Usage:
    >>> predicate = compile_condition("confidence < 0.5")
    >>> predicate({"confidence": 0.3})
    True
    >>> predicate({})
    False
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Mapping
from functools import lru_cache
from typing import Any, Final

from omnilearning.exceptions import RuleEvaluationError

# any-ok: payloads are free-form mappings
RulePredicate = Callable[[Mapping[str, Any]], bool]

_OPERATORS: Final[dict[str, Callable[[Any, Any], bool]]] = {
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "==": operator.eq,
    "!=": operator.ne,
}

_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    \s*(?:
        (?P<number>-?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?)
      | (?P<string>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')
      | (?P<op><=|>=|==|!=|<|>)
      | (?P<ident>[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*)
    )
    """,
    re.VERBOSE,
)

_KEYWORD_LITERALS: Final[dict[str, Any]] = {"true": True, "false": False, "null": None}

_MISSING: Final = object()


def _tokenize(text: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    pos = 0
    end = len(text.rstrip())
    while pos < end:
        match = _TOKEN_RE.match(text, pos)
        kind = match.lastgroup if match is not None else None
        if match is None or kind is None or match.end() == pos:
            raise RuleEvaluationError(
                f"Unexpected character at position {pos} in condition: {text!r}"
            )
        tokens.append((kind, match.group(kind)))
        pos = match.end()
    return tokens


def _parse_literal(kind: str, value: str, text: str) -> Any:
    if kind == "number":
        return float(value) if any(c in value for c in ".eE") else int(value)
    if kind == "string":
        return re.sub(r"\\(.)", r"\1", value[1:-1])
    if kind == "ident" and value in _KEYWORD_LITERALS:
        return _KEYWORD_LITERALS[value]
    raise RuleEvaluationError(f"Expected a literal, got {value!r} in condition: {text!r}")


def _resolve(payload: Mapping[str, Any], path: str) -> Any:
    current: Any = payload
    for part in path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return _MISSING
        current = current[part]
    return current


def _comparison(field: str, op: str, literal: Any, text: str) -> RulePredicate:
    compare = _OPERATORS[op]

    def predicate(payload: Mapping[str, Any]) -> bool:
        value = _resolve(payload, field)
        if value is _MISSING:
            return False
        try:
            return bool(compare(value, literal))
        except TypeError as e:
            raise RuleEvaluationError(
                f"Cannot compare {field}={value!r} {op} {literal!r} in condition: {text!r}"
            ) from e

    return predicate


def _all_of(predicates: list[RulePredicate]) -> RulePredicate:
    if len(predicates) == 1:
        return predicates[0]
    return lambda payload: all(p(payload) for p in predicates)


def _any_of(predicates: list[RulePredicate]) -> RulePredicate:
    if len(predicates) == 1:
        return predicates[0]
    return lambda payload: any(p(payload) for p in predicates)


@lru_cache(maxsize=256)
def compile_condition(text: str) -> RulePredicate:
    """Compile a condition into a predicate over a payload mapping.

    Compiled predicates are cached by condition text.

    Raises:
        RuleEvaluationError: If the condition is empty or malformed.
    """
    tokens = _tokenize(text)
    if not tokens:
        raise RuleEvaluationError("Empty rule condition")

    or_groups: list[RulePredicate] = []
    and_group: list[RulePredicate] = []
    i = 0
    while True:
        if i + 3 > len(tokens):
            raise RuleEvaluationError(f"Incomplete comparison in condition: {text!r}")
        (field_kind, field), (op_kind, op), (lit_kind, lit) = tokens[i : i + 3]
        if field_kind != "ident" or field in _KEYWORD_LITERALS or field in ("and", "or"):
            raise RuleEvaluationError(f"Expected a field name, got {field!r} in condition: {text!r}")
        if op_kind != "op":
            raise RuleEvaluationError(f"Expected an operator, got {op!r} in condition: {text!r}")
        and_group.append(_comparison(field, op, _parse_literal(lit_kind, lit, text), text))
        i += 3

        if i == len(tokens):
            break
        joiner_kind, joiner = tokens[i]
        if joiner_kind != "ident" or joiner not in ("and", "or"):
            raise RuleEvaluationError(f"Expected 'and' or 'or', got {joiner!r} in condition: {text!r}")
        if joiner == "or":
            or_groups.append(_all_of(and_group))
            and_group = []
        i += 1

    or_groups.append(_all_of(and_group))
    return _any_of(or_groups)


def evaluate_condition(text: str, payload: Mapping[str, Any]) -> bool:
    """Compile (cached) and evaluate ``text`` against ``payload``."""
    return compile_condition(text)(payload)


__all__ = ["RulePredicate", "compile_condition", "evaluate_condition"]
