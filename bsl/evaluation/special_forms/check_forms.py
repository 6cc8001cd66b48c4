"""Test assertions, evaluated after every definition and expression.

The expected side is always evaluated before the actual side.
"""

from __future__ import annotations

from bsl import EvaluatorFn, Form, LispValue
from bsl.evaluation.apply import type_error
from bsl.printer import print_eval_error
from bsl.types.environment import Environment
from bsl.types.forms import CheckError, CheckExpect, CheckWithin
from bsl.types.results import (
    CheckErrorFailure,
    CheckExpectedError,
    CheckFailure,
    CheckSuccess,
)
from bsl.types.values import Atomic, EvalError


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Equality used by check-expect.

    Numbers, strings and booleans compare by kind and value, so #true is
    never 1. Functions and structures are never equal to anything.
    """
    if not isinstance(a, Atomic) or not isinstance(b, Atomic):
        return False
    if isinstance(a.value, bool) or isinstance(b.value, bool):
        return a.value is b.value
    if type(a.value) is not type(b.value):
        return False
    return a.value == b.value


def _is_number(value: LispValue) -> bool:
    return isinstance(value, Atomic) and isinstance(value.value, float)


def check_expect_form(check: CheckExpect, env: Environment, evaluate_fn: EvaluatorFn) -> Form:
    expected = evaluate_fn(check.expected, env)
    if isinstance(expected, EvalError):
        return CheckExpectedError(expected)
    actual = evaluate_fn(check.actual, env)
    if not isinstance(actual, EvalError) and values_equal(actual, expected):
        return CheckSuccess()
    return CheckFailure(actual, expected)


def check_within_form(check: CheckWithin, env: Environment, evaluate_fn: EvaluatorFn) -> Form:
    expected = evaluate_fn(check.expected, env)
    if isinstance(expected, EvalError):
        return CheckExpectedError(expected)
    margin = evaluate_fn(check.margin, env)
    if isinstance(margin, EvalError):
        return CheckExpectedError(margin)
    if not _is_number(margin) or margin.value < 0:
        return CheckExpectedError(type_error("check-within", "a non-negative number", 3, margin))

    actual = evaluate_fn(check.actual, env)
    if isinstance(actual, EvalError):
        return CheckFailure(actual, expected, margin)
    if _is_number(actual) and _is_number(expected):
        if abs(actual.value - expected.value) <= margin.value:
            return CheckSuccess()
    elif values_equal(actual, expected):
        return CheckSuccess()
    return CheckFailure(actual, expected, margin)


def check_error_form(check: CheckError, env: Environment, evaluate_fn: EvaluatorFn) -> Form:
    message = None
    if check.message is not None:
        value = evaluate_fn(check.message, env)
        if isinstance(value, EvalError):
            return CheckExpectedError(value)
        if not (isinstance(value, Atomic) and isinstance(value.value, str)):
            return CheckExpectedError(type_error("check-error", "a string", 2, value))
        message = value.value

    actual = evaluate_fn(check.actual, env)
    if not isinstance(actual, EvalError):
        return CheckErrorFailure(actual, message)
    if message is None or print_eval_error(actual) == message:
        return CheckSuccess()
    return CheckErrorFailure(actual, message)
