"""Built-in functions for the bsl runtime environment.

This module defines arithmetic, comparison, string operations, predicates,
the `posn` structure, and the registration utility that seeds the top-level
environment. Argument counts are validated by the application engine before
any function here runs; each function validates its argument types and
reports the 1-based position of the first bad one.
"""
from __future__ import annotations

import math
from typing import Callable, Optional

from bsl import LispValue
from bsl.evaluation.apply import fn_error, type_error
from bsl.printer import print_value
from bsl.types.environment import Environment
from bsl.types.structs import StructType, structure_functions
from bsl.types.values import FALSE, TRUE, Atomic, BuiltinFunction, EvalError, boolean


def _is_number(value: LispValue) -> bool:
    return isinstance(value, Atomic) and isinstance(value.value, float)


def _is_string(value: LispValue) -> bool:
    return isinstance(value, Atomic) and isinstance(value.value, str)


def _is_boolean(value: LispValue) -> bool:
    return isinstance(value, Atomic) and isinstance(value.value, bool)


def _is_integer(value: LispValue) -> bool:
    return _is_number(value) and value.value.is_integer()


def _check(name: str, args: list[LispValue], test, expected: str) -> Optional[EvalError]:
    """The type error for the first argument failing `test`, if any."""
    for i, arg in enumerate(args, start=1):
        if not test(arg):
            return type_error(name, expected, i, arg)
    return None


def numeric(name: str, fn: Callable[..., float]) -> Callable[[list[LispValue]], LispValue]:
    """Wrap `fn(*floats) -> float` as a builtin taking number arguments."""

    def builtin(args: list[LispValue]) -> LispValue:
        err = _check(name, args, _is_number, "a number")
        if err is not None:
            return err
        return Atomic(float(fn(*(a.value for a in args))))

    return builtin


def integral(name: str, fn: Callable[[float, float], float]) -> Callable[[list[LispValue]], LispValue]:
    """Wrap a two-integer operation that is undefined for a zero divisor."""

    def builtin(args: list[LispValue]) -> LispValue:
        err = _check(name, args, _is_integer, "an integer")
        if err is not None:
            return err
        n, d = (a.value for a in args)
        if d == 0:
            return fn_error(name, "undefined for 0")
        return Atomic(float(fn(n, d)))

    return builtin


def comparison(name: str, holds: Callable[[float, float], bool]) -> Callable[[list[LispValue]], LispValue]:
    """Chainable numeric comparison: (< a b c) is a < b and b < c."""

    def builtin(args: list[LispValue]) -> LispValue:
        err = _check(name, args, _is_number, "a number")
        if err is not None:
            return err
        values = [a.value for a in args]
        return boolean(all(holds(a, b) for a, b in zip(values, values[1:])))

    return builtin


def predicate(test: Callable[[LispValue], bool]) -> Callable[[list[LispValue]], LispValue]:
    return lambda args: boolean(test(args[0]))


# -------------------------------
# Arithmetic
# -------------------------------
def add(*xs: float) -> float:
    return sum(xs)


def sub(first: float, *rest: float) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not rest:
        return -first
    result = first
    for x in rest:
        result -= x
    return result


def mul(*xs: float) -> float:
    result = 1.0
    for x in xs:
        result *= x
    return result


def div(args: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    err = _check("/", args, _is_number, "a number")
    if err is not None:
        return err
    values = [a.value for a in args]
    divisors = values[1:] if len(values) > 1 else values
    if any(d == 0 for d in divisors):
        return fn_error("/", "division by zero")
    if len(values) == 1:
        return Atomic(1.0 / values[0])
    result = values[0]
    for d in divisors:
        result /= d
    return Atomic(result)


def sqrt(args: list[LispValue]) -> LispValue:
    x = args[0]
    if not _is_number(x) or x.value < 0:
        return type_error("sqrt", "a non-negative number", 1, x)
    return Atomic(math.sqrt(x.value))


def quotient(n: float, d: float) -> float:
    q = abs(int(n)) // abs(int(d))
    return q if (n < 0) == (d < 0) else -q


def finite_only(fn: Callable[[float], float], otherwise=None) -> Callable[[float], float]:
    """Apply `fn` to finite numbers; infinities and NaN map to `otherwise`
    (or to themselves when it is None)."""
    def wrapped(x: float) -> float:
        if math.isfinite(x):
            return fn(x)
        return x if otherwise is None else otherwise
    return wrapped


# -------------------------------
# Booleans
# -------------------------------
def logical_not(args: list[LispValue]) -> LispValue:
    x = args[0]
    if not _is_boolean(x):
        return fn_error("not", f"expected either #true or #false; given {print_value(x)}")
    return boolean(not x.value)


# -------------------------------
# Strings
# -------------------------------
def string_append(args: list[LispValue]) -> LispValue:
    err = _check("string-append", args, _is_string, "a string")
    if err is not None:
        return err
    return Atomic("".join(a.value for a in args))


def string_equal(args: list[LispValue]) -> LispValue:
    err = _check("string=?", args, _is_string, "a string")
    if err is not None:
        return err
    first = args[0].value
    return boolean(all(a.value == first for a in args[1:]))


def string_length(args: list[LispValue]) -> LispValue:
    err = _check("string-length", args, _is_string, "a string")
    if err is not None:
        return err
    return Atomic(float(len(args[0].value)))


def substring(args: list[LispValue]) -> LispValue:
    """(substring s start [end])"""
    s = args[0]
    if not _is_string(s):
        return type_error("substring", "a string", 1, s)
    for i, arg in enumerate(args[1:], start=2):
        if not _is_integer(arg) or arg.value < 0:
            return type_error("substring", "a natural number", i, arg)
    text = s.value
    start = int(args[1].value)
    end = int(args[2].value) if len(args) == 3 else len(text)
    if start > len(text):
        return fn_error("substring", f"starting index {start} is out of range [0, {len(text)}] for {print_value(s)}")
    if end < start or end > len(text):
        return fn_error("substring", f"ending index {end} is out of range [{start}, {len(text)}] for {print_value(s)}")
    return Atomic(text[start:end])


def error_builtin(args: list[LispValue]) -> LispValue:
    """(error v ...) produces an error whose message is the arguments,
    strings as written and other values as printed, separated by spaces."""
    parts = [a.value if _is_string(a) else print_value(a) for a in args]
    return EvalError(" ".join(parts))


def _builtin(name: str, fn, min_args: int, max_args: Optional[int] = None) -> BuiltinFunction:
    return BuiltinFunction(name, fn, min_args, max_args)


def _numeric(name: str, fn, min_args: int, max_args: Optional[int] = None) -> BuiltinFunction:
    return _builtin(name, numeric(name, fn), min_args, max_args)


POSN = ("posn", ("x", "y"))


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    functions = [
        _numeric("+", add, 2),
        _numeric("-", sub, 1),
        _numeric("*", mul, 2),
        _builtin("/", div, 1),
        _numeric("add1", lambda x: x + 1, 1, 1),
        _numeric("sub1", lambda x: x - 1, 1, 1),
        _numeric("abs", abs, 1, 1),
        _builtin("sqrt", sqrt, 1, 1),
        _numeric("floor", finite_only(math.floor), 1, 1),
        _numeric("ceiling", finite_only(math.ceil), 1, 1),
        _numeric("sin", finite_only(math.sin, math.nan), 1, 1),
        _numeric("cos", finite_only(math.cos, math.nan), 1, 1),
        _numeric("max", max, 1),
        _numeric("min", min, 1),
        _builtin("modulo", integral("modulo", lambda n, d: n % d), 2, 2),
        _builtin("remainder", integral("remainder", math.fmod), 2, 2),
        _builtin("quotient", integral("quotient", quotient), 2, 2),
        _builtin("=", comparison("=", lambda a, b: a == b), 2),
        _builtin("<", comparison("<", lambda a, b: a < b), 2),
        _builtin(">", comparison(">", lambda a, b: a > b), 2),
        _builtin("<=", comparison("<=", lambda a, b: a <= b), 2),
        _builtin(">=", comparison(">=", lambda a, b: a >= b), 2),
        _builtin("not", logical_not, 1, 1),
        _builtin("string-append", string_append, 0),
        _builtin("string=?", string_equal, 2),
        _builtin("string-length", string_length, 1, 1),
        _builtin("substring", substring, 2, 3),
        _builtin("number?", predicate(_is_number), 1, 1),
        _builtin("string?", predicate(_is_string), 1, 1),
        _builtin("boolean?", predicate(_is_boolean), 1, 1),
        _builtin("error", error_builtin, 1),
    ]
    env.update({fn.name: fn for fn in functions})
    env.update(structure_functions(StructType(*POSN)))
    env.define("pi", Atomic(math.pi))
    env.define("e", Atomic(math.e))
    env.define("true", TRUE)
    env.define("false", FALSE)
