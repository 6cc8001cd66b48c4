"""Runtime values and evaluation errors.

ExprResult = Value | EvalError. Values are immutable once constructed.
EvalError is the student-facing evaluation failure; it carries the
expression it was raised for (if any) so the printer can show where it
happened.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class Atomic:
    """A number (float), string or boolean."""
    value: str | float | bool


TRUE = Atomic(True)
FALSE = Atomic(False)


def boolean(flag: bool) -> Atomic:
    return TRUE if flag else FALSE


@dataclass(frozen=True)
class EvalError:
    message: str
    expr: Optional[Any] = None


@dataclass(frozen=True, eq=False)
class BuiltinFunction:
    """A natively implemented function.

    `fn` receives the list of evaluated argument values and returns an
    ExprResult. Argument counts are validated before `fn` runs; `max_args`
    of None means variadic.
    """
    name: str
    fn: Callable[[list], Any] = field(repr=False)
    min_args: int = 0
    max_args: Optional[int] = None

    def __str__(self) -> str:
        return self.name
