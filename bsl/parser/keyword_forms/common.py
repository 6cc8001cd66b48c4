"""Helpers shared by the keyword rules: what was found, and name checks."""

from __future__ import annotations

from typing import Optional

from bsl import Form
from bsl.types.forms import is_expr
from bsl.types.sexp import BoolAtom, IdAtom, NumAtom, ReadError, SExp, SExpList, StringAtom

ELLIPSES = ("..", "...", "....", ".....", "......")

UNSUPPORTED = (
    "check-random",
    "check-satisfied",
    "check-member-of",
    "check-range",
    "lambda",
    "λ",
)

KEYWORDS = frozenset({
    "define",
    "define-struct",
    "if",
    "cond",
    "else",
    "and",
    "or",
    "check-expect",
    "check-within",
    "check-error",
    *ELLIPSES,
    *UNSUPPORTED,
})

NOTHING_THERE = "nothing's there"


def is_keyword(name: str) -> bool:
    return name in KEYWORDS


def describe(sexp: SExp, list_text: str = "something else") -> str:
    """How a misplaced S-expression is named in a message: 'a string', ..."""
    match sexp:
        case StringAtom():
            return "a string"
        case NumAtom():
            return "a number"
        case BoolAtom():
            return "a boolean"
        case IdAtom(value=name) if is_keyword(name):
            return "a keyword"
        case SExpList():
            return list_text
    return "something else"


def parts(n: int, word: str = "part") -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def extra_parts(n: int) -> str:
    return parts(n, "extra part")


def check_identifier(sexp: SExp, make_error, prefix: str) -> str | Form:
    """Return the name when `sexp` is a non-keyword identifier.

    Otherwise return the error to report: a nested ReadError as is, or
    `make_error(prefix + what was found)`.
    """
    match sexp:
        case ReadError():
            return sexp
        case IdAtom(value=name) if not is_keyword(name):
            return name
    return make_error(prefix + describe(sexp))


def first_error(forms) -> Optional[Form]:
    """The first parsed form that is not an expression, if any."""
    for form in forms:
        if not is_expr(form):
            return form
    return None


def whole(keyword: str, tail) -> tuple[SExp, ...]:
    """The offending form as one S-expression, for display."""
    return (SExpList((IdAtom(keyword), *tail)),)
