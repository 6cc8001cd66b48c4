"""
  Parser: S-expressions -> top-level forms.

One TopLevel per S-expression, in order. Lists headed by a keyword go to
the matching rule in KEYWORD_FORMS; any other identifier head is a function
call. Every failure is returned as a form carrying a student-facing message.
"""

from __future__ import annotations

import logging
from typing import Iterable

from bsl import Form, SExpression
from bsl.errors import BslInvariantError
from bsl.parser.keyword_forms import BARE_KEYWORD_FORMS, KEYWORD_FORMS
from bsl.parser.keyword_forms.common import NOTHING_THERE, describe
from bsl.types.forms import (
    BoolExpr,
    Call,
    CheckError,
    CheckExpect,
    CheckWithin,
    DefineConstant,
    DefineFunction,
    DefineStruct,
    ExprError,
    IdExpr,
    NumExpr,
    StringExpr,
    TopLevelError,
    is_expr,
)
from bsl.types.sexp import BoolAtom, IdAtom, NumAtom, ReadError, SExpList, StringAtom

logger = logging.getLogger(__name__)

NOT_AT_TOP_LEVEL = {
    DefineConstant: "define: found a definition that is not at the top level",
    DefineFunction: "define: found a definition that is not at the top level",
    DefineStruct: "define-struct: found a definition that is not at the top level",
    CheckExpect: "check-expect: found a test that is not at the top level",
    CheckWithin: "check-within: found a test that is not at the top level",
    CheckError: "check-error: found a test that is not at the top level",
}

_NO_FUNCTION = "function call: expected a function after the open parenthesis, but "


def parse(sexps: Iterable[SExpression]) -> list[Form]:
    forms = [parse_top_level(sexp) for sexp in sexps]
    logger.debug("parsed %d top-level forms", len(forms))
    return forms


def parse_top_level(sexp: SExpression) -> Form:
    """Parse one S-expression written at the outermost level of a program."""
    match sexp:
        case ReadError():
            return sexp
        case StringAtom(value=s):
            return StringExpr(s)
        case NumAtom(value=n):
            return NumExpr(n)
        case BoolAtom(value=b):
            return BoolExpr(b)
        case IdAtom(value=name):
            if name in BARE_KEYWORD_FORMS:
                return BARE_KEYWORD_FORMS[name]()
            if name in KEYWORD_FORMS:
                return TopLevelError(
                    f"{name}: expected an open parenthesis before {name}, but found none",
                    (sexp,),
                )
            return IdExpr(name)
        case SExpList(items=items):
            return parse_list(sexp, items)
    raise BslInvariantError(f"Not an S-expression: {sexp!r}")


def parse_expression(sexp: SExpression) -> Form:
    """Parse an S-expression nested inside another form.

    Definitions and tests are recognised, then rejected: they may only be
    written at the top level.
    """
    form = parse_top_level(sexp)
    message = NOT_AT_TOP_LEVEL.get(type(form))
    if message is not None:
        return TopLevelError(message, (sexp,))
    return form


def parse_list(sexp: SExpList, items: tuple) -> Form:
    if not items:
        return ExprError(_NO_FUNCTION + NOTHING_THERE, (sexp,))

    head, tail = items[0], items[1:]
    match head:
        case ReadError():
            return head
        case IdAtom(value=name) if name in KEYWORD_FORMS:
            return KEYWORD_FORMS[name](tail, parse_expression)
        case IdAtom(value=name):
            return parse_call(name, tail)
    return ExprError(_NO_FUNCTION + "found " + describe(head, list_text="a part"), (sexp,))


def parse_call(name: str, args: Iterable[SExpression]) -> Form:
    parsed = []
    for arg in args:
        form = parse_expression(arg)
        if not is_expr(form):
            return form
        parsed.append(form)
    return Call(name, tuple(parsed))
