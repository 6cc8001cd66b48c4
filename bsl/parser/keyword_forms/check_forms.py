"""Test assertions. They are only legal at the top level; the parser
rejects them in nested positions after they have been recognised here."""

from __future__ import annotations

from bsl import Form, ParserFn, SExpression
from bsl.parser.keyword_forms.common import first_error, whole
from bsl.types.forms import CheckError, CheckExpect, CheckWithin, TopLevelError


def _exact_arity(keyword: str, expected: int, tail) -> TopLevelError | None:
    n = len(tail)
    if n == expected:
        return None
    if n == 0:
        message = f"{keyword}: expects {expected} arguments, but found none"
    elif n < expected:
        message = f"{keyword}: expects {expected} arguments, but found only {n}"
    else:
        message = f"{keyword}: expects only {expected} arguments, but found {n}"
    return TopLevelError(message, whole(keyword, tail))


def _parse_all(tail, parse_expr: ParserFn):
    forms = [parse_expr(sexp) for sexp in tail]
    return forms, first_error(forms)


def check_expect_form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
    """(check-expect actual expected)"""
    err = _exact_arity("check-expect", 2, tail)
    if err is not None:
        return err
    forms, err = _parse_all(tail, parse_expr)
    if err is not None:
        return err
    return CheckExpect(*forms)


def check_within_form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
    """(check-within actual expected margin)"""
    err = _exact_arity("check-within", 3, tail)
    if err is not None:
        return err
    forms, err = _parse_all(tail, parse_expr)
    if err is not None:
        return err
    return CheckWithin(*forms)


def check_error_form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
    """(check-error expr) or (check-error expr message)"""
    if not tail:
        return TopLevelError("check-error: expects at least 1 argument, but found none", whole("check-error", tail))
    if len(tail) > 2:
        return TopLevelError(
            f"check-error: expects at most 2 arguments, but found {len(tail)}", whole("check-error", tail)
        )
    forms, err = _parse_all(tail, parse_expr)
    if err is not None:
        return err
    return CheckError(*forms)
