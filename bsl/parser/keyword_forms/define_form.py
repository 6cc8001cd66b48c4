from __future__ import annotations

from bsl import Form, ParserFn, SExpression
from bsl.parser.keyword_forms.common import (
    NOTHING_THERE,
    check_identifier,
    extra_parts,
    whole,
)
from bsl.types.forms import DefineConstant, DefineFunction, DefinitionError, is_expr
from bsl.types.sexp import ReadError, SExpList


def define_form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
    """
    (define name body)
    (define (name param ...) body)
    """

    def error(message: str) -> DefinitionError:
        return DefinitionError(message, whole("define", tail))

    if not tail:
        return error(
            "define: expected a variable name, or a function name and its "
            f"variables (in parentheses), but {NOTHING_THERE}"
        )

    head = tail[0]
    if isinstance(head, ReadError):
        return head
    if isinstance(head, SExpList):
        return _define_function(head, tail[1:], parse_expr, error)

    name = check_identifier(
        head,
        error,
        "define: expected a variable name, or a function name and its "
        "variables (in parentheses), but found ",
    )
    if not isinstance(name, str):
        return name
    if len(tail) == 1:
        return error(f"define: expected an expression after the variable name {name}, but {NOTHING_THERE}")
    if len(tail) > 2:
        return error(
            f"define: expected only one expression after the variable name {name}, "
            f"but found {extra_parts(len(tail) - 2)}"
        )

    body = parse_expr(tail[1])
    if not is_expr(body):
        return body
    return DefineConstant(name, body)


def _define_function(header: SExpList, rest: tuple, parse_expr: ParserFn, error) -> Form:
    if not header.items:
        return error(f"define: expected a name for the function, but {NOTHING_THERE}")

    name = check_identifier(header.items[0], error, "define: expected the name of the function, but found ")
    if not isinstance(name, str):
        return name

    params: list[str] = []
    for sexp in header.items[1:]:
        param = check_identifier(sexp, error, "define: expected a variable, but found ")
        if not isinstance(param, str):
            return param
        if param in params:
            return error(f"define: found a variable that is used more than once: {param}")
        params.append(param)

    # keyword parameters are reported before a missing parameter list
    if not params:
        return error("define: expected at least one variable after the function name, but found none")
    if not rest:
        return error(f"define: expected an expression for the function body, but {NOTHING_THERE}")
    if len(rest) > 1:
        return error(
            "define: expected only one expression for the function body, "
            f"but found {extra_parts(len(rest) - 1)}"
        )

    body = parse_expr(rest[0])
    if not is_expr(body):
        return body
    return DefineFunction(name, tuple(params), body)
