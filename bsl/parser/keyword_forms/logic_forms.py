from bsl import Form, ParserFn, SExpression
from bsl.parser.keyword_forms.common import first_error, whole
from bsl.types.forms import And, ExprError, Or


def _logic_form(keyword: str, make, tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
    if len(tail) < 2:
        found = "found none" if not tail else "found only 1"
        return ExprError(f"{keyword}: expects at least 2 arguments, but {found}", whole(keyword, tail))

    forms = [parse_expr(sexp) for sexp in tail]
    err = first_error(forms)
    if err is not None:
        return err
    return make(tuple(forms))


def and_form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
    """(and q1 q2 ...), at least two questions."""
    return _logic_form("and", And, tail, parse_expr)


def or_form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
    """(or q1 q2 ...), at least two questions."""
    return _logic_form("or", Or, tail, parse_expr)
