from bsl import Form, ParserFn, SExpression
from bsl.parser.keyword_forms.common import NOTHING_THERE, first_error, parts, whole
from bsl.types.forms import ExprError, If


def if_form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
    """(if question answer answer)"""
    if len(tail) != 3:
        if not tail:
            found = NOTHING_THERE
        elif len(tail) < 3:
            found = f"found only {parts(len(tail))}"
        else:
            found = f"found {parts(len(tail))}"
        return ExprError(f"if: expected a question and two answers, but {found}", whole("if", tail))

    forms = [parse_expr(sexp) for sexp in tail]
    err = first_error(forms)
    if err is not None:
        return err
    return If(*forms)
