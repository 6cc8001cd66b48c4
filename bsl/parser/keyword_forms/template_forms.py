from bsl import Form, ParserFn, SExpression
from bsl.types.forms import TemplatePlaceholder
from bsl.types.sexp import IdAtom, ReadError, SExpList


def template_form(keyword: str):
    """Rule for one ellipsis spelling: `(... x ...)` is an unfinished
    template; only read errors inside it are reported."""

    def form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
        for sexp in tail:
            if isinstance(sexp, ReadError):
                return sexp
        return TemplatePlaceholder(SExpList((IdAtom(keyword), *tail)))

    form.__name__ = f"template_form_{len(keyword)}"
    return form
