from bsl import Form, ParserFn, SExpression
from bsl.parser.keyword_forms.common import whole
from bsl.types.forms import TopLevelError


def unsupported_message(keyword: str) -> str:
    return f"{keyword}: this form is not supported in the beginning student language"


def unsupported_form(keyword: str):
    """Rule for a keyword reserved by the full language but not offered here."""

    def form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
        return TopLevelError(unsupported_message(keyword), whole(keyword, tail))

    return form
