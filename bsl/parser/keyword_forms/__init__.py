"""Registry of keyword rules for the bsl parser.

Maps keyword names to handler functions that validate the shape of a
parenthesized form starting with that keyword and build its TopLevel.
The parser consults this table before treating a list as a function call.
BARE_KEYWORD_FORMS holds the keywords with their own meaning when written
without parentheses; every other bare keyword is an error.
"""

from bsl.parser.keyword_forms.common import ELLIPSES, KEYWORDS, UNSUPPORTED, whole  # noqa: F401
from bsl.parser.keyword_forms.define_form import define_form
from bsl.parser.keyword_forms.define_struct_form import define_struct_form
from bsl.parser.keyword_forms.if_form import if_form
from bsl.parser.keyword_forms.cond_form import cond_form
from bsl.parser.keyword_forms.logic_forms import and_form, or_form
from bsl.parser.keyword_forms.check_forms import check_expect_form, check_within_form, check_error_form
from bsl.parser.keyword_forms.template_forms import template_form
from bsl.parser.keyword_forms.unsupported import unsupported_form, unsupported_message
from bsl.types.forms import TemplatePlaceholder, TopLevelError
from bsl.types.sexp import IdAtom

_ELSE_MESSAGE = "else: not allowed here, because this is not a question in a clause"


def _else_form(tail, parse_expr):
    return TopLevelError(_ELSE_MESSAGE, whole("else", tail))


KEYWORD_FORMS = {
    "define": define_form,
    "define-struct": define_struct_form,
    "if": if_form,
    "cond": cond_form,
    "else": _else_form,
    "and": and_form,
    "or": or_form,
    "check-expect": check_expect_form,
    "check-within": check_within_form,
    "check-error": check_error_form,
    **{dots: template_form(dots) for dots in ELLIPSES},
    **{kw: unsupported_form(kw) for kw in UNSUPPORTED},
}

BARE_KEYWORD_FORMS = {
    "else": lambda: TopLevelError(_ELSE_MESSAGE, (IdAtom("else"),)),
    "check-expect": lambda: TopLevelError(
        "check-expect: expects 2 arguments, but found none", (IdAtom("check-expect"),)
    ),
    "check-within": lambda: TopLevelError(
        "check-within: expects 3 arguments, but found none", (IdAtom("check-within"),)
    ),
    **{dots: (lambda d=dots: TemplatePlaceholder(IdAtom(d))) for dots in ELLIPSES},
    **{kw: (lambda k=kw: TopLevelError(unsupported_message(k), (IdAtom(k),))) for kw in UNSUPPORTED},
}

