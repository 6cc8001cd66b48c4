from __future__ import annotations

from bsl import Form, ParserFn, SExpression
from bsl.parser.keyword_forms.common import (
    NOTHING_THERE,
    check_identifier,
    describe,
    extra_parts,
    whole,
)
from bsl.types.forms import DefineStruct, DefinitionError
from bsl.types.sexp import ReadError, SExpList

_FIELDS_EXPECTED = (
    "define-struct: expected at least one field name (in parentheses) after the structure name, but "
)


def define_struct_form(tail: tuple[SExpression, ...], parse_expr: ParserFn) -> Form:
    """(define-struct name (field ...))"""

    def error(message: str) -> DefinitionError:
        return DefinitionError(message, whole("define-struct", tail))

    if not tail:
        return error(f"define-struct: expected the structure name after define-struct, but {NOTHING_THERE}")

    name = check_identifier(tail[0], error, "define-struct: expected the structure name after define-struct, but found ")
    if not isinstance(name, str):
        return name

    if len(tail) == 1:
        return error(_FIELDS_EXPECTED + NOTHING_THERE)
    field_list = tail[1]
    if isinstance(field_list, ReadError):
        return field_list
    if not isinstance(field_list, SExpList):
        return error(_FIELDS_EXPECTED + "found " + describe(field_list))
    if not field_list.items:
        return error(_FIELDS_EXPECTED + "found none")

    fields: list[str] = []
    for sexp in field_list.items:
        field = check_identifier(sexp, error, "define-struct: expected a field name, but found ")
        if not isinstance(field, str):
            return field
        if field in fields:
            return error(f"define-struct: found a field name that is used more than once: {field}")
        fields.append(field)

    if len(tail) > 2:
        return error(f"define-struct: expected nothing after the field names, but found {extra_parts(len(tail) - 2)}")

    return DefineStruct(name, tuple(fields))
