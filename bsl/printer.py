"""
  Printer: results -> display text.

- One line per result, each ending in a newline; no results print as "\n".
- Expressions are rendered back into the surface syntax they were parsed
  from, so messages quote the student's code in a form they recognise.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable, Optional

from bsl import Form, LispValue
from bsl.config import get_check_success_marker
from bsl.types.closure import Closure
from bsl.types.forms import (
    And,
    BoolExpr,
    Call,
    Cond,
    DefinitionError,
    ExprError,
    IdExpr,
    If,
    NumExpr,
    Or,
    StringExpr,
    TemplatePlaceholder,
    TopLevelError,
)
from bsl.types.results import (
    Binding,
    BindingError,
    CheckErrorFailure,
    CheckExpectedError,
    CheckFailure,
    CheckSuccess,
    ResourceError,
)
from bsl.types.sexp import BoolAtom, IdAtom, NumAtom, ReadError, ReadErrorKind, SExpList, StringAtom
from bsl.types.structs import Struct, StructureAccessor, StructureConstructor, StructurePredicate
from bsl.types.tokens import CLOSERS, OPENERS, AnyToken, TokenError
from bsl.types.values import Atomic, BuiltinFunction, EvalError

CLOSING_BRACKET = {"(": ")", "[": "]", "{": "}"}


def format_number(x: float) -> str:
    if math.isnan(x):
        return "+nan.0"
    if math.isinf(x):
        return "+inf.0" if x > 0 else "-inf.0"
    if x.is_integer():
        return str(int(x))
    # positional notation: `1e-07` would not read back as one number
    return format(Decimal(repr(x)), "f")


def format_boolean(b: bool) -> str:
    return "#true" if b else "#false"


# --- Surface syntax ---

def render_tokens(tokens: Iterable[AnyToken]) -> str:
    """Replay a run of tokens: no space after an opener or before a closer."""
    text = ""
    for tok in tokens:
        if isinstance(tok, TokenError):
            text += tok.text + " "
        elif tok.type in OPENERS:
            text += tok.text
        elif tok.type in CLOSERS:
            text = text.strip() + tok.text + " "
        else:
            text += tok.text + " "
    return text.strip()


def render_sexp(sexp) -> str:
    match sexp:
        case StringAtom(value=s):
            return f'"{s}"'
        case NumAtom(value=n):
            return format_number(n)
        case BoolAtom(value=b):
            return format_boolean(b)
        case IdAtom(value=name):
            return name
        case SExpList(items=items, bracket=bracket):
            inner = " ".join(render_sexp(item) for item in items)
            return f"{bracket}{inner}{CLOSING_BRACKET[bracket]}"
        case ReadError():
            return print_read_error(sexp)
    return str(sexp)


def render_expr(expr: Form) -> str:
    """The structural inverse of parsing an expression."""
    match expr:
        case StringExpr(value=s):
            return f'"{s}"'
        case NumExpr(value=n):
            return format_number(n)
        case BoolExpr(value=b):
            return format_boolean(b)
        case IdExpr(name=name):
            return name
        case Call(op=op, args=args):
            return "(" + " ".join([op, *(render_expr(a) for a in args)]) + ")"
        case If(predicate=p, consequent=c, alternative=a):
            return f"(if {render_expr(p)} {render_expr(c)} {render_expr(a)})"
        case Cond(clauses=clauses, otherwise=otherwise):
            parts = [f"[{render_expr(q)} {render_expr(a)}]" for q, a in clauses]
            if otherwise is not None:
                parts.append(f"[else {render_expr(otherwise)}]")
            return "(cond " + " ".join(parts) + ")"
        case And(args=args):
            return "(and " + " ".join(render_expr(a) for a in args) + ")"
        case Or(args=args):
            return "(or " + " ".join(render_expr(a) for a in args) + ")"
        case TemplatePlaceholder(sexp=sexp):
            return render_sexp(sexp)
    return print_result(expr)


# --- Values and errors ---

def print_read_error(err: ReadError) -> str:
    if err.kind is ReadErrorKind.INVALID_TOKEN and err.tokens:
        tok = err.tokens[0]
        if isinstance(tok, TokenError):
            return tok.message
    return f"Read Error: {err.kind.value} for {render_tokens(err.tokens)}"


def print_eval_error(err: EvalError) -> str:
    if err.expr is None:
        return err.message
    return f"{render_expr(err.expr)}: {err.message}"


def print_value(value: LispValue) -> str:
    match value:
        case Atomic(value=bool() as b):
            return format_boolean(b)
        case Atomic(value=str() as s):
            return f'"{s}"'
        case Atomic(value=n):
            return format_number(float(n))
        case EvalError():
            return print_eval_error(value)
        case BuiltinFunction(name=name):
            return name
        case Closure():
            return render_expr(value.body)
        case Struct(struct_type=st, values=values):
            return "(" + " ".join([f"make-{st.name}", *(print_value(v) for v in values)]) + ")"
        case StructureConstructor() | StructureAccessor() | StructurePredicate():
            return value.name
    return str(value)


def print_result(result, success_marker: Optional[str] = None) -> str:
    """Render one result as a single line, without the newline."""
    match result:
        case Binding(name=name, value=None):
            return f"Defined {name}."
        case Binding(value=EvalError() as err):
            return print_eval_error(err)
        case Binding(name=name, value=Closure() as fn):
            return f"Defined ({' '.join([name, *fn.params])}) to be {render_expr(fn.body)}."
        case Binding(name=name, value=value):
            return f"Defined {name} to be {print_value(value)}."
        case BindingError(message=message, name=name):
            return f"{name}: {message}"
        case CheckSuccess():
            return success_marker if success_marker is not None else get_check_success_marker()
        case CheckFailure(actual=EvalError() as err):
            return print_eval_error(err)
        case CheckFailure(actual=actual, expected=expected, margin=None):
            return f"Actual value {print_value(actual)} differs from {print_value(expected)}, the expected value."
        case CheckFailure(actual=actual, expected=expected, margin=margin):
            return (
                f"Actual value {print_value(actual)} is not within "
                f"{print_value(margin)} of expected value {print_value(expected)}."
            )
        case CheckExpectedError(error=err):
            return print_value(err)
        case CheckErrorFailure(actual=EvalError() as err, expected_message=message):
            return f'check-error: expected the error "{message}", but got "{print_eval_error(err)}"'
        case CheckErrorFailure(actual=actual):
            return f"check-error: expected an error, but received {print_value(actual)}"
        case ResourceError(message=message):
            return message
        case DefinitionError(message=message) | ExprError(message=message) | TopLevelError(message=message):
            return message
        case ReadError():
            return print_read_error(result)
    return print_value(result)


def print_results(results: Iterable, success_marker: Optional[str] = None) -> str:
    if success_marker is None:
        success_marker = get_check_success_marker()
    lines = [print_result(r, success_marker) for r in results]
    if not lines:
        return "\n"
    return "".join(line + "\n" for line in lines)
