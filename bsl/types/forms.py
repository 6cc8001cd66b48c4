"""Top-level forms produced by the parser.

A program is a sequence of TopLevel forms: definitions, expressions and test
assertions. Each category has its own error variant that keeps the
S-expressions that caused it, and a ReadError may appear wherever a form is
expected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bsl.types.sexp import IdAtom, ReadError, SExp, SExpList


# --- Expressions ---

@dataclass(frozen=True)
class StringExpr:
    value: str


@dataclass(frozen=True)
class NumExpr:
    value: float


@dataclass(frozen=True)
class BoolExpr:
    value: bool


@dataclass(frozen=True)
class IdExpr:
    name: str


@dataclass(frozen=True)
class Call:
    op: str
    args: tuple = ()


@dataclass(frozen=True)
class If:
    predicate: "Expr"
    consequent: "Expr"
    alternative: "Expr"


@dataclass(frozen=True)
class Cond:
    clauses: tuple = ()  # of (question, answer) pairs
    otherwise: Optional["Expr"] = None  # the [else ...] answer


@dataclass(frozen=True)
class And:
    args: tuple = ()


@dataclass(frozen=True)
class Or:
    args: tuple = ()


@dataclass(frozen=True)
class TemplatePlaceholder:
    """A design-recipe stub such as `...` or `(... x ...)`."""
    sexp: SExp

    @property
    def keyword(self) -> str:
        match self.sexp:
            case IdAtom(value=name):
                return name
            case SExpList(items=(IdAtom(value=name), *_)):
                return name
        return "..."


# --- Definitions ---

@dataclass(frozen=True)
class DefineConstant:
    name: str
    body: "Expr"


@dataclass(frozen=True)
class DefineFunction:
    name: str
    params: tuple
    body: "Expr"


@dataclass(frozen=True)
class DefineStruct:
    name: str
    fields: tuple

    def constructor_name(self) -> str:
        return f"make-{self.name}"

    def accessor_names(self) -> list[str]:
        return [f"{self.name}-{f}" for f in self.fields]

    def predicate_name(self) -> str:
        return f"{self.name}?"

    def defined_names(self) -> list[str]:
        return [self.constructor_name(), *self.accessor_names(), self.predicate_name()]


# --- Test assertions ---

@dataclass(frozen=True)
class CheckExpect:
    actual: "Expr"
    expected: "Expr"


@dataclass(frozen=True)
class CheckWithin:
    actual: "Expr"
    expected: "Expr"
    margin: "Expr"


@dataclass(frozen=True)
class CheckError:
    actual: "Expr"
    message: Optional["Expr"] = None


# --- Parse errors ---

@dataclass(frozen=True)
class DefinitionError:
    message: str
    sexps: tuple = ()


@dataclass(frozen=True)
class ExprError:
    message: str
    sexps: tuple = ()


@dataclass(frozen=True)
class TopLevelError:
    message: str
    sexps: tuple = ()


Expr = (
    StringExpr | NumExpr | BoolExpr | IdExpr | Call | If | Cond | And | Or | TemplatePlaceholder
)
Definition = DefineConstant | DefineFunction | DefineStruct
Check = CheckExpect | CheckWithin | CheckError
ParseError = DefinitionError | ExprError | TopLevelError | ReadError
TopLevel = Definition | Expr | Check | ParseError

EXPR_TYPES = (StringExpr, NumExpr, BoolExpr, IdExpr, Call, If, Cond, And, Or, TemplatePlaceholder)
DEFINITION_TYPES = (DefineConstant, DefineFunction, DefineStruct)
CHECK_TYPES = (CheckExpect, CheckWithin, CheckError)
PARSE_ERROR_TYPES = (DefinitionError, ExprError, TopLevelError, ReadError)


def is_expr(form) -> bool:
    return isinstance(form, EXPR_TYPES)


def is_definition(form) -> bool:
    return isinstance(form, DEFINITION_TYPES)


def is_check(form) -> bool:
    return isinstance(form, CHECK_TYPES)


def is_parse_error(form) -> bool:
    return isinstance(form, PARSE_ERROR_TYPES)
