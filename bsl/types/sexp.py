"""S-expression model produced by the reader.

An SExpression is an atom, a bracketed list of SExpressions, or a ReadError
describing why a run of tokens could not be read. The three bracket kinds are
interchangeable once read, so the bracket is kept for display only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from bsl.types.tokens import AnyToken


@dataclass(frozen=True)
class StringAtom:
    value: str


@dataclass(frozen=True)
class NumAtom:
    value: float


@dataclass(frozen=True)
class IdAtom:
    value: str


@dataclass(frozen=True)
class BoolAtom:
    value: bool


@dataclass(frozen=True)
class SExpList:
    items: tuple = ()
    bracket: str = field(default="(", compare=False)

    def __len__(self) -> int:
        return len(self.items)


class ReadErrorKind(Enum):
    NO_VALID_SEXP = "No Valid SExp"
    NO_CLOSING_PAREN = "No Closing Paren"
    NO_OPEN_PAREN = "No Open Paren"
    MISMATCHED_PARENS = "Mismatched Parens"
    INVALID_TOKEN = "Invalid token found while reading SExp"


@dataclass(frozen=True)
class ReadError:
    kind: ReadErrorKind
    tokens: tuple[AnyToken, ...] = ()


Atom = StringAtom | NumAtom | IdAtom | BoolAtom
SExp = Atom | SExpList | ReadError


def sexps(*items, bracket: str = "(") -> SExpList:
    """Convenience constructor: sexps(IdAtom('f'), NumAtom(1)) is (f 1)."""
    return SExpList(tuple(items), bracket)
