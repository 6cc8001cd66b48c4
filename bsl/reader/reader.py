"""
  Reader: tokens -> S-expressions.

- Brackets `()`, `[]` and `{}` are interchangeable but must pair up.
- Reading keeps going after isolated problems. A stray closer or a bad
  token becomes a ReadError and reading resumes after it, so the forms
  around it are still evaluated. An unclosed group or a closer of the wrong
  kind swallows everything up to the end of input.
- Nesting is handled with an explicit stack; deeply nested input cannot
  exhaust the Python stack here.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from bsl.errors import BslInvariantError
from bsl.types.sexp import (
    BoolAtom,
    IdAtom,
    NumAtom,
    ReadError,
    ReadErrorKind,
    SExp,
    SExpList,
    StringAtom,
)
from bsl.types.tokens import (
    CLOSERS,
    MATCHING_CLOSER,
    OPENERS,
    AnyToken,
    Token,
    TokenError,
    TokenType,
)

logger = logging.getLogger(__name__)

TRUE_SPELLINGS = frozenset({"#t", "#T", "#true"})


def _significant(tokens: Iterable[AnyToken]) -> list[AnyToken]:
    return [
        t for t in tokens
        if isinstance(t, TokenError) or t.type is not TokenType.WHITESPACE
    ]


def _atom(tok: Token) -> SExp:
    match tok.type:
        case TokenType.NUMBER:
            return NumAtom(float(tok.text))
        case TokenType.STRING:
            return StringAtom(tok.text[1:-1])
        case TokenType.BOOLEAN:
            return BoolAtom(tok.text in TRUE_SPELLINGS)
        case TokenType.IDENTIFIER:
            return IdAtom(tok.text)
    raise BslInvariantError(f"Not an atom token: {tok!r}")


class TokenStream:
    """Cursor over the significant tokens of one snapshot."""

    def __init__(self, tokens: Iterable[AnyToken]):
        self.tokens: list[AnyToken] = _significant(tokens)
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Optional[AnyToken]:
        if self.at_end():
            return None
        return self.tokens[self.pos]

    def advance(self) -> AnyToken:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def remaining(self) -> list[AnyToken]:
        return self.tokens[self.pos:]

    def read_sexp(self) -> SExp:
        """Read one S-expression from the current position."""
        if self.at_end():
            return ReadError(ReadErrorKind.NO_VALID_SEXP, ())

        tok = self.advance()
        if isinstance(tok, TokenError):
            return ReadError(ReadErrorKind.INVALID_TOKEN, (tok,))
        if tok.type in CLOSERS:
            return ReadError(ReadErrorKind.NO_OPEN_PAREN, (tok,))
        if tok.type not in OPENERS:
            return _atom(tok)

        start = self.pos - 1
        # one (opener, elements) entry per unclosed group
        stack: list[tuple[Token, list[SExp]]] = [(tok, [])]
        while True:
            if self.at_end():
                return ReadError(ReadErrorKind.NO_CLOSING_PAREN, tuple(self.tokens[start:]))
            tok = self.advance()
            if isinstance(tok, TokenError):
                stack[-1][1].append(ReadError(ReadErrorKind.INVALID_TOKEN, (tok,)))
            elif tok.type in OPENERS:
                stack.append((tok, []))
            elif tok.type in CLOSERS:
                opener, items = stack.pop()
                if MATCHING_CLOSER[opener.type] is not tok.type:
                    # a wrong closer ends the read; a nested one leaves the outer group unreadable
                    kind = ReadErrorKind.NO_VALID_SEXP if stack else ReadErrorKind.MISMATCHED_PARENS
                    self.pos = len(self.tokens)
                    return ReadError(kind, tuple(self.tokens[start:]))
                group = SExpList(tuple(items), opener.text)
                if not stack:
                    return group
                stack[-1][1].append(group)
            else:
                stack[-1][1].append(_atom(tok))

    def read_all(self) -> list[SExp]:
        out: list[SExp] = []
        while not self.at_end():
            out.append(self.read_sexp())
        return out


def read_one(tokens: Iterable[AnyToken]) -> tuple[SExp, list[AnyToken]]:
    """Read the first S-expression; return it with the tokens after it."""
    stream = TokenStream(tokens)
    sexp = stream.read_sexp()
    return sexp, stream.remaining()


def read(tokens: Iterable[AnyToken]) -> list[SExp]:
    """Read S-expressions until the tokens run out."""
    stream = TokenStream(tokens)
    result = stream.read_all()
    logger.debug("read %d s-expressions", len(result))
    return result
