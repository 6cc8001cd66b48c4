"""Token model produced by the tokenizer and consumed by the reader."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    OPEN_PAREN = "("
    OPEN_SQUARE = "["
    OPEN_BRACE = "{"
    CLOSE_PAREN = ")"
    CLOSE_SQUARE = "]"
    CLOSE_BRACE = "}"
    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"
    BOOLEAN = "boolean"
    WHITESPACE = "whitespace"  # blank space and comments


OPENERS = frozenset({TokenType.OPEN_PAREN, TokenType.OPEN_SQUARE, TokenType.OPEN_BRACE})
CLOSERS = frozenset({TokenType.CLOSE_PAREN, TokenType.CLOSE_SQUARE, TokenType.CLOSE_BRACE})

MATCHING_CLOSER = {
    TokenType.OPEN_PAREN: TokenType.CLOSE_PAREN,
    TokenType.OPEN_SQUARE: TokenType.CLOSE_SQUARE,
    TokenType.OPEN_BRACE: TokenType.CLOSE_BRACE,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TokenError:
    """A lexeme the tokenizer refused, with the diagnostic shown to the student."""
    message: str
    text: str

    def __str__(self) -> str:
        return self.text


AnyToken = Token | TokenError
