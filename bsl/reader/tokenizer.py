"""
  Tokenizer for the beginning student language.

- Never fails: a lexeme that fits no category becomes a TokenError that the
  reader turns into a read error, so later forms still get read.
- Every step consumes at least one character, so tokenizing terminates.
- Blank space and comments are kept as WHITESPACE tokens.
"""

from __future__ import annotations

import logging
import re

from bsl.types.tokens import AnyToken, Token, TokenError, TokenType

logger = logging.getLogger(__name__)


# Alternatives are tried in order; the first that matches wins.
TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<lsquare>\[)"
    r"|(?P<lbrace>\{)"
    r"|(?P<rparen>\))"
    r"|(?P<rsquare>\])"
    r"|(?P<rbrace>\})"
    r"|(?P<number>-?\d+(?:\.\d+)?)"
    r'|(?P<string>"[^"]*")'
    r"|(?P<identifier>[^\",'`()\[\]{};\s]+)"
    r"|(?P<boolean>#(?:true|false|t|T|f|F)\b)"
    r"|(?P<whitespace>\s+|;[^\n]*)"
)

GROUP_TYPES: dict[str, TokenType] = {
    "lparen": TokenType.OPEN_PAREN,
    "lsquare": TokenType.OPEN_SQUARE,
    "lbrace": TokenType.OPEN_BRACE,
    "rparen": TokenType.CLOSE_PAREN,
    "rsquare": TokenType.CLOSE_SQUARE,
    "rbrace": TokenType.CLOSE_BRACE,
    "number": TokenType.NUMBER,
    "string": TokenType.STRING,
    "identifier": TokenType.IDENTIFIER,
    "boolean": TokenType.BOOLEAN,
    "whitespace": TokenType.WHITESPACE,
}

BOOLEAN_SPELLINGS = frozenset({"#t", "#T", "#f", "#F", "#true", "#false"})


def _classify_identifier(text: str) -> AnyToken:
    """Identifier lexemes that are not identifiers: `.` and `#...`."""
    if text == ".":
        return TokenError("read-syntax: illegal use of `.`", text)
    if text.startswith("#"):
        if text in BOOLEAN_SPELLINGS:
            return Token(TokenType.BOOLEAN, text)
        return TokenError(f"read-syntax: bad syntax `{text}`", text)
    return Token(TokenType.IDENTIFIER, text)


def _unmatched(char: str) -> TokenError:
    if char == '"':
        return TokenError('read-syntax: expected a closing `"`', char)
    return TokenError(f"read-syntax: unexpected `{char}`", char)


def tokenize(source: str) -> list[AnyToken]:
    """Split `source` into tokens; the concatenated token texts equal `source`."""
    tokens: list[AnyToken] = []
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            tokens.append(_unmatched(source[pos]))
            pos += 1
            continue
        kind = m.lastgroup
        text = m.group(kind)
        if kind == "identifier":
            tokens.append(_classify_identifier(text))
        else:
            tokens.append(Token(GROUP_TYPES[kind], text))
        pos = m.end()
    logger.debug("tokenized %d characters into %d tokens", n, len(tokens))
    return tokens
