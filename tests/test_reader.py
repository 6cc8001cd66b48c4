import pytest

from bsl.reader.reader import read, read_one
from bsl.reader.tokenizer import tokenize
from bsl.types.sexp import (
    BoolAtom,
    IdAtom,
    NumAtom,
    ReadError,
    ReadErrorKind,
    SExpList,
    StringAtom,
    sexps,
)
from bsl.types.tokens import Token, TokenError, TokenType

K = ReadErrorKind


def _tok(kind, text):
    return Token(kind, text)


OPEN = _tok(TokenType.OPEN_PAREN, "(")
CLOSE = _tok(TokenType.CLOSE_PAREN, ")")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", []),
        ("  ; nothing here\n", []),
        ("42", [NumAtom(42.0)]),
        ("-1.5", [NumAtom(-1.5)]),
        ('"s"', [StringAtom("s")]),
        ('""', [StringAtom("")]),
        ("#t #f #true #false", [BoolAtom(True), BoolAtom(False), BoolAtom(True), BoolAtom(False)]),
        ("x", [IdAtom("x")]),
        ("()", [sexps()]),
        ("(define x 10)", [sexps(IdAtom("define"), IdAtom("x"), NumAtom(10.0))]),
        ("[a (b {c})]", [sexps(IdAtom("a"), sexps(IdAtom("b"), sexps(IdAtom("c"))))]),
        ("1 (f) 2", [NumAtom(1.0), sexps(IdAtom("f")), NumAtom(2.0)]),
    ],
)
def test_read(source, expected):
    assert read(tokenize(source)) == expected


def test_brackets_are_remembered_for_display():
    [outer] = read(tokenize("[a {b}]"))
    assert outer.bracket == "["
    assert outer.items[1].bracket == "{"
    assert outer == sexps(IdAtom("a"), sexps(IdAtom("b")))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(", [ReadError(K.NO_CLOSING_PAREN, (OPEN,))]),
        ("(a (b", [ReadError(K.NO_CLOSING_PAREN, (
            OPEN, _tok(TokenType.IDENTIFIER, "a"), OPEN, _tok(TokenType.IDENTIFIER, "b")))]),
        (")", [ReadError(K.NO_OPEN_PAREN, (CLOSE,))]),
        (") 5", [ReadError(K.NO_OPEN_PAREN, (CLOSE,)), NumAtom(5.0)]),
        ("(]", [ReadError(K.MISMATCHED_PARENS, (OPEN, _tok(TokenType.CLOSE_SQUARE, "]")))]),
        ("[)", [ReadError(K.MISMATCHED_PARENS, (
            _tok(TokenType.OPEN_SQUARE, "["), CLOSE))]),
        ("{]", [ReadError(K.MISMATCHED_PARENS, (
            _tok(TokenType.OPEN_BRACE, "{"), _tok(TokenType.CLOSE_SQUARE, "]")))]),
    ],
)
def test_read_errors(source, expected):
    assert read(tokenize(source)) == expected


def test_wrong_closer_swallows_rest_of_input():
    rest = (_tok(TokenType.IDENTIFIER, "b"), CLOSE, _tok(TokenType.NUMBER, "7"))
    assert read(tokenize("(a] b) 7")) == [
        ReadError(K.MISMATCHED_PARENS, (OPEN, _tok(TokenType.IDENTIFIER, "a"),
                                        _tok(TokenType.CLOSE_SQUARE, "]")) + rest),
    ]


def test_nested_wrong_closer_leaves_no_valid_sexp():
    assert read(tokenize("1 ((a] b) 7")) == [
        NumAtom(1.0),
        ReadError(K.NO_VALID_SEXP, (
            OPEN, OPEN, _tok(TokenType.IDENTIFIER, "a"), _tok(TokenType.CLOSE_SQUARE, "]"),
            _tok(TokenType.IDENTIFIER, "b"), CLOSE, _tok(TokenType.NUMBER, "7"),
        )),
    ]


def test_read_one_after_wrong_closer_leaves_nothing():
    sexp, rest = read_one(tokenize("(] (+ 1 2)"))
    assert sexp.kind is K.MISMATCHED_PARENS
    assert len(sexp.tokens) == 7
    assert rest == []


def test_invalid_token_at_top_level():
    assert read(tokenize("#x 1")) == [
        ReadError(K.INVALID_TOKEN, (TokenError("read-syntax: bad syntax `#x`", "#x"),)),
        NumAtom(1.0),
    ]


def test_invalid_token_inside_list_becomes_element():
    bad = ReadError(K.INVALID_TOKEN, (TokenError("read-syntax: bad syntax `#x`", "#x"),))
    assert read(tokenize("(a #x b)")) == [sexps(IdAtom("a"), bad, IdAtom("b"))]


def test_read_one_on_empty_input():
    assert read_one([]) == (ReadError(K.NO_VALID_SEXP, ()), [])


def test_read_one_returns_rest():
    sexp, rest = read_one(tokenize("1 2"))
    assert sexp == NumAtom(1.0)
    assert rest == [Token(TokenType.NUMBER, "2")]


def test_read_one_consumes_whole_group():
    sexp, rest = read_one(tokenize("(f [x]) y"))
    assert sexp == sexps(IdAtom("f"), sexps(IdAtom("x")))
    assert rest == [Token(TokenType.IDENTIFIER, "y")]


def test_deep_nesting_does_not_overflow():
    depth = 50000
    [result] = read(tokenize("(" * depth + ")" * depth))
    node = result
    for _ in range(depth - 1):
        assert isinstance(node, SExpList)
        (node,) = node.items
    assert node == sexps()


def test_deep_unclosed_nesting():
    [result] = read(tokenize("(" * 10000))
    assert result.kind is K.NO_CLOSING_PAREN
    assert len(result.tokens) == 10000
