import io
import sys

import pytest

import bsl
from bsl.__main__ import main_with_args
from bsl.errors import BslConfigError
from bsl.interpreter import Interpreter, evaluate_and_print, raised_recursion_limit


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 2 3)", "5\n"),
        ("(define x 10) x", "Defined x to be 10.\n10\n"),
        ("hello", "hello: this variable is not defined\n"),
        ("(check-expect -13 1)", "Actual value -13 differs from 1, the expected value.\n"),
        ("(", "Read Error: No Closing Paren for (\n"),
        ("", "\n"),
        ("   \n\t", "\n"),
        ("; just a comment", "\n"),
    ],
)
def test_evaluate_and_print(source, expected):
    assert evaluate_and_print(source) == expected


def test_package_exports_entry_point():
    assert bsl.evaluate_and_print("(* 6 7)") == "42\n"
    assert bsl.Interpreter is Interpreter


def test_forward_reference_in_constant(run):
    assert run("(define x (f 3)) (define (f y) y)") == (
        "f: Expression defined later in program\nDefined (f y) to be y.\n"
    )


@pytest.mark.parametrize("opener", ["(", "[", "{"])
@pytest.mark.parametrize("closer", [")", "]", "}"])
def test_bracket_kinds_must_match(run, opener, closer):
    out = run(f"{opener}+ 1 2{closer}")
    if "([{".index(opener) == ")]}".index(closer):
        assert out == "3\n"
    else:
        assert out == f"Read Error: Mismatched Parens for {opener}+ 1 2{closer}\n"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(]", "Read Error: Mismatched Parens for (]\n"),
        ("[)", "Read Error: Mismatched Parens for [)\n"),
        ("(+ 1 2) ) (+ 3 4)", "3\nRead Error: No Open Paren for )\n7\n"),
        ("(+ 1 (* 2 3]", "Read Error: No Valid SExp for (+ 1 (* 2 3]\n"),
        ("(] (+ 1 2)", "Read Error: Mismatched Parens for (] (+ 1 2)\n"),
        ("(+ 1 2) (a [b) 7", "3\nRead Error: No Valid SExp for (a [b) 7\n"),
        ("(define (f x) (+ x 1)", "Read Error: No Closing Paren for (define (f x) (+ x 1)\n"),
        ("#hello", "read-syntax: bad syntax `#hello`\n"),
        ("(+ 1 .)", "read-syntax: illegal use of `.`\n"),
        ('"abc', 'read-syntax: expected a closing `"`\nabc: this variable is not defined\n'),
        ("'x", "read-syntax: unexpected `'`\nx: this variable is not defined\n"),
    ],
)
def test_read_errors(run, source, expected):
    assert run(source) == expected


def test_half_typed_expression_keeps_earlier_results(run):
    assert run("(define x 2) (* x 3) (+ x") == (
        "Defined x to be 2.\n6\nRead Error: No Closing Paren for (+ x\n"
    )


def test_no_state_between_calls(run):
    assert run("(define x 1)") == "Defined x to be 1.\n"
    assert run("x") == "x: this variable is not defined\n"
    assert run("(define x 2)") == "Defined x to be 2.\n"


def test_infinite_recursion():
    interp = Interpreter(recursion_limit=3000, success_marker="PASS")
    assert interp.evaluate_and_print("(define (loop x) (loop x)) (loop 1) (+ 1 2)") == (
        "Defined (loop x) to be (loop x).\nmaximum recursion depth exceeded\n3\n"
    )


def test_recursive_constant_reads_as_undefined():
    interp = Interpreter(recursion_limit=3000, success_marker="PASS")
    out = interp.evaluate_and_print("(define (loop x) (loop x)) (define y (loop 1)) y")
    assert out.splitlines()[1:] == ["maximum recursion depth exceeded", "y: this variable is not defined"]


def test_deep_recursion_within_limit(run):
    out = run("(define (count n) (if (= n 0) 0 (+ 1 (count (- n 1))))) (count 300)")
    assert out.splitlines()[-1] == "300"


def test_deeply_nested_source():
    depth = 10000
    source = "(f " * depth + "1" + ")" * depth
    assert Interpreter(recursion_limit=3000).evaluate_and_print(source) == "maximum recursion depth exceeded\n"


def test_recursion_limit_is_restored():
    before = sys.getrecursionlimit()
    with raised_recursion_limit(before + 500):
        assert sys.getrecursionlimit() == before + 500
    assert sys.getrecursionlimit() == before


def test_recursion_limit_never_lowered():
    before = sys.getrecursionlimit()
    with raised_recursion_limit(10):
        assert sys.getrecursionlimit() == before


def test_recursion_limit_from_environment(monkeypatch):
    monkeypatch.setenv("BSL_RECURSION_LIMIT", "4321")
    assert Interpreter().recursion_limit == 4321
    assert Interpreter(recursion_limit=99).recursion_limit == 99


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_bad_recursion_limit_falls_back_to_default(monkeypatch, caplog, raw):
    monkeypatch.setenv("BSL_RECURSION_LIMIT", raw)
    assert evaluate_and_print("(+ 1 2)") == "3\n"
    assert Interpreter().recursion_limit == 20000
    assert "BSL_RECURSION_LIMIT" in caplog.text


def test_cli_rejects_bad_recursion_limit(monkeypatch):
    monkeypatch.setenv("BSL_RECURSION_LIMIT", "abc")
    monkeypatch.setattr(sys, "stdin", io.StringIO("(+ 1 2)"))
    with pytest.raises(BslConfigError):
        main_with_args()


def test_cli_reads_file(tmp_path, capsys):
    program = tmp_path / "program.rkt"
    program.write_text("(define (sq x) (* x x))\n(sq 4)\n", encoding="utf-8")
    main_with_args(program)
    assert capsys.readouterr().out == "Defined (sq x) to be (* x x).\n16\n"


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("(string-append \"a\" \"b\")"))
    main_with_args()
    assert capsys.readouterr().out == '"ab"\n'
