import pytest

from bsl.evaluation.special_forms.check_forms import values_equal
from bsl.interpreter import Interpreter
from bsl.types.structs import Struct, StructType
from bsl.types.values import Atomic


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(check-expect 1 1)", "PASS"),
        ('(check-expect "a" "a")', "PASS"),
        ("(check-expect (+ 1 1) 2)", "PASS"),
        ("(check-expect (+ 1 1) 3)", "Actual value 2 differs from 3, the expected value."),
        ("(check-expect -13 1)", "Actual value -13 differs from 1, the expected value."),
        ("(check-expect #true 1)", "Actual value #true differs from 1, the expected value."),
        ('(check-expect "1" 1)', 'Actual value "1" differs from 1, the expected value.'),
        ("(check-expect 1 (/ 1 0))", "/: division by zero"),
        ("(check-expect (/ 1 0) 1)", "/: division by zero"),
        ("(check-expect (make-posn 1 2) (make-posn 1 2))",
         "Actual value (make-posn 1 2) differs from (make-posn 1 2), the expected value."),
        ("(check-within 1.05 1 0.1)", "PASS"),
        ("(check-within 1 1 0)", "PASS"),
        ("(check-within 2 1 0.1)", "Actual value 2 is not within 0.1 of expected value 1."),
        ("(check-within 1 1 -1)", "check-within: expects a non-negative number as 3rd argument, given -1"),
        ('(check-within 1 1 "a")', 'check-within: expects a non-negative number as 3rd argument, given "a"'),
        ('(check-within "a" "a" 1)', "PASS"),
        ("(check-within (/ 1 0) 1 1)", "/: division by zero"),
        ("(check-error (/ 1 0))", "PASS"),
        ('(check-error (/ 1 0) "/: division by zero")', "PASS"),
        ('(check-error (error "boom") "boom")', "PASS"),
        ("(check-error 5)", "check-error: expected an error, but received 5"),
        ('(check-error 5 "boom")', "check-error: expected an error, but received 5"),
        ('(check-error (/ 1 0) "nope")', 'check-error: expected the error "nope", but got "/: division by zero"'),
        ("(check-error 1 2)", "check-error: expects a string as 2nd argument, given 2"),
    ],
)
def test_checks(run, source, expected):
    assert run(source) == expected + "\n"


def test_checks_run_after_definitions(run):
    assert run("(check-expect (f 2) 4) (define (f x) (* x 2))") == "PASS\nDefined (f x) to be (* x 2).\n"


def test_checks_see_constants_defined_later(run):
    assert run("(check-expect x 1) (define x 1)") == "PASS\nDefined x to be 1.\n"


def test_check_results_stay_in_place(run):
    assert run("(check-expect 1 2) 5 (check-expect 1 1)") == (
        "Actual value 1 differs from 2, the expected value.\n5\nPASS\n"
    )


def test_default_success_marker():
    assert Interpreter().evaluate_and_print("(check-expect 1 1)") == "\U0001F389\n"


def test_success_marker_from_environment(monkeypatch):
    monkeypatch.setenv("BSL_CHECK_SUCCESS_MARKER", "ok")
    assert Interpreter().evaluate_and_print("(check-expect 1 1)") == "ok\n"


@pytest.mark.parametrize(
    "a,b,equal",
    [
        (Atomic(1.0), Atomic(1.0), True),
        (Atomic("a"), Atomic("a"), True),
        (Atomic(True), Atomic(True), True),
        (Atomic(True), Atomic(1.0), False),
        (Atomic(False), Atomic(0.0), False),
        (Atomic("1"), Atomic(1.0), False),
        (Atomic(1.0), Atomic(2.0), False),
    ],
)
def test_values_equal(a, b, equal):
    assert values_equal(a, b) is equal
    assert values_equal(b, a) is equal


def test_structures_are_never_equal():
    posn = StructType("posn", ("x", "y"))
    s = Struct(posn, (Atomic(1.0), Atomic(2.0)))
    assert not values_equal(s, s)
