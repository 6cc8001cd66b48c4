import pytest
from hypothesis import given, strategies as st

from bsl.evaluation.apply import apply
from bsl.types.forms import Call
from bsl.types.structs import (
    Struct,
    StructType,
    StructureAccessor,
    StructureConstructor,
    StructurePredicate,
    structure_functions,
)
from bsl.types.values import FALSE, TRUE, Atomic


def test_define_struct_program(run):
    assert run(
        "(define-struct point (x y))"
        "(define p (make-point 1 2))"
        "(point-x p) (point-y p) (point? p) (point? 5)"
    ) == (
        "Defined point.\n"
        "Defined p to be (make-point 1 2).\n"
        "1\n"
        "2\n"
        "#true\n"
        "#false\n"
    )


def test_nested_structures_print(run):
    assert run('(make-posn (make-posn 1 "a") #true)') == '(make-posn (make-posn 1 "a") #true)\n'


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(posn-x (make-posn 3 4))", "3"),
        ("(posn-y (make-posn 3 4))", "4"),
        ("(posn? (make-posn 3 4))", "#true"),
        ("(posn-x 5)", "posn-x: expects a posn, given 5"),
        ("(make-posn 1)", "make-posn: expects 2 arguments, but found only 1"),
        ("(make-posn 1 2 3)", "make-posn: expects only 2 arguments, but found 3"),
        ("(posn? (make-posn 1 2) 3)", "posn?: expects only 1 argument, but found 2"),
        ("(posn-x)", "posn-x: expects 1 argument, but found none"),
    ],
)
def test_posn(run, source, expected):
    assert run(source) == expected + "\n"


def test_types_are_distinct(lines):
    out = lines("(define-struct cat (name)) (define-struct dog (name)) (cat-name (make-dog 1)) (cat? (make-dog 1))")
    assert out == [
        "Defined cat.",
        "Defined dog.",
        "cat-name: expects a cat, given (make-dog 1)",
        "#false",
    ]


def test_struct_can_replace_posn(lines):
    assert lines("(define-struct posn (a)) (posn-a (make-posn 1))") == ["Defined posn.", "1"]


def test_struct_functions_cannot_be_redefined(lines):
    assert lines("(define-struct p (x)) (define (p-x v) v)") == [
        "Defined p.",
        "p-x: this name was defined previously and cannot be re-defined",
    ]


def test_struct_after_function_of_same_name(lines):
    assert lines("(define (make-p x) x) (define-struct p (x))") == [
        "Defined (make-p x) to be x.",
        "make-p: this name was defined previously and cannot be re-defined",
    ]


def test_use_before_define_struct(lines):
    assert lines("(make-box 1) (define-struct box (v))") == [
        "make-box: Expression defined later in program",
        "Defined box.",
    ]


def test_structure_function_names():
    posn = StructType("posn", ("x", "y"))
    assert list(structure_functions(posn)) == ["make-posn", "posn-x", "posn-y", "posn?"]
    assert StructureConstructor(posn).name == "make-posn"
    assert StructureAccessor(posn, 1).name == "posn-y"
    assert StructurePredicate(posn).name == "posn?"


def test_same_name_types_are_different():
    a = StructType("p", ("x",))
    b = StructType("p", ("x",))
    assert a != b
    assert apply(StructurePredicate(a), [Struct(b, (Atomic(1.0),))], Call("p?"), None) is FALSE


_names = st.from_regex(r"[a-z]{1,6}", fullmatch=True)
_values = st.one_of(
    st.integers(-1000, 1000).map(lambda i: Atomic(float(i))),
    st.text(max_size=5).map(Atomic),
    st.booleans().map(Atomic),
)


@given(_names.filter(lambda s: s != "make"), st.lists(_names, min_size=1, max_size=4, unique=True), st.data())
def test_accessors_return_constructor_arguments(name, fields, data):
    struct_type = StructType(name, tuple(fields))
    fns = structure_functions(struct_type)
    values = data.draw(st.lists(_values, min_size=len(fields), max_size=len(fields)))

    instance = apply(fns[f"make-{name}"], values, Call(f"make-{name}"), None)
    assert isinstance(instance, Struct)
    for field, value in zip(fields, values):
        accessor = fns[f"{name}-{field}"]
        assert apply(accessor, [instance], Call(accessor.name), None) == value
    assert apply(fns[f"{name}?"], [instance], Call(f"{name}?"), None) is TRUE
    for value in values:
        assert apply(fns[f"{name}?"], [value], Call(f"{name}?"), None) is FALSE
