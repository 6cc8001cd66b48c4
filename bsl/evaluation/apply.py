"""Application engine for bsl.

This module centralizes function application semantics for the evaluator:
- Argument-count validation with the messages every callable shares.
- Closure application in a fresh child of the captured environment.
- Structure constructors, accessors and predicates.
- Builtins, which receive already-evaluated, already-counted arguments.

Argument values are always evaluated by the caller, left to right.
"""

from __future__ import annotations

from typing import Optional

from bsl import EvaluatorFn, LispValue
from bsl.printer import print_value
from bsl.types.closure import Closure
from bsl.types.forms import Call, IdExpr
from bsl.types.structs import Struct, StructureAccessor, StructureConstructor, StructurePredicate
from bsl.types.values import BuiltinFunction, EvalError, boolean


def _arguments(n: int) -> str:
    return "1 argument" if n == 1 else f"{n} arguments"


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def fn_error(name: str, message: str) -> EvalError:
    """An error reported against the function `name`: `name: message`."""
    return EvalError(message, IdExpr(name))


def type_error(name: str, expected: str, position: int, value: LispValue) -> EvalError:
    """`+: expects a number as 2nd argument, given "hello"`"""
    return fn_error(name, f"expects {expected} as {ordinal(position)} argument, given {print_value(value)}")


def arity_error(name: str, min_args: int, max_args: Optional[int], found: int) -> Optional[EvalError]:
    """The argument-count error for calling `name` with `found` arguments, if any.

    `max_args` of None means no upper bound.
    """
    if found < min_args:
        if max_args == min_args:
            wanted = f"expects {_arguments(min_args)}"
        else:
            wanted = f"expects at least {_arguments(min_args)}"
        got = "found none" if found == 0 else f"found only {found}"
        return fn_error(name, f"{wanted}, but {got}")
    if max_args is not None and found > max_args:
        if max_args == min_args:
            wanted = f"expects only {_arguments(max_args)}"
        else:
            wanted = f"expects at most {_arguments(max_args)}"
        return fn_error(name, f"{wanted}, but found {found}")
    return None


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    err = arity_error(fn.name, fn.arity, fn.arity, len(args))
    if err is not None:
        return err
    return evaluate_fn(fn.body, fn.extend_env(args))


def apply_builtin(fn: BuiltinFunction, args: list[LispValue]) -> LispValue:
    err = arity_error(fn.name, fn.min_args, fn.max_args, len(args))
    if err is not None:
        return err
    return fn.fn(args)


def apply(head: LispValue, args: list[LispValue], call: Call, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a function value to evaluated arguments.

    `call` is the expression being evaluated; it names the culprit when the
    operator is not a function at all.
    """
    match head:
        case BuiltinFunction():
            return apply_builtin(head, args)
        case Closure():
            return apply_closure(head, args, evaluate_fn)
        case StructureConstructor(struct_type=st):
            err = arity_error(head.name, st.arity, st.arity, len(args))
            if err is not None:
                return err
            return Struct(st, tuple(args))
        case StructureAccessor(struct_type=st, index=index):
            err = arity_error(head.name, 1, 1, len(args))
            if err is not None:
                return err
            arg = args[0]
            if not isinstance(arg, Struct) or arg.struct_type is not st:
                return fn_error(head.name, f"expects a {st.name}, given {print_value(arg)}")
            return arg.values[index]
        case StructurePredicate(struct_type=st):
            err = arity_error(head.name, 1, 1, len(args))
            if err is not None:
                return err
            return boolean(isinstance(args[0], Struct) and args[0].struct_type is st)
    # numbers, strings, booleans and structure instances
    return EvalError("tried to apply a non-function", call)
