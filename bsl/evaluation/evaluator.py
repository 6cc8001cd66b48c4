"""Core evaluator for bsl.

Evaluates a program in three passes over one top-level environment seeded
with the builtins:

1. reserve every name a well-formed definition introduces, in source order;
2. evaluate definitions and expressions in order, filling each slot once;
3. evaluate the test assertions.

Every student mistake is returned as a value; one bad form never stops the
forms after it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from bsl import Form, LispValue
from bsl.builtin.env_builtin import register
from bsl.evaluation.apply import apply
from bsl.evaluation.special_forms import CHECK_FORMS, DEFINITION_FORMS, SPECIAL_FORMS
from bsl.types.closure import Closure
from bsl.types.environment import Environment
from bsl.types.forms import (
    BoolExpr,
    Call,
    DefineStruct,
    IdExpr,
    NumExpr,
    StringExpr,
    TemplatePlaceholder,
    is_check,
    is_definition,
)
from bsl.types.nothing import Nothing
from bsl.types.results import ResourceError
from bsl.types.structs import StructureAccessor, StructureConstructor, StructurePredicate
from bsl.types.values import Atomic, BuiltinFunction, EvalError

logger = logging.getLogger(__name__)

RESOURCE_MESSAGE = "maximum recursion depth exceeded"

FUNCTION_TYPES = (BuiltinFunction, Closure, StructureConstructor, StructureAccessor, StructurePredicate)


def builtin_environment() -> Environment:
    env = Environment()
    register(env)
    return env


def _defined_names(defn: Form) -> list[str]:
    if isinstance(defn, DefineStruct):
        return defn.defined_names()
    return [defn.name]


def evaluate(forms: Iterable[Form], env: Optional[Environment] = None) -> list:
    """Evaluate a whole program; one result per form, in order."""
    forms = list(forms)
    if env is None:
        env = builtin_environment()

    definitions = [f for f in forms if is_definition(f)]
    for defn in definitions:
        for name in _defined_names(defn):
            env.reserve(name)
    logger.debug("reserved names for %d definitions: %r", len(definitions), env)

    results: list = [None] * len(forms)
    checks: list[int] = []
    for i, form in enumerate(forms):
        if is_check(form):
            checks.append(i)
        else:
            results[i] = _guarded(evaluate_top_level, form, env)

    logger.debug("running %d checks", len(checks))
    for i in checks:
        results[i] = _guarded(evaluate_check, forms[i], env)
    return results


def _guarded(step, form: Form, env: Environment):
    """Run one top-level step, turning stack exhaustion into a result."""
    try:
        return step(form, env)
    except RecursionError:
        logger.warning("recursion limit reached while evaluating %s", type(form).__name__)
        if is_definition(form):
            # later uses of the name report it as undefined
            for name in _defined_names(form):
                if env.lookup(name) is Nothing:
                    env.fill(name, EvalError(RESOURCE_MESSAGE))
        return ResourceError(RESOURCE_MESSAGE, form)


def evaluate_top_level(form: Form, env: Environment):
    handler = DEFINITION_FORMS.get(type(form))
    if handler is not None:
        return handler(form, env, evaluate_expr)
    # expressions, and parse errors passed through unchanged
    return evaluate_expr(form, env)


def evaluate_check(form: Form, env: Environment):
    return CHECK_FORMS[type(form)](form, env, evaluate_expr)


def lookup_variable(expr: IdExpr, env: Environment) -> LispValue:
    slot = env.lookup(expr.name)
    if slot is None or isinstance(slot, EvalError):
        return EvalError("this variable is not defined", expr)
    if slot is Nothing:
        return EvalError("referenced before definition", expr)
    if isinstance(slot, FUNCTION_TYPES):
        return EvalError("expected a function call, but there is no open parenthesis before this function", expr)
    return slot


def evaluate_call(expr: Call, env: Environment) -> LispValue:
    head = env.lookup(expr.op)
    if head is None or isinstance(head, EvalError):
        return EvalError("this function is not defined", IdExpr(expr.op))
    if head is Nothing:
        return EvalError("Expression defined later in program", IdExpr(expr.op))

    args = []
    for arg in expr.args:
        val = evaluate_expr(arg, env)
        if isinstance(val, EvalError):
            return val
        args.append(val)
    return apply(head, args, expr, evaluate_expr)


def evaluate_expr(expr: Form, env: Environment) -> LispValue:
    """Evaluate one expression to a value or an EvalError."""
    match expr:
        case StringExpr(value=v) | NumExpr(value=v) | BoolExpr(value=v):
            return Atomic(v)
        case IdExpr():
            return lookup_variable(expr, env)
        case Call():
            return evaluate_call(expr, env)
        case TemplatePlaceholder():
            return EvalError("expected a finished expression, but found a template", IdExpr(expr.keyword))

    handler = SPECIAL_FORMS.get(type(expr))
    if handler is not None:
        return handler(expr, env, evaluate_expr)
    # parse errors are already results
    return expr
