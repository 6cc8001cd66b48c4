from __future__ import annotations

from bsl import EvaluatorFn, Form
from bsl.types.closure import Closure
from bsl.types.environment import Environment
from bsl.types.forms import DefineConstant, DefineFunction
from bsl.types.nothing import Nothing
from bsl.types.results import Binding, BindingError

REDEFINITION = "this name was defined previously and cannot be re-defined"


def define_function_form(defn: DefineFunction, env: Environment, evaluate_fn: EvaluatorFn) -> Form:
    """
    (define (name param ...) body)
    The closure captures `env` itself, the live top-level frame, so its body
    sees every definition of the program, including later ones.
    """
    fn = Closure(defn.name, defn.params, defn.body, env)
    if not env.fill(defn.name, fn):
        return BindingError(REDEFINITION, defn.name, defn)
    return Binding(defn.name, fn)


def define_constant_form(defn: DefineConstant, env: Environment, evaluate_fn: EvaluatorFn) -> Form:
    """
    (define name body)
    The body is evaluated now. If it fails, the slot holds the error and the
    name reads as undefined from then on.
    """
    if env.lookup(defn.name) is not Nothing:
        return BindingError(REDEFINITION, defn.name, defn)
    value = evaluate_fn(defn.body, env)
    env.fill(defn.name, value)
    return Binding(defn.name, value)
