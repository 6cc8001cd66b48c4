from bsl import EvaluatorFn, LispValue
from bsl.evaluation.special_forms.questions import is_boolean, question_error
from bsl.types.environment import Environment
from bsl.types.forms import And, Or
from bsl.types.values import FALSE, TRUE, EvalError


def and_form(expr: And, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and q1 q2 ...) evaluates each question left-to-right and stops at the
    first #false. Every question evaluated must produce a boolean.
    """
    for arg in expr.args:
        val = evaluate_fn(arg, env)
        if isinstance(val, EvalError):
            return val
        if not is_boolean(val):
            return question_error("and", val)
        if not val.value:
            return FALSE
    return TRUE


def or_form(expr: Or, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or q1 q2 ...) evaluates each question left-to-right and stops at the
    first #true.
    """
    for arg in expr.args:
        val = evaluate_fn(arg, env)
        if isinstance(val, EvalError):
            return val
        if not is_boolean(val):
            return question_error("or", val)
        if val.value:
            return TRUE
    return FALSE
