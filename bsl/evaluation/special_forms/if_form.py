from bsl import EvaluatorFn, LispValue
from bsl.evaluation.special_forms.questions import question_error
from bsl.types.environment import Environment
from bsl.types.forms import If
from bsl.types.values import Atomic, EvalError


def if_form(expr: If, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate the question, then exactly one of the two answers."""
    question = evaluate_fn(expr.predicate, env)
    if isinstance(question, EvalError):
        return question
    match question:
        case Atomic(value=True):
            return evaluate_fn(expr.consequent, env)
        case Atomic(value=False):
            return evaluate_fn(expr.alternative, env)
    return question_error("if", question)
