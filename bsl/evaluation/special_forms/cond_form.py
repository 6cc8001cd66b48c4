from bsl import EvaluatorFn, LispValue
from bsl.evaluation.apply import fn_error
from bsl.evaluation.special_forms.questions import is_boolean, question_error
from bsl.types.environment import Environment
from bsl.types.forms import Cond
from bsl.types.values import EvalError


def cond_form(expr: Cond, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Try each question in order and answer with the first true clause.

    An `else` clause answers when every question before it was false;
    without one, running out of clauses is an error.
    """
    for question_expr, answer_expr in expr.clauses:
        question = evaluate_fn(question_expr, env)
        if isinstance(question, EvalError):
            return question
        if not is_boolean(question):
            return question_error("cond", question)
        if question.value:
            return evaluate_fn(answer_expr, env)

    if expr.otherwise is not None:
        return evaluate_fn(expr.otherwise, env)
    return fn_error("cond", "all question results were false")
