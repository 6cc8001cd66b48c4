from bsl import LispValue
from bsl.evaluation.apply import fn_error
from bsl.printer import print_value
from bsl.types.values import Atomic, EvalError


def is_boolean(value: LispValue) -> bool:
    return isinstance(value, Atomic) and isinstance(value.value, bool)


def question_error(keyword: str, value: LispValue) -> EvalError:
    """A question of `keyword` produced something other than a boolean."""
    return fn_error(keyword, f"question result is not true or false: {print_value(value)}")
