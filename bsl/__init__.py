# Core type aliases for the bsl data model.
# Each pipeline stage produces a tagged union whose variants are frozen
# dataclasses, and every union carries its own error variant so failures flow
# downstream as ordinary values.
#
# Naming guidance:
# - SExpression: reader output (atoms, lists, read errors).
# - Form:        parser output (definitions, expressions, checks, parse errors).
# - LispValue:   evaluator output (runtime values and evaluation errors).
# The aliases resolve to `Any` at runtime; the concrete variants live in
# bsl.types.*.

from typing import Any, Callable

SExpression = Any
Form = Any
LispValue = Any

# Stage callbacks handed to keyword rules and special forms
EvaluatorFn = Callable[..., LispValue]
ParserFn = Callable[[SExpression], Form]

__version__ = "0.3.0"


# Public entry points, imported on first use: every stage module imports the
# aliases above from this package.
_EXPORTS = {
    "evaluate_and_print": "bsl.interpreter",
    "Interpreter": "bsl.interpreter",
    "tokenize": "bsl.reader.tokenizer",
    "read": "bsl.reader.reader",
    "parse": "bsl.parser.parser",
    "evaluate": "bsl.evaluation.evaluator",
    "print_results": "bsl.printer",
}

__all__ = ["SExpression", "Form", "LispValue", "EvaluatorFn", "ParserFn", *_EXPORTS]


def __getattr__(name: str):
    if name in _EXPORTS:
        from importlib import import_module
        return getattr(import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
