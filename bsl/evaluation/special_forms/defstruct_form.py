from __future__ import annotations

from bsl import EvaluatorFn, Form
from bsl.evaluation.special_forms.define_form import REDEFINITION
from bsl.types.environment import Environment
from bsl.types.forms import DefineStruct
from bsl.types.nothing import Nothing
from bsl.types.results import Binding, BindingError
from bsl.types.structs import StructType, structure_functions


def defstruct_form(defn: DefineStruct, env: Environment, evaluate_fn: EvaluatorFn) -> Form:
    """
    (define-struct name (field ...))
    Binds make-name, one name-field accessor per field, and name?. All of
    them share one new StructType.
    """
    for name in defn.defined_names():
        if env.lookup(name) is not Nothing:
            return BindingError(REDEFINITION, name, defn)

    struct_type = StructType(defn.name, tuple(defn.fields))
    for name, fn in structure_functions(struct_type).items():
        env.fill(name, fn)
    return Binding(defn.name, None)
