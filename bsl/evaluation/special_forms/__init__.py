"""Registry of special forms for the bsl evaluator.

SPECIAL_FORMS maps expression types to handlers that implement
non-standard evaluation rules: short-circuiting and boolean-only questions.
DEFINITION_FORMS and CHECK_FORMS map top-level forms to their handlers;
definitions run in the evaluation pass and checks after it.
"""

from bsl.types.forms import (
    And,
    CheckError,
    CheckExpect,
    CheckWithin,
    Cond,
    DefineConstant,
    DefineFunction,
    DefineStruct,
    If,
    Or,
)
from bsl.evaluation.special_forms.if_form import if_form
from bsl.evaluation.special_forms.cond_form import cond_form
from bsl.evaluation.special_forms.logic_forms import and_form, or_form
from bsl.evaluation.special_forms.define_form import define_constant_form, define_function_form
from bsl.evaluation.special_forms.defstruct_form import defstruct_form
from bsl.evaluation.special_forms.check_forms import check_error_form, check_expect_form, check_within_form

SPECIAL_FORMS = {
    If: if_form,
    Cond: cond_form,
    And: and_form,
    Or: or_form,
}

DEFINITION_FORMS = {
    DefineConstant: define_constant_form,
    DefineFunction: define_function_form,
    DefineStruct: defstruct_form,
}

CHECK_FORMS = {
    CheckExpect: check_expect_form,
    CheckWithin: check_within_form,
    CheckError: check_error_form,
}
