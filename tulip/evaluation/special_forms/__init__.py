"""Registry of special forms for the Tulip evaluator.

Special forms are ordinary builtins that control the evaluation of their own
arguments. They are installed into the root environment alongside the rest
of the standard library.
"""

from tulip.evaluation.special_forms.if_form import if_form, is_truthy
from tulip.evaluation.special_forms.let_form import let_form
from tulip.evaluation.special_forms.lambda_form import lambda_form
from tulip.evaluation.special_forms.define_form import define_form

SPECIAL_FORMS = {
    "if": if_form,
    "let": let_form,
    "lambda": lambda_form,
    "define": define_form,
}

__all__ = ["SPECIAL_FORMS", "if_form", "let_form", "lambda_form", "define_form", "is_truthy"]
