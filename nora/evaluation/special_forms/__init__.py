"""Registry of special forms for the Nora evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so
these names cannot be rebound as functions.

Every handler has the signature ``handler(tail, env, evaluate_fn)`` where
`tail` is the Python list of unevaluated operands.
"""

from nora.types.symbol import Symbol
from nora.evaluation.special_forms.quote_form import quote_form
from nora.evaluation.special_forms.if_form import if_form
from nora.evaluation.special_forms.define_form import define_form
from nora.evaluation.special_forms.lambda_form import lambda_form
from nora.evaluation.special_forms.defun_form import defun_form
from nora.evaluation.special_forms.progn_form import progn_form
from nora.evaluation.special_forms.function_form import function_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("defun"): defun_form,
    Symbol("begin"): progn_form,
    Symbol("function"): function_form,
}
