"""Registry of special forms for the lishp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so a
special-form keyword keeps its meaning even if the name is bound in the
environment.
"""

from lishp.types.symbol import Symbol
from lishp.evaluation.special_forms.quote_form import quote_form
from lishp.evaluation.special_forms.if_form import if_form
from lishp.evaluation.special_forms.define_form import define_form
from lishp.evaluation.special_forms.lambda_form import lambda_form
from lishp.evaluation.special_forms.begin_form import begin_form
from lishp.evaluation.special_forms.let_form import let_form
from lishp.evaluation.special_forms.logic_forms import and_form, or_form
from lishp.evaluation.special_forms.apply_form import apply_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
    Symbol("let"): let_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("apply"): apply_form,
}
