"""Registry of special forms for the Lisple evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
procedure application. Every handler is called as
`handler(operands, env, loader, evaluate_fn)`.
"""

from lisple.evaluation.special_forms.names import QUOTE, IF, SET, DEFINE, LAMBDA, BEGIN, LOAD
from lisple.evaluation.special_forms.quote_form import quote_form
from lisple.evaluation.special_forms.if_form import if_form
from lisple.evaluation.special_forms.set_form import set_form
from lisple.evaluation.special_forms.define_form import define_form
from lisple.evaluation.special_forms.lambda_form import lambda_form
from lisple.evaluation.special_forms.begin_form import begin_form
from lisple.evaluation.special_forms.load_form import load_form

SPECIAL_FORMS = {
    QUOTE: quote_form,
    IF: if_form,
    SET: set_form,
    DEFINE: define_form,
    LAMBDA: lambda_form,
    BEGIN: begin_form,
    LOAD: load_form,
}
