"""Registry of special forms for the Twik evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table by the literal head symbol of a call form,
before any ordinary function application, so a special form can't be shadowed
by a binding in scope.
"""

from twik.types.symbol import Symbol
from twik.evaluation.special_forms.if_form import if_form
from twik.evaluation.special_forms.logic_forms import and_form, or_form
from twik.evaluation.special_forms.var_form import var_form
from twik.evaluation.special_forms.set_form import set_form
from twik.evaluation.special_forms.do_form import do_form
from twik.evaluation.special_forms.func_form import func_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("var"): var_form,
    Symbol("set"): set_form,
    Symbol("do"): do_form,
    Symbol("func"): func_form,
}
