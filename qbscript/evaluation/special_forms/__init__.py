"""Registry of special forms for the Qb Script evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so
these names cannot be shadowed by `let`.
"""

from qbscript.types.symbol import QUOTE, LET, FUN, IF, COND
from qbscript.evaluation.special_forms.quote_forms import quote_form
from qbscript.evaluation.special_forms.let_form import let_form
from qbscript.evaluation.special_forms.fun_form import fun_form
from qbscript.evaluation.special_forms.if_form import if_form
from qbscript.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    QUOTE: quote_form,
    LET: let_form,
    FUN: fun_form,
    IF: if_form,
    COND: cond_form,
}
