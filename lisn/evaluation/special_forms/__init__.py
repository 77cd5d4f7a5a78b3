"""Registry of special forms for the LISN evaluator.

Maps head symbols to handler functions. Every list that reaches the evaluator
must start with one of these names; there is no ordinary function application.
"""

from lisn.evaluation.special_forms.map_form import map_form
from lisn.evaluation.special_forms.list_form import list_form
from lisn.evaluation.special_forms.ref_form import ref_form, REF_KEY

SPECIAL_FORMS = {
    "map": map_form,
    "list": list_form,
    REF_KEY: ref_form,
}
