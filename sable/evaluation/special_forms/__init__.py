"""Registry of special forms for the Sable evaluator.

Maps Symbols to handler functions that implement non-standard evaluation
rules. Every handler has the signature

    handler(tail, env, evaluate_fn) -> LispValue | TailCall

where `tail` is the list of unevaluated operands. Handlers that return a
TailCall leave their continuation to the evaluator loop.
"""

from sable.types.symbol import Symbol
from sable.evaluation.special_forms.define_form import define_form
from sable.evaluation.special_forms.eval_form import eval_form
from sable.evaluation.special_forms.apply_form import apply_form
from sable.evaluation.special_forms.if_form import if_form
from sable.evaluation.special_forms.cond_form import cond_form
from sable.evaluation.special_forms.begin_form import begin_form
from sable.evaluation.special_forms.lambda_form import lambda_form
from sable.evaluation.special_forms.load_form import load_form
from sable.evaluation.special_forms.delay_form import delay_form
from sable.evaluation.special_forms.logic_forms import and_form, or_form
from sable.evaluation.special_forms.quote_forms import quote_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("eval"): eval_form,
    Symbol("apply"): apply_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
    Symbol("begin"): begin_form,
    Symbol("lambda"): lambda_form,
    Symbol("load"): load_form,
    Symbol("delay"): delay_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("quote"): quote_form,
}
