# Core type aliases for Sable's data model.
# Syntax is plain Python data (list for compound forms, float, bool, str,
# Symbol); runtime lists are Pair chains terminated by Empty.
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: the evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
