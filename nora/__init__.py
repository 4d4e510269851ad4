# Core type aliases for Nora's data model.
# Numbers are plain Python floats; Nil, Symbol, Cons and the two Function
# variants are the small classes under nora.types. Together they form a closed
# set of runtime values, and source code is read into exactly the same values.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` so that nora.types can import them without a cycle.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms and values share one representation
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
