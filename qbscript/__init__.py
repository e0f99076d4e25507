# Core type aliases for Qb Script's data model.
# We use plain Python types (int, float, str, list) plus Symbol, Call and Lambda
# to represent both code (forms) and runtime values. There is no wrapper union type:
# the Python type of an object is its tag.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable, since literal lists are
# expression trees and values at the same time.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (often used interchangeably in this codebase)
SExpression = LispValue

# Evaluator function type: Python evaluator passed to special forms
EvaluatorFn = Callable[..., LispValue]

# Builtins are plain callables taking the calling environment and evaluated operands
BuiltinFn = Callable[..., LispValue]
