"""Untyped λ-calculus evaluator: repeated beta-reduction until the rendering of a term stops changing.

For reference:
- `lambdaeval.pure`: terms, substitution, reduction and the evaluation loop. Pure: no printing, no names.
- `lambdaeval.lang`: everything around it- embedding syntax, named terms, console report, errors.
"""

from lambdaeval.pure.reducer import Reducer, State, Step, Verbosity
from lambdaeval.pure.term import Abstraction, Application, LambdaTerm, Variable

__all__ = ["Abstraction", "Application", "LambdaTerm", "Reducer", "State", "Step", "Variable", "Verbosity"]
