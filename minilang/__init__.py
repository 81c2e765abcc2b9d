# minilang package
# This package provides a tree-walking evaluator for the minilang expression language.
from .evaluator import evaluate_program, Evaluator, Outcome
from .errors import EvalError

__all__ = [
    'evaluate_program',
    'Evaluator',
    'Outcome',
    'EvalError',
]
