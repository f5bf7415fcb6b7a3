from tulip.evaluation.evaluator import evaluate
from tulip.evaluation.apply import apply

__all__ = ["evaluate", "apply"]
