from lisple.evaluation.evaluator import evaluate
from lisple.evaluation.apply import apply_procedure

__all__ = ["evaluate", "apply_procedure"]
