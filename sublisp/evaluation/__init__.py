from sublisp.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
