"""Match helpers for Stonecheck."""

from .match import EvaluationResult, evaluate_choosers

__all__ = ["EvaluationResult", "evaluate_choosers"]
