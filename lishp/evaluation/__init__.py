"""Evaluation engine: evaluator, application and special forms."""

from lishp.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
