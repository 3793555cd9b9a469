# src/oq/evaluator/__init__.py
from .core import Evaluator, evaluate
from .utils import NULL, TRUE, FALSE, is_error, is_truthy

__all__ = ['Evaluator', 'evaluate', 'NULL', 'TRUE', 'FALSE', 'is_error', 'is_truthy']
