# src/oq/parser/__init__.py
"""
Parser module for the oQ language.
"""

from .parser import Parser, precedences, LOWEST, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL

__all__ = [
    "Parser", "precedences",
    "LOWEST", "EQUALS", "LESSGREATER", "SUM", "PRODUCT", "PREFIX", "CALL",
]
