# src/oq/__init__.py
"""
oQ: a small scripting language whose keywords can be written in several
human languages, switched mid-file with ``~eng``, ``~trk`` or ``~qzq``.
"""

__version__ = "0.1.0"

from .lexer import Lexer
from .parser import Parser
from .environment import Environment
from .evaluator import Evaluator, evaluate
from .session import Session, Outcome, parse_source, run_source
from .errors import OqError, ParseError, SourceError

__all__ = [
    "__version__",
    "Lexer", "Parser", "Environment", "Evaluator", "evaluate",
    "Session", "Outcome", "parse_source", "run_source",
    "OqError", "ParseError", "SourceError",
]
