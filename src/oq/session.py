# src/oq/session.py
"""
Source-to-value pipeline shared by the REPL and batch mode.

Batch mode parses a whole file once and evaluates it in a fresh environment.
Interactive mode feeds one line at a time into a :class:`Session`, which keeps
its environment and its active dialect between lines.
"""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .environment import Environment
from .errors import ParseError, SourceError
from .evaluator import Evaluator, evaluate
from .lexer import Lexer
from .object import Object
from .oq_ast import Program
from .oq_token import TILDE, IDENT, NEW_LINE, LBRACE
from .parser import Parser

logger = logging.getLogger("oq.session")


def parse_source(source: str, dialect: Optional[str] = None) -> Tuple[Program, List[str], List[str], str]:
    """Parse ``source`` and return ``(program, errors, warnings, dialect)``.

    ``dialect`` is the keyword table the lexer starts with; the returned
    dialect is the one active when parsing finished.
    """
    lexer = Lexer(source, dialect=dialect)
    parser = Parser(lexer)
    program = parser.parse_program()
    return program, list(parser.errors), list(parser.warnings), lexer.dialect


def tokenize(source: str, dialect: Optional[str] = None):
    """Yield tokens up to and including EOF, applying ``~name`` switches on the way.

    Like the parser, only a ``~`` where a statement can start is a switch.
    """
    lexer = Lexer(source, dialect=dialect)
    at_statement_start = True
    after_pragma_tilde = False
    for tok in lexer:
        switched = after_pragma_tilde and tok.type == IDENT
        if switched:
            # the next token is lexed lazily, so it already sees the new table
            lexer.set_dialect(tok.literal)
        yield tok
        after_pragma_tilde = at_statement_start and tok.type == TILDE
        at_statement_start = switched or tok.type in (NEW_LINE, LBRACE)


def read_source(path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"cannot read {path}: {e}") from e


def run_source(source: str, env: Optional[Environment] = None, dialect: Optional[str] = None):
    """Batch mode: parse all of ``source`` then evaluate it.

    Raises :class:`ParseError` when parsing fails; nothing is evaluated in
    that case. Returns the final object, or None when the program produced
    no value.
    """
    program, errors, _, _ = parse_source(source + "\n", dialect=dialect)
    if errors:
        raise ParseError(errors)
    return evaluate(program, env if env is not None else Environment())


@dataclass
class Outcome:
    value: Optional[Object] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Session:
    """One interactive session: a persistent environment and active dialect.

    ``execute`` may be called from several threads; the lock keeps one line
    evaluating against the shared environment at a time.
    """

    def __init__(self, env: Optional[Environment] = None, dialect: Optional[str] = None):
        self.env = env if env is not None else Environment()
        self.dialect = dialect
        self.evaluator = Evaluator()
        self._lock = threading.Lock()

    def execute(self, line: str) -> Outcome:
        with self._lock:
            program, errors, warnings, dialect = parse_source(line + "\n", dialect=self.dialect)
            self.dialect = dialect
            if errors:
                logger.debug("line rejected with %d parser error(s)", len(errors))
                return Outcome(errors=errors, warnings=warnings)
            value = evaluate(program, self.env, self.evaluator)
            return Outcome(value=value, warnings=warnings)
