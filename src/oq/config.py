"""
Runtime configuration for the oQ interpreter.

Values come from the environment once at import time and can be overridden on
the ``config`` object afterwards (the CLI does this for ``--log-level`` and
``--dialect``; tests do it to shrink the depth guards).

    OQ_LOG_LEVEL        debug | info | warning | error   (default: warning)
    OQ_DEBUG            any truthy value forces debug tracing
    OQ_DEFAULT_DIALECT  keyword table a fresh lexer starts with (default: eng)
    OQ_MAX_PARSE_DEPTH  nested expression limit for the parser (default: 150)
    OQ_MAX_EVAL_DEPTH   nested evaluation limit for the evaluator (default: 1000)
"""

import os
import sys
from dataclasses import dataclass

LOG_LEVELS = {
    "debug": 10,
    "info": 20,
    "warning": 30,
    "error": 40,
}

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass
class OqConfig:
    log_level: str = "warning"
    default_dialect: str = "eng"
    max_parse_depth: int = 150
    max_eval_depth: int = 1000

    @classmethod
    def from_env(cls) -> "OqConfig":
        level = os.environ.get("OQ_LOG_LEVEL", "warning").strip().lower()
        if level not in LOG_LEVELS:
            level = "warning"
        if os.environ.get("OQ_DEBUG", "").strip().lower() in _TRUTHY:
            level = "debug"
        return cls(
            log_level=level,
            default_dialect=os.environ.get("OQ_DEFAULT_DIALECT", "eng").strip() or "eng",
            max_parse_depth=_env_int("OQ_MAX_PARSE_DEPTH", 150),
            max_eval_depth=_env_int("OQ_MAX_EVAL_DEPTH", 1000),
        )

    def should_log(self, level: str) -> bool:
        """True when messages at ``level`` pass the configured threshold."""
        return LOG_LEVELS.get(level, LOG_LEVELS["debug"]) >= LOG_LEVELS[self.log_level]

    def set_log_level(self, level: str) -> None:
        level = level.lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {level}")
        self.log_level = level


def raise_recursion_limit(frames: int) -> None:
    """Make sure the interpreter allows at least ``frames`` nested Python calls."""
    if sys.getrecursionlimit() < frames:
        sys.setrecursionlimit(frames)


config = OqConfig.from_env()
