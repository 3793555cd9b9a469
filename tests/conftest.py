"""
Pytest configuration for oQ tests.
"""
import sys
import os

import pytest

# Make `import oq` work from a source checkout (src/ on sys.path)
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)

from oq.config import config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_config():
	"""Tests may shrink depth guards or change the log level; undo it afterwards."""
	saved = (config.log_level, config.default_dialect, config.max_parse_depth, config.max_eval_depth)
	yield
	config.log_level, config.default_dialect, config.max_parse_depth, config.max_eval_depth = saved


@pytest.fixture
def default_recursion_limit():
	"""Run with CPython's stock recursion limit, whatever earlier tests raised it to."""
	saved = sys.getrecursionlimit()
	sys.setrecursionlimit(1000)
	yield 1000
	sys.setrecursionlimit(saved)
