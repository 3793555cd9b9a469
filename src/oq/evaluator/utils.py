# src/oq/evaluator/utils.py
import logging

from ..config import config
from ..object import Boolean, Null, Error, ReturnValue

logger = logging.getLogger("oq.evaluator")

# Singletons: every true/false/null produced by evaluation is one of these
NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def debug_log(message, data=None):
    if not config.should_log("debug"):
        return
    if data is not None:
        logger.debug("%s: %s", message, data)
    else:
        logger.debug("%s", message)


def new_error(message, *args):
    return Error(message % args if args else message)


def is_error(obj):
    return isinstance(obj, Error)


def is_interrupt(obj):
    """True for values that stop a statement sequence early"""
    return isinstance(obj, (ReturnValue, Error))


def is_truthy(obj):
    if obj is NULL or obj is FALSE:
        return False
    if isinstance(obj, (Null, Boolean)):
        return bool(getattr(obj, "value", False))
    return True


def native_bool_to_boolean(value):
    return TRUE if value else FALSE


def wrap_int64(value):
    """Reduce ``value`` to the signed 64-bit range with two's-complement wrapping"""
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return ((value - INT64_MIN) % 2 ** 64) + INT64_MIN


def truncating_div(left, right):
    """Integer division rounding toward zero"""
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient
