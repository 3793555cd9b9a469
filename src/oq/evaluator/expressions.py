# src/oq/evaluator/expressions.py
from ..object import Integer, Float, String, Boolean as BooleanObj, Function
from .utils import (
    is_error, debug_log, new_error, is_truthy, native_bool_to_boolean,
    wrap_int64, truncating_div, NULL, TRUE, FALSE,
)

_COMPARISONS = {
    "<": lambda a, b: a < b,
    ">": lambda a, b: a > b,
    "<=": lambda a, b: a <= b,
    ">=": lambda a, b: a >= b,
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
}


class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: Literals, Math, Logic, Identifiers."""

    def eval_identifier(self, node, env):
        if node.value in env:
            return env.get(node.value)

        builtin = self.builtins.get(node.value)
        if builtin is not None:
            debug_log("  Found builtin", node.value)
            return builtin

        return new_error("identifier not found: %s", node.value)

    def eval_function_literal(self, node, env):
        return Function(node.parameters, node.body, env)

    def eval_prefix_expression(self, node, env):
        right = self.eval_value(node.right, env)
        if is_error(right):
            return right

        operator = node.operator
        if operator == "!":
            return FALSE if is_truthy(right) else TRUE
        if operator == "-":
            if isinstance(right, Integer):
                return Integer(wrap_int64(-right.value))
            if isinstance(right, Float):
                return Float(-right.value)
        return new_error("unknown operator: %s%s", operator, right.type())

    def eval_infix_expression(self, node, env):
        left = self.eval_value(node.left, env)
        if is_error(left):
            return left

        right = self.eval_value(node.right, env)
        if is_error(right):
            return right

        return self.eval_infix(node.operator, left, right)

    def eval_infix(self, operator, left, right):
        debug_log("eval_infix", f"{left.type()} {operator} {right.type()}")

        if isinstance(left, Integer) and isinstance(right, Integer):
            return self.eval_integer_infix(operator, left, right)
        if isinstance(left, (Integer, Float)) and isinstance(right, (Integer, Float)):
            # int and float mixed or both float: evaluate as floats
            return self.eval_float_infix(operator, float(left.value), float(right.value), left, right)
        if isinstance(left, BooleanObj) and isinstance(right, BooleanObj):
            return self.eval_boolean_infix(operator, left, right)
        if isinstance(left, String) and isinstance(right, String):
            return self.eval_string_infix(operator, left, right)

        if left.type() == right.type():
            return new_error("unknown operator: %s %s %s", left.type(), operator, right.type())
        return new_error("type mismatch: %s %s %s", left.type(), operator, right.type())

    def eval_integer_infix(self, operator, left, right):
        left_val = left.value
        right_val = right.value

        if operator == "+":
            return Integer(wrap_int64(left_val + right_val))
        elif operator == "-":
            return Integer(wrap_int64(left_val - right_val))
        elif operator == "*":
            return Integer(wrap_int64(left_val * right_val))
        elif operator == "/":
            if right_val == 0:
                return new_error("division by zero")
            return Integer(wrap_int64(truncating_div(left_val, right_val)))
        elif operator in _COMPARISONS:
            return native_bool_to_boolean(_COMPARISONS[operator](left_val, right_val))

        return new_error("unknown operator: %s %s %s", left.type(), operator, right.type())

    def eval_float_infix(self, operator, left_val, right_val, left, right):
        if operator == "+":
            return Float(left_val + right_val)
        elif operator == "-":
            return Float(left_val - right_val)
        elif operator == "*":
            return Float(left_val * right_val)
        elif operator == "/":
            if right_val == 0:
                return new_error("division by zero")
            return Float(left_val / right_val)
        elif operator in _COMPARISONS:
            return native_bool_to_boolean(_COMPARISONS[operator](left_val, right_val))

        return new_error("unknown operator: %s %s %s", left.type(), operator, right.type())

    def eval_boolean_infix(self, operator, left, right):
        if operator == "==":
            return native_bool_to_boolean(left.value == right.value)
        elif operator == "!=":
            return native_bool_to_boolean(left.value != right.value)
        return new_error("unknown operator: %s %s %s", left.type(), operator, right.type())

    def eval_string_infix(self, operator, left, right):
        if operator == "+":
            return String(left.value + right.value)
        elif operator == "==":
            return native_bool_to_boolean(left.value == right.value)
        elif operator == "!=":
            return native_bool_to_boolean(left.value != right.value)
        return new_error("unknown operator: %s %s %s", left.type(), operator, right.type())

    def eval_if_expression(self, node, env):
        condition = self.eval_value(node.condition, env)
        if is_error(condition):
            return condition

        if is_truthy(condition):
            debug_log("  Condition true, evaluating consequence")
            return self.eval_node(node.consequence, env)
        elif node.alternative is not None:
            debug_log("  Condition false, evaluating alternative")
            return self.eval_node(node.alternative, env)

        return NULL

    def eval_expressions(self, exps, env):
        """Evaluate left to right; the first Error is returned instead of a list."""
        results = []
        for e in exps:
            val = self.eval_value(e, env)
            if is_error(val):
                return val
            results.append(val)
        return results
