# src/oq/evaluator/core.py
from .. import oq_ast
from ..config import config, raise_recursion_limit
from ..environment import Environment
from ..object import Integer, Float, String
from .utils import debug_log, new_error, native_bool_to_boolean, NULL
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin

# Upper bound on Python frames used per level of eval_node nesting
FRAMES_PER_LEVEL = 4


class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):
    """Tree-walking evaluator.

    ``eval_node`` returns a runtime object, or None for nodes that produce no
    value (``let``, empty blocks). Errors and returns travel as ordinary
    values; nothing here raises for a language-level problem.
    """

    def __init__(self, max_depth=None):
        # Initialize mixins (FunctionEvaluatorMixin sets up builtins)
        FunctionEvaluatorMixin.__init__(self)
        self.max_depth = max_depth if max_depth is not None else config.max_eval_depth
        self.depth = 0

    def eval_value(self, node, env):
        """Evaluate where a value is required; no value reads as null."""
        result = self.eval_node(node, env)
        return NULL if result is None else result

    def eval_node(self, node, env):
        if node is None:
            return None

        self.depth += 1
        try:
            if self.depth > self.max_depth:
                return new_error("maximum recursion depth %d exceeded", self.max_depth)

            node_type = type(node)

            # === STATEMENTS ===
            if node_type == oq_ast.Program:
                return self.eval_program(node.statements, env)

            elif node_type == oq_ast.ExpressionStatement:
                return self.eval_node(node.expression, env)

            elif node_type == oq_ast.BlockStatement:
                return self.eval_block_statement(node, env)

            elif node_type == oq_ast.ReturnStatement:
                return self.eval_return_statement(node, env)

            elif node_type == oq_ast.LetStatement:
                return self.eval_let_statement(node, env)

            # === EXPRESSIONS ===
            elif node_type == oq_ast.Identifier:
                return self.eval_identifier(node, env)

            elif node_type == oq_ast.IntegerLiteral:
                return Integer(node.value)

            elif node_type == oq_ast.FloatLiteral:
                return Float(node.value)

            elif node_type == oq_ast.StringLiteral:
                return String(node.value)

            elif node_type == oq_ast.Boolean:
                return native_bool_to_boolean(node.value)

            elif node_type == oq_ast.PrefixExpression:
                return self.eval_prefix_expression(node, env)

            elif node_type == oq_ast.InfixExpression:
                return self.eval_infix_expression(node, env)

            elif node_type == oq_ast.IfExpression:
                return self.eval_if_expression(node, env)

            elif node_type == oq_ast.FunctionLiteral:
                return self.eval_function_literal(node, env)

            elif node_type == oq_ast.CallExpression:
                return self.eval_call_expression(node, env)

            debug_log("  Unknown node type", node_type.__name__)
            return None
        finally:
            self.depth -= 1


def ensure_recursion_headroom(max_depth):
    """Raise the interpreter's recursion limit so ``max_depth`` trips first."""
    raise_recursion_limit(max_depth * FRAMES_PER_LEVEL + 500)


# Global Entry Point
def evaluate(program, env=None, evaluator=None):
    """Evaluate ``program`` in ``env`` (a fresh Environment when omitted)."""
    if env is None:
        env = Environment()
    evaluator = evaluator or Evaluator()
    ensure_recursion_headroom(evaluator.max_depth)
    try:
        return evaluator.eval_node(program, env)
    except RecursionError:
        evaluator.depth = 0
        return new_error("maximum recursion depth %d exceeded", evaluator.max_depth)
