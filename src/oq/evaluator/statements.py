# src/oq/evaluator/statements.py
from ..object import ReturnValue
from .utils import is_error, is_interrupt, debug_log


class StatementEvaluatorMixin:
    """Handles evaluation of statement sequences, bindings and returns."""

    def eval_program(self, statements, env):
        debug_log("eval_program", f"Processing {len(statements)} statements")

        result = None
        for i, stmt in enumerate(statements):
            res = self.eval_node(stmt, env)

            if isinstance(res, ReturnValue):
                debug_log("  ReturnValue encountered", res.value.inspect())
                return res.value
            if is_error(res):
                debug_log(f"  Error in statement {i + 1}", res.message)
                return res
            if res is not None:
                result = res

        return result

    def eval_block_statement(self, block, env):
        result = None
        for stmt in block.statements:
            res = self.eval_node(stmt, env)

            # ReturnValue stays wrapped so it keeps unwinding to the call site
            if is_interrupt(res):
                debug_log("  Block interrupted", res.type())
                return res
            if res is not None:
                result = res

        return result

    def eval_let_statement(self, node, env):
        debug_log("eval_let_statement", f"let {node.name.value}")

        value = self.eval_value(node.value, env)
        if is_error(value):
            return value

        env.set(node.name.value, value)
        return None

    def eval_return_statement(self, node, env):
        val = self.eval_value(node.return_value, env)
        if is_error(val):
            return val
        return ReturnValue(val)
