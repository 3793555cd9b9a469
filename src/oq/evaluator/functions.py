# src/oq/evaluator/functions.py
from ..object import Integer, String, Builtin, Function, ReturnValue
from .utils import is_error, debug_log, new_error, NULL


class FunctionEvaluatorMixin:
    """Handles function application and defines the builtins."""

    def __init__(self):
        self.builtins = {}
        self._register_core_builtins()

    def eval_call_expression(self, node, env):
        fn = self.eval_value(node.function, env)
        if is_error(fn):
            return fn

        args = self.eval_expressions(node.arguments, env)
        if is_error(args):
            return args

        debug_log("  Arguments evaluated", f"count: {len(args)}")
        return self.apply_function(fn, args)

    def apply_function(self, fn, args):
        if isinstance(fn, Function):
            if len(args) != len(fn.parameters):
                return new_error("wrong number of arguments: want=%d, got=%d", len(fn.parameters), len(args))

            call_env = fn.env.enclosed()
            for param, arg in zip(fn.parameters, args):
                call_env.set(param.value, arg)

            evaluated = self.eval_node(fn.body, call_env)
            if isinstance(evaluated, ReturnValue):
                return evaluated.value
            if evaluated is None:
                return NULL
            return evaluated

        if isinstance(fn, Builtin):
            debug_log("  Calling builtin", fn.name)
            result = fn.fn(*args)
            return NULL if result is None else result

        return new_error("not a function: %s", fn.type())

    def _register_core_builtins(self):
        def _length_builtin(name, arity_message, unsupported_message):
            def _len(*a):
                if len(a) != 1:
                    return new_error(arity_message, len(a))
                if isinstance(a[0], String):
                    return Integer(len(a[0].value))
                return new_error(unsupported_message, a[0].type())
            return Builtin(_len, name)

        self.builtins["len"] = _length_builtin(
            "len",
            "wrong number of arguments. got=%d, want=1",
            "argument to `len` not supported, got %s",
        )
        self.builtins["uzunluk"] = _length_builtin(
            "uzunluk",
            "yanlış sayıda argüman. got=%d, want=1",
            "`uzunluk` argümanı desteklenmiyor, %s alındı",
        )
        self.builtins["ұзындығы"] = _length_builtin(
            "ұзындығы",
            "аргументтердің қате саны. алды=%d, келеді=1",
            "`ұзындығы` аргументіне қолдау көрсетілмейді, %s алынды",
        )
