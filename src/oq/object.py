# src/oq/object.py
#
# Runtime values. Each variant reports its kind through ``type()``; the
# evaluator dispatches on the Python class and uses ``type()`` in messages.

INTEGER_OBJ = "INTEGER"
FLOAT_OBJ = "FLOAT"
BOOLEAN_OBJ = "BOOLEAN"
NULL_OBJ = "NULL"
STRING_OBJ = "STRING"
RETURN_VALUE_OBJ = "RETURN_VALUE"
ERROR_OBJ = "ERROR"
FUNCTION_OBJ = "FUNCTION"
BUILTIN_OBJ = "BUILTIN"


class Object:
    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def __repr__(self):
        return f"<{self.type()} {self.inspect()}>"


class Integer(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return INTEGER_OBJ


class Float(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return FLOAT_OBJ


class Boolean(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return "true" if self.value else "false"
    def type(self): return BOOLEAN_OBJ


class Null(Object):
    def inspect(self): return "null"
    def type(self): return NULL_OBJ


class String(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return STRING_OBJ
    def __str__(self): return self.value


class ReturnValue(Object):
    """Carries a ``return`` value up to the enclosing function call."""
    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return RETURN_VALUE_OBJ


class Error(Object):
    def __init__(self, message): self.message = message
    def inspect(self): return f"ERROR: {self.message}"
    def type(self): return ERROR_OBJ


class Function(Object):
    """A closure: parameters and body plus the environment it was defined in.

    ``env`` is shared, not copied, so bindings added to the defining scope
    after the function was created are visible when it runs.
    """

    def __init__(self, parameters, body, env):
        self.parameters = parameters
        self.body = body
        self.env = env

    def inspect(self):
        params = ", ".join(p.value for p in self.parameters)
        return f"fn({params}) {{\n{self.body}\n}}"

    def type(self):
        return FUNCTION_OBJ


class Builtin(Object):
    def __init__(self, fn, name=""):
        self.fn = fn  # native Python callable taking *args of Objects
        self.name = name

    def inspect(self):
        return "builtin function"

    def type(self):
        return BUILTIN_OBJ
