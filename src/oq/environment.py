# src/oq/environment.py


class Environment:
    """A scope: local bindings plus a link to the enclosing scope.

    Lookups walk outward through ``outer``; ``set`` always binds locally, so an
    inner ``let`` shadows an outer binding instead of replacing it.
    """

    def __init__(self, outer=None):
        self.store = {}
        self.outer = outer

    def __contains__(self, name):
        if name in self.store:
            return True
        if self.outer is not None:
            return name in self.outer
        return False

    def get(self, name, default=None):
        """Resolve ``name`` here or in an enclosing scope."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return default

    def set(self, name, value):
        """Bind ``name`` in this scope and return the value"""
        self.store[name] = value
        return value

    def enclosed(self):
        """New child scope whose lookups fall back to this one."""
        return Environment(outer=self)
