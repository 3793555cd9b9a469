# src/oq/oq_ast.py
#
# Every node keeps the token it was built from. ``token_literal()`` returns the
# canonical spelling of that token, so a let statement written as ``olsun`` or
# ``болсын`` still reports ``let``. ``str(node)`` rebuilds the canonical,
# fully parenthesized source text.


# Base classes
class Node:
    def __init__(self, token=None):
        self.token = token

    def token_literal(self):
        return self.token.canonical if self.token is not None else ""

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return ""


class Statement(Node): pass
class Expression(Node): pass


def _text(node):
    return "" if node is None else str(node)


class Program(Node):
    def __init__(self, statements=None):
        super().__init__(None)
        self.statements = statements if statements is not None else []

    def token_literal(self):
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self):
        return "".join(str(s) for s in self.statements)

    def __repr__(self):
        return f"Program(statements={len(self.statements)})"


# Statement Nodes
class LetStatement(Statement):
    def __init__(self, token, name=None, value=None):
        super().__init__(token)
        self.name = name
        self.value = value

    def __str__(self):
        return f"{self.token_literal()} {_text(self.name)} = {_text(self.value)}"

    def __repr__(self):
        return f"LetStatement(name={self.name!r}, value={self.value!r})"


class ReturnStatement(Statement):
    def __init__(self, token, return_value=None):
        super().__init__(token)
        self.return_value = return_value

    def __str__(self):
        return f"{self.token_literal()} {_text(self.return_value)}"

    def __repr__(self):
        return f"ReturnStatement(return_value={self.return_value!r})"


class ExpressionStatement(Statement):
    def __init__(self, token, expression=None):
        super().__init__(token)
        self.expression = expression

    def __str__(self):
        return _text(self.expression)

    def __repr__(self):
        return f"ExpressionStatement(expression={self.expression!r})"


class BlockStatement(Statement):
    def __init__(self, token, statements=None):
        super().__init__(token)
        self.statements = statements if statements is not None else []

    def __str__(self):
        return "".join(str(s) for s in self.statements)

    def __repr__(self):
        return f"BlockStatement(statements={len(self.statements)})"


# Expression Nodes
class Identifier(Expression):
    def __init__(self, token, value):
        super().__init__(token)
        self.value = value

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"Identifier('{self.value}')"


class IntegerLiteral(Expression):
    def __init__(self, token, value=None):
        super().__init__(token)
        self.value = value

    def __str__(self):
        return self.token.literal

    def __repr__(self):
        return f"IntegerLiteral({self.value})"


class FloatLiteral(Expression):
    def __init__(self, token, value=None):
        super().__init__(token)
        self.value = value

    def __str__(self):
        return self.token.literal

    def __repr__(self):
        return f"FloatLiteral({self.value})"


class StringLiteral(Expression):
    def __init__(self, token, value):
        super().__init__(token)
        self.value = value

    def __str__(self):
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'

    def __repr__(self):
        return f"StringLiteral({self.value!r})"


class Boolean(Expression):
    def __init__(self, token, value):
        super().__init__(token)
        self.value = value

    def __str__(self):
        return self.token_literal()

    def __repr__(self):
        return f"Boolean({self.value})"


class PrefixExpression(Expression):
    def __init__(self, token, operator, right=None):
        super().__init__(token)
        self.operator = operator
        self.right = right

    def __str__(self):
        return f"({self.operator}{_text(self.right)})"

    def __repr__(self):
        return f"PrefixExpression(operator='{self.operator}', right={self.right!r})"


class InfixExpression(Expression):
    def __init__(self, token, left, operator, right=None):
        super().__init__(token)
        self.left = left
        self.operator = operator
        self.right = right

    def __str__(self):
        return f"({_text(self.left)} {self.operator} {_text(self.right)})"

    def __repr__(self):
        return f"InfixExpression(left={self.left!r}, operator='{self.operator}', right={self.right!r})"


class IfExpression(Expression):
    """``if (<condition>) { ... } else { ... }``; ``alternative`` may be None."""

    def __init__(self, token, condition=None, consequence=None, alternative=None):
        super().__init__(token)
        self.condition = condition
        self.consequence = consequence
        self.alternative = alternative

    def __str__(self):
        out = f"{self.token_literal()}{_text(self.condition)} {_text(self.consequence)}"
        if self.alternative is not None:
            out += f"else {self.alternative}"
        return out

    def __repr__(self):
        return f"IfExpression(condition={self.condition!r}, has_else={self.alternative is not None})"


class FunctionLiteral(Expression):
    def __init__(self, token, parameters=None, body=None):
        super().__init__(token)
        self.parameters = parameters if parameters is not None else []
        self.body = body

    def __str__(self):
        params = ", ".join(str(p) for p in self.parameters)
        return f"{self.token_literal()}({params}) {_text(self.body)}"

    def __repr__(self):
        return f"FunctionLiteral(parameters={[p.value for p in self.parameters]})"


class CallExpression(Expression):
    def __init__(self, token, function, arguments=None):
        super().__init__(token)
        self.function = function
        self.arguments = arguments if arguments is not None else []

    def __str__(self):
        args = ", ".join(_text(a) for a in self.arguments)
        return f"{_text(self.function)}({args})"

    def __repr__(self):
        return f"CallExpression(function={self.function!r}, arguments={len(self.arguments)})"
