# src/oq/oq_token.py

ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers + literals
IDENT = "IDENTIFIER"
INT = "INTEGER"
FLOAT = "FLOAT"
STRING = "STRING"

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
STAR = "*"
SLASH = "/"
BANG = "!"
LT = "<"
GT = ">"
LTE = "<="
GTE = ">="
EQ = "=="
NOT_EQ = "!="
AND = "AND"
OR = "OR"

# Delimiters
COMMA = ","
LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"
NEW_LINE = "NEW_LINE"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
ELSIF = "ELSIF"
RETURN = "RETURN"
FOR = "FOR"
WHILE = "WHILE"

# Dialect switch marker
TILDE = "~"

KEYWORD_KINDS = frozenset({
    FUNCTION, LET, TRUE, FALSE, IF, ELSE, ELSIF, RETURN, AND, OR, FOR, WHILE,
})


class Token:
    """A lexical unit.

    ``literal`` is the text exactly as it appeared in the source (``olsun``),
    ``canonical`` the dialect-independent spelling (``let``). For anything
    that is not a keyword the two are equal.
    """

    __slots__ = ("type", "literal", "canonical", "line", "column", "position")

    def __init__(self, type, literal, canonical=None, line=0, column=0, position=0):
        self.type = type
        self.literal = literal
        self.canonical = literal if canonical is None else canonical
        self.line = line
        self.column = column
        self.position = position

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.literal, self.canonical) == (other.type, other.literal, other.canonical)

    def __hash__(self):
        return hash((self.type, self.literal, self.canonical))

    def __repr__(self):
        if self.canonical != self.literal:
            return f"Token({self.type}, {self.literal!r} -> {self.canonical!r})"
        return f"Token({self.type}, {self.literal!r})"
