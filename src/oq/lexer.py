# src/oq/lexer.py
import logging
import unicodedata

from .oq_token import *
from .config import config
from .dialects import DEFAULT_DIALECT, DIALECTS, get_dialect, lookup_ident

logger = logging.getLogger("oq.lexer")

_SINGLE_CHAR_TOKENS = {
    "~": TILDE,
    "+": PLUS,
    "-": MINUS,
    "*": STAR,
    "/": SLASH,
    ",": COMMA,
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
    "\n": NEW_LINE,
}

# Operators that may be followed by '=' to form a two-character operator.
_TWO_CHAR_TOKENS = {
    "=": (ASSIGN, EQ),
    "!": (BANG, NOT_EQ),
    "<": (LT, LTE),
    ">": (GT, GTE),
}

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}


class Lexer:
    """Turns source text into tokens, one ``next_token()`` call at a time.

    The lexer owns the active keyword table. It never decides what a ``~``
    means; the parser sees the ``TILDE`` token and calls :meth:`set_dialect`.
    """

    def __init__(self, source_code, dialect=None):
        self.input = source_code
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.warnings = []
        self.dialect = DEFAULT_DIALECT
        self.keywords = DIALECTS[DEFAULT_DIALECT]
        self.set_dialect(dialect or config.default_dialect)
        self.read_char()

    def __iter__(self):
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == EOF:
                return

    # ---- Dialects -------------------------------------------------------------

    def set_dialect(self, name):
        """Activate the keyword table registered as ``name``.

        Unknown names fall back to the default table and leave a warning in
        ``self.warnings``; they never stop tokenization.
        """
        table = get_dialect(name)
        if table is None:
            message = f"Unknown dialect '{name}'. Keeping default({DEFAULT_DIALECT}) keyword map."
            logger.warning(message)
            self.warnings.append(message)
            name, table = DEFAULT_DIALECT, DIALECTS[DEFAULT_DIALECT]
        self.dialect = name
        self.keywords = table
        logger.debug("active dialect: %s", name)

    # ---- Cursor ---------------------------------------------------------------

    def read_char(self):
        if self.ch == "\n":
            self.line += 1
            self.column = 0

        if self.read_position >= len(self.input):
            self.ch = ""
            self.position = len(self.input)
            return

        self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def seek(self, position, line=1, column=1):
        """Move the cursor back to ``position`` so the text there is lexed again."""
        self.line = line
        if position >= len(self.input):
            self.ch = ""
            self.position = self.read_position = len(self.input)
            self.column = column
            return
        self.ch = ""
        self.read_position = position
        self.column = column - 1
        self.read_char()

    # ---- Tokens ---------------------------------------------------------------

    def next_token(self):
        self.skip_whitespace()

        line, column, start = self.line, self.column, self.position

        def make(token_type, literal, canonical=None):
            return Token(token_type, literal, canonical, line=line, column=column, position=start)

        if self.ch == "":
            return make(EOF, "")

        if self.ch in _TWO_CHAR_TOKENS:
            single, double = _TWO_CHAR_TOKENS[self.ch]
            if self.peek_char() == "=":
                ch = self.ch
                self.read_char()
                tok = make(double, ch + self.ch)
            else:
                tok = make(single, self.ch)
        elif self.ch in _SINGLE_CHAR_TOKENS:
            tok = make(_SINGLE_CHAR_TOKENS[self.ch], self.ch)
        elif self.ch == '"':
            text, closed = self.read_string()
            if not closed:
                logger.debug("unterminated string literal at %s:%s", line, column)
                return make(ILLEGAL, '"' + text)
            tok = make(STRING, text)
        elif self.is_letter(self.ch):
            literal = self.read_identifier()
            entry = lookup_ident(literal, self.keywords)
            # read_identifier already moved past the identifier
            return make(entry.kind, literal, entry.canonical)
        elif self.is_digit(self.ch):
            literal = self.read_number()
            return make(FLOAT if "." in literal else INT, literal)
        else:
            tok = make(ILLEGAL, self.ch)

        self.read_char()
        return tok

    def read_identifier(self):
        start_position = self.position
        # '_' may join letters but never starts an identifier
        while self.is_letter(self.ch) or self.is_mark(self.ch) or self.ch == "_":
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position

        while self.is_digit(self.ch):
            self.read_char()

        # A '.' belongs to the number only when a digit follows it
        if self.ch == "." and self.is_digit(self.peek_char()):
            self.read_char()
            while self.is_digit(self.ch):
                self.read_char()

        return self.input[start_position:self.position]

    def read_string(self):
        """Read a double-quoted literal; returns ``(text, closed)``.

        A raw newline or end of input ends an unterminated literal without
        consuming the newline, so statement boundaries survive the error.
        """
        result = []
        while True:
            self.read_char()
            if self.ch == "" or self.ch == "\n":
                return "".join(result), False
            if self.ch == "\\":
                nxt = self.peek_char()
                if nxt in _ESCAPES:
                    self.read_char()
                    result.append(_ESCAPES[self.ch])
                    continue
                result.append(self.ch)
            elif self.ch == '"':
                return "".join(result), True
            else:
                result.append(self.ch)

    def skip_whitespace(self):
        # Newlines are tokens, not whitespace
        while self.ch in (" ", "\t", "\r"):
            self.read_char()

    @staticmethod
    def is_letter(char):
        return char != "" and char.isalpha()

    @staticmethod
    def is_mark(char):
        return char != "" and unicodedata.category(char).startswith("M")

    @staticmethod
    def is_digit(char):
        return char != "" and char.isdecimal()
