# src/oq/parser/parser.py
import logging

from ..oq_token import *
from ..oq_ast import *
from ..config import config, raise_recursion_limit

logger = logging.getLogger("oq.parser")

INT64_MAX = 2 ** 63 - 1

# Upper bound on Python frames per nesting level, for parsing and for str() of the tree
FRAMES_PER_NESTING = 8

# Precedence constants
LOWEST, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL = 1, 2, 3, 4, 5, 6, 7

precedences = {
    EQ: EQUALS, NOT_EQ: EQUALS,
    LT: LESSGREATER, GT: LESSGREATER, LTE: LESSGREATER, GTE: LESSGREATER,
    PLUS: SUM, MINUS: SUM,
    SLASH: PRODUCT, STAR: PRODUCT,
    LPAREN: CALL,
}

# Tokens that end the current line or block; error recovery stops in front of them
_RECOVERY_STOPS = (NEW_LINE, EOF, RBRACE)


class Parser:
    """Pratt parser over a :class:`~oq.lexer.Lexer`.

    Errors are collected in ``self.errors`` instead of being raised; a caller
    must check that list before handing the program to the evaluator.
    """

    def __init__(self, lexer, max_depth=None):
        self.lexer = lexer
        self.errors = []
        self.cur_token = None
        self.peek_token = None
        self.max_depth = max_depth if max_depth is not None else config.max_parse_depth
        self._depth = 0
        raise_recursion_limit(self.max_depth * FRAMES_PER_NESTING + 500)
        # Set when an operand position swallowed a '}' that closes an enclosing block
        self._dangling_rbrace = False

        self.prefix_parse_fns = {
            IDENT: self.parse_identifier,
            INT: self.parse_integer_literal,
            FLOAT: self.parse_float_literal,
            STRING: self.parse_string_literal,
            BANG: self.parse_prefix_expression,
            MINUS: self.parse_prefix_expression,
            TRUE: self.parse_boolean,
            FALSE: self.parse_boolean,
            LPAREN: self.parse_grouped_expression,
            IF: self.parse_if_expression,
            FUNCTION: self.parse_function_literal,
        }
        self.infix_parse_fns = {
            PLUS: self.parse_infix_expression,
            MINUS: self.parse_infix_expression,
            SLASH: self.parse_infix_expression,
            STAR: self.parse_infix_expression,
            EQ: self.parse_infix_expression,
            NOT_EQ: self.parse_infix_expression,
            LT: self.parse_infix_expression,
            GT: self.parse_infix_expression,
            LTE: self.parse_infix_expression,
            GTE: self.parse_infix_expression,
            LPAREN: self.parse_call_expression,
        }
        self.next_token()
        self.next_token()

    @property
    def warnings(self):
        return self.lexer.warnings

    def _log(self, message, *args):
        if config.should_log("debug"):
            logger.debug(message, *args)

    def parse_program(self):
        program = Program()
        while not self.cur_token_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self._dangling_rbrace = False
            self.next_token()
        self._log("parsed %d statement(s), %d error(s)", len(program.statements), len(self.errors))
        return program

    # === STATEMENTS ===

    def parse_statement(self):
        """Parse one statement starting at ``cur_token``.

        Returns None for blank lines, dialect pragmas and statements that
        failed to parse. A failed statement leaves its errors behind and the
        cursor at the end of its line.
        """
        if self.cur_token_is(NEW_LINE):
            return None

        errors_before = len(self.errors)

        if self.cur_token_is(TILDE):
            if not self.parse_dialect_switch():
                self.recover_to_next_statement()
            return None

        if self.cur_token_is(LET):
            stmt = self.parse_let_statement()
        elif self.cur_token_is(RETURN):
            stmt = self.parse_return_statement()
        else:
            stmt = self.parse_expression_statement()

        if stmt is None or len(self.errors) > errors_before or not self.end_statement():
            self.recover_to_next_statement()
            return None
        return stmt

    def parse_dialect_switch(self):
        """``~name``: activate a keyword table and re-read the lookahead with it."""
        if not self.expect_peek(IDENT):
            return False

        name = self.cur_token.literal
        self.lexer.set_dialect(name)

        # peek_token was produced under the previous table
        peek = self.peek_token
        self.lexer.seek(peek.position, peek.line, peek.column)
        self.peek_token = self.lexer.next_token()
        self._log("dialect switched to %s at line %s", self.lexer.dialect, self.cur_token.line)
        return True

    def end_statement(self):
        if self.peek_token_is(NEW_LINE):
            self.next_token()
            return True
        if self.peek_token_is(EOF) or self.peek_token_is(RBRACE):
            return True
        self.peek_error(NEW_LINE)
        return False

    def recover_to_next_statement(self):
        """Skip the rest of a broken statement, stopping before the line or block ends."""
        if self.cur_token_is(NEW_LINE) or self.cur_token_is(EOF) or self._dangling_rbrace:
            return
        while self.peek_token.type not in _RECOVERY_STOPS:
            self.next_token()

    def parse_let_statement(self):
        stmt = LetStatement(self.cur_token)

        if not self.expect_peek(IDENT):
            return None

        stmt.name = Identifier(self.cur_token, self.cur_token.literal)

        if not self.expect_peek(ASSIGN):
            return None

        self.next_token()
        stmt.value = self.parse_expression(LOWEST)
        if stmt.value is None:
            return None
        return stmt

    def parse_return_statement(self):
        stmt = ReturnStatement(self.cur_token)
        self.next_token()
        stmt.return_value = self.parse_expression(LOWEST)
        if stmt.return_value is None:
            return None
        return stmt

    def parse_expression_statement(self):
        stmt = ExpressionStatement(self.cur_token)
        stmt.expression = self.parse_expression(LOWEST)
        if stmt.expression is None:
            return None
        return stmt

    def parse_block_statement(self):
        block = BlockStatement(self.cur_token)
        self.next_token()

        while not self.cur_token_is(RBRACE) and not self.cur_token_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                block.statements.append(stmt)
            if self._dangling_rbrace:
                # the broken statement already consumed this block's '}'
                self._dangling_rbrace = False
                return block
            self.next_token()

        if self.cur_token_is(EOF):
            self.errors.append(f"expected next token to be {RBRACE}, got {EOF} instead")
        return block

    # === EXPRESSIONS ===

    def parse_expression(self, precedence):
        self._depth += 1
        try:
            if self._depth > self.max_depth:
                self.errors.append(f"maximum nesting depth {self.max_depth} exceeded")
                return None

            prefix = self.prefix_parse_fns.get(self.cur_token.type)
            if prefix is None:
                self.no_prefix_parse_fn_error(self.cur_token.type)
                return None

            left_exp = prefix()
            if left_exp is None:
                return None

            while precedence < self.peek_precedence():
                infix = self.infix_parse_fns.get(self.peek_token.type)
                if infix is None:
                    return left_exp

                self.next_token()
                left_exp = infix(left_exp)
                if left_exp is None:
                    return None

            return left_exp
        finally:
            self._depth -= 1

    def parse_identifier(self):
        return Identifier(self.cur_token, self.cur_token.literal)

    def parse_integer_literal(self):
        literal = self.cur_token.literal
        try:
            value = int(literal)
        except ValueError:
            value = None
        if value is None or value > INT64_MAX:
            self.errors.append(f'could not parse "{literal}" as integer')
            return None
        return IntegerLiteral(self.cur_token, value)

    def parse_float_literal(self):
        literal = self.cur_token.literal
        try:
            return FloatLiteral(self.cur_token, float(literal))
        except ValueError:
            self.errors.append(f'could not parse "{literal}" as float')
            return None

    def parse_string_literal(self):
        return StringLiteral(self.cur_token, self.cur_token.literal)

    def parse_boolean(self):
        return Boolean(self.cur_token, self.cur_token_is(TRUE))

    def parse_prefix_expression(self):
        expression = PrefixExpression(self.cur_token, self.cur_token.literal)
        self.next_token()
        expression.right = self.parse_expression(PREFIX)
        if expression.right is None:
            return None
        return expression

    def parse_infix_expression(self, left):
        expression = InfixExpression(self.cur_token, left, self.cur_token.literal)
        precedence = self.cur_precedence()
        self.next_token()
        expression.right = self.parse_expression(precedence)
        if expression.right is None:
            return None
        return expression

    def parse_grouped_expression(self):
        self.next_token()
        exp = self.parse_expression(LOWEST)
        if exp is None:
            return None
        if not self.expect_peek(RPAREN):
            return None
        return exp

    def parse_if_expression(self):
        expression = IfExpression(self.cur_token)

        if not self.expect_peek(LPAREN):
            return None

        self.next_token()
        expression.condition = self.parse_expression(LOWEST)
        if expression.condition is None:
            return None

        if not self.expect_peek(RPAREN):
            return None

        if not self.expect_peek(LBRACE):
            return None

        expression.consequence = self.parse_block_statement()

        if self.peek_token_is(ELSE):
            self.next_token()
            if not self.expect_peek(LBRACE):
                return None
            expression.alternative = self.parse_block_statement()

        return expression

    def parse_function_literal(self):
        lit = FunctionLiteral(self.cur_token)

        if not self.expect_peek(LPAREN):
            return None

        parameters = self.parse_function_parameters()
        if parameters is None:
            return None
        lit.parameters = parameters

        if not self.expect_peek(LBRACE):
            return None

        lit.body = self.parse_block_statement()
        return lit

    def parse_function_parameters(self):
        identifiers = []

        if self.peek_token_is(RPAREN):
            self.next_token()
            return identifiers

        if not self.expect_peek(IDENT):
            return None
        identifiers.append(Identifier(self.cur_token, self.cur_token.literal))

        while self.peek_token_is(COMMA):
            self.next_token()
            if not self.expect_peek(IDENT):
                return None
            identifiers.append(Identifier(self.cur_token, self.cur_token.literal))

        if not self.expect_peek(RPAREN):
            return None

        return identifiers

    def parse_call_expression(self, function):
        exp = CallExpression(self.cur_token, function)
        arguments = self.parse_expression_list(RPAREN)
        if arguments is None:
            return None
        exp.arguments = arguments
        return exp

    def parse_expression_list(self, end):
        elements = []
        if self.peek_token_is(end):
            self.next_token()
            return elements

        self.next_token()
        element = self.parse_expression(LOWEST)
        if element is None:
            return None
        elements.append(element)

        while self.peek_token_is(COMMA):
            self.next_token()
            self.next_token()
            element = self.parse_expression(LOWEST)
            if element is None:
                return None
            elements.append(element)

        if not self.expect_peek(end):
            return None

        return elements

    # === TOKEN HELPERS ===

    def next_token(self):
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, t):
        return self.cur_token.type == t

    def peek_token_is(self, t):
        return self.peek_token.type == t

    def expect_peek(self, t):
        if self.peek_token_is(t):
            self.next_token()
            return True
        self.peek_error(t)
        return False

    def peek_error(self, t):
        self._log("unexpected %s at %s:%s", self.peek_token.type, self.peek_token.line, self.peek_token.column)
        self.errors.append(f"expected next token to be {t}, got {self.peek_token.type} instead")

    def no_prefix_parse_fn_error(self, t):
        if t == RBRACE:
            self._dangling_rbrace = True
        self.errors.append(f"no prefix parse function for {t} found")

    def peek_precedence(self):
        return precedences.get(self.peek_token.type, LOWEST)

    def cur_precedence(self):
        return precedences.get(self.cur_token.type, LOWEST)
