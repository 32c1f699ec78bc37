"""
Ember Parser

A Pratt parser over the token list produced by `lex`. Statements are
separated by `;` or by newlines: an infix operator, call or subscript that
starts a new line begins a new statement, except for `|>` and `.`, which
continue the expression on the previous line.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from ember import ast
from ember.errors import EmberSyntaxError
from ember.reader.lexer import lex
from ember.reader.tokens import Location, Token, TokenType
from ember.reporter import ErrorKind, Reporter
from ember.types.values import INT64_MAX


# Binding power, lowest first.
LOWEST = 1
PIPE = 2
BOOLEAN = 3
BITWISE = 4
EQUALITY = 5
COMPARISON = 6
RANGE = 7
BITSHIFT = 8
SUM = 9
PRODUCT = 10
POWER = 11
PREFIX = 12
CALL = 13
INDEX = 14

PRECEDENCES: Dict[TokenType, int] = {
    TokenType.PIPE: PIPE,
    TokenType.AND: BOOLEAN,
    TokenType.OR: BOOLEAN,
    TokenType.BITAND: BITWISE,
    TokenType.BITOR: BITWISE,
    TokenType.EQ: EQUALITY,
    TokenType.UNEQ: EQUALITY,
    TokenType.LT: COMPARISON,
    TokenType.LTE: COMPARISON,
    TokenType.GT: COMPARISON,
    TokenType.GTE: COMPARISON,
    TokenType.RANGE: RANGE,
    TokenType.BITSHLEFT: BITSHIFT,
    TokenType.BITSHRIGHT: BITSHIFT,
    TokenType.PLUS: SUM,
    TokenType.MINUS: SUM,
    TokenType.ASTERISK: PRODUCT,
    TokenType.SLASH: PRODUCT,
    TokenType.MODULO: PRODUCT,
    TokenType.POWER: POWER,
    TokenType.LPAREN: CALL,
    TokenType.DOT: CALL,
    TokenType.LBRACK: INDEX,
}

# Infix tokens allowed to continue an expression from the previous line.
LINE_CONTINUATIONS = frozenset({TokenType.PIPE, TokenType.DOT})

PREFIX_OPERATORS = frozenset({TokenType.BANG, TokenType.MINUS, TokenType.BITNOT})


class Parser:
    """Parses one source file into an `ast.Program`."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0
        self.prefix_fns: Dict[TokenType, Callable[[], ast.Expression]] = {
            TokenType.INT: self.parse_integer,
            TokenType.FLOAT: self.parse_float,
            TokenType.STRING: self.parse_string,
            TokenType.ATOM: self.parse_atom,
            TokenType.TRUE: self.parse_boolean,
            TokenType.FALSE: self.parse_boolean,
            TokenType.IDENTIFIER: self.parse_identifier,
            TokenType.PLACEHOLDER: self.parse_placeholder,
            TokenType.LPAREN: self.parse_grouped,
            TokenType.LBRACK: self.parse_array_or_dictionary,
            TokenType.FN: self.parse_function,
            TokenType.IF: self.parse_if,
            TokenType.SWITCH: self.parse_switch,
            TokenType.FOR: self.parse_for,
        }

    # -----------------------------------------------------
    # Token stream helpers
    # -----------------------------------------------------

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def peek(self, offset: int = 1) -> Token:
        idx = min(self.pos + offset, len(self.tokens) - 1)
        return self.tokens[idx]

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def check(self, *types: TokenType) -> bool:
        return self.current.type in types

    def expect(self, token_type: TokenType, what: str) -> Token:
        if self.current.type != token_type:
            raise EmberSyntaxError(
                f"Expected {what}, found {self._describe(self.current)}",
                self.current.location,
            )
        return self.advance()

    @staticmethod
    def _describe(token: Token) -> str:
        if token.type == TokenType.EOF:
            return "end of input"
        return f"'{token.value}'"

    # -----------------------------------------------------
    # Statements
    # -----------------------------------------------------

    def parse_program(self, program: ast.Program) -> ast.Program:
        """Parse statements into `program` until EOF.

        The program is filled in place so a caller still holds the statements
        parsed before a syntax error.
        """
        while not self.check(TokenType.EOF):
            if self.check(TokenType.SEMICOLON):
                self.advance()
                continue
            program.statements.append(self.parse_statement())
        return program

    def parse_statement(self) -> ast.Statement:
        token = self.current
        if token.type == TokenType.LET:
            statement = self.parse_let()
        elif token.type == TokenType.MODULE:
            statement = self.parse_module()
        elif token.type == TokenType.IMPORT:
            statement = self.parse_import()
        elif token.type == TokenType.RETURN:
            statement = self.parse_return()
        elif token.type == TokenType.BREAK:
            self.advance()
            statement = ast.BreakStatement(token.location)
        elif token.type == TokenType.CONTINUE:
            self.advance()
            statement = ast.ContinueStatement(token.location)
        else:
            expression = self.parse_expression(LOWEST)
            statement = ast.ExpressionStatement(token.location, expression)
        self._end_statement()
        return statement

    def _end_statement(self) -> None:
        if self.check(TokenType.SEMICOLON):
            self.advance()
            return
        if self.check(TokenType.EOF, TokenType.RBRACE) or self.current.newline_before:
            return
        raise EmberSyntaxError(
            f"Unexpected {self._describe(self.current)} after statement",
            self.current.location,
        )

    def parse_let(self) -> ast.Let:
        token = self.advance()
        name_token = self.expect(TokenType.IDENTIFIER, "identifier after 'let'")
        self.expect(TokenType.ASSIGN, "'=' in let statement")
        value = self.parse_expression(LOWEST)
        name = ast.Identifier(name_token.location, name_token.value)
        return ast.Let(token.location, name, value)

    def parse_module(self) -> ast.Module:
        token = self.advance()
        name_token = self.expect(TokenType.IDENTIFIER, "module name")
        body = self.parse_block()
        return ast.Module(token.location, ast.Identifier(name_token.location, name_token.value), body)

    def parse_import(self) -> ast.Import:
        token = self.advance()
        file_token = self.expect(TokenType.STRING, "file name string after 'import'")
        return ast.Import(token.location, ast.StringLiteral(file_token.location, file_token.value))

    def parse_return(self) -> ast.ReturnStatement:
        token = self.advance()
        if self.check(TokenType.SEMICOLON, TokenType.RBRACE, TokenType.EOF) or self.current.newline_before:
            return ast.ReturnStatement(token.location)
        return ast.ReturnStatement(token.location, self.parse_expression(LOWEST))

    def parse_block(self) -> ast.BlockStatement:
        token = self.expect(TokenType.LBRACE, "'{'")
        block = ast.BlockStatement(token.location)
        while not self.check(TokenType.RBRACE):
            if self.check(TokenType.EOF):
                raise EmberSyntaxError("Unterminated block, expected '}'", token.location)
            if self.check(TokenType.SEMICOLON):
                self.advance()
                continue
            block.statements.append(self.parse_statement())
        self.advance()
        return block

    # -----------------------------------------------------
    # Expressions
    # -----------------------------------------------------

    def parse_expression(self, precedence: int) -> ast.Expression:
        token = self.current
        if token.type in PREFIX_OPERATORS:
            left = self.parse_prefix()
        else:
            prefix = self.prefix_fns.get(token.type)
            if prefix is None:
                raise EmberSyntaxError(
                    f"Unexpected {self._describe(token)} at start of expression",
                    token.location,
                )
            left = prefix()

        while True:
            token = self.current
            token_precedence = PRECEDENCES.get(token.type)
            if token_precedence is None or token_precedence <= precedence:
                break
            if token.newline_before and token.type not in LINE_CONTINUATIONS:
                break
            left = self.parse_infix(left)
        return left

    def parse_prefix(self) -> ast.PrefixExpression:
        token = self.advance()
        right = self.parse_expression(PREFIX)
        return ast.PrefixExpression(token.location, token.value, right)

    def parse_infix(self, left: ast.Expression) -> ast.Expression:
        token = self.advance()
        if token.type == TokenType.LPAREN:
            arguments = self.parse_expression_list(TokenType.RPAREN, "')'")
            return ast.FunctionCall(token.location, left, arguments)
        if token.type == TokenType.LBRACK:
            index = self.parse_expression(LOWEST)
            self.expect(TokenType.RBRACK, "']'")
            return ast.Subscript(token.location, left, index)
        if token.type == TokenType.DOT:
            if not isinstance(left, ast.Identifier):
                raise EmberSyntaxError("Module access requires a module name before '.'", token.location)
            member = self.expect(TokenType.IDENTIFIER, "member name after '.'")
            return ast.ModuleAccess(token.location, left, ast.Identifier(member.location, member.value))
        if token.type == TokenType.PIPE:
            right = self.parse_expression(PIPE)
            return ast.Pipe(token.location, left, right)

        precedence = PRECEDENCES[token.type]
        if token.type == TokenType.POWER:
            # right associative: 2 ** 3 ** 2 == 2 ** 9
            precedence -= 1
        right = self.parse_expression(precedence)
        return ast.InfixExpression(token.location, left, token.value, right)

    def parse_expression_list(self, end: TokenType, what: str) -> List[ast.Expression]:
        items: List[ast.Expression] = []
        if self.check(end):
            self.advance()
            return items
        items.append(self.parse_expression(LOWEST))
        while self.check(TokenType.COMMA):
            self.advance()
            items.append(self.parse_expression(LOWEST))
        self.expect(end, what)
        return items

    def parse_integer(self) -> ast.Expression:
        token = self.advance()
        if token.value > INT64_MAX:
            raise EmberSyntaxError(f"Integer literal '{token.value}' is out of range", token.location)
        return ast.IntegerLiteral(token.location, token.value)

    def parse_float(self) -> ast.Expression:
        token = self.advance()
        return ast.FloatLiteral(token.location, token.value)

    def parse_string(self) -> ast.Expression:
        token = self.advance()
        return ast.StringLiteral(token.location, token.value)

    def parse_atom(self) -> ast.Expression:
        token = self.advance()
        return ast.AtomLiteral(token.location, token.value)

    def parse_boolean(self) -> ast.Expression:
        token = self.advance()
        return ast.BooleanLiteral(token.location, token.type == TokenType.TRUE)

    def parse_identifier(self) -> ast.Expression:
        token = self.advance()
        return ast.Identifier(token.location, token.value)

    def parse_placeholder(self) -> ast.Expression:
        token = self.advance()
        return ast.PlaceholderLiteral(token.location)

    def parse_grouped(self) -> ast.Expression:
        self.advance()
        expression = self.parse_expression(LOWEST)
        self.expect(TokenType.RPAREN, "')'")
        return expression

    def parse_array_or_dictionary(self) -> ast.Expression:
        token = self.advance()
        # [:] is the empty dictionary
        if self.check(TokenType.COLON) and self.peek().type == TokenType.RBRACK:
            self.advance()
            self.advance()
            return ast.DictionaryLiteral(token.location)
        if self.check(TokenType.RBRACK):
            self.advance()
            return ast.ArrayLiteral(token.location)

        first = self.parse_expression(LOWEST)
        if not self.check(TokenType.COLON):
            elements = [first]
            while self.check(TokenType.COMMA):
                self.advance()
                elements.append(self.parse_expression(LOWEST))
            self.expect(TokenType.RBRACK, "']' to close array")
            return ast.ArrayLiteral(token.location, elements)

        pairs = []
        key = first
        while True:
            self.expect(TokenType.COLON, "':' between dictionary key and value")
            pairs.append((key, self.parse_expression(LOWEST)))
            if not self.check(TokenType.COMMA):
                break
            self.advance()
            key = self.parse_expression(LOWEST)
        self.expect(TokenType.RBRACK, "']' to close dictionary")
        return ast.DictionaryLiteral(token.location, pairs)

    def parse_function(self) -> ast.Expression:
        token = self.advance()
        self.expect(TokenType.LPAREN, "'(' after 'fn'")
        parameters: List[ast.Identifier] = []
        if not self.check(TokenType.RPAREN):
            while True:
                name = self.expect(TokenType.IDENTIFIER, "parameter name")
                parameters.append(ast.Identifier(name.location, name.value))
                if not self.check(TokenType.COMMA):
                    break
                self.advance()
        self.expect(TokenType.RPAREN, "')' after parameters")
        body = self.parse_block()
        return ast.FunctionLiteral(token.location, parameters, body)

    def parse_if(self) -> ast.Expression:
        token = self.advance()
        condition = self.parse_expression(LOWEST)
        then = self.parse_block()
        else_: Optional[ast.BlockStatement] = None
        if self.check(TokenType.ELSE):
            else_token = self.advance()
            if self.check(TokenType.IF):
                # else if ... is an else block holding a single if expression
                nested = self.parse_if()
                else_ = ast.BlockStatement(
                    else_token.location,
                    [ast.ExpressionStatement(nested.location, nested)],
                )
            else:
                else_ = self.parse_block()
        return ast.If(token.location, condition, then, else_)

    def parse_switch(self) -> ast.Expression:
        token = self.advance()
        control: Optional[ast.Expression] = None
        if not self.check(TokenType.LBRACE):
            control = self.parse_expression(LOWEST)
        self.expect(TokenType.LBRACE, "'{' to open switch")

        switch = ast.Switch(token.location, control)
        while not self.check(TokenType.RBRACE):
            if self.check(TokenType.CASE):
                case_token = self.advance()
                values = [self.parse_expression(LOWEST)]
                while self.check(TokenType.COMMA):
                    self.advance()
                    values.append(self.parse_expression(LOWEST))
                body = self.parse_block()
                switch.cases.append(ast.SwitchCase(case_token.location, values, body))
            elif self.check(TokenType.DEFAULT):
                default_token = self.advance()
                if switch.default is not None:
                    raise EmberSyntaxError("Switch has more than one default branch", default_token.location)
                switch.default = self.parse_block()
            else:
                raise EmberSyntaxError(
                    f"Expected 'case' or 'default' in switch, found {self._describe(self.current)}",
                    self.current.location,
                )
        self.advance()
        return switch

    def parse_for(self) -> ast.Expression:
        token = self.advance()
        arguments: List[ast.Identifier] = []
        while True:
            name = self.expect(TokenType.IDENTIFIER, "loop variable")
            arguments.append(ast.Identifier(name.location, name.value))
            if not self.check(TokenType.COMMA):
                break
            self.advance()
        self.expect(TokenType.IN, "'in' after loop variables")
        enumerable = self.parse_expression(LOWEST)
        body = self.parse_block()
        return ast.For(token.location, arguments, enumerable, body)


def parse_program(source: str, reporter: Reporter, filename: str = "<input>") -> ast.Program:
    """Lex and parse `source`, reporting syntax errors to `reporter`.

    On an error the statements parsed so far are returned; callers compare
    `reporter.error_count` before and after to decide whether to run them.
    """
    program = ast.Program(Location(filename, 1, 1))
    try:
        tokens = lex(source, filename)
        Parser(tokens).parse_program(program)
    except EmberSyntaxError as err:
        reporter.report(ErrorKind.PARSE, err.location, err.message)
    return program
