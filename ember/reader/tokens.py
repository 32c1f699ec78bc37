"""
Token types and source locations for the Ember lexer.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


@dataclass(frozen=True)
class Location:
    """A position in a source file (1-based line and column)."""
    file: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class TokenType(Enum):
    """All token types recognized by the lexer."""

    # --- Literals ---
    INT = auto()            # 42
    FLOAT = auto()          # 3.14, 2.0e3
    STRING = auto()         # "hello"
    ATOM = auto()           # :ok

    # --- Identifiers ---
    IDENTIFIER = auto()
    PLACEHOLDER = auto()    # _

    # --- Keywords ---
    LET = auto()
    FN = auto()
    IF = auto()
    ELSE = auto()
    SWITCH = auto()
    CASE = auto()
    DEFAULT = auto()
    FOR = auto()
    IN = auto()
    RETURN = auto()
    BREAK = auto()
    CONTINUE = auto()
    MODULE = auto()
    IMPORT = auto()
    TRUE = auto()
    FALSE = auto()

    # --- Operators ---
    PLUS = auto()           # +
    MINUS = auto()          # -
    ASTERISK = auto()       # *
    SLASH = auto()          # /
    MODULO = auto()         # %
    POWER = auto()          # **
    EQ = auto()             # ==
    UNEQ = auto()           # !=
    LT = auto()             # <
    LTE = auto()            # <=
    GT = auto()             # >
    GTE = auto()            # >=
    AND = auto()            # &&
    OR = auto()             # ||
    BANG = auto()           # !
    BITAND = auto()         # &
    BITOR = auto()          # |
    BITNOT = auto()         # ~
    BITSHLEFT = auto()      # <<
    BITSHRIGHT = auto()     # >>
    RANGE = auto()          # ..
    PIPE = auto()           # |>
    ASSIGN = auto()         # =

    # --- Delimiters ---
    DOT = auto()
    COMMA = auto()
    COLON = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACK = auto()
    RBRACK = auto()
    LBRACE = auto()
    RBRACE = auto()

    EOF = auto()


KEYWORDS = {
    "let": TokenType.LET,
    "fn": TokenType.FN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "switch": TokenType.SWITCH,
    "case": TokenType.CASE,
    "default": TokenType.DEFAULT,
    "for": TokenType.FOR,
    "in": TokenType.IN,
    "return": TokenType.RETURN,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "module": TokenType.MODULE,
    "import": TokenType.IMPORT,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "_": TokenType.PLACEHOLDER,
}

# Longest operators first so the lexer matches greedily.
OPERATORS = {
    "**": TokenType.POWER,
    "==": TokenType.EQ,
    "!=": TokenType.UNEQ,
    "<=": TokenType.LTE,
    ">=": TokenType.GTE,
    "&&": TokenType.AND,
    "||": TokenType.OR,
    "<<": TokenType.BITSHLEFT,
    ">>": TokenType.BITSHRIGHT,
    "..": TokenType.RANGE,
    "|>": TokenType.PIPE,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "%": TokenType.MODULO,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "!": TokenType.BANG,
    "&": TokenType.BITAND,
    "|": TokenType.BITOR,
    "~": TokenType.BITNOT,
    "=": TokenType.ASSIGN,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACK,
    "]": TokenType.RBRACK,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# Tokens after which an operand has just ended; a ':' that follows one of
# these is a dictionary colon, never the start of an atom.
OPERAND_END = frozenset({
    TokenType.INT,
    TokenType.FLOAT,
    TokenType.STRING,
    TokenType.ATOM,
    TokenType.IDENTIFIER,
    TokenType.PLACEHOLDER,
    TokenType.TRUE,
    TokenType.FALSE,
    TokenType.RPAREN,
    TokenType.RBRACK,
    TokenType.RBRACE,
})


@dataclass(frozen=True)
class Token:
    """A lexical token."""
    type: TokenType
    value: Any
    location: Location
    newline_before: bool = False  # first token on its line

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.location})"
