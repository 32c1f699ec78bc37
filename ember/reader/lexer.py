"""
Ember Lexer

- Eager, regex-driven tokenizer producing a list of Token objects.
- Newlines are not tokens; instead each token records whether it is the
  first one on its line, which is how the parser ends statements.
- `:name` is an atom only where an operand may start, so `["k": v]`
  and `["k":v]` both lex as a dictionary colon, while `:name` at the start
  of a line is always an atom.
"""

from __future__ import annotations

import re
from typing import List

from ember.errors import EmberSyntaxError
from ember.reader.tokens import (
    KEYWORDS, OPERAND_END, OPERATORS, Location, Token, TokenType,
)


TOKEN_RE = re.compile(
    r"(?P<newline>\n)"  # line break
    r"|(?P<space>[ \t\r]+)"  # other whitespace
    r"|(?P<comment>//[^\n]*)"  # single-line comment
    r"|(?P<float>\d+\.\d+(?:[eE][+-]?\d+)?|\d+[eE][+-]?\d+)"  # 1.5, 2.0e3, 1e9
    r"|(?P<int>\d+)"  # integers
    r'|(?P<string>"(?:\\.|[^"\\\n])*")'  # double-quoted strings
    r"|(?P<atom>:[A-Za-z_][A-Za-z0-9_]*)"  # :atom
    r"|(?P<name>[A-Za-z_][A-Za-z0-9_]*)"  # identifiers and keywords
    r"|(?P<op>\*\*|==|!=|<=|>=|&&|\|\||<<|>>|\.\.|\|>|[-+*/%<>!&|~=.,:;()\[\]{}])"
)

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def _unescape(body: str, location: Location) -> str:
    out = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            nxt = body[i + 1]
            if nxt not in ESCAPES:
                raise EmberSyntaxError(f"Invalid escape sequence '\\{nxt}'", location)
            out.append(ESCAPES[nxt])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def lex(source: str, filename: str = "<input>") -> List[Token]:
    """Tokenize `source`; the returned list always ends with an EOF token."""
    tokens: List[Token] = []
    pos = 0
    line = 1
    line_start = 0
    newline_before = True
    n = len(source)

    while pos < n:
        match = TOKEN_RE.match(source, pos)
        location = Location(filename, line, pos - line_start + 1)
        if not match:
            if source[pos] == '"':
                raise EmberSyntaxError("Unterminated string literal", location)
            raise EmberSyntaxError(f"Unexpected character {source[pos]!r}", location)

        kind = match.lastgroup
        text = match.group()
        pos = match.end()

        if kind == "newline":
            line += 1
            line_start = pos
            newline_before = True
            continue
        if kind in ("space", "comment"):
            continue

        if kind == "atom" and not newline_before and tokens and tokens[-1].type in OPERAND_END:
            # Not an atom after all: emit the colon and re-scan the name.
            token = Token(TokenType.COLON, ":", location, newline_before)
            pos = match.start() + 1
        elif kind == "float":
            token = Token(TokenType.FLOAT, float(text), location, newline_before)
        elif kind == "int":
            token = Token(TokenType.INT, int(text), location, newline_before)
        elif kind == "string":
            token = Token(TokenType.STRING, _unescape(text[1:-1], location), location, newline_before)
        elif kind == "atom":
            token = Token(TokenType.ATOM, text[1:], location, newline_before)
        elif kind == "name":
            token = Token(KEYWORDS.get(text, TokenType.IDENTIFIER), text, location, newline_before)
        else:
            token = Token(OPERATORS[text], text, location, newline_before)

        tokens.append(token)
        newline_before = False

    tokens.append(Token(TokenType.EOF, None, Location(filename, line, pos - line_start + 1), True))
    return tokens
