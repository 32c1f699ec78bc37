"""Lexer and Pratt parser producing ember.ast nodes.

Import ``ember.reader.parser`` for ``parse_program`` and
``ember.reader.lexer`` for ``lex``.
"""
