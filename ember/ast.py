"""
Syntax tree node definitions for Ember.

The reader produces these nodes and the evaluator consumes them. Every node
carries the source location it was parsed from so runtime diagnostics can
point at the failing expression.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ember.reader.tokens import Location


# =============================================================================
# Base Classes
# =============================================================================

@dataclass
class Node:
    """Base class for all syntax tree nodes."""
    location: Location


@dataclass
class Statement(Node):
    """Base class for statements."""
    pass


@dataclass
class Expression(Node):
    """Base class for expressions."""
    pass


# =============================================================================
# Program structure
# =============================================================================

@dataclass
class Program(Node):
    statements: List[Statement] = field(default_factory=list)


@dataclass
class BlockStatement(Statement):
    statements: List[Statement] = field(default_factory=list)


@dataclass
class ExpressionStatement(Statement):
    expression: Expression


@dataclass
class Let(Statement):
    """let name = value"""
    name: "Identifier"
    value: Expression


@dataclass
class Module(Statement):
    """module Name { let ... }"""
    name: "Identifier"
    body: BlockStatement


@dataclass
class Import(Statement):
    """import "file" """
    file: "StringLiteral"


@dataclass
class ReturnStatement(Statement):
    value: Optional[Expression] = None


@dataclass
class BreakStatement(Statement):
    pass


@dataclass
class ContinueStatement(Statement):
    pass


# =============================================================================
# Literals
# =============================================================================

@dataclass
class Identifier(Expression):
    value: str


@dataclass
class IntegerLiteral(Expression):
    value: int


@dataclass
class FloatLiteral(Expression):
    value: float


@dataclass
class StringLiteral(Expression):
    value: str


@dataclass
class AtomLiteral(Expression):
    value: str


@dataclass
class BooleanLiteral(Expression):
    value: bool


@dataclass
class ArrayLiteral(Expression):
    elements: List[Expression] = field(default_factory=list)


@dataclass
class DictionaryLiteral(Expression):
    pairs: List[Tuple[Expression, Expression]] = field(default_factory=list)


@dataclass
class PlaceholderLiteral(Expression):
    """The `_` wildcard of array-shaped switch cases."""
    pass


@dataclass
class FunctionLiteral(Expression):
    parameters: List[Identifier]
    body: BlockStatement


# =============================================================================
# Operators and access
# =============================================================================

@dataclass
class PrefixExpression(Expression):
    operator: str
    right: Expression


@dataclass
class InfixExpression(Expression):
    left: Expression
    operator: str
    right: Expression


@dataclass
class Pipe(Expression):
    """left |> right(...)"""
    left: Expression
    right: Expression


@dataclass
class FunctionCall(Expression):
    function: Expression
    arguments: List[Expression] = field(default_factory=list)


@dataclass
class ModuleAccess(Expression):
    """Module.member"""
    object: Identifier
    parameter: Identifier


@dataclass
class Subscript(Expression):
    left: Expression
    index: Expression


# =============================================================================
# Control flow expressions
# =============================================================================

@dataclass
class If(Expression):
    condition: Expression
    then: BlockStatement
    else_: Optional[BlockStatement] = None


@dataclass
class SwitchCase(Node):
    values: List[Expression]
    body: BlockStatement


@dataclass
class Switch(Expression):
    control: Optional[Expression]
    cases: List[SwitchCase] = field(default_factory=list)
    default: Optional[BlockStatement] = None


@dataclass
class For(Expression):
    arguments: List[Identifier]
    enumerable: Expression
    body: BlockStatement
