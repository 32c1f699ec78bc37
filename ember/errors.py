from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ember.reader.tokens import Location


class EmberError(Exception):
    """ Base class for all Ember errors"""

    def __init__(self, message: str, location: Optional["Location"] = None):
        super().__init__(message)
        self.message = message
        self.location = location

class EmberSyntaxError(EmberError):
    """ Raised when source text cannot be lexed or parsed"""

class EmberNameError(EmberError):
    """ Raised when an identifier, module or module member cannot be found"""

class EmberDeclarationError(EmberError):
    """ Raised when an identifier or module is declared twice"""

class EmberKeyError(EmberError):
    """ Raised when a dictionary key does not exist"""

class EmberIndexError(EmberError):
    """ Raised when an array or string index is out of bounds"""

class EmberTypeError(EmberError):
    """ Raised when the types of operands or arguments are incorrect"""

class EmberArityError(EmberError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class EmberArithmeticError(EmberError):
    """ Raised on division by zero or integer overflow"""

class EmberImportError(EmberError):
    """ Raised when an imported file cannot be read"""

class EmberControlFlowError(EmberError):
    """ Raised when break or continue escape every enclosing loop"""

class EmberRecursionError(EmberError):
    """ Raised when calls nest deeper than the host recursion limit"""
