# Ember: an expression-oriented scripting language with a tree-walking evaluator.
#
# Runtime values are instances of ember.types.Value. Syntax tree nodes live in
# ember.ast. Keep this module free of submodule imports: the reader, the value
# model and the evaluator all import each other's leaves from here.

__version__ = "0.1.0"
