"""Registry of node forms for the Ember evaluator.

Maps syntax tree node classes to the handler functions that evaluate them.
Every handler has the signature ``(node, scope, evaluator)``.
"""

from ember import ast
from ember.evaluation.forms.block_forms import (
    block_statement_form, expression_statement_form, program_form,
)
from ember.evaluation.forms.control_forms import break_form, continue_form, return_form
from ember.evaluation.forms.for_form import for_form
from ember.evaluation.forms.function_forms import function_call_form, function_literal_form
from ember.evaluation.forms.identifier_form import identifier_form
from ember.evaluation.forms.if_form import if_form
from ember.evaluation.forms.import_form import import_form
from ember.evaluation.forms.let_form import let_form
from ember.evaluation.forms.literal_forms import (
    array_form, atom_form, boolean_form, dictionary_form, float_form,
    integer_form, placeholder_form, string_form,
)
from ember.evaluation.forms.module_forms import module_access_form, module_form
from ember.evaluation.forms.operator_forms import infix_form, prefix_form
from ember.evaluation.forms.pipe_form import pipe_form
from ember.evaluation.forms.subscript_form import subscript_form
from ember.evaluation.forms.switch_form import switch_form

NODE_FORMS = {
    ast.Program: program_form,
    ast.BlockStatement: block_statement_form,
    ast.ExpressionStatement: expression_statement_form,
    ast.Let: let_form,
    ast.Module: module_form,
    ast.Import: import_form,
    ast.ReturnStatement: return_form,
    ast.BreakStatement: break_form,
    ast.ContinueStatement: continue_form,
    ast.Identifier: identifier_form,
    ast.IntegerLiteral: integer_form,
    ast.FloatLiteral: float_form,
    ast.StringLiteral: string_form,
    ast.AtomLiteral: atom_form,
    ast.BooleanLiteral: boolean_form,
    ast.ArrayLiteral: array_form,
    ast.DictionaryLiteral: dictionary_form,
    ast.PlaceholderLiteral: placeholder_form,
    ast.FunctionLiteral: function_literal_form,
    ast.PrefixExpression: prefix_form,
    ast.InfixExpression: infix_form,
    ast.Pipe: pipe_form,
    ast.FunctionCall: function_call_form,
    ast.ModuleAccess: module_access_form,
    ast.Subscript: subscript_form,
    ast.If: if_form,
    ast.Switch: switch_form,
    ast.For: for_form,
}
