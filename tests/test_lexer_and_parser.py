import pytest
from hypothesis import given, strategies as st

from ember import ast
from ember.errors import EmberSyntaxError
from ember.reader.lexer import lex
from ember.reader.parser import parse_program
from ember.reader.tokens import Location, TokenType
from ember.reporter import ErrorKind, Reporter


def types_of(source):
    return [t.type for t in lex(source)][:-1]


def parse_ok(source):
    reporter = Reporter()
    program = parse_program(source, reporter, "test.em")
    assert reporter.diagnostics == [], [d.format() for d in reporter.diagnostics]
    return program


def only_expression(source):
    program = parse_ok(source)
    assert len(program.statements) == 1
    statement = program.statements[0]
    assert isinstance(statement, ast.ExpressionStatement)
    return statement.expression


# -----------------------------------------------------
# Lexer
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", [TokenType.INT]),
        ("1.5 2.0e3", [TokenType.FLOAT, TokenType.FLOAT]),
        ('"hi"', [TokenType.STRING]),
        (":ok", [TokenType.ATOM]),
        ("_", [TokenType.PLACEHOLDER]),
        ("let x = y", [TokenType.LET, TokenType.IDENTIFIER, TokenType.ASSIGN, TokenType.IDENTIFIER]),
        ("a |> b", [TokenType.IDENTIFIER, TokenType.PIPE, TokenType.IDENTIFIER]),
        ("1..5", [TokenType.INT, TokenType.RANGE, TokenType.INT]),
        ("2 ** 3", [TokenType.INT, TokenType.POWER, TokenType.INT]),
        ("a // comment\nb", [TokenType.IDENTIFIER, TokenType.IDENTIFIER]),
        ("[:]", [TokenType.LBRACK, TokenType.COLON, TokenType.RBRACK]),
    ],
)
def test_token_types(source, expected):
    assert types_of(source) == expected


def test_colon_after_operand_is_not_an_atom():
    assert types_of('["k":v]') == [
        TokenType.LBRACK, TokenType.STRING, TokenType.COLON,
        TokenType.IDENTIFIER, TokenType.RBRACK,
    ]


def test_string_escapes():
    token = lex(r'"a\n\t\"\\"')[0]
    assert token.value == 'a\n\t"\\'


def test_locations_and_newline_flags():
    tokens = lex("let a = 1\n  b", "f.em")
    assert tokens[0].location == Location("f.em", 1, 1)
    b = tokens[4]
    assert b.location == Location("f.em", 2, 3)
    assert b.newline_before
    assert not tokens[1].newline_before
    assert tokens[-1].type == TokenType.EOF


def test_lexer_errors():
    with pytest.raises(EmberSyntaxError, match="Unterminated string"):
        lex('"open')
    with pytest.raises(EmberSyntaxError, match="Unexpected character"):
        lex("a $ b")
    with pytest.raises(EmberSyntaxError, match="Invalid escape"):
        lex(r'"\q"')


# -----------------------------------------------------
# Parser
# -----------------------------------------------------

def test_precedence_product_over_sum():
    expr = only_expression("1 + 2 * 3")
    assert isinstance(expr, ast.InfixExpression)
    assert expr.operator == "+"
    assert isinstance(expr.right, ast.InfixExpression)
    assert expr.right.operator == "*"


def test_power_is_right_associative():
    expr = only_expression("2 ** 3 ** 2")
    assert expr.operator == "**"
    assert isinstance(expr.left, ast.IntegerLiteral)
    assert expr.right.operator == "**"


def test_prefix_binds_tighter_than_infix():
    expr = only_expression("-a + b")
    assert expr.operator == "+"
    assert isinstance(expr.left, ast.PrefixExpression)


def test_let_module_import_statements():
    program = parse_ok('let x = 1\nmodule M { let y = 2 }\nimport "lib"')
    let, module, imp = program.statements
    assert isinstance(let, ast.Let) and let.name.value == "x"
    assert isinstance(module, ast.Module) and module.name.value == "M"
    assert isinstance(module.body.statements[0], ast.Let)
    assert isinstance(imp, ast.Import) and imp.file.value == "lib"


def test_function_literal_and_call():
    expr = only_expression("fn(a, b) { a + b }(1, 2)")
    assert isinstance(expr, ast.FunctionCall)
    assert isinstance(expr.function, ast.FunctionLiteral)
    assert [p.value for p in expr.function.parameters] == ["a", "b"]
    assert len(expr.arguments) == 2


def test_module_access_call():
    expr = only_expression("Math.sqrt(4)")
    assert isinstance(expr, ast.FunctionCall)
    assert isinstance(expr.function, ast.ModuleAccess)
    assert expr.function.object.value == "Math"
    assert expr.function.parameter.value == "sqrt"


def test_array_and_dictionary_literals():
    assert isinstance(only_expression("[1, 2]"), ast.ArrayLiteral)
    assert isinstance(only_expression("[]"), ast.ArrayLiteral)
    empty = only_expression("[:]")
    assert isinstance(empty, ast.DictionaryLiteral) and empty.pairs == []
    d = only_expression('["a": 1, "b": 2]')
    assert [k.value for k, _ in d.pairs] == ["a", "b"]


def test_subscript():
    expr = only_expression("a[0][1]")
    assert isinstance(expr, ast.Subscript)
    assert isinstance(expr.left, ast.Subscript)


def test_if_else_if_chain():
    expr = only_expression("if a { 1 } else if b { 2 } else { 3 }")
    assert isinstance(expr, ast.If)
    nested = expr.else_.statements[0].expression
    assert isinstance(nested, ast.If)
    assert nested.else_ is not None


def test_switch_cases_and_default():
    expr = only_expression("switch x { case 1, 2 { :low } case _ { :any } default { :none } }")
    assert isinstance(expr, ast.Switch)
    assert len(expr.cases) == 2
    assert len(expr.cases[0].values) == 2
    assert isinstance(expr.cases[1].values[0], ast.PlaceholderLiteral)
    assert expr.default is not None


def test_switch_without_control():
    expr = only_expression("switch { case a > 1 { 1 } }")
    assert expr.control is None


def test_for_with_two_bindings():
    expr = only_expression("for i, v in xs { v }")
    assert isinstance(expr, ast.For)
    assert [a.value for a in expr.arguments] == ["i", "v"]


def test_pipe_chains_left_to_right():
    expr = only_expression("x |> f(1) |> g()")
    assert isinstance(expr, ast.Pipe)
    assert isinstance(expr.left, ast.Pipe)
    assert isinstance(expr.right, ast.FunctionCall)


def test_pipe_continues_on_next_line():
    program = parse_ok("[1, 2]\n  |> Enum.size()")
    assert len(program.statements) == 1


def test_newline_separates_statements():
    program = parse_ok("let a = 1\nlet b = 2; a\n(b)")
    assert len(program.statements) == 4


def test_nodes_carry_locations():
    program = parse_ok("let a = 1\n  a + b")
    expr = program.statements[1].expression
    assert expr.location.line == 2
    assert expr.right.location == Location("test.em", 2, 7)


def test_syntax_error_is_reported_and_partial_program_returned():
    reporter = Reporter()
    program = parse_program("let a = 1\nlet = 2", reporter, "bad.em")
    assert len(program.statements) == 1
    assert reporter.error_count == 1
    diagnostic = reporter.diagnostics[0]
    assert diagnostic.kind is ErrorKind.PARSE
    assert diagnostic.location.line == 2


def test_statements_on_one_line_need_separator():
    reporter = Reporter()
    parse_program("let a = 1 let b = 2", reporter)
    assert reporter.has_errors()


def test_unterminated_block_is_reported():
    reporter = Reporter()
    parse_program("fn() { 1", reporter)
    assert "Unterminated block" in reporter.messages()[0]


def test_integer_literal_out_of_range_is_reported():
    assert only_expression("9223372036854775807").value == 2 ** 63 - 1
    reporter = Reporter()
    parse_program("let big = 9223372036854775808", reporter, "big.em")
    assert reporter.messages() == ["Integer literal '9223372036854775808' is out of range"]
    assert reporter.diagnostics[0].kind is ErrorKind.PARSE
    assert reporter.diagnostics[0].location.column == 11


# -----------------------------------------------------
# Robustness
# -----------------------------------------------------

fragments = st.sampled_from([
    "let", "x", "=", "1", "2.5", '"s"', ":a", "fn", "(", ")", "{", "}", "[", "]",
    ",", ":", ";", "+", "*", "|>", "..", "if", "else", "switch", "case", "for",
    "in", "return", "\n", "_", ".", "Math",
])


@given(st.lists(fragments, max_size=30))
def test_parser_never_crashes(parts):
    reporter = Reporter()
    program = parse_program(" ".join(parts), reporter)
    assert isinstance(program, ast.Program)
