import pytest

from ember.types import Function, Integer, Nil, String


def test_call_with_arguments(run_ok):
    assert run_ok("let add = fn(a, b) { a + b }\nadd(2, 3)") == Integer(5)


def test_immediately_invoked_literal(run_ok):
    assert run_ok("fn(x) { x * x }(4)") == Integer(16)


def test_empty_body_yields_nil(run_ok):
    assert run_ok("fn() { }()") is Nil


def test_return_is_unwrapped(run_ok):
    assert run_ok("let f = fn(x) { if x > 0 { return :pos }; :neg }\nf(1)").inspect() == ":pos"
    assert run_ok("f(-1)").inspect() == ":neg"


def test_bare_return_yields_nil(run_ok):
    assert run_ok("fn() { return }()") is Nil


def test_let_attaches_name_to_function(itp):
    fn = itp.eval("let square = fn(x) { x * x }")
    assert isinstance(fn, Function)
    assert fn.name == "square"


def test_let_keeps_an_existing_name(itp):
    itp.eval("let first = fn() { 1 }\nlet second = first")
    assert itp.eval("second").name == "first"


def test_recursion_through_declared_name(run_ok):
    source = """
    let fact = fn(n) {
        if n <= 1 { return 1 }
        n * fact(n - 1)
    }
    fact(10)
    """
    assert run_ok(source) == Integer(3628800)


def test_recursive_function_declared_inside_function(run_ok):
    source = """
    let outer = fn(n) {
        let count = fn(k) { if k == 0 { 0 } else { 1 + count(k - 1) } }
        count(n)
    }
    outer(5)
    """
    assert run_ok(source) == Integer(5)


def test_let_in_body_works_on_repeated_calls(run_ok):
    run_ok("let f = fn(x) { let y = x * 2; y }")
    assert run_ok("f(1)") == Integer(2)
    assert run_ok("f(2)") == Integer(4)


def test_closure_captures_enclosing_call_locals(run_ok):
    source = """
    let adder = fn(n) { fn(x) { x + n } }
    let add2 = adder(2)
    let add10 = adder(10)
    [add2(1), add10(1)]
    """
    assert run_ok(source).inspect() == "[3, 11]"


def test_closure_sees_later_outer_declarations(run_ok):
    source = """
    let get = fn() { later }
    let later = 42
    get()
    """
    assert run_ok(source) == Integer(42)


def test_nested_closure_sees_every_enclosing_frame(run_ok):
    source = """
    let a = fn(x) { fn(y) { fn(z) { x + y + z } } }
    a(1)(2)(3)
    """
    assert run_ok(source) == Integer(6)


def test_parameters_shadow_outer_names(run_ok):
    assert run_ok("let x = 100\nlet f = fn(x) { x }\nf(1)") == Integer(1)


def test_arguments_are_evaluated_in_caller_scope(run_ok):
    assert run_ok("let v = 3\nlet id = fn(x) { x }\nid(v + 1)") == Integer(4)


def test_functions_are_first_class(run_ok):
    source = """
    let apply = fn(f, v) { f(v) }
    apply(fn(s) { s + "!" }, "hi")
    """
    assert run_ok(source) == String("hi!")


@pytest.mark.parametrize(
    "source,message",
    [
        ("let f = fn(a) { a }\nf(1, 2)", "Too many arguments in function call: expected 1, got 2"),
        ("let f = fn(a, b) { a }\nf(1)", "Too few arguments in function call: expected 2, got 1"),
        ("5(1)", "Trying to call a non-function of type 'Integer'"),
        ("fn() { break }()", "'break' outside of a loop"),
        ("fn() { continue }()", "'continue' outside of a loop"),
    ],
)
def test_call_errors(itp, source, message):
    assert itp.eval(source) is None
    assert itp.reporter.messages() == [message]


def test_break_inside_loop_inside_function_is_fine(run_ok):
    assert run_ok("fn() { for x in [1, 2] { break } }()").inspect() == "[]"


def test_function_values_do_not_leak_call_frames(itp):
    itp.eval("let f = fn(p) { p }\nf(1)")
    assert itp.eval("p") is None


def test_deep_recursion(run_ok):
    run_ok("let sum = fn(n) { if n == 0 { return 0 }\n n + sum(n - 1) }")
    assert run_ok("sum(500)") == Integer(125250)


def test_runaway_recursion_is_reported(itp):
    itp.eval("let forever = fn(n) { forever(n + 1) }")
    assert itp.eval("forever(0)") is None
    assert itp.reporter.messages() == ["Maximum recursion depth exceeded"]
    assert itp.eval("1 + 1") == Integer(2)


def test_runaway_recursion_does_not_stop_the_program(itp):
    result = itp.eval("let forever = fn() { forever() }\nforever()\n:after")
    assert result.inspect() == ":after"
    assert itp.reporter.messages() == ["Maximum recursion depth exceeded"]
