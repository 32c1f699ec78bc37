import pytest

from ember.types import Array, Integer, String


def ints(*values):
    return Array(tuple(Integer(v) for v in values))


def strs(*values):
    return Array(tuple(String(v) for v in values))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("for x in [1, 2, 3] { x * 2 }", ints(2, 4, 6)),
        ("for i, x in [5, 6] { i }", ints(0, 1)),
        ("for x in [] { x }", Array()),
        ('for c in "abc" { c }', strs("a", "b", "c")),
        ("for c in :hi { c }", strs("h", "i")),
        ('for v in ["a": 1, "b": 2] { v }', ints(1, 2)),
        ('for k, v in ["a": 1, "b": 2] { k }', strs("a", "b")),
        ("for x in 1..3 { x }", ints(1, 2, 3)),
    ],
)
def test_for_maps_over_enumerables(run_ok, source, expected):
    assert run_ok(source) == expected


def test_break_stops_the_loop(run_ok):
    assert run_ok("for x in 1..10 { if x > 3 { break }; x }") == ints(1, 2, 3)


def test_continue_skips_accumulation(run_ok):
    assert run_ok("for x in 1..6 { if x % 2 == 0 { continue }; x }") == ints(1, 3, 5)


def test_return_propagates_out_of_the_loop(run_ok):
    source = """
    let find = fn(xs, wanted) {
        for x in xs {
            if x == wanted { return :found }
        }
        :missing
    }
    [find([1, 2, 3], 2), find([1], 5)]
    """
    assert run_ok(source).inspect() == "[:found, :missing]"


def test_body_lets_do_not_collide_across_iterations(run_ok):
    assert run_ok("for x in [1, 2] { let y = x + 1; y }") == ints(2, 3)


def test_loop_variables_do_not_leak(itp):
    itp.eval("for x in [1] { x }")
    assert itp.eval("x") is None


def test_nested_loops(run_ok):
    result = run_ok("for a in [1, 2] { for b in [10, 20] { a + b } }")
    assert result.inspect() == "[[11, 21], [12, 22]]"


def test_non_enumerable_is_an_error(itp):
    assert itp.eval("for x in 5 { x }") is None
    assert itp.reporter.messages() == ["Type 'Integer' is not an enumerable"]


def test_too_many_loop_variables_is_an_error(itp, capsys):
    assert itp.eval('for a, b, c in [1] { IO.puts("ran") }') is None
    assert "expects 1 or 2 arguments" in itp.reporter.messages()[0]
    # arity is checked before the body ever runs
    assert capsys.readouterr().out == ""
