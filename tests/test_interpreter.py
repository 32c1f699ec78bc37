import sys

from ember.interpreter import Interpreter
from ember.reporter import Reporter
from ember.types import Integer, String


def test_state_persists_between_evals(itp):
    itp.eval("let a = 1")
    itp.eval("let f = fn() { a + 1 }")
    assert itp.eval("f()") == Integer(2)


def test_define_globals_seeds_the_global_frame(itp):
    itp.define_globals({"host": String("py"), "limit": Integer(3)})
    assert itp.eval('host + "!"') == String("py!")
    assert itp.eval("limit * 2") == Integer(6)


def test_define_globals_can_be_shadowed_in_nested_scopes(itp):
    itp.define_globals({"x": Integer(1)})
    assert itp.eval("fn() { let x = 2; x }()") == Integer(2)


def test_shared_reporter():
    reporter = Reporter()
    itp = Interpreter(reporter=reporter)
    itp.eval("missing")
    assert reporter.error_count == 1
    assert itp.diagnostics is reporter.diagnostics


def test_run_file(tmp_path):
    script = tmp_path / "main.em"
    script.write_text('import "helper"\nhelper(2)\n')
    (tmp_path / "helper.em").write_text("let helper = fn(x) { x * 21 }\n")
    itp = Interpreter(base_dir=tmp_path)
    assert itp.run_file(script) == Integer(42)


def test_diagnostics_carry_the_file_name(tmp_path):
    script = tmp_path / "bad.em"
    script.write_text("let a = 1\nnope\n")
    itp = Interpreter()
    itp.run_file(script)
    location = itp.diagnostics[0].location
    assert location.file == str(script)
    assert location.line == 2


def test_interpreter_raises_the_recursion_limit(monkeypatch):
    monkeypatch.setattr(sys, "getrecursionlimit", lambda: 1000)
    limits = []
    monkeypatch.setattr(sys, "setrecursionlimit", limits.append)
    monkeypatch.setenv("EMBER_RECURSION_LIMIT", "12345")
    Interpreter()
    assert limits == [12345]
