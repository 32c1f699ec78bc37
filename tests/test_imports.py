import pytest

from ember.errors import EmberImportError
from ember.interpreter import Interpreter
from ember.modules.import_loader import ImportLoader
from ember.reader.parser import parse_program
from ember.reporter import ErrorKind, Reporter
from ember.types import Integer, String


@pytest.fixture
def project(tmp_path):
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "greet.em").write_text('let greet = fn(name) { "hi " + name }\n')
    (tmp_path / "consts.em").write_text("let answer = 42\nanswer\n")
    (tmp_path / "broken.em").write_text("let = oops\n")
    return tmp_path


def test_import_binds_into_current_scope(project):
    itp = Interpreter(base_dir=project)
    result = itp.eval('import "lib/greet"\ngreet("bob")')
    assert result == String("hi bob")
    assert itp.diagnostics == []


def test_import_yields_last_value_of_the_file(project):
    itp = Interpreter(base_dir=project)
    assert itp.eval('import "consts.em"') == Integer(42)


def test_missing_file_is_reported(project):
    itp = Interpreter(base_dir=project)
    assert itp.eval('import "nowhere"') is None
    diagnostic = itp.diagnostics[0]
    assert diagnostic.kind is ErrorKind.RUNTIME
    assert diagnostic.message == "Couldn't read imported file 'nowhere'"
    assert diagnostic.location.line == 1


def test_parse_failure_is_reported_and_not_cached(project):
    itp = Interpreter(base_dir=project)
    assert itp.eval('import "broken"') is None
    assert itp.diagnostics[0].kind is ErrorKind.PARSE
    assert itp.loader.cache == {}

    (project / "broken.em").write_text("let fixed = 1\n")
    assert itp.eval('import "broken"') == Integer(1)
    assert itp.eval("fixed") == Integer(1)


def test_statements_after_a_failed_import_still_run(project):
    itp = Interpreter(base_dir=project)
    assert itp.eval('import "nowhere"\n1 + 1') == Integer(2)


def test_imported_programs_are_cached(project, capsys):
    (project / "counted.em").write_text("IO.puts(:loaded)\nlet answer = 42\nanswer\n")
    reads = []

    def read_text(path):
        reads.append(path)
        return (project / "counted.em").read_text()

    itp = Interpreter(base_dir=project, read_text=read_text)
    assert itp.eval('if true { import "consts" }') == Integer(42)
    assert itp.eval('if true { import "consts" }') == Integer(42)
    assert itp.diagnostics == []
    assert len(reads) == 1
    # the cached program still runs on every import
    assert capsys.readouterr().out == "loaded\nloaded\n"
    assert list(itp.loader.cache) == [str(project / "consts.em")]


def test_import_inside_function_scope(project):
    itp = Interpreter(base_dir=project)
    itp.eval('let load = fn() { import "consts"\n answer + 1 }')
    assert itp.eval("load()") == Integer(43)
    assert itp.eval("answer") is None


# -----------------------------------------------------
# Loader
# -----------------------------------------------------

def test_normalize_appends_extension_and_resolves_base_dir(tmp_path):
    loader = ImportLoader(parse_program, extension=".em", base_dir=tmp_path)
    assert loader.normalize("a/b") == str(tmp_path / "a" / "b.em")
    assert loader.normalize("c.txt") == str(tmp_path / "c.txt")
    assert loader.normalize(str(tmp_path / "abs")) == str(tmp_path / "abs.em")


def test_normalize_without_base_dir():
    loader = ImportLoader(parse_program, extension=".em")
    assert loader.normalize("lib") == "lib.em"


def test_extension_comes_from_environment(monkeypatch):
    monkeypatch.setenv("EMBER_SOURCE_EXT", "ari")
    assert ImportLoader(parse_program).normalize("x") == "x.ari"


def test_load_raises_for_unreadable_file(tmp_path):
    loader = ImportLoader(parse_program, base_dir=tmp_path)
    with pytest.raises(EmberImportError, match="Couldn't read imported file 'ghost'"):
        loader.load("ghost", Reporter())


def test_load_uses_custom_reader():
    sources = {"mem.em": "let x = 1"}
    loader = ImportLoader(parse_program, read_text=lambda p: sources[p], extension=".em")
    program = loader.load("mem", Reporter())
    assert len(program.statements) == 1
    assert loader.load("mem", Reporter()) is program
