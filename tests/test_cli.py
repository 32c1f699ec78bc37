import io

from ember.__main__ import main


def test_run_script(tmp_path, capsys):
    script = tmp_path / "hello.em"
    script.write_text('IO.puts("hello " + "world")\n')
    assert main([str(script)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "hello world\n"
    assert captured.err == ""


def test_script_errors_go_to_stderr(tmp_path, capsys):
    script = tmp_path / "bad.em"
    script.write_text('IO.puts("before")\nnope\nIO.puts("after")\n')
    assert main([str(script)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "before\nafter\n"
    assert "bad.em:2:1: runtime error: Identifier 'nope' not found" in captured.err


def test_imports_resolve_next_to_the_script(tmp_path, capsys):
    (tmp_path / "lib.em").write_text("let name = :lib\n")
    script = tmp_path / "main.em"
    script.write_text('import "lib"\nIO.puts(name)\n')
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "lib\n"


def test_missing_script(tmp_path, capsys):
    assert main([str(tmp_path / "absent.em")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_repl(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("let x = 2\nx * 3\nnope\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "ember> 6" in captured.out
    assert "Identifier 'nope' not found" in captured.err
