import pytest

from SyntaxTree_Gen.__main__ import main
from SyntaxTree_Gen.config import GeneratorConfig

GOOD = "class A{ public static void main(String[] args){ int x; x = 1+2; } }"
BAD = "class A{ public static void main(String[] args){ int x x = 1; } }"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _source(workdir, text):
    path = workdir / "Main.java"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_success_writes_header_tree_and_blank_line(workdir, capsys):
    assert main([_source(workdir, GOOD)]) == 0
    assert capsys.readouterr().out == "Parsing succesful\nAST generated\n"
    text = (workdir / "AST.txt").read_text(encoding="utf-8")
    lines = text.split("\n")
    assert lines[0] == "Abstract Syntax Tree"
    assert lines[1] == "└──CLASS DECLARATION"
    assert lines[-3] == "                            └──(num, 2)"
    assert text.endswith("└──(num, 2)\n\n")


def test_failure_prints_unsuccessful_and_leaves_empty_output(workdir, capsys):
    (workdir / "AST.txt").write_text("stale tree\n", encoding="utf-8")
    assert main([_source(workdir, BAD)]) == 0
    assert capsys.readouterr().out == "Unsuccessful\n"
    assert (workdir / "AST.txt").read_text(encoding="utf-8") == ""


def test_missing_source_file(workdir, capsys):
    missing = str(workdir / "nope.java")
    assert main([missing]) == 1
    assert capsys.readouterr().out == f"Error: could not read {missing}\n"
    assert (workdir / "AST.txt").exists()


def test_custom_output_file(workdir, capsys):
    config = GeneratorConfig(output_file="tree.txt", header="Tree")
    assert main([_source(workdir, GOOD)], config=config) == 0
    text = (workdir / "tree.txt").read_text(encoding="utf-8")
    assert text.startswith("Tree\n└──CLASS DECLARATION\n")
    assert not (workdir / "AST.txt").exists()


def test_source_argument_is_required(workdir):
    with pytest.raises(SystemExit):
        main([])
