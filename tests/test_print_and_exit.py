import pytest

from lisple.errors import ArityMismatchError
from lisple.evaluation.evaluator import evaluate
from lisple.reader.parser import read
from lisple.types import NIL


def test_display_writes_rendering_and_returns_nil(env, capsys):
    ret = evaluate(read("(display '(1 (a b)))"), env)
    assert capsys.readouterr().out == "(1 (a b))"
    assert ret == NIL


def test_display_space_and_newline_symbols(env, capsys):
    for source in ["(display 'hello)", "(display \\s)", "(display 42)", "(display \\n)"]:
        evaluate(read(source), env)
    assert capsys.readouterr().out == "hello 42\n"


def test_display_procedures(env, capsys):
    evaluate(read("(display car)"), env)
    evaluate(read("(display (lambda (x) x))"), env)
    assert capsys.readouterr().out == "<Proc><Lambda>"


def test_exit_raises_system_exit(env):
    with pytest.raises(SystemExit) as excinfo:
        evaluate(read("(exit)"), env)
    assert excinfo.value.code == 0

    with pytest.raises(SystemExit) as excinfo:
        evaluate(read("(exit 3)"), env)
    assert excinfo.value.code == 3


def test_exit_arity(env):
    with pytest.raises(ArityMismatchError):
        evaluate(read("(exit 1 2)"), env)
