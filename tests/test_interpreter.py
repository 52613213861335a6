import pytest

from lisple.errors import UnboundSymbolError
from lisple.interpreter import Interpreter
from lisple.types import FALSE, LispList, Number, Symbol


def test_eval_returns_last_value(interp):
    assert interp.eval("(define x 2) (* x 21)") == Number(42)


def test_eval_blank_input(interp):
    assert interp.eval("   ") == FALSE


def test_eval_all_collects_every_result(interp):
    results = interp.eval_all("1 'a (list 1 2)")
    assert results == [Number(1), Symbol("a"), LispList([Number(1), Number(2)])]


def test_interpreters_are_independent():
    a = Interpreter()
    b = Interpreter()
    a.eval("(define only-in-a 1)")
    assert a.eval("only-in-a") == Number(1)
    with pytest.raises(UnboundSymbolError):
        b.eval("only-in-a")


def test_install_primitive(interp):
    interp.install_primitive("double", lambda args: Number(args[0].to_int() * 2))
    assert interp.eval("(double 21)") == Number(42)
    assert interp.show(interp.eval("double")) == "<Proc>"


def test_read_and_show(interp):
    assert interp.show(interp.read("(a  (b)   c)")) == "(a (b) c)"


def test_load_with_custom_loader():
    interp = Interpreter(loader={"prelude": "(define inc (lambda (n) (+ n 1)))"}.__getitem__)
    interp.load("prelude")
    assert interp.eval("(inc 1)") == Number(2)
    assert interp.eval("(load 'prelude)") == Symbol("True")


def test_error_leaves_interpreter_usable(interp):
    interp.eval("(define x 1)")
    with pytest.raises(UnboundSymbolError):
        interp.eval("(set! x (+ y 1))")
    assert interp.eval("x") == Number(1)
