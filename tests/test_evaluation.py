import pytest

from lisple.errors import (
    ArityMismatchError,
    LispTypeError,
    MalformedFormError,
    NotAProcedureError,
    UnboundSymbolError,
)
from lisple.evaluation.evaluator import evaluate
from lisple.reader.parser import read, read_all
from lisple.types import FALSE, NIL, TRUE, Closure, LispList, NativeProcedure, Number, Symbol


def run(source, env):
    """Evaluate every expression in source, returning the last value."""
    result = None
    for expr in read_all(source):
        result = evaluate(expr, env)
    return result


@pytest.mark.parametrize("n", [0, 1, 42, -7, 10**20])
def test_integer_literals_self_evaluate(n, env):
    assert evaluate(read(str(n)), env) == Number(n)


def test_symbol_lookup(env):
    env.define_local("x", Number(42))
    assert evaluate(Symbol("x"), env) == Number(42)


def test_empty_list_evaluates_to_nil(env):
    assert evaluate(LispList(), env) == NIL


def test_quote_returns_operand_unevaluated(env):
    result = evaluate(read("(quote (1 2 3))"), env)
    assert result == LispList([Number(1), Number(2), Number(3)])
    assert all(isinstance(item, Number) for item in result)
    assert evaluate(read("'undefined-name"), env) == Symbol("undefined-name")


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(if False 1 2)", Number(2)),
        ("(if True 1 2)", Number(1)),
        ("(if False 1)", NIL),
        ("(if 0 1 2)", Number(1)),
        ("(if '() 1 2)", Number(1)),
        ("(if nil 1 2)", Number(1)),
        ("(if (< 1 2) 'yes 'no)", Symbol("yes")),
    ]
)
def test_if(source, expected, env):
    assert evaluate(read(source), env) == expected


def test_if_evaluates_only_the_chosen_branch(env):
    assert evaluate(read("(if True 1 undefined)"), env) == Number(1)
    assert evaluate(read("(if False undefined 2)"), env) == Number(2)


def test_define_returns_value_and_binds_locally(env):
    assert evaluate(read("(define x 10)"), env) == Number(10)
    assert env.vars["x"] == Number(10)


def test_set_updates_existing_binding(env):
    run("(define x 1)", env)
    assert evaluate(read("(set! x (+ x 1))"), env) == Number(2)
    assert evaluate(Symbol("x"), env) == Number(2)


def test_set_unbound_raises(env):
    with pytest.raises(UnboundSymbolError):
        evaluate(read("(set! y 1)"), env)


def test_begin_returns_last_value(env):
    assert run("(begin (define a 10) (define b 20) (+ a b))", env) == Number(30)


def test_lambda_captures_definition_environment(env):
    closure = evaluate(read("(lambda (x) (+ x 1))"), env)
    assert isinstance(closure, Closure)
    assert closure.env is env
    assert closure.parameters == (Symbol("x"),)
    assert evaluate(LispList([closure, Number(4)]), env) == Number(5)


def test_closure_sees_current_value_of_captured_binding(env):
    assert run("(define x 1) (define f (lambda () x)) (set! x 2) (f)", env) == Number(2)


def test_recursive_factorial(env):
    source = """
    (define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))
    (fact 5)
    """
    assert run(source, env) == Number(120)


def test_closures_keep_escaped_frames_alive(env):
    source = """
    (define make-counter
      (lambda ()
        (begin
          (define count 0)
          (lambda () (set! count (+ count 1))))))
    (define c1 (make-counter))
    (define c2 (make-counter))
    (c1) (c1) (c2)
    (list (c1) (c2))
    """
    assert run(source, env) == LispList([Number(3), Number(2)])


def test_define_inside_closure_does_not_leak(env):
    run("(define f (lambda (x) (define y x)))", env)
    run("(f 5)", env)
    with pytest.raises(UnboundSymbolError):
        evaluate(Symbol("y"), env)


def test_parameters_shadow_globals(env):
    assert run("(define x 1) ((lambda (x) (* x 10)) 5)", env) == Number(50)
    assert evaluate(Symbol("x"), env) == Number(1)


def test_lambda_with_several_body_forms(env):
    assert run("((lambda (x) (define y (* x 2)) (+ y 1)) 4)", env) == Number(9)


def test_surplus_arguments_are_ignored(env):
    assert run("((lambda (x) x) 1 2 3)", env) == Number(1)


def test_too_few_arguments_raise(env):
    run("(define f (lambda (x) x))", env)
    with pytest.raises(ArityMismatchError) as excinfo:
        run("(f)", env)
    assert excinfo.value.expected == 1
    assert excinfo.value.got == 0


def test_unbound_symbol_aborts_evaluation(env):
    with pytest.raises(UnboundSymbolError) as excinfo:
        evaluate(read("(+ x 1)"), env)
    assert excinfo.value.name == "x"


def test_arguments_evaluated_left_to_right(env):
    seen = []

    def record(args):
        seen.append(args[0])
        return args[0]

    env.define_local("rec", NativeProcedure("rec", record))
    run("(list (rec 1) (rec 2) (rec 3))", env)
    assert seen == [Number(1), Number(2), Number(3)]


def test_native_procedure_receives_evaluated_arguments(env):
    env.define_local("first", NativeProcedure("first", lambda args: args[0]))
    assert run("(first (+ 1 2) 9)", env) == Number(3)


@pytest.mark.parametrize("source", ["(1 2)", "('a 1)", "((list 1))", "(x)"])
def test_not_a_procedure(source, env):
    env.define_local("x", Number(3))
    with pytest.raises(NotAProcedureError):
        evaluate(read(source), env)


@pytest.mark.parametrize(
    "source",
    [
        "(quote)",
        "(quote a b)",
        "(if)",
        "(if True)",
        "(if 1 2 3 4)",
        "(define)",
        "(define x)",
        "(define 1 2)",
        "(set! x)",
        "(lambda (x))",
        "(lambda x x)",
        "(lambda (1) 1)",
        "(lambda (if) if)",
        "(lambda (x quote) x)",
        "(begin)",
        "(load)",
        "(define if 1)",
        "(set! lambda 1)",
    ]
)
def test_malformed_special_forms(source, env):
    with pytest.raises(MalformedFormError):
        evaluate(read(source), env)


def test_special_forms_are_not_values(env):
    with pytest.raises(UnboundSymbolError):
        evaluate(read("(list if)"), env)


def test_special_form_wins_over_binding(env):
    env.define_local("quote", NativeProcedure("quote", lambda args: Number(0)))
    assert evaluate(read("(quote a)"), env) == Symbol("a")


def test_type_errors_from_primitives_propagate(env):
    with pytest.raises(LispTypeError):
        evaluate(read("(+ 'a 1)"), env)


def test_booleans_are_symbols(env):
    assert evaluate(read("(< 1 2)"), env) == TRUE
    assert evaluate(read("(> 1 2)"), env) == FALSE
