import pytest

from nora import errors
from nora.evaluation.evaluator import evaluate
from nora.types.cons import Cons, from_iterable
from nora.types.environment import Environment
from nora.types.function import Closure, Primitive
from nora.types.nil import Nil
from nora.types.symbol import Symbol

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

def L(*items):
    return from_iterable(items)


@pytest.fixture
def env():
    env = Environment()
    env.define(Symbol("+"), Primitive("+", lambda _, args: sum(args, 0.0)))
    env.define(Symbol("-"), Primitive("-", lambda _, args: args[0] - sum(args[1:], 0.0)))
    env.define(Symbol("x"), 42.0)
    env.define(Symbol("y"), 100.0)
    env.define(Symbol("nil"), Nil)
    return env

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1.0, env) == 1.0
    assert evaluate(3.14, env) == 3.14
    assert evaluate(Nil, env) is Nil


def test_symbol_lookup(env):
    assert evaluate(Symbol("x"), env) == 42.0
    assert evaluate(Symbol("y"), env) == 100.0
    with pytest.raises(errors.NoraUnboundSymbol):
        evaluate(Symbol("z"), env)


def test_quote(env):
    datum = L(1.0, 2.0, 3.0)
    assert evaluate(L(Symbol("quote"), datum), env) is datum


def test_simple_expression(env):
    assert evaluate(L(Symbol("+"), 1.0, 2.0), env) == 3.0


def test_nested_call(env):
    expr = L(Symbol("-"), L(Symbol("+"), Symbol("x"), 8.0), 10.0)
    assert evaluate(expr, env) == 40.0


def test_lambda_simple(env):
    lam = evaluate(L(Symbol("lambda"), L(Symbol("a"), Symbol("b")), L(Symbol("+"), Symbol("a"), Symbol("b"))), env)
    assert isinstance(lam, Closure)
    assert lam.env is env
    assert evaluate(L(lam, 2.0, 3.0), env) == 5.0


def test_lambda_in_head_position(env):
    expr = L(L(Symbol("lambda"), L(Symbol("n")), L(Symbol("+"), Symbol("n"), 1.0)), 41.0)
    assert evaluate(expr, env) == 42.0


def test_define_and_lookup(env):
    assert evaluate(L(Symbol("define"), Symbol("y"), 7.0), env) == Symbol("y")
    assert evaluate(Symbol("y"), env) == 7.0


def test_if_expression(env):
    assert evaluate(L(Symbol("if"), 1.0, 1.0, 2.0), env) == 1.0
    assert evaluate(L(Symbol("if"), Symbol("nil"), 1.0, 2.0), env) == 2.0


def test_begin_sequencing(env):
    expr = L(Symbol("begin"),
             L(Symbol("define"), Symbol("a"), 10.0),
             L(Symbol("define"), Symbol("b"), 20.0),
             L(Symbol("+"), Symbol("a"), Symbol("b")))
    assert evaluate(expr, env) == 30.0


def test_primitive_receives_caller_env_and_evaluated_args(env):
    seen = {}

    def spy(caller_env, args):
        seen["env"] = caller_env
        seen["args"] = args
        return Nil

    env.define(Symbol("spy"), Primitive("spy", spy))
    evaluate(L(Symbol("spy"), Symbol("x"), L(Symbol("quote"), Symbol("q"))), env)
    assert seen["env"] is env
    assert seen["args"] == [42.0, Symbol("q")]


def test_arguments_evaluated_left_to_right(env):
    order = []

    def tracer(tag):
        def fn(_, args):
            order.append(tag)
            return Nil
        return Primitive(tag, fn)

    env.define(Symbol("a"), tracer("a"))
    env.define(Symbol("b"), tracer("b"))
    env.define(Symbol("c"), tracer("c"))
    env.define(Symbol("list3"), Primitive("list3", lambda _, args: Nil))
    evaluate(L(Symbol("list3"), L(Symbol("a")), L(Symbol("b")), L(Symbol("c"))), env)
    assert order == ["a", "b", "c"]


def test_errors(env):
    with pytest.raises(errors.NoraUnboundSymbol):
        evaluate(Symbol("not_defined"), env)

    with pytest.raises(errors.NoraFormError):
        evaluate(L(Symbol("define")), env)

    with pytest.raises(errors.NoraApplicationError):
        evaluate(L(1.0, 2.0), env)


def test_improper_call_form_fails_before_evaluation(env):
    calls = []
    env.define(Symbol("f"), Primitive("f", lambda _, args: calls.append(args)))
    with pytest.raises(errors.NoraFormError):
        evaluate(Cons(Symbol("f"), Cons(1.0, 2.0)), env)
    assert calls == []


def test_special_form_names_are_not_looked_up(env):
    env.define(Symbol("quote"), Primitive("quote", lambda _, args: 0.0))
    assert evaluate(L(Symbol("quote"), Symbol("x")), env) == Symbol("x")
