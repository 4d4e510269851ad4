import pytest

from nora import errors
from nora.errors import ErrorKind
from nora.interpreter import Interpreter, Outcome, create_global_environment, evaluate, parse
from nora.printer import to_repr
from nora.types.nil import Nil
from nora.types.symbol import Symbol


def test_entry_points_compose():
    env = create_global_environment()
    assert evaluate(parse("(+ 1 2)"), env) == 3.0
    assert evaluate(parse("nil"), env) is Nil
    assert evaluate(parse("NIL"), env) is Nil


def test_eval_returns_last_value(interp):
    assert interp.eval("1 2 3") == 3.0
    assert interp.eval("") is Nil
    assert interp.eval("   ") is Nil


def test_definitions_persist_between_calls(interp):
    interp.eval("(define counter 1)")
    interp.eval("(define counter (+ counter 1))")
    assert interp.eval("counter") == 2.0


def test_interpreters_are_isolated():
    a, b = Interpreter(), Interpreter()
    a.eval("(define only-a 1)")
    with pytest.raises(errors.NoraUnboundSymbol):
        b.eval("only-a")


def test_feed_success(interp):
    outcome = interp.feed("(define x 4) (* x x)")
    assert isinstance(outcome, Outcome)
    assert outcome.ok
    assert outcome.kind is None
    assert outcome.values == [Symbol("x"), 16.0]
    assert outcome.value == 16.0


@pytest.mark.parametrize(
    "line, kind",
    [
        ("(+ 1", ErrorKind.SYNTAX),
        (")", ErrorKind.SYNTAX),
        ("undefined", ErrorKind.BINDING),
        ("(if 1 2)", ErrorKind.FORM),
        ("((lambda (x) x))", ErrorKind.FORM),
        ("(car 5)", ErrorKind.TYPE),
        ("(5)", ErrorKind.APPLICATION),
    ]
)
def test_feed_reports_error_kind(interp, line, kind):
    outcome = interp.feed(line)
    assert not outcome.ok
    assert outcome.kind is kind
    assert isinstance(outcome.error, errors.NoraError)


def test_feed_stops_at_first_error_and_keeps_earlier_work(interp):
    outcome = interp.feed("(define a 1) (car a) (define b 2)")
    assert outcome.values == [Symbol("a")]
    assert outcome.kind is ErrorKind.TYPE
    assert interp.eval("a") == 1.0
    with pytest.raises(errors.NoraUnboundSymbol):
        interp.eval("b")


def test_feed_empty_line(interp):
    outcome = interp.feed("")
    assert outcome.ok
    assert outcome.values == []
    assert outcome.value is Nil


def test_deep_recursion_is_reported(interp):
    interp.eval("(defun down (n) (if (= n 0) 0 (+ 1 (down (- n 1)))))")
    assert interp.eval("(down 50)") == 50.0
    with pytest.raises(errors.NoraRecursionError) as info:
        interp.eval("(down 1000000)")
    assert "recursion too deep" in str(info.value).lower()
    assert info.value.kind is ErrorKind.RECURSION
    # the interpreter is still usable afterwards
    assert interp.eval("(down 10)") == 10.0


def test_deep_recursion_via_feed(interp):
    interp.eval("(defun loop (n) (loop n))")
    outcome = interp.feed("(loop 1)")
    assert outcome.kind is ErrorKind.RECURSION


# ---------------------------------------------------------------------------
# Properties from the language description
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "code, expected",
    [
        ("(quote (+ 1 2))", "(+ 1 2)"),
        ("(if nil (car 1) 'b)", "b"),
        ("(if 1 'a (car 1))", "a"),
        ("(+)", "0"),
        ("(*)", "1"),
        ("(- 5)", "-5"),
        ("(/ 2)", "0.5"),
        ("(- 10 1 2)", "7"),
        ("(< 1 2 3)", "T"),
        ("(< 1 3 2)", "NIL"),
        ("(= 2 2 2)", "T"),
        ("(length (list 1 2 3))", "3"),
        ("(length nil)", "0"),
        ("(append '(1 2) '(3 4))", "(1 2 3 4)"),
        ("(append)", "NIL"),
        ("(define x 1) (define f (lambda () x)) (define x 2) (f)", "2"),
        ("(atom? '())", "T"),
        ("(atom? 1)", "T"),
        ("(atom? 'x)", "T"),
        ("(atom? '(1 2))", "NIL"),
        ("'(a b . c)", "(a b . c)"),
    ]
)
def test_language_properties(interp, code, expected):
    assert to_repr(interp.eval(code)) == expected


def test_quoted_list_round_trips_through_printer(interp):
    value = interp.eval("'(1 (2 three) (4 . 5) -6.5)")
    again = interp.eval("(quote " + to_repr(value) + ")")
    assert again == value
    assert again is not value


def test_unbound_symbol_error_names_symbol(interp):
    with pytest.raises(errors.NoraUnboundSymbol, match="never-bound"):
        interp.eval("(+ 1 never-bound)")


def test_feed_reports_deeply_nested_input(interp):
    outcome = interp.feed("(define ok 1) " + "(" * 5000 + ")" * 5000)
    assert outcome.values == [Symbol("ok")]
    assert outcome.kind is ErrorKind.RECURSION
    assert interp.eval("(+ ok 1)") == 2.0
