import pytest

from sublisp.errors import MalformedExpression
from sublisp.evaluation.evaluator import evaluate
from sublisp.evaluation.substitution import lookup, quote_if_needed, substitute
from sublisp.reader.parser import read
from sublisp.types.primitive import Primitive
from sublisp.types.symbol import Symbol

X, Y, Z = Symbol("x"), Symbol("y"), Symbol("z")
QUOTE = Symbol("quote")
LAMBDA = Symbol("lambda")


def parse(source):
    [expr] = read(source)
    return expr


# -----------------------------------------------------
# quote_if_needed
# -----------------------------------------------------

@pytest.mark.parametrize("value", [1, 2.5, "s", True, False])
def test_atoms_inserted_directly(value):
    assert quote_if_needed(value) == value


def test_procedures_inserted_directly():
    prim = Primitive("car", lambda args: args[0][0])
    fn = [LAMBDA, [X], X]
    assert quote_if_needed(prim) is prim
    assert quote_if_needed(fn) is fn


@pytest.mark.parametrize("value", [[1, 2], [], Symbol("the"), {"k": 1}])
def test_other_values_are_quoted(value):
    assert quote_if_needed(value) == [QUOTE, value]


# -----------------------------------------------------
# lookup
# -----------------------------------------------------

def test_lookup_is_positional():
    assert lookup(Y, [X, Y], [1, 2]) == 2
    assert lookup(X, [X, Y], [1, 2]) == 1


def test_lookup_quotes_data():
    assert lookup(X, [X], [[1, 2]]) == [QUOTE, [1, 2]]


def test_lookup_free_symbol_unchanged():
    assert lookup(Z, [X, Y], [1, 2]) is Z


def test_lookup_with_missing_argument_leaves_symbol_free():
    assert lookup(Y, [X, Y], [1]) is Y


# -----------------------------------------------------
# substitute
# -----------------------------------------------------

def test_substitute_replaces_parameters():
    body = parse("(+ x (* y x))")
    assert substitute(body, [X, Y], [3, 4], frozenset()) == parse("(+ 3 (* 4 3))")


def test_substitute_does_not_mutate_body():
    body = parse("(+ x 1)")
    substitute(body, [X], [5], frozenset())
    assert body == parse("(+ x 1)")


def test_substitute_leaves_quoted_data_alone():
    body = parse("(list x '(x y))")
    assert substitute(body, [X], [1], frozenset()) == parse("(list 1 '(x y))")


def test_substitute_into_if_form():
    body = parse("(if x y 0)")
    assert substitute(body, [X, Y], [True, 9], frozenset()) == [Symbol("if"), True, 9, 0]


def test_inner_lambda_shadows_parameter():
    body = parse("(lambda (x) (+ x y))")
    assert substitute(body, [X, Y], [1, 2], frozenset()) == parse("(lambda (x) (+ x 2))")


def test_shadowing_reaches_nested_bodies():
    body = parse("(lambda (x) (lambda (z) (list x y z)))")
    result = substitute(body, [X, Y, Z], [1, 2, 3], frozenset())
    assert result == parse("(lambda (x) (lambda (z) (list x 2 z)))")


def test_bound_symbols_are_never_replaced():
    assert substitute(X, [X], [1], frozenset({X})) is X


def test_free_symbols_pass_through_to_host(host, settings):
    body = parse("(car x)")
    result = substitute(body, [X], [[7, 8]], frozenset())
    assert result == [Symbol("car"), [QUOTE, [7, 8]]]
    assert evaluate(result, host, settings) == 7
    assert Symbol("car") in host.lookups


def test_substitute_malformed_inner_lambda():
    with pytest.raises(MalformedExpression):
        substitute([LAMBDA, X, X], [X], [1], frozenset())


def test_substitute_rejects_non_expressions():
    with pytest.raises(MalformedExpression):
        substitute([Symbol("f"), (1, 2)], [X], [1], frozenset())


# -----------------------------------------------------
# Application through substitution
# -----------------------------------------------------

@pytest.mark.parametrize(
    "arg_source",
    ["42", '"str"', "#f", "(lambda (y) (+ y 1))", "car"],
)
def test_identity_returns_argument_unchanged(arg_source, host, settings):
    arg = evaluate(parse(arg_source), host, settings)
    result = evaluate([parse("(lambda (x) x)"), [QUOTE, arg]], host, settings)
    assert result == arg
    if not isinstance(arg, (int, str)):
        assert result is arg


def test_identity_returns_data_unchanged(host, settings):
    result = evaluate(parse("((lambda (x) x) '(1 (2 3)))"), host, settings)
    assert result == [1, [2, 3]]


def test_shadowed_parameter_takes_inner_argument(host, settings):
    inner = evaluate(parse("((lambda (x) (lambda (x) x)) 'v1)"), host, settings)
    assert inner == parse("(lambda (x) x)")
    assert evaluate([inner, [QUOTE, Symbol("v2")]], host, settings) == Symbol("v2")


def test_curried_application(host, settings):
    expr = parse("(((lambda (x) (lambda (y) (- x y))) 10) 3)")
    assert evaluate(expr, host, settings) == 7


def test_procedure_arguments(host, settings):
    expr = parse("((lambda (f a) (f (f a))) (lambda (n) (* n n)) 3)")
    assert evaluate(expr, host, settings) == 81


def test_symbol_argument_is_requoted(host, settings):
    expr = parse("((lambda (s) (list s s)) 'abc)")
    assert evaluate(expr, host, settings) == [Symbol("abc"), Symbol("abc")]


def test_missing_argument_resolves_globally(host, settings):
    host.define("y", 100)
    expr = parse("((lambda (x y) (+ x y)) 1)")
    assert evaluate(expr, host, settings) == 101


def test_extra_arguments_ignored(host, settings):
    assert evaluate(parse("((lambda (x) x) 1 2 3)"), host, settings) == 1
