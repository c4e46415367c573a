import pytest

from sublisp.errors import MalformedExpression
from sublisp.evaluation.classifier import (
    Shape,
    classify,
    is_constant,
    is_if_form,
    is_lambda_form,
    is_procedure,
    is_quote_form,
    is_sequence,
    is_symbol,
    lambda_parts,
    tagged_form,
)
from sublisp.types.primitive import Primitive
from sublisp.types.symbol import Symbol


@pytest.mark.parametrize("value", [0, -3, 2.5, 1j, True, False, "", "text"])
def test_atoms_are_constants(value):
    assert is_constant(value)
    assert classify(value) is Shape.CONSTANT


def test_primitive_is_constant():
    prim = Primitive("id", lambda args: args[0])
    assert is_constant(prim)
    assert is_procedure(prim)


def test_symbol_is_not_a_constant():
    assert not is_constant(Symbol("x"))
    assert is_symbol(Symbol("x"))
    assert not is_symbol("x")


@pytest.mark.parametrize(
    "expr,shape",
    [
        ([Symbol("quote"), [1, 2]], Shape.QUOTE),
        ([Symbol("if"), True, 1, 2], Shape.IF),
        ([Symbol("lambda"), [Symbol("x")], Symbol("x")], Shape.LAMBDA),
        ([Symbol("f"), 1], Shape.CALL),
        ([1, 2, 3], Shape.CALL),
        ([], Shape.CALL),
        (Symbol("quote"), Shape.SYMBOL),
    ],
)
def test_classify(expr, shape):
    assert classify(expr) is shape


def test_tagged_form_predicates():
    is_let = tagged_form("let")
    assert is_let([Symbol("let"), [], 1])
    assert not is_let([Symbol("lambda"), [], 1])
    assert not is_let([])
    assert not is_let(Symbol("let"))
    assert is_quote_form([Symbol("quote"), 1])
    assert is_if_form([Symbol("if")])
    assert is_lambda_form([Symbol("lambda")])
    assert not is_lambda_form(["lambda", [], 1])


def test_sequences():
    assert is_sequence([])
    assert not is_sequence((1, 2))
    assert not is_sequence("abc")


@pytest.mark.parametrize("value", [None, (1, 2), {"a": 1}, object()])
def test_unknown_shapes_are_malformed(value):
    with pytest.raises(MalformedExpression):
        classify(value)


def test_procedure_values():
    assert is_procedure([Symbol("lambda"), [], 1])
    assert not is_procedure([Symbol("f"), 1])
    assert not is_procedure(Symbol("car"))
    assert not is_procedure(42)


def test_lambda_parts():
    params, body = lambda_parts([Symbol("lambda"), [Symbol("x")], [Symbol("f"), Symbol("x")]])
    assert params == [Symbol("x")]
    assert body == [Symbol("f"), Symbol("x")]


@pytest.mark.parametrize(
    "fn",
    [
        [Symbol("lambda"), [Symbol("x")]],
        [Symbol("lambda"), [Symbol("x")], 1, 2],
        [Symbol("lambda"), Symbol("x"), 1],
        [Symbol("lambda"), [1], 1],
    ],
)
def test_lambda_parts_rejects_malformed(fn):
    with pytest.raises(MalformedExpression):
        lambda_parts(fn)
