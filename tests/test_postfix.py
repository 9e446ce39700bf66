import pytest

from adtkit.errors import IllegalStateError
from adtkit.postfix import (
    Operation,
    PostfixStack,
    execute_operation,
    is_symbol,
    operation_for,
)


def _evaluate(tokens):
    stack = PostfixStack()
    for token in tokens:
        stack.push(token)
    return stack


def test_stack_list_1():
    stack = _evaluate(["5", "9", "8", "+", "4", "6", "*", "*", "7", "+", "*"])
    assert int(stack.pop()) == 2075


def test_stack_list_2():
    stack = _evaluate(["5", "10", "2", "*", "+"])
    assert int(stack.pop()) == 25


def test_stack_list_3():
    stack = _evaluate(["20", "15", "100", "5", "-", "*", "+", "21", "-"])
    assert int(stack.pop()) == 1424


def test_expression_leaves_single_value():
    stack = _evaluate(["5", "10", "2", "*", "+"])
    stack.pop()
    assert stack.is_empty()


@pytest.mark.parametrize("token", ["+", "*", "-", "/", ":"])
def test_symbols_recognised(token):
    assert is_symbol(token) is True


@pytest.mark.parametrize("token", ["**", "5", "+5", "", "x"])
def test_non_symbols(token):
    assert is_symbol(token) is False


@pytest.mark.parametrize(
    ("symbol", "operation"),
    [
        ("+", Operation.PLUS),
        ("-", Operation.MINUS),
        (":", Operation.DIVIDE),
        ("/", Operation.DIVIDE),
        ("*", Operation.MULTIPLY),
        ("**", Operation.ELEVATE),
        ("?", Operation.ELEVATE),
    ],
)
def test_operation_for(symbol, operation):
    assert operation_for(symbol) is operation


def test_result_is_string_of_product():
    assert execute_operation("*", "10", "2") == "20"


def test_minus_is_symmetric():
    assert execute_operation("-", "5", "100") == execute_operation("-", "100", "5")


def test_divide_uses_both_symbols_alike():
    assert execute_operation("/", "10", "2") == execute_operation(":", "10", "2")


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        execute_operation("/", "3", "0")


def test_non_numeric_operand_raises():
    with pytest.raises(ValueError):
        execute_operation("+", "a", "1")


def test_operator_without_operands_raises():
    stack = PostfixStack()
    stack.push("1")
    with pytest.raises(IllegalStateError):
        stack.push("+")