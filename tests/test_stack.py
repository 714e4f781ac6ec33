import pytest
from hypothesis import given
from hypothesis import strategies as st

from estudos.stack import Stack


@given(st.lists(st.integers()))
def test_pop_returns_values_in_reverse(values):
    stack = Stack()
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert stack.is_empty() is True


@given(st.lists(st.text()))
def test_iteration_runs_top_down(values):
    stack = Stack()
    for value in values:
        stack.push(value)
    assert list(stack) == values[::-1]
    assert len(stack) == len(values)


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_discard_drops_top():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    stack.discard()
    assert list(stack) == ["a"]


def test_discard_on_empty_does_nothing():
    stack = Stack()
    stack.discard()
    assert len(stack) == 0


def test_clear_empties_stack():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    stack.clear()
    assert stack.is_empty() is True
    with pytest.raises(IndexError):
        stack.pop()


def test_describe_lists_top_first():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    assert stack.describe() == "Elemento 0 : \tb\nElemento 1 : \ta\n"