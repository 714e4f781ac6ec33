import pytest
from hypothesis import given
from hypothesis import strategies as st

from estudos.linkedlist import LinkedList


@given(st.lists(st.integers()))
def test_append_keeps_order(values):
    items = LinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


@given(st.lists(st.integers()))
def test_prepend_reverses_order(values):
    items = LinkedList()
    for value in values:
        items.prepend(value)
    assert list(items) == values[::-1]


def test_prepend_then_append_mix():
    items = LinkedList(["b"])
    items.prepend("a")
    items.append("c")
    assert list(items) == ["a", "b", "c"]


def test_new_list_is_empty():
    items = LinkedList()
    assert items.is_empty() is True
    assert len(items) == 0


def test_remove_default_drops_head():
    items = LinkedList(["x", "y", "z"])
    items.remove()
    assert list(items) == ["y", "z"]
    assert len(items) == 2


def test_remove_middle_and_tail():
    items = LinkedList(["x", "y", "z"])
    items.remove(1)
    assert list(items) == ["x", "z"]
    items.remove(1)
    assert list(items) == ["x"]
    items.append("w")
    assert list(items) == ["x", "w"]


def test_remove_past_end_is_ignored():
    items = LinkedList(["x", "y"])
    items.remove(2)
    assert list(items) == ["x", "y"]


def test_remove_on_single_value_empties_whatever_index():
    items = LinkedList(["only"])
    items.remove(5)
    assert items.is_empty() is True
    assert len(items) == 0


def test_remove_on_empty_list_does_nothing():
    items = LinkedList()
    items.remove(0)
    assert list(items) == []


def test_contains():
    items = LinkedList([3, 5, 8])
    assert 5 in items
    assert 4 not in items


def test_getitem_returns_positions():
    values = ["p", "q", "r"]
    items = LinkedList(values)
    assert [items[i] for i in range(len(values))] == values


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_getitem_out_of_range(index):
    with pytest.raises(IndexError):
        LinkedList(["p", "q", "r"])[index]


def test_getitem_rejects_non_integer():
    with pytest.raises(TypeError):
        LinkedList(["p"])["0"]


def test_clear_empties_list():
    items = LinkedList([1, 2, 3])
    items.clear()
    assert items.is_empty() is True
    assert list(items) == []
    items.append(4)
    assert list(items) == [4]


def test_str_lists_indices():
    assert str(LinkedList(["a", "b"])) == "Indice 0: a\nIndice 1: b\n\n"


def test_describe_lists_elements():
    assert LinkedList(["a", "b"]).describe() == "Elemento 0 : \ta\nElemento 1 : \tb\n"


def test_to_ints_prefixes_size():
    result = LinkedList([7, 8, 9]).to_ints()
    assert result[1:] == [7, 8, 9]
    assert result[0] == 4