import io

import pytest
from hypothesis import given, strategies as st

from linkedds.singly_linked_list import SinglyLinkedList


def make(values):
    lst = SinglyLinkedList()
    for v in values:
        lst.append(v)
    return lst


def test_new_list_is_empty():
    lst = SinglyLinkedList()
    assert lst.is_empty()
    assert len(lst) == 0
    assert list(lst) == []


def test_append_keeps_order():
    lst = make([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3
    assert not lst.is_empty()


def test_prepend_puts_values_first():
    lst = SinglyLinkedList()
    for v in [1, 2, 3]:
        lst.prepend(v)
    assert list(lst) == [3, 2, 1]


def test_insert_positions():
    lst = make([1, 3])
    lst.insert(1, 2)
    lst.insert(0, 0)
    lst.insert(100, 4)
    assert list(lst) == [0, 1, 2, 3, 4]
    assert len(lst) == 5


def test_insert_negative_index_raises():
    lst = make([1])
    with pytest.raises(ValueError):
        lst.insert(-1, 5)


def test_remove_tail_then_append():
    lst = make([1, 2, 3])
    assert lst.remove(2) == 3
    lst.append(9)
    assert list(lst) == [1, 2, 9]


def test_remove_only_element_then_append():
    lst = make([7])
    assert lst.remove(0) == 7
    assert lst.is_empty()
    lst.append(8)
    assert list(lst) == [8]


def test_remove_out_of_range_does_nothing():
    lst = make([1, 2])
    assert lst.remove(5) is None
    assert list(lst) == [1, 2]


def test_reverse_then_append():
    lst = make([1, 2, 3])
    lst.reverse()
    assert list(lst) == [3, 2, 1]
    lst.append(0)
    assert list(lst) == [3, 2, 1, 0]


def test_reverse_empty():
    lst = SinglyLinkedList()
    lst.reverse()
    assert list(lst) == []


def test_print_list_custom_formatter():
    lst = SinglyLinkedList(lambda v: f"<{v}>")
    lst.append(1)
    lst.append(2)
    buf = io.StringIO()
    lst.print_list(buf)
    assert buf.getvalue() == "<1><2>\n"


def test_print_list_default_to_stdout(capsys):
    lst = make(["a", "b"])
    lst.print_list()
    assert capsys.readouterr().out == "a b \n"


def test_print_empty_list_writes_newline():
    buf = io.StringIO()
    SinglyLinkedList().print_list(buf)
    assert buf.getvalue() == "\n"


operations = st.lists(
    st.one_of(
        st.tuples(st.just("append"), st.integers()),
        st.tuples(st.just("prepend"), st.integers()),
        st.tuples(st.just("insert"), st.integers(0, 10), st.integers()),
        st.tuples(st.just("remove"), st.integers(0, 10)),
        st.tuples(st.just("reverse")),
    )
)


@given(operations)
def test_behaves_like_python_list(ops):
    lst = SinglyLinkedList()
    model = []
    for op in ops:
        if op[0] == "append":
            lst.append(op[1])
            model.append(op[1])
        elif op[0] == "prepend":
            lst.prepend(op[1])
            model.insert(0, op[1])
        elif op[0] == "insert":
            lst.insert(op[1], op[2])
            model.insert(op[1], op[2])
        elif op[0] == "remove":
            expected = model.pop(op[1]) if op[1] < len(model) else None
            assert lst.remove(op[1]) == expected
        else:
            lst.reverse()
            model.reverse()
        assert list(lst) == model
        assert len(lst) == len(model)
    lst.append("end")
    assert list(lst)[-1] == "end"