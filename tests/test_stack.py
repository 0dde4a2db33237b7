import pytest

from dsalgo.stack import Stack, reverse_string


def test_push_pop_sequence():
    s = Stack()
    s.push("A")
    s.push("B")
    s.push("C")
    assert str(s) == "A B C"
    assert s.top() == "C"
    assert s.pop() == "C"
    assert s.top() == "B"
    s.pop()
    s.push("E")
    assert str(s) == "A E"
    s.pop()
    assert s.top() == "A"
    s.pop()
    assert s.is_empty()


def test_int_stack():
    s = Stack()
    s.push(123)
    assert s.top() == 123
    assert len(s) == 1


def test_capacity_grows_by_doubling():
    s = Stack()
    assert s.capacity == 1
    s.push(1)
    s.push(2)
    assert s.capacity == 2
    s.push(3)
    assert s.capacity == 4
    assert list(s) == [1, 2, 3]


def test_iter_bottom_to_top():
    s = Stack(4)
    for x in "xyz":
        s.push(x)
    assert list(s) == ["x", "y", "z"]


def test_empty_top_and_pop_raise():
    s = Stack()
    with pytest.raises(IndexError):
        s.top()
    with pytest.raises(IndexError):
        s.pop()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Stack(0)


def test_reverse_string():
    assert reverse_string("Hello, World!") == "!dlroW ,olleH"


def test_reverse_string_round_trip():
    text = "abc def"
    assert reverse_string(reverse_string(text)) == text
    assert reverse_string("") == ""