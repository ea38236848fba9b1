import pytest

from practicekit.arith import add, divide, swap, total


def test_add():
    assert add(2, 3) == 5


def test_add_negative():
    assert add(-1, -2) == -3


def test_swap():
    assert swap(1, 2) == (2, 1)


@pytest.mark.parametrize("a, b, expected", [(10, 2, 5), (-6, 3, -2)])
def test_divide(a, b, expected):
    assert divide(a, b) == expected


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError, match="division by zero"):
        divide(5, 0)


def test_total():
    assert total(1, 2, 3, 4) == 10
    assert total(10, 20) == 30


def test_total_empty():
    assert total() == 0