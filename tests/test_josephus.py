import pytest

from dsalgo.josephus import josephus


def test_seven_people_every_third():
    executed, survivor = josephus(7, 3)
    assert executed == [3, 6, 2, 7, 5, 1]
    assert survivor == 4


def test_single_person_survives():
    assert josephus(1, 5) == ([], 1)


@pytest.mark.parametrize("n", [2, 5, 9])
def test_k_one_removes_in_order(n):
    executed, survivor = josephus(n, 1)
    assert executed == list(range(1, n))
    assert survivor == n


@pytest.mark.parametrize("n,k", [(4, 3), (5, 2), (7, 3), (10, 4), (12, 13)])
def test_everyone_accounted_for_once(n, k):
    executed, survivor = josephus(n, k)
    assert sorted(executed + [survivor]) == list(range(1, n + 1))
    assert len(executed) == n - 1


@pytest.mark.parametrize("n,k", [(0, 3), (5, 0), (-1, 1)])
def test_invalid_arguments(n, k):
    with pytest.raises(ValueError):
        josephus(n, k)