import pytest

from dsalgo.sparse_polynomial import SparsePolynomial, Term


def build(*pairs):
    p = SparsePolynomial()
    for coef, exp in pairs:
        p.new_term(coef, exp)
    return p


@pytest.fixture
def p1():
    return build((1.0, 0), (1.5, 1), (2.0, 2))


def test_str(p1):
    assert str(p1) == "1 + 1.5*x^1 + 2*x^2"


@pytest.mark.parametrize("x, expected", [(0.0, 1.0), (1.0, 4.5), (2.0, 12.0)])
def test_evaluate(p1, x, expected):
    assert p1.evaluate(x) == pytest.approx(expected)


def test_zero_coefficient_ignored():
    p = build((0.0, 3), (2.0, 4))
    assert p.terms() == (Term(2.0, 4),)


def test_add_first_example(p1):
    p2 = build((1.0, 1), (3.0, 2), (5.0, 7), (2.0, 11))
    assert str(p2) == "1*x^1 + 3*x^2 + 5*x^7 + 2*x^11"
    assert str(p1.add(p2)) == "1 + 2.5*x^1 + 5*x^2 + 5*x^7 + 2*x^11"


def test_add_second_example():
    a = build((1.0, 0), (1.5, 1), (2.0, 2), (5.0, 7), (3.5, 10), (5.5, 20), (5.0, 1000))
    b = build((3.2, 0), (1.0, 1), (3.0, 2), (2.0, 11))
    assert str(a.add(b)) == (
        "4.2 + 2.5*x^1 + 5*x^2 + 5*x^7 + 3.5*x^10 + 2*x^11 + 5.5*x^20 + 5*x^1000"
    )


def test_add_is_commutative_and_sorted(p1):
    p2 = build((1.0, 1), (3.0, 2), (5.0, 7), (2.0, 11))
    forward, backward = p1.add(p2), p2.add(p1)
    assert forward.terms() == backward.terms()
    exps = [t.exp for t in forward.terms()]
    assert exps == sorted(exps)


def test_add_evaluates_to_sum(p1):
    p2 = build((1.0, 1), (3.0, 2), (5.0, 7))
    for x in (-1.0, 0.5, 1.5):
        assert p1.add(p2).evaluate(x) == pytest.approx(p1.evaluate(x) + p2.evaluate(x))


def test_cancelling_terms_dropped():
    a = build((1.0, 0), (2.0, 1))
    b = build((-2.0, 1),)
    assert a.add(b).terms() == (Term(1.0, 0),)


def test_empty_polynomial():
    p = SparsePolynomial()
    assert p.terms() == ()
    assert str(p) == ""
    assert p.evaluate(3.0) == 0.0