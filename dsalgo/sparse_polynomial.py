"""Polynomial that stores only its non-zero terms."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One term ``coef * x**exp``."""

    coef: float
    exp: int


def _format_number(value: float) -> str:
    return f"{value:g}"


class SparsePolynomial:
    """Polynomial kept as a list of non-zero terms, in the order they were added.

    Terms are expected to be added in ascending order of exponent, one per
    exponent; ``add`` relies on that.
    """

    def __init__(self) -> None:
        self._terms: list[Term] = []

    def terms(self) -> tuple[Term, ...]:
        """Return the stored terms."""
        return tuple(self._terms)

    def new_term(self, coef: float, exp: int) -> None:
        """Append a term; a zero coefficient is ignored."""
        if coef == 0.0:
            return
        self._terms.append(Term(float(coef), exp))

    def evaluate(self, x: float) -> float:
        """Return the value of the polynomial at ``x``."""
        return sum((term.coef * x**term.exp for term in self._terms), 0.0)

    def add(self, other: SparsePolynomial) -> SparsePolynomial:
        """Return the sum, merging two exponent-sorted term lists."""
        result = SparsePolynomial()
        mine, theirs = self._terms, other._terms
        i = j = 0
        while i < len(mine) and j < len(theirs):
            a, b = mine[i], theirs[j]
            if a.exp == b.exp:
                result.new_term(a.coef + b.coef, a.exp)
                i += 1
                j += 1
            elif b.exp < a.exp:
                result.new_term(b.coef, b.exp)
                j += 1
            else:
                result.new_term(a.coef, a.exp)
                i += 1
        for term in mine[i:] + theirs[j:]:
            result.new_term(term.coef, term.exp)
        return result

    def __str__(self) -> str:
        parts = []
        for term in self._terms:
            text = _format_number(term.coef)
            if term.exp != 0:
                text += f"*x^{term.exp}"
            parts.append(text)
        return " + ".join(parts)

    def __repr__(self) -> str:
        return f"SparsePolynomial({self._terms!r})"