"""Dense polynomial with a fixed maximum degree."""

from __future__ import annotations


def _format_number(value: float) -> str:
    return f"{value:g}"


class Polynomial:
    """Polynomial whose coefficients are stored for every exponent up to a maximum."""

    def __init__(self, max_degree: int = 100) -> None:
        if max_degree <= 0:
            raise ValueError("max_degree must be positive")
        self._coeffs = [0.0] * (max_degree + 1)

    def max_degree(self) -> int:
        """Return the highest exponent this polynomial can hold."""
        return len(self._coeffs) - 1

    def _check_exp(self, exp: int) -> None:
        if not 0 <= exp < len(self._coeffs):
            raise ValueError(f"exponent {exp} outside 0..{self.max_degree()}")

    def coefficient(self, exp: int) -> float:
        """Return the coefficient of ``x**exp``."""
        self._check_exp(exp)
        return self._coeffs[exp]

    def new_term(self, coef: float, exp: int) -> None:
        """Set the coefficient of ``x**exp`` to ``coef``."""
        self._check_exp(exp)
        self._coeffs[exp] = float(coef)

    def add(self, other: Polynomial) -> Polynomial:
        """Return the sum; its maximum degree is the larger of the two."""
        result = Polynomial(max(self.max_degree(), other.max_degree()))
        for source in (self._coeffs, other._coeffs):
            for exp, coef in enumerate(source):
                result._coeffs[exp] += coef
        return result

    def multiply(self, other: Polynomial) -> Polynomial:
        """Return the product of two polynomials of the same maximum degree."""
        if self.max_degree() != other.max_degree():
            raise ValueError("polynomials must have the same maximum degree")
        result = Polynomial(self.max_degree() + other.max_degree())
        for exp, coef in enumerate(self._coeffs):
            if coef == 0.0:
                continue
            for other_exp, other_coef in enumerate(other._coeffs):
                if other_coef != 0.0:
                    result._coeffs[exp + other_exp] += coef * other_coef
        return result

    def evaluate(self, x: float) -> float:
        """Return the value of the polynomial at ``x``."""
        total = self._coeffs[0]
        for exp, coef in enumerate(self._coeffs[1:], start=1):
            total += coef * x**exp
        return total

    def __str__(self) -> str:
        parts = []
        for exp, coef in enumerate(self._coeffs):
            if coef == 0.0:
                continue
            text = _format_number(coef)
            if exp != 0:
                text += f"*x^{exp}"
            parts.append(text)
        return " + ".join(parts)

    def __repr__(self) -> str:
        return f"Polynomial({self.max_degree()})"