"""Per-byte polynomials over GF(2^8): construction, Horner evaluation, interpolation."""

from __future__ import annotations

from typing import List, Sequence

from .field import add, div, mul


def make_polynomial(intercept: int, coefficients: bytes) -> List[int]:
    """
    Build the coefficient list ``[intercept, c1, ..., c(t-1)]``.

    ``coefficients`` are the random terms for x^1 upwards.
    """
    if not 0 <= intercept < 256:
        raise ValueError(f"intercept out of range: {intercept}")
    return [intercept, *coefficients]


def evaluate(coeffs: Sequence[int], x: int) -> int:
    """Evaluate the polynomial at ``x`` with Horner's rule."""
    if x == 0:
        return coeffs[0]
    acc = 0
    for coeff in reversed(coeffs):
        acc = add(mul(acc, x), coeff)
    return acc


def interpolate_at_zero(x_samples: Sequence[int], y_samples: Sequence[int]) -> int:
    """
    Lagrange interpolation of the points ``(x_j, y_j)`` evaluated at x = 0.

    Subtraction is XOR, so each basis term is ``prod x_k / (x_k ^ x_j)``.
    Callers guarantee the x values are distinct and nonzero.
    """
    if len(x_samples) != len(y_samples):
        raise ValueError("sample length mismatch")
    result = 0
    for j, (xj, yj) in enumerate(zip(x_samples, y_samples)):
        basis = 1
        for k, xk in enumerate(x_samples):
            if k == j:
                continue
            basis = mul(basis, div(xk, add(xk, xj)))
        result = add(result, mul(basis, yj))
    return result
