"""
Arithmetic in GF(2^8), the field of 256 elements represented as bytes.

The field is defined by the AES/Rijndael reduction polynomial
x^8 + x^4 + x^3 + x + 1 (0x11B) with 0x03 as primitive element. Split and
combine must agree on both, so they are fixed here and nowhere else.

Multiplication and division go through log/exp tables. The tables are
immutable and built at most once per process, on first use.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional, Tuple

FIELD_POLYNOMIAL = 0x11B
GENERATOR = 0x03
FIELD_ORDER = 256


def _check_element(value: int) -> None:
    if not 0 <= value < FIELD_ORDER:
        raise ValueError(f"field element out of range: {value}")


def _carryless_mul(a: int, b: int) -> int:
    """Shift-and-reduce multiplication, used only to build the tables."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        if a & 0x100:
            a ^= FIELD_POLYNOMIAL
        b >>= 1
    return result


@dataclass(frozen=True)
class GF256Tables:
    """Log and exponent tables over the primitive element."""

    exp: Tuple[int, ...]
    log: Tuple[int, ...]

    @classmethod
    def build(cls) -> "GF256Tables":
        # exp is doubled so exp[log a + log b] never needs a modulo.
        exp = [0] * 510
        log = [0] * FIELD_ORDER
        value = 1
        for power in range(255):
            exp[power] = value
            log[value] = power
            value = _carryless_mul(value, GENERATOR)
        for power in range(255, 510):
            exp[power] = exp[power - 255]
        return cls(exp=tuple(exp), log=tuple(log))


_tables: Optional[GF256Tables] = None
_tables_lock = threading.Lock()


def get_tables() -> GF256Tables:
    """Return the shared tables, building them on first call."""
    global _tables
    tables = _tables
    if tables is None:
        with _tables_lock:
            if _tables is None:
                _tables = GF256Tables.build()
            tables = _tables
    return tables


def add(a: int, b: int) -> int:
    """Addition and subtraction are both XOR in characteristic 2."""
    _check_element(a)
    _check_element(b)
    return a ^ b


def mul(a: int, b: int) -> int:
    _check_element(a)
    _check_element(b)
    if a == 0 or b == 0:
        return 0
    tables = get_tables()
    return tables.exp[tables.log[a] + tables.log[b]]


def div(a: int, b: int) -> int:
    _check_element(a)
    _check_element(b)
    if b == 0:
        raise ZeroDivisionError("division by zero in GF(2^8)")
    if a == 0:
        return 0
    tables = get_tables()
    return tables.exp[tables.log[a] - tables.log[b] + 255]


def inverse(a: int) -> int:
    """Multiplicative inverse; 0 has none."""
    _check_element(a)
    if a == 0:
        raise ZeroDivisionError("zero has no multiplicative inverse in GF(2^8)")
    tables = get_tables()
    return tables.exp[255 - tables.log[a]]
