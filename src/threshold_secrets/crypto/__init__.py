from .field import FIELD_POLYNOMIAL, GENERATOR, GF256Tables, add, div, get_tables, inverse, mul
from .polynomial import evaluate, interpolate_at_zero, make_polynomial
from .randomness import PrgRandomSource, RandomSource, SystemRandomSource, random_below, random_permutation
from .shamir import MAX_SHARES, MIN_SHARES, choose_x_coordinates, combine, split, validate_shares

__all__ = [
    "FIELD_POLYNOMIAL",
    "GENERATOR",
    "GF256Tables",
    "add",
    "div",
    "get_tables",
    "inverse",
    "mul",
    "evaluate",
    "interpolate_at_zero",
    "make_polynomial",
    "PrgRandomSource",
    "RandomSource",
    "SystemRandomSource",
    "random_below",
    "random_permutation",
    "MAX_SHARES",
    "MIN_SHARES",
    "choose_x_coordinates",
    "combine",
    "split",
    "validate_shares",
]
