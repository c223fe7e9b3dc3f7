"""
Shamir secret sharing over GF(2^8), one polynomial per secret byte.

``split`` turns a secret into ``share_count`` shares of which any
``threshold`` reconstruct it through ``combine``. Fewer shares reveal
nothing about the secret.

There is no integrity tag. ``combine`` cannot tell how many shares the
split required, so passing fewer than that threshold, or mixing shares from
different splits, returns well-formed but meaningless bytes instead of an
error. Callers that need detection must layer their own checksum or MAC.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union

from ..errors import ConfigurationError, LengthMismatchError, MalformedShareError
from ..models.share import Share
from ..utils.logging import get_logger
from .polynomial import evaluate, interpolate_at_zero, make_polynomial
from .randomness import RandomSource, SystemRandomSource, random_permutation, read_random_bytes

MIN_SHARES = 2
MAX_SHARES = 255
MAX_X_ATTEMPTS = 8

ShareInput = Union[bytes, bytearray, memoryview, Share]

logger = get_logger(__name__)


def _validate_parameters(secret: bytes, share_count: int, threshold: int) -> None:
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise ConfigurationError("secret must be bytes")
    if len(secret) == 0:
        raise ConfigurationError("secret must be non-empty")
    if not MIN_SHARES <= share_count <= MAX_SHARES:
        raise ConfigurationError(f"share count must satisfy {MIN_SHARES} <= n <= {MAX_SHARES}")
    if not MIN_SHARES <= threshold <= MAX_SHARES:
        raise ConfigurationError(f"threshold must satisfy {MIN_SHARES} <= t <= {MAX_SHARES}")
    if threshold > share_count:
        raise ConfigurationError("threshold cannot exceed share count")


def _check_x_coordinates(x_coordinates: Sequence[int]) -> None:
    for x in x_coordinates:
        if not 1 <= x <= 255:
            raise MalformedShareError(f"x-coordinate must be in 1..255, got {x}")
    if len(set(x_coordinates)) != len(x_coordinates):
        raise MalformedShareError("duplicate x-coordinates")


def choose_x_coordinates(share_count: int, random_source: RandomSource) -> List[int]:
    """Random distinct x-coordinates in 1..255, taken from a shuffled range."""
    for _ in range(MAX_X_ATTEMPTS):
        candidates = random_permutation(random_source, range(1, 256))[:share_count]
        if len(set(candidates)) == share_count:
            return candidates
        logger.debug("Discarding x-coordinate draw with duplicates")
    raise RuntimeError("could not draw distinct x-coordinates")


def split(
    secret: bytes,
    share_count: int,
    threshold: int,
    *,
    random_source: Optional[RandomSource] = None,
    x_coordinates: Optional[Sequence[int]] = None,
) -> List[bytes]:
    """
    Split ``secret`` into ``share_count`` shares, any ``threshold`` of which rebuild it.

    Args:
        secret: Non-empty secret bytes.
        share_count: Number of shares to produce (2..255).
        threshold: Shares needed to reconstruct (2..share_count).
        random_source: Byte source for coefficients and x-coordinates.
            Defaults to the OS CSPRNG.
        x_coordinates: Optional fixed x-coordinates, one per share.

    Returns:
        Shares in wire form: x-coordinate byte followed by one y-value per
        secret byte.

    Raises:
        ConfigurationError: bad counts, threshold or empty secret.
        MalformedShareError: fixed x-coordinates that are zero, out of range
            or repeated.
    """
    _validate_parameters(secret, share_count, threshold)
    fixed_xs: Optional[List[int]] = None
    if x_coordinates is not None:
        fixed_xs = [int(x) for x in x_coordinates]
        if len(fixed_xs) != share_count:
            raise ConfigurationError(f"expected {share_count} x-coordinates, got {len(fixed_xs)}")
        _check_x_coordinates(fixed_xs)
    source = random_source if random_source is not None else SystemRandomSource()
    xs = fixed_xs if fixed_xs is not None else choose_x_coordinates(share_count, source)

    secret_bytes = bytes(secret)
    degree = threshold - 1
    randomness = read_random_bytes(source, degree * len(secret_bytes))

    ys = [bytearray(len(secret_bytes)) for _ in xs]
    for i, value in enumerate(secret_bytes):
        coeffs = make_polynomial(value, randomness[i * degree : (i + 1) * degree])
        for share_idx, x in enumerate(xs):
            ys[share_idx][i] = evaluate(coeffs, x)

    logger.debug(
        "Split %d-byte secret into %d shares (threshold %d)", len(secret_bytes), share_count, threshold
    )
    return [bytes([x]) + bytes(y) for x, y in zip(xs, ys)]


def _raw_share(share: ShareInput) -> bytes:
    if isinstance(share, Share):
        return share.to_bytes()
    if isinstance(share, (bytes, bytearray, memoryview)):
        return bytes(share)
    raise TypeError("shares must be bytes or Share instances")


def validate_shares(shares: Iterable[ShareInput]) -> List[Share]:
    """
    Check a share set before any arithmetic runs on it.

    Raises:
        ConfigurationError: fewer than 2 or more than 255 shares.
        LengthMismatchError: a share shorter than 2 bytes or unequal lengths.
        MalformedShareError: an x-coordinate of 0 or a repeated x-coordinate.
    """
    raw_shares = [_raw_share(share) for share in shares]
    if len(raw_shares) < MIN_SHARES:
        raise ConfigurationError(f"at least {MIN_SHARES} shares are required to combine")
    if len(raw_shares) > MAX_SHARES:
        raise ConfigurationError(f"at most {MAX_SHARES} shares can be combined")
    length = len(raw_shares[0])
    for raw in raw_shares:
        if len(raw) < 2:
            raise LengthMismatchError("share too short, need an x-coordinate and at least one y-value")
        if len(raw) != length:
            raise LengthMismatchError("all shares must have the same length")
    seen = set()
    for raw in raw_shares:
        if raw[0] == 0:
            raise MalformedShareError("share x-coordinate 0 is reserved for the secret")
        if raw[0] in seen:
            raise MalformedShareError(f"duplicate share x-coordinate {raw[0]}")
        seen.add(raw[0])
    return [Share(x=raw[0], y=raw[1:]) for raw in raw_shares]


def combine(shares: Iterable[ShareInput]) -> bytes:
    """
    Reconstruct the secret by Lagrange interpolation at x = 0.

    Any ``threshold`` (or more) shares from one split return the original
    secret exactly. Fewer shares, or shares from different splits, are not
    detected and produce unrelated bytes of the same length.
    """
    share_list = validate_shares(shares)
    x_samples = [share.x for share in share_list]
    secret_len = len(share_list[0].y)
    secret = bytearray(secret_len)
    for i in range(secret_len):
        secret[i] = interpolate_at_zero(x_samples, [share.y[i] for share in share_list])
    logger.debug("Combined %d shares into %d-byte secret", len(share_list), secret_len)
    return bytes(secret)
