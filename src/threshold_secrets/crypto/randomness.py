"""Randomness sources for coefficient and x-coordinate generation."""

from __future__ import annotations

import secrets
import threading
from typing import List, Protocol, Sequence, TypeVar

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can hand out ``count`` unpredictable bytes."""

    def get_random_bytes(self, count: int) -> bytes:
        ...


class SystemRandomSource:
    """OS CSPRNG. The default for every split."""

    def get_random_bytes(self, count: int) -> bytes:
        if count < 0:
            raise ValueError("count must be non-negative")
        return secrets.token_bytes(count)


def _derive_key_iv(seed: bytes) -> tuple[bytes, bytes]:
    hkdf = HKDF(algorithm=hashes.SHA256(), length=48, salt=None, info=b"threshold-secrets/prg")
    material = hkdf.derive(seed)
    return material[:32], material[32:]


class PrgRandomSource:
    """
    Deterministic AES-CTR keystream keyed from a seed.

    Successive calls continue the same stream, so two sources built from the
    same seed yield identical splits. Only meant for reproducible tests and
    vectors; production splits use :class:`SystemRandomSource`.
    """

    def __init__(self, seed: bytes) -> None:
        if not seed:
            raise ValueError("seed must be non-empty")
        key, iv = _derive_key_iv(seed)
        self._encryptor = Cipher(algorithms.AES(key), modes.CTR(iv)).encryptor()
        self._lock = threading.Lock()

    def get_random_bytes(self, count: int) -> bytes:
        if count < 0:
            raise ValueError("count must be non-negative")
        if count == 0:
            return b""
        with self._lock:
            return self._encryptor.update(b"\x00" * count)


def read_random_bytes(source: RandomSource, count: int) -> bytes:
    """Pull ``count`` bytes from ``source`` and check it delivered them."""
    data = bytes(source.get_random_bytes(count))
    if len(data) != count:
        raise RuntimeError(f"random source returned {len(data)} bytes, expected {count}")
    return data


def random_below(source: RandomSource, bound: int) -> int:
    """Uniform integer in ``[0, bound)`` by rejection sampling."""
    if bound <= 0:
        raise ValueError("bound must be positive")
    if bound == 1:
        return 0
    nbytes = ((bound - 1).bit_length() + 7) // 8
    span = 1 << (8 * nbytes)
    limit = span - span % bound
    while True:
        value = int.from_bytes(read_random_bytes(source, nbytes), byteorder="big")
        if value < limit:
            return value % bound


def random_permutation(source: RandomSource, values: Sequence[T]) -> List[T]:
    """Fisher-Yates shuffle of a copy of ``values``."""
    items = list(values)
    for i in range(len(items) - 1, 0, -1):
        j = random_below(source, i + 1)
        items[i], items[j] = items[j], items[i]
    return items
