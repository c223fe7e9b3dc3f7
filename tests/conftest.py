import itertools
from typing import Iterable, List

import pytest


class CyclingSource:
    """Deterministic random source that repeats a fixed byte pattern and records requests."""

    def __init__(self, pattern: Iterable[int]) -> None:
        self._stream = itertools.cycle(list(pattern))
        self.requests: List[int] = []

    def get_random_bytes(self, count: int) -> bytes:
        self.requests.append(count)
        return bytes(next(self._stream) for _ in range(count))


class ExplodingSource:
    """Random source that must never be reached."""

    def get_random_bytes(self, count: int) -> bytes:
        raise AssertionError("random source should not have been called")


@pytest.fixture
def cycling_source():
    return CyclingSource


@pytest.fixture
def exploding_source() -> ExplodingSource:
    return ExplodingSource()
