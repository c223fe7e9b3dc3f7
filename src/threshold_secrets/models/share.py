"""
Share representation and its wire codec.

Wire form: one x-coordinate byte (1..255) followed by one y-value per
secret byte, in secret order. Storage and labelling are up to the caller.
"""

from __future__ import annotations

import binascii
from dataclasses import dataclass

from ..errors import LengthMismatchError, MalformedShareError


@dataclass(frozen=True)
class Share:
    """A single share: x-coordinate plus per-byte evaluations."""

    x: int
    y: bytes

    def __post_init__(self) -> None:
        if not 1 <= self.x <= 255:
            raise MalformedShareError(f"share x-coordinate must be in 1..255, got {self.x}")
        if len(self.y) == 0:
            raise LengthMismatchError("share must carry at least one y-value")

    def __len__(self) -> int:
        return len(self.y) + 1

    def to_bytes(self) -> bytes:
        return bytes([self.x]) + bytes(self.y)

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Share":
        return decode_share(data)

    @classmethod
    def from_hex(cls, hex_str: str) -> "Share":
        try:
            raw = binascii.unhexlify(hex_str.strip())
        except (binascii.Error, ValueError) as exc:
            raise MalformedShareError(f"share is not valid hex: {exc}") from exc
        return decode_share(raw)


def encode_share(share: Share) -> bytes:
    return share.to_bytes()


def decode_share(data: bytes) -> Share:
    """Parse wire bytes, rejecting empty input, missing y-values and x = 0."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("share must be bytes")
    raw = bytes(data)
    if len(raw) == 0:
        raise LengthMismatchError("share is empty")
    if len(raw) < 2:
        raise LengthMismatchError("share too short, need an x-coordinate and at least one y-value")
    if raw[0] == 0:
        raise MalformedShareError("share x-coordinate 0 is reserved for the secret")
    return Share(x=raw[0], y=raw[1:])
