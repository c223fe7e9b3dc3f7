"""
Threshold secret sharing: byte-wise Shamir splitting over GF(2^8).

Modules:
- crypto: field arithmetic, randomness sources, polynomials, split/combine
- models: share representation and wire codec
- config: split defaults loaded from JSON
- utils: logging setup
"""

from .crypto.shamir import combine, split
from .errors import ConfigurationError, LengthMismatchError, MalformedShareError, SharingError
from .models.share import Share, decode_share, encode_share

__version__ = "0.1.0"
__all__ = [
    "split",
    "combine",
    "Share",
    "decode_share",
    "encode_share",
    "SharingError",
    "ConfigurationError",
    "MalformedShareError",
    "LengthMismatchError",
]
