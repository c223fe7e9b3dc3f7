from .share import Share, decode_share, encode_share

__all__ = ["Share", "decode_share", "encode_share"]
