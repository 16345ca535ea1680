"""Core configuration, constants and error types.

This package provides:
- Configuration (DecoderConfig)
- Decode error taxonomy (DecodeError and subclasses)
"""

from abidecode.core.config import DEFAULT_CONFIG, DecoderConfig
from abidecode.core.errors import (
    DecodeError,
    IndexOutOfRangeError,
    MalformedSignatureError,
    MalformedWordError,
    NestingTooDeepError,
    OffsetOverflowError,
    SelectorMismatchError,
    TruncatedPayloadError,
    UnsupportedTypeError,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DecoderConfig",
    "DecodeError",
    "IndexOutOfRangeError",
    "MalformedSignatureError",
    "MalformedWordError",
    "NestingTooDeepError",
    "OffsetOverflowError",
    "SelectorMismatchError",
    "TruncatedPayloadError",
    "UnsupportedTypeError",
]
