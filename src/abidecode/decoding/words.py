"""Word sequence parsing and hex padding helpers.

A payload is split into 32-byte words kept as 64-character hex strings.
No hex validation happens here; malformed characters are reported by the
word codec at the point a word is actually converted.
"""

from __future__ import annotations

from enum import Enum

from abidecode.core.constants import WORD_BYTES, WORD_HEX_CHARS
from abidecode.core.errors import TruncatedPayloadError

WordSequence = tuple[str, ...]


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"


def strip_hex_prefix(payload: str) -> str:
    """Trim surrounding whitespace and drop an optional `0x` prefix."""
    s = payload.strip()
    return s[2:] if s.startswith("0x") else s


def parse_words(payload: str, *, strict: bool = True) -> WordSequence:
    """Split a hex payload into consecutive 64-character words.

    With `strict=False` a trailing partial word is dropped silently;
    otherwise it raises `TruncatedPayloadError`.
    """
    body = strip_hex_prefix(payload)
    n_words, remainder = divmod(len(body), WORD_HEX_CHARS)
    if remainder and strict:
        raise TruncatedPayloadError(
            f"payload has {remainder} hex chars past the last whole word",
            index=n_words,
        )
    return tuple(body[i * WORD_HEX_CHARS : (i + 1) * WORD_HEX_CHARS] for i in range(n_words))


def join_words(words: WordSequence) -> str:
    """Concatenate words back into a 0x-prefixed payload."""
    return "0x" + "".join(words)


def pad_hex(hex_str: str, byte_count: int, direction: Direction = Direction.LEFT) -> str:
    """Zero-pad `hex_str` to `byte_count` bytes on the given side."""
    target = 2 * byte_count
    if len(hex_str) > target:
        raise ValueError(f"{hex_str!r} is longer than {byte_count} bytes")
    fill = "0" * (target - len(hex_str))
    if direction is Direction.LEFT:
        return fill + hex_str
    return hex_str + fill


def pad_to_word(hex_str: str, direction: Direction = Direction.LEFT) -> str:
    """Zero-pad `hex_str` to a full 32-byte word."""
    return pad_hex(hex_str, WORD_BYTES, direction)
