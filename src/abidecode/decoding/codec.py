"""Word codec: typed conversions of a single 32-byte ABI word.

All numeric results are Python ints, so 256-bit values are exact.
"""

from __future__ import annotations

from eth_utils import to_checksum_address

from abidecode.core.constants import MAX_INDEX, WORD_BITS, WORD_HEX_CHARS
from abidecode.core.errors import MalformedWordError, OffsetOverflowError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _check_hex(word: str) -> None:
    if not word or not _HEX_DIGITS.issuperset(word):
        raise MalformedWordError(f"not a hex word: {word!r}")


def to_unsigned(word: str, bit_size: int = WORD_BITS) -> int:
    """Parse the word as base-16, keeping the low `bit_size` bits."""
    _check_hex(word)
    value = int(word, 16)
    if bit_size < WORD_BITS:
        value &= (1 << bit_size) - 1
    return value


def to_signed(word: str, bit_size: int = WORD_BITS) -> int:
    """Two's-complement interpretation of the word at `bit_size` bits.

    Values below the midpoint `2**(bit_size - 1)` stay non-negative;
    values at or above it wrap to `-(2**bit_size - u)`.
    """
    u = to_unsigned(word, bit_size)
    modulus = 1 << bit_size
    half = modulus >> 1
    if u < half:
        return u
    return -(modulus - u)


def to_bool(word: str) -> bool:
    """True only for a word whose unsigned value is exactly 1."""
    return to_unsigned(word) == 1


def to_text(word: str, byte_length: int) -> str:
    """Read the first `byte_length` bytes as 8-bit character codes."""
    run = word[: byte_length * 2]
    if not run:
        return ""
    _check_hex(run)
    return bytes.fromhex(run).decode("latin-1")


def to_opaque_bytes(word: str) -> str:
    """Return the word verbatim with a `0x` prefix."""
    return word if word.startswith("0x") else "0x" + word


def to_address(word: str) -> str:
    """Checksummed address held in the low 20 bytes of the word."""
    _check_hex(word)
    return to_checksum_address("0x" + word[-40:])


def to_index(word: str) -> int:
    """Unsigned value for offsets, lengths and counts, bounded to 32 bits."""
    value = to_unsigned(word)
    if value > MAX_INDEX:
        raise OffsetOverflowError(f"index value {value} exceeds the 32-bit range")
    return value


def to_word(value: int, bit_size: int = WORD_BITS) -> str:
    """Encode an int as a 64-char word; negatives in two's complement at `bit_size`.

    Negative values are sign-extended to the full word, as the ABI does.
    """
    if value < 0:
        if value < -(1 << (bit_size - 1)):
            raise ValueError(f"{value} does not fit int{bit_size}")
        value += 1 << WORD_BITS
    elif value >= 1 << WORD_BITS:
        raise ValueError(f"{value} does not fit a word")
    return format(value, f"0{WORD_HEX_CHARS}x")
