from __future__ import annotations

# ABI word geometry
WORD_BYTES     = 32
WORD_HEX_CHARS = WORD_BYTES * 2
WORD_BITS      = WORD_BYTES * 8

# offsets, lengths and array counts must fit an unsigned 32-bit index
MAX_INDEX = 2**32 - 1

DEFAULT_MAX_DEPTH = 32
