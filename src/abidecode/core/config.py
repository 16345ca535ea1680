from __future__ import annotations

from dataclasses import dataclass

from abidecode.core.constants import DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class DecoderConfig:
    """Configuration for the recursive value decoder."""

    # False: every int* is read with a 256-bit modulus regardless of declared width
    strict_int_width: bool = False
    # False: trailing hex that does not fill a whole word is dropped silently
    strict_length: bool = True
    # True: a dynamic array that is the only sibling in its scope has no offset word
    sole_array_inline: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH


DEFAULT_CONFIG = DecoderConfig()
