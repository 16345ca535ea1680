"""Decode error taxonomy.

Every failure of a decode call is raised as a subclass of `DecodeError`.
Errors carry the offending word `index` and/or type `descriptor` so callers
(the CLI, services) can report precisely what went wrong.
"""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for all decoding failures."""

    def __init__(self, message: str, *, index: int | None = None, descriptor: str | None = None) -> None:
        super().__init__(message)
        self.index = index
        self.descriptor = descriptor


class MalformedWordError(DecodeError):
    """A word holds non-hexadecimal characters."""


class TruncatedPayloadError(DecodeError):
    """Payload length is not a whole number of words."""


class IndexOutOfRangeError(DecodeError):
    """A cursor, tail or offset-derived index falls outside the word sequence."""


class OffsetOverflowError(DecodeError):
    """An offset, length or count does not fit the 32-bit index range."""


class UnsupportedTypeError(DecodeError):
    """A type descriptor the decoder cannot dispatch on."""


class MalformedSignatureError(DecodeError):
    """A function signature without a well-formed parameter list."""


class NestingTooDeepError(DecodeError):
    """Array nesting exceeds the configured maximum depth."""


class SelectorMismatchError(DecodeError):
    """Calldata selector does not belong to the given signature."""
