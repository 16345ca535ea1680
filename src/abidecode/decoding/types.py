"""Parameter type descriptors as tagged variants.

A descriptor such as `uint128[2][3]` is tokenized into a base type plus
bracket groups and built into nested `AbiTypes.*` values:
- `AbiTypes.Uint` / `AbiTypes.Int`: integer with declared bit width
- `AbiTypes.Bool`, `AbiTypes.String`, `AbiTypes.Address`
- `AbiTypes.Bytes`: `bytes<N>` (size N) or plain `bytes` (size None)
- `AbiTypes.Array`: element type plus `length` (None for `T[]`)

Bracket groups nest outermost-first: `T[2][3]` is an array of two `T[3]`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from abidecode.core.constants import DEFAULT_MAX_DEPTH, WORD_BITS
from abidecode.core.errors import NestingTooDeepError, UnsupportedTypeError

_TYPE_RE = re.compile(r"^(?P<base>[a-z]+?)(?P<width>\d*)(?P<dims>(?:\[\d*\])*)$")
_DIM_RE = re.compile(r"\[(\d*)\]")

# widths and dimensions past 32 bits are never decodable
_MAX_DIGITS = 10


class AbiTypes:
    @dataclass(frozen=True)
    class Uint:
        bits: int = WORD_BITS

        def __str__(self) -> str:
            return f"uint{self.bits}"

    @dataclass(frozen=True)
    class Int:
        bits: int = WORD_BITS

        def __str__(self) -> str:
            return f"int{self.bits}"

    @dataclass(frozen=True)
    class Bool:
        def __str__(self) -> str:
            return "bool"

    @dataclass(frozen=True)
    class String:
        def __str__(self) -> str:
            return "string"

    @dataclass(frozen=True)
    class Address:
        def __str__(self) -> str:
            return "address"

    @dataclass(frozen=True)
    class Bytes:
        size: int | None = None

        def __str__(self) -> str:
            return "bytes" if self.size is None else f"bytes{self.size}"

    @dataclass(frozen=True)
    class Array:
        element: AbiType
        length: int | None = None  # None → dynamic `T[]`

        def __str__(self) -> str:
            groups: list[str] = []
            t: AbiType = self
            while isinstance(t, AbiTypes.Array):
                groups.append("[]" if t.length is None else f"[{t.length}]")
                t = t.element
            return str(t) + "".join(groups)


AbiType = (
    AbiTypes.Uint
    | AbiTypes.Int
    | AbiTypes.Bool
    | AbiTypes.String
    | AbiTypes.Address
    | AbiTypes.Bytes
    | AbiTypes.Array
)


def _to_int(digits: str, descriptor: str) -> int:
    if len(digits) > _MAX_DIGITS:
        raise UnsupportedTypeError(f"size out of range in {descriptor!r}", descriptor=descriptor)
    return int(digits)


def _parse_base(base: str, width: str, descriptor: str) -> AbiType:
    match base:
        case "uint":
            return AbiTypes.Uint(_to_int(width, descriptor)) if width else AbiTypes.Uint()
        case "int":
            return AbiTypes.Int(_to_int(width, descriptor)) if width else AbiTypes.Int()
        case "bytes":
            return AbiTypes.Bytes(_to_int(width, descriptor)) if width else AbiTypes.Bytes()
        case "bool" if not width:
            return AbiTypes.Bool()
        case "string" if not width:
            return AbiTypes.String()
        case "address" if not width:
            return AbiTypes.Address()
    raise UnsupportedTypeError(f"unsupported type: {descriptor!r}", descriptor=descriptor)


def parse_type(descriptor: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> AbiType:
    """Tokenize one parameter type descriptor into an `AbiType`.

    Descriptors with more than `max_depth` bracket groups raise
    `NestingTooDeepError` before any type is built.
    """
    m = _TYPE_RE.match(descriptor.strip())
    if m is None:
        raise UnsupportedTypeError(f"unsupported type: {descriptor!r}", descriptor=descriptor)
    dims = _DIM_RE.findall(m["dims"])
    if len(dims) > max_depth:
        raise NestingTooDeepError(
            f"{len(dims)} array levels exceed the limit of {max_depth}",
            descriptor=descriptor,
        )
    t = _parse_base(m["base"], m["width"], descriptor)
    # wrap innermost (rightmost) group first so the leftmost ends up outermost
    for dim in reversed(dims):
        t = AbiTypes.Array(t, _to_int(dim, descriptor) if dim else None)
    return t


def is_dynamic(t: AbiType) -> bool:
    """True if the value lives in the tail and its head word is an offset.

    Plain `bytes` is read as a single opaque word and counts as static.
    """
    while isinstance(t, AbiTypes.Array):
        if t.length is None:
            return True
        t = t.element
    return isinstance(t, AbiTypes.String)


def head_size(t: AbiType) -> int:
    """Number of head words the type occupies inside its scope."""
    if is_dynamic(t):
        return 1
    size = 1
    while isinstance(t, AbiTypes.Array):
        size *= t.length
        t = t.element
    return size


def nesting_depth(t: AbiType) -> int:
    """Count of array levels wrapped around the base type."""
    depth = 0
    while isinstance(t, AbiTypes.Array):
        depth += 1
        t = t.element
    return depth
