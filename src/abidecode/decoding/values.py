"""Decoded value tree and its canonical text rendering.

The decoder builds `Values.*` nodes; `render` flattens them to the public
text form: integers in decimal, text verbatim, bytes as 0x-hex, booleans
as `true`/`false`, lists as `[a, b, c]`. Top-level siblings are joined
with `", "` and carry no surrounding brackets.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

SEPARATOR = ", "


class Values:
    @dataclass(frozen=True, slots=True)
    class Integer:
        value: int

    @dataclass(frozen=True, slots=True)
    class Boolean:
        value: bool

    @dataclass(frozen=True, slots=True)
    class Text:
        value: str

    @dataclass(frozen=True, slots=True)
    class Bytes:
        value: str  # 0x-prefixed hex

    @dataclass(frozen=True, slots=True)
    class Address:
        value: str  # checksummed

    @dataclass(frozen=True, slots=True)
    class List:
        items: tuple[Value, ...] = field(default_factory=tuple)


Value = Values.Integer | Values.Boolean | Values.Text | Values.Bytes | Values.Address | Values.List


def render(value: Value) -> str:
    """Render one decoded value to its canonical text."""
    match value:
        case Values.Integer(value=v):
            return str(v)
        case Values.Boolean(value=v):
            return "true" if v else "false"
        case Values.Text(value=v) | Values.Bytes(value=v) | Values.Address(value=v):
            return v
        case Values.List(items=items):
            return "[" + render_values(items) + "]"
    raise TypeError(f"not a decoded value: {value!r}")


def render_values(values: Sequence[Value]) -> str:
    """Render sibling values joined by `", "` without enclosing brackets."""
    return SEPARATOR.join(render(v) for v in values)


def to_python(value: Value) -> object:
    """Unwrap a value tree into plain Python objects (lists, ints, strs, bools)."""
    if isinstance(value, Values.List):
        return [to_python(v) for v in value.items]
    return value.value
