"""Function signature parsing.

Accepts text of the form `[function ]NAME(T1, T2 name2, ...)` and exposes:
- `parse_function_name` / `parse_parameter_types`: raw text extraction
- `FunctionSignature`: name plus tokenized `AbiType` parameters
- `canonical_signature` / `function_selector`: `name(t1,t2)` and its 4-byte keccak selector
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_utils import keccak

from abidecode.core.constants import DEFAULT_MAX_DEPTH
from abidecode.core.errors import MalformedSignatureError
from abidecode.decoding.types import AbiType, parse_type

_KEYWORD = "function"


def _check_parens(text: str) -> tuple[int, int]:
    """Return (first '(', last ')') after checking the parentheses balance."""
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                break
    open_paren = text.find("(")
    close_paren = text.rfind(")")
    if open_paren == -1 or close_paren == -1 or close_paren < open_paren or depth != 0:
        raise MalformedSignatureError(f"invalid function signature: {text!r}", descriptor=text)
    return open_paren, close_paren


def parse_function_name(text: str) -> str:
    """Name between an optional leading `function` keyword and the first `(`."""
    sig = text.strip()
    open_paren, _ = _check_parens(sig)
    start = 0
    if sig.startswith(_KEYWORD) and sig[len(_KEYWORD) : len(_KEYWORD) + 1].isspace():
        start = len(_KEYWORD)
    return sig[start:open_paren].strip()


def parse_parameter_types(text: str) -> list[str]:
    """Bare type of every parameter, in declaration order.

    Parameter names are dropped (`uint256 amount` → `uint256`). An empty
    parameter list yields a single empty descriptor.
    """
    sig = text.strip()
    open_paren, close_paren = _check_parens(sig)
    types: list[str] = []
    for piece in sig[open_paren + 1 : close_paren].split(","):
        p = piece.strip()
        if " " in p:
            p = p[: p.find(" ")]
        types.append(p)
    return types


@dataclass(frozen=True)
class FunctionSignature:
    """A parsed function signature."""

    name: str
    params: tuple[AbiType, ...]

    @classmethod
    def from_text(cls, text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> FunctionSignature:
        raw = parse_parameter_types(text)
        if raw == [""]:
            raw = []
        return cls(name=parse_function_name(text), params=tuple(parse_type(t, max_depth=max_depth) for t in raw))

    @property
    def canonical(self) -> str:
        return f"{self.name}({','.join(str(p) for p in self.params)})"

    @property
    def selector(self) -> str:
        return "0x" + keccak(text=self.canonical)[:4].hex()


def canonical_signature(text: str) -> str:
    """Return `name(t1,t2,...)` with names, spaces and type aliases normalized."""
    return FunctionSignature.from_text(text).canonical


def function_selector(text: str) -> str:
    """Return the 0x-prefixed 4-byte selector of a function signature."""
    return FunctionSignature.from_text(text).selector
