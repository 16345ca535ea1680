"""Recursive ABI value decoder.

This module turns a word sequence into `Values.*` trees, one scope at a
time. A scope is a list of sibling types plus the cursor of the first
head word; each sibling owns `head_size(t)` consecutive head words.

Head/tail rules
---------------
- Scalars (`uint*`, `int*`, `bool`, `address`, `bytes*`) are read inline.
- Static fixed arrays (`T[K]` with static `T`) are laid out inline, element
  after element.
- Dynamic types keep an offset in their head word; the tail starts at
  `scope_base + offset // 32`. A dynamic array that is the only sibling of
  its scope has no offset word when `sole_array_inline` is set.
- `T[]` reads its element count from the first tail word; `T[K]` takes K
  from the type and consumes no count word.

`decode` composes signature parsing, word parsing and the scope decoder
into the canonical text rendering.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from abidecode.core.config import DEFAULT_CONFIG, DecoderConfig
from abidecode.core.constants import WORD_BITS, WORD_BYTES
from abidecode.core.errors import (
    DecodeError,
    IndexOutOfRangeError,
    NestingTooDeepError,
    SelectorMismatchError,
)
from abidecode.decoding.codec import (
    to_address,
    to_bool,
    to_index,
    to_opaque_bytes,
    to_signed,
    to_text,
    to_unsigned,
)
from abidecode.decoding.signature import FunctionSignature
from abidecode.decoding.types import AbiType, AbiTypes, head_size, is_dynamic, nesting_depth
from abidecode.decoding.values import Value, Values, render_values
from abidecode.decoding.words import WordSequence, parse_words, strip_hex_prefix

# ---------- word access ----------


def _word_at(words: WordSequence, i: int, t: AbiType) -> str:
    if not 0 <= i < len(words):
        raise IndexOutOfRangeError(
            f"word {i} out of range for {t} (payload has {len(words)} words)",
            index=i,
            descriptor=str(t),
        )
    return words[i]


def _read(words: WordSequence, i: int, t: AbiType, convert, *args):
    """Apply a codec conversion to word `i`, tagging failures with the index and type."""
    word = _word_at(words, i, t)
    try:
        return convert(word, *args)
    except DecodeError as e:
        e.index, e.descriptor = i, str(t)
        raise


def _check_span(words: WordSequence, start: int, n_words: int, t: AbiType) -> None:
    """Fail early when `n_words` words starting at `start` are not all present."""
    if start < 0 or start + n_words > len(words):
        raise IndexOutOfRangeError(
            f"{t} needs words {start}..{start + n_words - 1} (payload has {len(words)} words)",
            index=start + n_words - 1,
            descriptor=str(t),
        )


def _tail_of(words: WordSequence, cursor: int, base: int, t: AbiType) -> int:
    """Word index a dynamic value's head offset points to."""
    offset = _read(words, cursor, t, to_index)
    tail = base + offset // WORD_BYTES
    logger.debug(f"{t}: head word {cursor} holds offset {offset} → tail word {tail}")
    return tail


# ---------- per-type decoding ----------


def _decode_string(words: WordSequence, cursor: int, base: int, t: AbiType) -> Value:
    tail = _tail_of(words, cursor, base, t)
    length = _read(words, tail, t, to_index)
    n_words = -(-length // WORD_BYTES)
    _check_span(words, tail + 1, n_words, t)
    try:
        text = to_text("".join(words[tail + 1 : tail + 1 + n_words]), length)
    except DecodeError as e:
        e.index, e.descriptor = tail + 1, str(t)
        raise
    return Values.Text(text)


def _decode_array(
    t: AbiTypes.Array,
    words: WordSequence,
    cursor: int,
    base: int,
    *,
    sole: bool,
    depth: int,
    config: DecoderConfig,
) -> Value:
    if depth + nesting_depth(t) > config.max_depth:
        raise NestingTooDeepError(
            f"{t} nests deeper than {config.max_depth} levels",
            index=cursor,
            descriptor=str(t),
        )

    if not is_dynamic(t):
        start = cursor
    elif sole and config.sole_array_inline:
        start = cursor
    else:
        start = _tail_of(words, cursor, base, t)

    if t.length is None:
        count = _read(words, start, t, to_index)
        start += 1
    else:
        count = t.length

    _check_span(words, start, count * head_size(t.element), t)
    items = decode_scope_values([t.element] * count, words, start, depth=depth + 1, config=config)
    return Values.List(tuple(items))


def _decode_one(
    t: AbiType,
    words: WordSequence,
    cursor: int,
    base: int,
    *,
    sole: bool,
    depth: int,
    config: DecoderConfig,
) -> Value:
    match t:
        case AbiTypes.Uint(bits=bits):
            return Values.Integer(_read(words, cursor, t, to_unsigned, bits))
        case AbiTypes.Int(bits=bits):
            width = bits if config.strict_int_width else WORD_BITS
            return Values.Integer(_read(words, cursor, t, to_signed, width))
        case AbiTypes.Bool():
            return Values.Boolean(_read(words, cursor, t, to_bool))
        case AbiTypes.Address():
            return Values.Address(_read(words, cursor, t, to_address))
        case AbiTypes.Bytes():
            return Values.Bytes(_read(words, cursor, t, to_opaque_bytes))
        case AbiTypes.String():
            return _decode_string(words, cursor, base, t)
        case AbiTypes.Array():
            return _decode_array(t, words, cursor, base, sole=sole, depth=depth, config=config)
    raise TypeError(f"not an AbiType: {t!r}")


# ---------- scopes ----------


def decode_scope_values(
    types: Sequence[AbiType],
    words: WordSequence,
    cursor: int,
    *,
    depth: int = 0,
    config: DecoderConfig = DEFAULT_CONFIG,
) -> list[Value]:
    """Decode sibling `types` whose head words start at `cursor`.

    Offsets found in this scope are relative to `cursor`, the scope's first
    head word.
    """
    logger.debug(f"scope depth={depth} cursor={cursor} siblings={len(types)}")
    base = cursor
    sole = len(types) == 1
    out: list[Value] = []
    for t in types:
        out.append(_decode_one(t, words, cursor, base, sole=sole, depth=depth, config=config))
        cursor += head_size(t)
    return out


def decode_scope(
    types: Sequence[AbiType],
    words: WordSequence,
    cursor: int = 0,
    *,
    config: DecoderConfig = DEFAULT_CONFIG,
) -> str:
    """Text rendering of one scope: sibling renderings joined by `", "`."""
    return render_values(decode_scope_values(types, words, cursor, config=config))


# ---------- entry points ----------


def _decode_payload(sig: FunctionSignature, payload: str, config: DecoderConfig) -> list[Value]:
    words = parse_words(payload, strict=config.strict_length)
    logger.debug(f"decoding {sig.canonical} over {len(words)} words")
    return decode_scope_values(sig.params, words, 0, config=config)


def decode_values(signature: str, payload: str, *, config: DecoderConfig = DEFAULT_CONFIG) -> list[Value]:
    """Decode every top-level parameter of `signature` into a value tree."""
    return _decode_payload(FunctionSignature.from_text(signature, max_depth=config.max_depth), payload, config)


def decode(signature: str, payload: str, *, config: DecoderConfig = DEFAULT_CONFIG) -> str:
    """Decode an ABI payload into its comma-joined text rendering.

    Example
    -------
    >>> decode("function baz(uint256,bool)", "0x" + "0" * 63 + "7" + "0" * 63 + "1")
    '7, true'
    """
    return render_values(decode_values(signature, payload, config=config))


def decode_calldata_values(
    signature: str, calldata: str, *, config: DecoderConfig = DEFAULT_CONFIG
) -> list[Value]:
    """Decode transaction calldata: 4-byte selector followed by the ABI payload."""
    sig = FunctionSignature.from_text(signature, max_depth=config.max_depth)
    body = strip_hex_prefix(calldata)
    selector = "0x" + body[:8].lower()
    if selector != sig.selector:
        raise SelectorMismatchError(
            f"calldata selector {selector} does not match {sig.canonical} ({sig.selector})",
            descriptor=sig.canonical,
        )
    return _decode_payload(sig, body[8:], config)


def decode_calldata(signature: str, calldata: str, *, config: DecoderConfig = DEFAULT_CONFIG) -> str:
    """Text rendering of `decode_calldata_values`."""
    return render_values(decode_calldata_values(signature, calldata, config=config))
