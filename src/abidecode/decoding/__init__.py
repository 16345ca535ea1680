"""ABI payload decoding.

This package provides:
- Word sequence parsing and the per-word codec
- Signature parsing into tagged-variant type descriptors
- The recursive scope decoder and the `decode` entry point
- A decoded value tree with canonical text rendering
"""

from abidecode.decoding.decoder import (
    decode,
    decode_calldata,
    decode_calldata_values,
    decode_scope,
    decode_scope_values,
    decode_values,
)
from abidecode.decoding.signature import (
    FunctionSignature,
    canonical_signature,
    function_selector,
    parse_function_name,
    parse_parameter_types,
)
from abidecode.decoding.types import AbiType, AbiTypes, parse_type
from abidecode.decoding.values import Value, Values, render, render_values
from abidecode.decoding.words import Direction, join_words, pad_hex, pad_to_word, parse_words

__all__ = [
    "decode",
    "decode_calldata",
    "decode_calldata_values",
    "decode_scope",
    "decode_scope_values",
    "decode_values",
    "FunctionSignature",
    "canonical_signature",
    "function_selector",
    "parse_function_name",
    "parse_parameter_types",
    "AbiType",
    "AbiTypes",
    "parse_type",
    "Value",
    "Values",
    "render",
    "render_values",
    "Direction",
    "join_words",
    "pad_hex",
    "pad_to_word",
    "parse_words",
]
