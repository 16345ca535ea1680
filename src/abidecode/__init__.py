from __future__ import annotations

from .core.config import DecoderConfig
from .core.errors import DecodeError
from .decoding.decoder import decode, decode_calldata, decode_values
from .decoding.signature import FunctionSignature, canonical_signature, function_selector
from .decoding.values import Values, render_values

__all__ = [
    "decode",
    "decode_calldata",
    "decode_values",
    "DecoderConfig",
    "DecodeError",
    "FunctionSignature",
    "canonical_signature",
    "function_selector",
    "Values",
    "render_values",
]
