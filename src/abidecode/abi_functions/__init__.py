import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel

from abidecode.core.errors import DecodeError, UnsupportedTypeError
from abidecode.decoding.signature import FunctionSignature


class AbiInput(BaseModel):
    name: str = ""
    type: str
    internalType: str | None = None


class AbiFunction(BaseModel):
    name: str
    inputs: Sequence[AbiInput]
    outputs: Sequence[AbiInput] = ()
    stateMutability: str | None = None
    type: Literal["function"]


def get_function_signature(function: AbiFunction) -> str:
    for function_input in function.inputs:
        if function_input.type.startswith("tuple"):
            raise UnsupportedTypeError(
                f"{function.name}: tuple inputs are not supported",
                descriptor=function_input.type,
            )
    return f"{function.name}({','.join(function_input.type for function_input in function.inputs)})"


def get_function_selector(function: AbiFunction) -> str:
    return FunctionSignature.from_text(get_function_signature(function)).selector


AbiJson = Iterable[dict[str, Any]]
AbiSpec = AbiJson | Path


def _load_abi(abi: AbiSpec) -> AbiJson:
    if isinstance(abi, Path):
        return json.loads(abi.read_text())
    return abi


def get_functions_from_abi(abi: AbiSpec) -> dict[str, AbiFunction]:
    functions = (
        AbiFunction.model_validate(entry)
        for entry in _load_abi(abi)
        if isinstance(entry, dict) and entry.get("type") == "function"
    )
    return {function.name: function for function in functions}


def find_function(abi: AbiSpec, name_or_selector: str) -> AbiFunction:
    """Look up a function by name, or by 0x-prefixed selector."""
    functions = get_functions_from_abi(abi)
    if name_or_selector in functions:
        return functions[name_or_selector]
    wanted = name_or_selector.lower()
    for function in functions.values():
        try:
            selector = get_function_selector(function)
        except DecodeError:
            continue
        if selector == wanted:
            return function
    raise KeyError(f"no function {name_or_selector!r} in ABI")
