"""Reference decode cases used by the `demo` command."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SampleCase:
    signature: str
    payload: str
    expected: str


def _words(*hex_words: str) -> str:
    return "0x" + "".join(w.rjust(64, "0") for w in hex_words)


_NEG_2 = "f" * 63 + "e"
_NEG_3 = "f" * 63 + "d"
_NEG_5 = "f" * 63 + "b"

SAMPLE_CASES: tuple[SampleCase, ...] = (
    SampleCase("function baz(int8)", _words(_NEG_2), "-2"),
    SampleCase("function baz(int80)", _words("b29c26f344fe"), "196383738119422"),
    SampleCase("function baz(uint32)", _words(_NEG_2), "4294967294"),
    SampleCase(
        "function baz(string)",
        _words("20", "b", "68656c6c6f20776f726c64".ljust(64, "0")),
        "hello world",
    ),
    SampleCase(
        "function baz(bytes[] a, bytes32 b)",
        _words(
            "40",
            "cb93e7ddea88eb37f5419784b399cf13f7df44079d05905006044dd14bb89811",
            "3",
            "000bf9f2adc93a1da7b9e61f44ee6504f99c467a2812b354d70a07f0b3cdc58c",
            "0007cc5734453f8d7bbacd4b3a8e753250dc4a432aaa5be5b048c59e0b5ac5fc",
            "00120aa407bdbff1d93ea98dafc5f1da56b589b427167ec414bccbe0cfdfd573",
        ),
        "[0x000bf9f2adc93a1da7b9e61f44ee6504f99c467a2812b354d70a07f0b3cdc58c, "
        "0x0007cc5734453f8d7bbacd4b3a8e753250dc4a432aaa5be5b048c59e0b5ac5fc, "
        "0x00120aa407bdbff1d93ea98dafc5f1da56b589b427167ec414bccbe0cfdfd573], "
        "0xcb93e7ddea88eb37f5419784b399cf13f7df44079d05905006044dd14bb89811",
    ),
    SampleCase("function baz(int[3])", _words("2a", _NEG_3, _NEG_5), "[42, -3, -5]"),
    SampleCase(
        "function baz(uint128[2][3], uint)",
        _words("1", "2", "3", "4", "5", "6", "a"),
        "[[1, 2, 3], [4, 5, 6]], 10",
    ),
    SampleCase(
        "function baz(uint128[2][3][2], uint)",
        _words("1", "2", "3", "4", "5", "6", "1", "2", "3", "4", "5", "6", "a"),
        "[[[1, 2], [3, 4], [5, 6]], [[1, 2], [3, 4], [5, 6]]], 10",
    ),
    SampleCase(
        "function baz(uint256[] a,uint[] b,uint256[] c)",
        _words(
            "60", "c0", "120",
            "2", "6", "5",
            "2", "15af1d78b58c40000", "15af1d78b58c40000",
            "2", "1bc16d674ec80000", "1bc16d674ec80000",
        ),
        "[6, 5], [25000000000000000000, 25000000000000000000], [2000000000000000000, 2000000000000000000]",
    ),
)
