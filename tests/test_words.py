import pytest

from abidecode.core.errors import TruncatedPayloadError
from abidecode.decoding.words import Direction, join_words, pad_hex, pad_to_word, parse_words

WORD_A = "00" * 31 + "2a"
WORD_B = "f" * 64


def test_parse_words_splits_on_word_boundaries() -> None:
    words = parse_words("0x" + WORD_A + WORD_B)
    assert words == (WORD_A, WORD_B)


def test_parse_words_strips_whitespace_and_optional_prefix() -> None:
    assert parse_words(f"  {WORD_A}\n") == (WORD_A,)
    assert parse_words(f" 0x{WORD_A} ") == (WORD_A,)


def test_parse_then_join_is_identity() -> None:
    p = "0x" + WORD_A + WORD_B + WORD_A
    assert join_words(parse_words(p)) == p


def test_parse_words_empty_payload() -> None:
    assert parse_words("0x") == ()
    assert parse_words("") == ()


def test_partial_word_rejected_by_default() -> None:
    with pytest.raises(TruncatedPayloadError) as exc:
        parse_words("0x" + WORD_A + "ab")
    assert exc.value.index == 1


def test_partial_word_dropped_when_lenient() -> None:
    assert parse_words("0x" + WORD_A + "ab", strict=False) == (WORD_A,)


def test_pad_hex_both_directions() -> None:
    assert pad_hex("0F49DEA", 4, Direction.LEFT) == "00F49DEA"
    assert pad_hex("dead", 4, Direction.RIGHT) == "dead0000"


def test_pad_to_word() -> None:
    assert pad_to_word("2a") == WORD_A
    assert pad_to_word("DEADBEEF", Direction.RIGHT) == "DEADBEEF" + "0" * 56


def test_pad_hex_rejects_oversized_input() -> None:
    with pytest.raises(ValueError):
        pad_hex("abcdef", 2)
