import json
from pathlib import Path

from click.testing import CliRunner

from abidecode.cli import cli
from abidecode.decoding.codec import to_word

ABI = Path(__file__).parent / "abi" / "erc20_abi.json"
HELLO = "0x" + to_word(0x20) + to_word(11) + "68656c6c6f20776f726c64".ljust(64, "0")


def test_decode_command() -> None:
    result = CliRunner().invoke(cli, ["decode", "function baz(string)", HELLO])
    assert result.exit_code == 0
    assert result.output.strip() == "hello world"


def test_decode_command_json() -> None:
    p = "0x" + "".join(to_word(i) for i in (1, 2, 3, 4, 5, 6, 10))
    result = CliRunner().invoke(cli, ["decode", "--json", "baz(uint128[2][3],uint)", p])
    assert result.exit_code == 0
    assert json.loads(result.output) == [[[1, 2, 3], [4, 5, 6]], 10]


def test_decode_command_reports_decode_errors() -> None:
    result = CliRunner().invoke(cli, ["decode", "f(uint256,uint256)", "0x" + to_word(1)])
    assert result.exit_code == 1
    assert "IndexOutOfRangeError" in result.output


def test_decode_command_with_abi_and_calldata() -> None:
    calldata = "0xa9059cbb" + to_word(0xD8DA6BF26964AF9D7EED9E03E53415D37AA96045) + to_word(100)
    result = CliRunner().invoke(cli, ["decode", "--abi", str(ABI), "--calldata", "transfer", calldata])
    assert result.exit_code == 0
    assert result.output.strip() == "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045, 100"


def test_decode_command_unknown_abi_function() -> None:
    result = CliRunner().invoke(cli, ["decode", "--abi", str(ABI), "approve", "0x"])
    assert result.exit_code == 2


def test_strict_int_width_flag() -> None:
    p = "0x" + to_word(0xFF)
    assert CliRunner().invoke(cli, ["decode", "f(int8)", p]).output.strip() == "255"
    assert CliRunner().invoke(cli, ["decode", "--strict-int-width", "f(int8)", p]).output.strip() == "-1"


def test_selector_command() -> None:
    result = CliRunner().invoke(cli, ["selector", "function transfer(address to, uint amount)"])
    assert result.exit_code == 0
    assert result.output.strip() == "0xa9059cbb transfer(address,uint256)"


def test_demo_command() -> None:
    result = CliRunner().invoke(cli, ["demo"])
    assert result.exit_code == 0
    assert "failed=0" in result.output


def test_decode_command_rejects_invalid_abi_json(tmp_path: Path) -> None:
    abi = tmp_path / "broken.json"
    abi.write_text('[{"type": "function", "name": ')
    result = CliRunner().invoke(cli, ["decode", "--abi", str(abi), "transfer", "0x"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error" in result.output


def test_decode_command_rejects_function_entry_without_inputs(tmp_path: Path) -> None:
    abi = tmp_path / "partial.json"
    abi.write_text(json.dumps([{"type": "function", "name": "transfer"}]))
    result = CliRunner().invoke(cli, ["decode", "--abi", str(abi), "transfer", "0x"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "inputs" in result.output
