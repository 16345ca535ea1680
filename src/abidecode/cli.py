import json
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from abidecode.core.config import DecoderConfig
from abidecode.core.constants import DEFAULT_MAX_DEPTH
from abidecode.core.errors import DecodeError
from abidecode.decoding.decoder import decode, decode_calldata_values, decode_values
from abidecode.decoding.signature import FunctionSignature
from abidecode.decoding.values import render_values, to_python
from abidecode.samples import SAMPLE_CASES
from abidecode.utils import configure_logger

console = Console()


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log scope/offset resolution to stderr")
def cli(verbose: bool) -> None:
    """abidecode — decode ABI-encoded payloads against a function signature."""
    configure_logger(verbose)


@cli.command("decode")
@click.argument("signature")
@click.argument("payload")
@click.option(
    "--abi",
    "abi_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON ABI file; SIGNATURE is then a function name or 0x selector",
)
@click.option("--calldata", is_flag=True, default=False, help="PAYLOAD starts with the 4-byte selector")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the decoded values as JSON")
@click.option("--strict-int-width", is_flag=True, default=False, help="Decode int<N> at its declared width")
@click.option("--lenient-length", is_flag=True, default=False, help="Drop a trailing partial word instead of failing")
@click.option(
    "--sole-array-offset",
    is_flag=True,
    default=False,
    help="Expect an offset word even for a dynamic array that is the sole parameter",
)
@click.option("--max-depth", type=int, default=DEFAULT_MAX_DEPTH, show_default=True, help="Maximum array nesting")
def decode_cmd(
    signature: str,
    payload: str,
    abi_path: Path | None,
    calldata: bool,
    as_json: bool,
    strict_int_width: bool,
    lenient_length: bool,
    sole_array_offset: bool,
    max_depth: int,
) -> None:
    """Decode PAYLOAD (hex) using the parameter types of SIGNATURE."""
    config = DecoderConfig(
        strict_int_width=strict_int_width,
        strict_length=not lenient_length,
        sole_array_inline=not sole_array_offset,
        max_depth=max_depth,
    )

    if abi_path is not None:
        from abidecode.abi_functions import find_function, get_function_signature

        try:
            signature = get_function_signature(find_function(abi_path, signature))
        except KeyError as e:
            raise click.UsageError(str(e)) from e
        except (DecodeError, ValidationError, json.JSONDecodeError) as e:
            raise click.ClickException(str(e)) from e

    try:
        if calldata:
            values = decode_calldata_values(signature, payload, config=config)
        else:
            values = decode_values(signature, payload, config=config)
    except DecodeError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e

    if as_json:
        click.echo(json.dumps([to_python(v) for v in values]))
    else:
        click.echo(render_values(values))


@cli.command("selector")
@click.argument("signature")
def selector_cmd(signature: str) -> None:
    """Print the canonical form and 4-byte selector of SIGNATURE."""
    try:
        sig = FunctionSignature.from_text(signature)
    except DecodeError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{sig.selector} {sig.canonical}")


@cli.command("demo")
def demo_cmd() -> None:
    """Run the bundled reference cases and report PASS/FAIL for each."""
    table = Table(title="abidecode reference cases", expand=True)
    table.add_column("signature", style="bold")
    table.add_column("expected")
    table.add_column("decoded")
    table.add_column("result", justify="center")

    failed = 0
    for case in SAMPLE_CASES:
        try:
            result = decode(case.signature, case.payload)
        except DecodeError as e:
            result = f"{type(e).__name__}: {e}"
        ok = result == case.expected
        failed += not ok
        table.add_row(
            case.signature,
            case.expected,
            result,
            "[green]PASS[/]" if ok else "[red]FAIL[/]",
        )

    console.print(table)
    console.print(
        f"[bold]summary[/]: [green]passed[/]={len(SAMPLE_CASES) - failed}  [red]failed[/]={failed}"
    )
    if failed:
        raise SystemExit(1)
