"""Command-line interface for inspecting ABI type signatures."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from cellabi.abi import ABI_VERSIONS, DEFAULT_ABI_VERSION, AbiError
from cellabi.tools import docs
from cellabi.tools.analysis import describe, unsupported_types
from cellabi.tools.parser import parse_param, parse_signature

if TYPE_CHECKING:
    from cellabi.tools.analysis import TypeInfo

logger = logging.getLogger(__name__)

abi_version_option = click.option(
    "--abi-version",
    "abi_version",
    type=click.IntRange(min=1),
    default=DEFAULT_ABI_VERSION,
    show_default=True,
    help=f"ABI version to check against (known: {', '.join(map(str, ABI_VERSIONS))})",
)


def _fail(error: AbiError) -> NoReturn:
    print(f"Error: {error.message}")
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Inspect ABI type signatures."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@cli.command()
@click.argument("text")
def signature(text: str) -> None:
    """Print the canonical form of a type signature."""
    try:
        param_type = parse_signature(text)
    except AbiError as e:
        _fail(e)

    print(param_type.type_signature())


@cli.command()
@click.argument("text")
@abi_version_option
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(text: str, abi_version: int, output_json: bool) -> None:
    """Display structural information about a type signature."""
    try:
        param_type = parse_signature(text)
        type_info = describe(param_type)
    except AbiError as e:
        _fail(e)

    unsupported = [t.type_signature() for t in unsupported_types(param_type, abi_version)]

    if output_json:
        print(type_info.to_json(indent=2))
    else:
        _output_plain(type_info, abi_version, unsupported)

    if unsupported:
        logger.debug("Unsupported in ABI v%d: %s", abi_version, unsupported)
        sys.exit(1)


def _format_optional(value: int | None) -> str:
    """Format a value that does not apply to every type."""
    return "n/a" if value is None else str(value)


def _output_plain(type_info: TypeInfo, abi_version: int, unsupported: list[str]) -> None:
    """Output type info using rich text formatting."""
    console = Console()

    console.print("[bold cyan]Type[/bold cyan]")
    type_table = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    type_table.add_column("Label", style="dim")
    type_table.add_column("Value", style="white")

    type_table.add_row("Signature", type_info.signature)
    type_table.add_row("Bit length", _format_optional(type_info.bit_len or None))
    type_table.add_row("Map key bits", _format_optional(type_info.map_key_size))
    type_table.add_row("Min ABI version", str(type_info.min_abi_version))
    type_table.add_row("Depth", str(type_info.max_depth))

    console.print(type_table)
    console.print()

    if type_info.fields:
        console.print("[bold cyan]Fields[/bold cyan]")
        field_table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
        field_table.add_column("Name", style="white")
        field_table.add_column("Type", style="yellow")

        for field in type_info.fields:
            field_table.add_row(field.name, field.signature)

        console.print(field_table)
        console.print()

    if unsupported:
        console.print(f"[bold red]Not supported by ABI version {abi_version}[/bold red]")
        for sig in unsupported:
            console.print(f"  {sig}", markup=False)
    else:
        console.print(f"[green]Supported by ABI version {abi_version}[/green]")


@cli.command()
@click.argument("params", nargs=-1, required=True)
@abi_version_option
@click.option("--title", default="Parameters", show_default=True, help="Document title")
@click.option("--output", "-o", "output_file", default=None, help="Output file (default stdout)")
def doc(params: tuple[str, ...], abi_version: int, title: str, output_file: str | None) -> None:
    """Render Markdown documentation for name:signature parameters."""
    try:
        rendered = docs.render([parse_param(p) for p in params], abi_version, title=title)
    except AbiError as e:
        _fail(e)

    if output_file is None:
        print(rendered, end="")
        return

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(rendered)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
