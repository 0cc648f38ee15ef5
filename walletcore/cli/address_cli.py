# walletcore/cli/address_cli.py
"""
Command-line interface for address formatting and identity lookup.

Input validation lives here: the address functions themselves do not reject
malformed addresses, so every command checks the shape before calling them.
"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ..address import (
    checksum_identities,
    is_valid_address,
    is_valid_checksum_address,
    render_account_name,
    render_full_address,
    render_short_address,
    render_slightly_long_address,
    resembles_address,
    to_checksum_address,
)
from ..config.settings import logger

console = Console()


def _require_address(address: str) -> str:
    if not address.startswith("0x"):
        address = f"0x{address}"
    if not is_valid_address(address):
        raise click.BadParameter(
            f"'{address}' is not a 0x-prefixed 40 hex character address", param_hint="ADDRESS"
        )
    return address


@click.group("address")
def address_cli():
    """
    🏷️ Commands for checksumming and displaying account addresses.
    """
    pass


@address_cli.command("checksum")
@click.argument("address")
@click.option("--chain-id", type=int, default=None, help="EIP-1191 chain id to mix into the checksum.")
def checksum_cmd(address: str, chain_id: Optional[int]):
    """✅ Print the checksummed form of ADDRESS."""
    address = _require_address(address)
    checksummed = to_checksum_address(address, chain_id)

    table = Table(title="Checksum", show_header=False)
    table.add_row("Input", address)
    table.add_row("Checksummed", checksummed)
    table.add_row("Input already checksummed", "yes" if is_valid_checksum_address(address, chain_id) else "no")
    if chain_id is not None:
        table.add_row("Chain ID", str(chain_id))
    console.print(table)


@address_cli.command("short")
@click.argument("address")
@click.option("--chars", type=int, default=4, show_default=True, help="Characters kept at each end.")
def short_cmd(address: str, chars: int):
    """✂️ Print the short display form of ADDRESS."""
    console.print(render_short_address(_require_address(address), chars))


@address_cli.command("long")
@click.argument("address")
@click.option("--chars", type=int, default=4, show_default=True, help="Characters kept at the end.")
def long_cmd(address: str, chars: int):
    """📏 Print the slightly long display form of ADDRESS."""
    console.print(render_slightly_long_address(_require_address(address), chars))


@address_cli.command("full")
@click.argument("address", required=False)
def full_cmd(address: Optional[str]):
    """🔎 Print the full checksummed ADDRESS, or the placeholder when omitted."""
    if address:
        address = _require_address(address)
    console.print(render_full_address(address))


@address_cli.command("resembles")
@click.argument("address")
@click.pass_context
def resembles_cmd(ctx, address: str):
    """📐 Check whether ADDRESS has the length of an address. Exits 1 if not."""
    if resembles_address(address):
        console.print(f"[bold green]✅ '{address}' is address-shaped[/bold green]")
    else:
        console.print(f"[bold red]❌ '{address}' is not address-shaped[/bold red]")
        ctx.exit(1)


@address_cli.command("name")
@click.argument("address")
@click.option(
    "--identities",
    "identities_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file mapping addresses to objects with a 'name' field.",
)
def name_cmd(address: str, identities_path: Optional[str]):
    """👤 Print the known account name for ADDRESS, or its short form."""
    address = _require_address(address)
    identities = {}
    if identities_path:
        try:
            with open(identities_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"Invalid JSON: {e}", param_hint="--identities")
        if not isinstance(raw, dict):
            raise click.BadParameter("Expected a JSON object", param_hint="--identities")
        identities = checksum_identities(raw)
        logger.debug(f"Loaded {len(identities)} identities from {identities_path}")
    console.print(render_account_name(address, identities))
