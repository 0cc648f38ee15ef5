# walletcore/cli/ens_cli.py

import click
from rich.console import Console

from ..address import is_valid_ens_name
from ..address.ens import to_ascii

console = Console()


@click.group("ens")
def ens_cli():
    """
    🌐 Commands for ENS names (syntax only, no resolution).
    """
    pass


@ens_cli.command("validate")
@click.argument("name")
@click.pass_context
def validate_cmd(ctx, name: str):
    """🧪 Check whether NAME is a syntactically valid ENS name. Exits 1 if not."""
    ascii_name = to_ascii(name).lower()
    if ascii_name != name:
        console.print(f"[dim]ASCII form: {ascii_name}[/dim]")

    if is_valid_ens_name(name):
        console.print(f"[bold green]✅ '{name}' is a valid ENS name[/bold green]")
    else:
        console.print(f"[bold red]❌ '{name}' is not a valid ENS name[/bold red]")
        ctx.exit(1)
