# walletcore/cli/main.py

import click
from rich.console import Console
from rich.panel import Panel

from .. import __version__
from .address_cli import address_cli
from .ens_cli import ens_cli


@click.group(invoke_without_command=True)
@click.pass_context
def walletcore(ctx):
    """
    🔐 walletcore CLI - address checksums, display formats and ENS name checks.
    """
    if ctx.invoked_subcommand is None:
        console = Console()
        console.print(
            Panel(
                "[bright_green]Available commands:[/]\n"
                "  • [bright_yellow]address[/]   🏷️ Checksum, shorten and name account addresses\n"
                "  • [bright_yellow]ens[/]       🌐 Validate ENS name syntax\n"
                "  • [bright_yellow]version[/]   ℹ️ Show version information\n\n"
                "Usage: [bright_white]walletcore [COMMAND] --help[/]",
                title="walletcore",
                border_style="bright_magenta",
            )
        )


@walletcore.command()
def version():
    """ℹ️ Show version information."""
    Console().print(f"walletcore [bold cyan]{__version__}[/bold cyan]")


walletcore.add_command(address_cli)
walletcore.add_command(ens_cli)


def main():
    walletcore()


if __name__ == "__main__":
    main()
