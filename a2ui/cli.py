"""Command line tools for inspecting A2UI wire messages"""

import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .config import get_config
from .decoder import DecodedAction, decode

app = typer.Typer(help="A2UI v0.9 protocol tools", no_args_is_help=True)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """A2UI v0.9 protocol tools"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command("decode")
def decode_cmd(
    file: Optional[Path] = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        help="File with inbound JSON (reads stdin when omitted)",
    ),
):
    """Decode client messages (action / error envelopes)"""
    text = file.read_text(encoding="utf-8") if file else sys.stdin.read()

    result = decode(text)
    if not result.ok:
        console.print(f"[red]Error:[/red] {result.error.message}")
        console.print_json(json.dumps(result.error.to_dict(), default=str))
        raise typer.Exit(1)

    for message in result.messages:
        if isinstance(message, DecodedAction):
            body = {
                "name": message.action.name,
                "context": message.action.context,
                "metadata": message.metadata,
            }
            console.print("[cyan]action[/cyan]")
        else:
            body = {
                "type": message.error.type,
                "path": message.error.path,
                "message": message.error.message,
                "metadata": message.metadata,
            }
            console.print("[yellow]error[/yellow]")
        console.print_json(json.dumps(body, default=str))

    console.print(f"[green]✓[/green] {len(result.messages)} message(s) decoded")


@app.command("version")
def version_cmd():
    """Show package and protocol versions"""
    try:
        installed = package_version("a2ui-protocol")
    except PackageNotFoundError:
        installed = "unknown"
    console.print(f"a2ui-protocol {installed} (protocol {get_config().version})")


if __name__ == "__main__":
    app()
