import json

import typer
from rich.console import Console
from rich.table import Table

from hostinfo.internal.logging import get_logger
from hostinfo.runtime.mode import detect_runtime_mode
from hostinfo.runtime.system import get_hardware_details

logger = get_logger(__name__)
console = Console()

def hardware(as_json: bool = typer.Option(False, "--json", help="Print the details as JSON.")):
    """
    Show the OS, architecture, CPU count and memory of this host.
    """
    details = get_hardware_details().as_dict()
    logger.info("Hardware details probed", **details)

    if as_json:
        typer.echo(json.dumps(details, indent=2))
        return

    table = Table(title=f"Hardware ({detect_runtime_mode().value})")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="green")
    for name, value in details.items():
        table.add_row(name, str(value))
    console.print(table)

if __name__ == "__main__":
    typer.run(hardware)
