from pathlib import Path
from typing import Optional

import typer

from hostinfo.cli.commands import (
    duration,
    hardware,
    mode,
    version,
)
from hostinfo.internal import paths
from hostinfo.internal.logging import setup_logging

app = typer.Typer(
    name="hostinfo",
    help="Inspect the host environment and format durations.",
    no_args_is_help=True
)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level (overridden by HOSTINFO_LOG_LEVEL)."),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write logs to this file instead of the app data directory."),
):
    setup_logging(log_level_name=log_level, log_file_path=log_file or paths.get_log_file())


app.command("hardware")(hardware.hardware)
app.command("mode")(mode.mode)
app.command("duration")(duration.duration)
app.command("version")(version.version)

# Alias imported by the tests; the console script points at `app`
cli_app = app

if __name__ == "__main__":
    app()
