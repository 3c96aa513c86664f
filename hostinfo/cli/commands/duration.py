import typer

from hostinfo.format.units import format_duration

def duration(milliseconds: int = typer.Argument(..., help="Duration in milliseconds.")):
    """
    Format a millisecond count as a human-readable duration.
    """
    if milliseconds < 0:
        raise typer.BadParameter("must not be negative", param_hint="MILLISECONDS")
    typer.echo(format_duration(milliseconds))

if __name__ == "__main__":
    typer.run(duration)
