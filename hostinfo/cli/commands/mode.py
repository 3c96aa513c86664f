import typer

from hostinfo.runtime.mode import detect_runtime_mode

def mode():
    """
    Show the detected runtime mode.
    """
    typer.echo(detect_runtime_mode().value)

if __name__ == "__main__":
    typer.run(mode)
