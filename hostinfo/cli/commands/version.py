import typer
import importlib.metadata

from hostinfo.internal.constants import APP_NAME
from hostinfo.internal.logging import get_logger

logger = get_logger(__name__)

def version():
    """
    Show the hostinfo version.
    """
    try:
        # Only available once the package is installed
        package_version = importlib.metadata.version(APP_NAME)
        typer.echo(f"hostinfo version: {package_version}")
    except importlib.metadata.PackageNotFoundError:
        typer.echo("hostinfo is not installed or version metadata not found.")
        typer.echo("Please install the package first (e.g., pip install . or pip install -e .)")
        logger.warning("hostinfo package version not found.")
        raise typer.Exit(1)

if __name__ == "__main__":
    typer.run(version)
