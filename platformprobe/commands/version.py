import click
import importlib.metadata
import sys
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of the PlatformProbe tool."""
    try:
        ver = importlib.metadata.version("platformprobe")
        logger.info(f"PlatformProbe version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of PlatformProbe. Is it installed correctly?")
    except Exception as e:
        logger.error(f"An unexpected error occurred while determining PlatformProbe version: {e}")
        logger.exception(*sys.exc_info())
