"""Command line entry points for duraspan."""

from typer import Typer

from .extract import cultures_command, extract_command
from ..configuration.cli import config_app


cli = Typer(help="duraspan command line tools")
cli.command("extract")(extract_command)
cli.command("cultures")(cultures_command)
cli.add_typer(config_app, name="config")

__all__ = ["cli", "config_app"]
