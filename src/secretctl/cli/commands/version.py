"""Version command - show secretctl version."""

import click
from ... import __version__


@click.command()
def version():
    """Show secretctl version."""
    click.echo(f"secretctl version {__version__}")
