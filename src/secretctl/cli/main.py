"""Main CLI entry point for secretctl."""

import logging
import click
from .commands.config import config
from .commands.workspace import workspace
from .commands.version import version as version_command
from ..config.manager import default_global_store
from ..config.workspace import WorkspaceConfigStore
from ..utils.logging import setup_logging, get_logger
from .. import __version__

logger = get_logger("cli.main")


@click.group()
@click.version_option(version=__version__, prog_name="secretctl", message="%(prog)s version %(version)s")
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, debug):
    """secretctl - secrets client configuration."""
    setup_logging(logging.DEBUG if debug else logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("global_store", default_global_store())
    ctx.obj.setdefault("workspace_store", WorkspaceConfigStore())


cli.add_command(config)
cli.add_command(workspace)
cli.add_command(version_command)
