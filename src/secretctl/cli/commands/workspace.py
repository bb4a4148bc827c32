"""Workspace commands - locate and show the project workspace config."""

import sys
import click
from ...utils.errors import SecretCtlError, WorkspaceNotFoundError
from ..utils import echo_json, format_error


@click.group()
def workspace():
    """Locate and inspect the workspace config."""
    pass


@workspace.command()
@click.pass_obj
def find(obj):
    """Print the nearest workspace file at or above this directory."""
    store = obj["workspace_store"]
    try:
        click.echo(str(store.find()))
    except WorkspaceNotFoundError as e:
        click.echo(format_error(str(e), f"Run this inside a project that contains {store.filename}."), err=True)
        sys.exit(1)
    except SecretCtlError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)


@workspace.command()
@click.option('--path', 'config_path', type=click.Path(dir_okay=False), help='Read this workspace file instead of searching')
@click.pass_obj
def show(obj, config_path):
    """Show the workspace config as JSON."""
    store = obj["workspace_store"]
    try:
        if config_path:
            workspace_config = store.load_from_path(config_path)
        else:
            workspace_config = store.load_from_current_directory()
    except SecretCtlError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    echo_json(workspace_config.model_dump(by_alias=True))


@workspace.command()
@click.pass_obj
def here(obj):
    """Report whether this directory itself holds a workspace file."""
    click.echo("yes" if obj["workspace_store"].exists_in_current_directory() else "no")
