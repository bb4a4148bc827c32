"""Config commands - inspect and update the global config."""

import sys
import click
from ...config import resolve_config
from ...config.models import UserCredentials
from ...utils.errors import SecretCtlError
from ...utils.logging import get_logger
from ..utils import echo_json, format_error, resolved_config_to_dict

logger = get_logger("cli.config")


@click.group()
def config():
    """Inspect and update secretctl configuration."""
    pass


@config.command()
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
@click.pass_obj
def show(obj, as_json):
    """Show the global config and the workspace config for this directory."""
    try:
        resolved = resolve_config(obj["global_store"], obj["workspace_store"])
    except SecretCtlError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    if as_json:
        echo_json(resolved_config_to_dict(resolved))
        return
    
    global_config = resolved.global_config
    click.echo(f"Logged in user:     {global_config.logged_in_user_email or '(none)'}")
    click.echo(f"Vault backend:      {global_config.vault_backend_type or '(default)'}")
    if resolved.workspace_config is None:
        click.echo("Workspace:          (none)")
    else:
        click.echo(f"Workspace:          {resolved.workspace_config.workspace_id}")
        click.echo(f"Workspace file:     {resolved.workspace_path}")
        click.echo(f"Default env:        {resolved.workspace_config.default_environment or '(none)'}")


@config.command()
@click.pass_obj
def path(obj):
    """Show where the global config is stored."""
    try:
        paths = obj["global_store"].resolve_paths()
    except SecretCtlError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    click.echo(f"file: {paths.file_path}")
    click.echo(f"dir:  {paths.dir_path}")


@config.command()
@click.argument('email')
@click.pass_obj
def init(obj, email):
    """Record EMAIL as the logged-in user, keeping the vault backend."""
    try:
        saved = obj["global_store"].initialize_from_credentials(UserCredentials(email=email))
    except SecretCtlError as e:
        click.echo(format_error(str(e), "Fix or remove the global config file and try again."), err=True)
        sys.exit(1)
    
    click.echo(f"Logged in as {saved.logged_in_user_email}")


@config.command(name="set-backend")
@click.argument('backend_type')
@click.pass_obj
def set_backend(obj, backend_type):
    """Set the vault backend type in the global config."""
    try:
        saved = obj["global_store"].update(vault_backend_type=backend_type)
    except SecretCtlError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    click.echo(f"Vault backend set to {saved.vault_backend_type}")
