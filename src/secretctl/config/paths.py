"""Config path resolution for the global and workspace config files."""

import os
from pathlib import Path
from typing import Callable, Iterator, NamedTuple, Optional, Union
from ..utils.errors import ConfigEnvironmentError

CONFIG_FOLDER_NAME = ".secretctl"
CONFIG_FILE_NAME = "secretctl-config.json"
WORKSPACE_CONFIG_FILE_NAME = ".secretctl.json"

HOME_ENV_VAR = "SECRETCTL_HOME"

HomeProvider = Callable[[], Union[str, Path]]


class ConfigPaths(NamedTuple):
    """Full paths to the global config file and its directory."""
    file_path: Path
    dir_path: Path


def get_home_dir() -> Path:
    """
    Return the invoking user's home directory.
    
    SECRETCTL_HOME, when set and non-empty, takes precedence over the
    home directory reported by the host.
    
    Raises:
        ConfigEnvironmentError: If no home directory can be determined
    """
    override = os.getenv(HOME_ENV_VAR)
    if override:
        return Path(override)
    
    if os.environ.get("HOME") == "":
        raise ConfigEnvironmentError("get_home_dir: unable to determine home directory [err=HOME is empty]")
    
    try:
        home = Path.home()
    except (RuntimeError, KeyError, OSError) as e:
        raise ConfigEnvironmentError(f"get_home_dir: unable to determine home directory [err={e}]") from e
    
    if not str(home) or home == Path(home.anchor):
        raise ConfigEnvironmentError(f"get_home_dir: home directory resolved to filesystem root [{home}]")
    return home


def resolve_config_paths(home_provider: HomeProvider = get_home_dir) -> ConfigPaths:
    """Get global config paths: <home>/.secretctl/secretctl-config.json"""
    home = Path(home_provider())
    dir_path = home / CONFIG_FOLDER_NAME
    return ConfigPaths(file_path=dir_path / CONFIG_FILE_NAME, dir_path=dir_path)


def get_working_dir() -> Path:
    """Return the current working directory as an absolute path."""
    try:
        return Path.cwd()
    except OSError as e:
        raise ConfigEnvironmentError(f"get_working_dir: unable to determine working directory [err={e}]") from e


def iter_ancestors(start: Union[str, Path]) -> Iterator[Path]:
    """
    Yield start and each of its ancestors, nearest first.
    
    The sequence ends at the filesystem root: the first directory whose
    parent is itself.
    """
    current = Path(os.path.abspath(start))
    while True:
        yield current
        parent = current.parent
        if parent == current:
            return
        current = parent
