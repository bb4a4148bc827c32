"""Configuration module: global (per-user) and workspace (per-project) config."""

from typing import Optional
from ..utils.errors import WorkspaceNotFoundError
from ..utils.logging import get_logger
from .manager import GlobalConfigStore, default_global_store
from .models import GlobalConfig, ResolvedConfig, UserCredentials, WorkspaceConfig
from .paths import (
    CONFIG_FILE_NAME,
    CONFIG_FOLDER_NAME,
    WORKSPACE_CONFIG_FILE_NAME,
    ConfigPaths,
    get_home_dir,
    iter_ancestors,
    resolve_config_paths,
)
from .workspace import WorkspaceConfigStore, find_workspace_config, load_workspace_config

logger = get_logger("config")


def resolve_config(
    global_store: Optional[GlobalConfigStore] = None,
    workspace_store: Optional[WorkspaceConfigStore] = None
) -> ResolvedConfig:
    """
    Load the global record and, when one is found, the workspace record.
    
    Args:
        global_store: Store for the global config (defaults to the user's home)
        workspace_store: Store for the workspace config (defaults to the working directory)
        
    Returns:
        ResolvedConfig; workspace fields are None outside a workspace
        
    Raises:
        SecretCtlError: Any load error other than a missing workspace marker
    """
    global_store = global_store or default_global_store()
    workspace_store = workspace_store or WorkspaceConfigStore()
    
    global_config = global_store.load()
    
    try:
        workspace_path = workspace_store.find()
    except WorkspaceNotFoundError as e:
        logger.debug(f"Not inside a workspace: {e}")
        return ResolvedConfig(global_config=global_config)
    
    return ResolvedConfig(
        global_config=global_config,
        workspace_config=workspace_store.load_from_path(workspace_path),
        workspace_path=workspace_path
    )


__all__ = [
    "CONFIG_FILE_NAME",
    "CONFIG_FOLDER_NAME",
    "WORKSPACE_CONFIG_FILE_NAME",
    "ConfigPaths",
    "GlobalConfig",
    "GlobalConfigStore",
    "ResolvedConfig",
    "UserCredentials",
    "WorkspaceConfig",
    "WorkspaceConfigStore",
    "default_global_store",
    "find_workspace_config",
    "get_home_dir",
    "iter_ancestors",
    "load_workspace_config",
    "resolve_config",
    "resolve_config_paths",
]
