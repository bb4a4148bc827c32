"""secretctl - configuration resolution for the secrets command-line client."""

from .config import (
    GlobalConfig,
    GlobalConfigStore,
    ResolvedConfig,
    UserCredentials,
    WorkspaceConfig,
    WorkspaceConfigStore,
    resolve_config,
)
from .utils.errors import SecretCtlError

__version__ = "0.1.0"

__all__ = [
    "GlobalConfig",
    "GlobalConfigStore",
    "ResolvedConfig",
    "SecretCtlError",
    "UserCredentials",
    "WorkspaceConfig",
    "WorkspaceConfigStore",
    "resolve_config",
]
