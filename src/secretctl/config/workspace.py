"""Workspace config discovery: ascent search for the marker file and decoding."""

import json
import os
from pathlib import Path
from typing import Callable, Optional, Union
from pydantic import ValidationError
from .models import WorkspaceConfig
from .paths import WORKSPACE_CONFIG_FILE_NAME, get_working_dir, iter_ancestors
from ..utils.errors import DecodeError, StorageError, WorkspaceNotFoundError
from ..utils.logging import get_logger

logger = get_logger("config.workspace")


def find_workspace_config(
    start: Optional[Union[str, Path]] = None,
    filename: str = WORKSPACE_CONFIG_FILE_NAME
) -> Path:
    """
    Find the nearest workspace marker file at or above start.
    
    Args:
        start: Directory to search from (defaults to the working directory)
        filename: Marker file name
        
    Returns:
        Full path to the nearest marker file
        
    Raises:
        ConfigEnvironmentError: If the working directory cannot be determined
        WorkspaceNotFoundError: If no ancestor up to the root holds the marker
    """
    if start is None:
        start = get_working_dir()
    
    for directory in iter_ancestors(start):
        candidate = directory / filename
        if os.path.exists(candidate):
            logger.debug(f"find_workspace_config: workspace file found at [path={candidate}]")
            return candidate
    
    raise WorkspaceNotFoundError(filename)


def load_workspace_config(path: Union[str, Path]) -> WorkspaceConfig:
    """
    Read and decode a workspace config file.
    
    Raises:
        StorageError: If the file cannot be read
        DecodeError: If the content is not a valid workspace record
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise StorageError(
            f"load_workspace_config: unable to read workspace config file because [{e}]",
            step="read",
            path=path
        ) from e
    
    try:
        return WorkspaceConfig.model_validate(json.loads(raw))
    except (ValueError, ValidationError) as e:
        raise DecodeError(
            f"load_workspace_config: unable to decode workspace config file because [{e}]",
            path=path
        ) from e


class WorkspaceConfigStore:
    """Read-only access to the workspace config of the current project."""
    
    def __init__(
        self,
        cwd_provider: Callable[[], Union[str, Path]] = get_working_dir,
        filename: str = WORKSPACE_CONFIG_FILE_NAME
    ):
        self.cwd_provider = cwd_provider
        self.filename = filename
    
    def find(self) -> Path:
        """Ascent search from the working directory. Never cached."""
        return find_workspace_config(self.cwd_provider(), self.filename)
    
    def load_from_current_directory(self) -> WorkspaceConfig:
        """Locate the nearest marker file and decode it."""
        return load_workspace_config(self.find())
    
    def load_from_path(self, path: Union[str, Path]) -> WorkspaceConfig:
        """Decode the workspace config at an explicit path, skipping the search."""
        return load_workspace_config(path)
    
    def exists_in_current_directory(self) -> bool:
        """
        Check for the marker directly in the working directory.
        
        Does not ascend. Any failure is logged and reported as absent.
        """
        try:
            candidate = Path(self.cwd_provider()) / self.filename
            candidate.stat()
        except Exception as e:
            logger.debug(f"exists_in_current_directory: {e}")
            return False
        return True
