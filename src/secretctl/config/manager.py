"""Global config store: load and persist the per-user config record."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any
from pydantic import ValidationError
from .models import GlobalConfig, UserCredentials
from .paths import ConfigPaths, HomeProvider, get_home_dir, resolve_config_paths
from ..utils.errors import ConfigEnvironmentError, DecodeError, StorageError
from ..utils.logging import get_logger

logger = get_logger("config.manager")


class GlobalConfigStore:
    """
    Reads and writes the single global config file under the home directory.
    
    Paths are recomputed on every call from the injected home provider, so
    a store never caches a stale location.
    """
    
    def __init__(self, home_provider: HomeProvider = get_home_dir):
        """
        Initialize the store.
        
        Args:
            home_provider: Zero-argument callable returning the home directory
        """
        self.home_provider = home_provider
    
    def resolve_paths(self) -> ConfigPaths:
        """
        Resolve the global config file and directory paths.
        
        Raises:
            ConfigEnvironmentError: If the home directory cannot be determined
        """
        return resolve_config_paths(self.home_provider)
    
    def exists(self) -> bool:
        """Check whether the global config file exists."""
        try:
            file_path, _ = self.resolve_paths()
        except ConfigEnvironmentError as e:
            logger.debug(f"There was an error when creating the full path to config file: {e}")
            return False
        return file_path.exists()
    
    def load(self) -> GlobalConfig:
        """
        Load the global config record.
        
        A missing file is the normal "never configured" state and yields
        an empty GlobalConfig rather than an error.
        
        Returns:
            Loaded GlobalConfig
            
        Raises:
            ConfigEnvironmentError: If the home directory cannot be determined
            StorageError: If the file exists but cannot be read
            DecodeError: If the file content is not a valid config record
        """
        file_path, _ = self.resolve_paths()
        
        try:
            raw = file_path.read_bytes()
        except FileNotFoundError:
            logger.debug(f"No global config at {file_path}, using empty config")
            return GlobalConfig()
        except OSError as e:
            raise StorageError(
                f"load_global_config: unable to read config file {file_path} [err={e}]",
                step="read",
                path=file_path
            ) from e
        
        try:
            data = json.loads(raw)
            return GlobalConfig.model_validate(data)
        except (ValueError, ValidationError) as e:
            raise DecodeError(
                f"load_global_config: unable to decode config file {file_path} [err={e}]",
                path=file_path
            ) from e
    
    def save(self, config: GlobalConfig) -> None:
        """
        Write the whole config record, replacing any existing file.
        
        Args:
            config: Record to persist
            
        Raises:
            ConfigEnvironmentError: If the home directory cannot be determined
            StorageError: If serializing, creating the directory or writing fails
        """
        file_path, dir_path = self.resolve_paths()
        
        try:
            content = json.dumps(config.model_dump(by_alias=True), indent=2) + "\n"
        except (TypeError, ValueError) as e:
            raise StorageError(
                f"save_global_config: unable to serialize config [err={e}]",
                step="serialize",
                path=file_path
            ) from e
        
        _ensure_config_dir(dir_path)
        _atomic_write_text(file_path, content)
        logger.info(f"Saved global config to {file_path}")
    
    def update(self, **fields: Any) -> GlobalConfig:
        """
        Read-modify-write the given fields of the stored record.
        
        Args:
            **fields: GlobalConfig field names and their new values
            
        Returns:
            The record that was saved
        """
        unknown = [name for name in fields if name not in GlobalConfig.model_fields]
        if unknown:
            raise ValueError(f"Unknown global config fields: {unknown}")
        
        config = self.load().model_copy(update=fields)
        self.save(config)
        return config
    
    def initialize_from_credentials(self, credentials: UserCredentials) -> GlobalConfig:
        """
        Write the config record for a fresh login.
        
        The logged-in email is replaced; an already configured vault
        backend type is carried over from the existing record.
        
        Args:
            credentials: Credentials of the user who just logged in
            
        Returns:
            The record that was saved
        """
        _, dir_path = self.resolve_paths()
        _ensure_config_dir(dir_path)
        
        existing = self.load()
        config = GlobalConfig(
            logged_in_user_email=credentials.email,
            vault_backend_type=existing.vault_backend_type
        )
        self.save(config)
        return config


def default_global_store() -> GlobalConfigStore:
    """Build a store bound to the invoking user's home directory."""
    return GlobalConfigStore(home_provider=get_home_dir)


def _ensure_config_dir(dir_path: Path) -> None:
    """Create the config directory; an existing directory is fine."""
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(
            f"save_global_config: unable to create config directory {dir_path} [err={e}]",
            step="mkdir",
            path=dir_path
        ) from e


def _atomic_write_text(path: Path, text: str) -> None:
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f"{path.name}.", suffix=".tmp", dir=str(path.parent))
    except OSError as e:
        raise StorageError(
            f"save_global_config: unable to create temp file in {path.parent} [err={e}]",
            step="write",
            path=path
        ) from e
    
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.chmod(tmp, 0o644)
        os.replace(tmp, path)
    except OSError as e:
        _discard_temp_file(tmp)
        raise StorageError(
            f"save_global_config: unable to write config file {path} [err={e}]",
            step="write",
            path=path
        ) from e


def _discard_temp_file(tmp: Path) -> None:
    try:
        tmp.unlink(missing_ok=True)
    except OSError as e:
        logger.debug(f"Could not remove temp file {tmp}: {e}")
