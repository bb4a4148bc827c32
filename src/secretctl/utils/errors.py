"""Custom exception classes for secretctl."""

from pathlib import Path
from typing import Optional, Union


class SecretCtlError(Exception):
    """Base exception for all secretctl errors."""
    pass


class ConfigEnvironmentError(SecretCtlError):
    """Raised when the home directory or working directory cannot be determined."""
    pass


class StorageError(SecretCtlError):
    """Raised when a config file or directory cannot be created, read or written."""

    def __init__(self, message: str, step: str = "", path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.step = step
        self.path = path


class DecodeError(SecretCtlError):
    """Raised when a config file exists but does not decode to the expected record."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class WorkspaceNotFoundError(SecretCtlError):
    """Raised when no workspace marker file exists up to the filesystem root."""

    def __init__(self, filename: str):
        super().__init__(f"file not found: {filename}")
        self.filename = filename
