"""Tests for config path resolution and ancestor iteration."""

from pathlib import Path
import pytest
from secretctl.config.paths import (
    CONFIG_FILE_NAME,
    CONFIG_FOLDER_NAME,
    get_home_dir,
    get_working_dir,
    iter_ancestors,
    resolve_config_paths,
)
from secretctl.utils.errors import ConfigEnvironmentError


class TestHomeDir:
    """Test home directory lookup."""
    
    def test_env_override(self, monkeypatch, tmp_path):
        """SECRETCTL_HOME replaces the host home directory."""
        monkeypatch.setenv("SECRETCTL_HOME", str(tmp_path))
        assert get_home_dir() == tmp_path
    
    def test_falls_back_to_host_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("SECRETCTL_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert get_home_dir() == tmp_path
    
    def test_undeterminable_home(self, monkeypatch):
        """Host failure surfaces as ConfigEnvironmentError."""
        def broken_home(cls):
            raise RuntimeError("Could not determine home directory.")
        
        monkeypatch.delenv("SECRETCTL_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(broken_home))
        
        with pytest.raises(ConfigEnvironmentError, match="home directory"):
            get_home_dir()
    
    def test_empty_home_variable(self, monkeypatch):
        """An empty HOME is missing environment state, not the filesystem root."""
        monkeypatch.delenv("SECRETCTL_HOME", raising=False)
        monkeypatch.setenv("HOME", "")
        
        with pytest.raises(ConfigEnvironmentError, match="HOME is empty"):
            get_home_dir()
    
    def test_home_at_filesystem_root(self, monkeypatch, tmp_path):
        root = Path(tmp_path.anchor)
        monkeypatch.delenv("SECRETCTL_HOME", raising=False)
        monkeypatch.setenv("HOME", str(root))
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: root))
        
        with pytest.raises(ConfigEnvironmentError, match="filesystem root"):
            get_home_dir()
    
    def test_undeterminable_working_dir(self, monkeypatch):
        def broken_cwd(cls):
            raise FileNotFoundError("cwd removed")
        
        monkeypatch.setattr(Path, "cwd", classmethod(broken_cwd))
        
        with pytest.raises(ConfigEnvironmentError, match="working directory"):
            get_working_dir()


class TestResolveConfigPaths:
    """Test global config path construction."""
    
    def test_paths_join_fixed_names(self, tmp_path):
        paths = resolve_config_paths(lambda: tmp_path)
        
        assert paths.dir_path == tmp_path / CONFIG_FOLDER_NAME
        assert paths.file_path == tmp_path / CONFIG_FOLDER_NAME / CONFIG_FILE_NAME
    
    def test_paths_are_tuple_unpackable(self, tmp_path):
        file_path, dir_path = resolve_config_paths(lambda: str(tmp_path))
        assert file_path.parent == dir_path
    
    def test_home_failure_propagates(self):
        def failing_home():
            raise ConfigEnvironmentError("no home")
        
        with pytest.raises(ConfigEnvironmentError):
            resolve_config_paths(failing_home)


class TestIterAncestors:
    """Test lazy ancestor sequence."""
    
    def test_starts_with_start_and_ends_at_root(self, tmp_path):
        start = tmp_path / "a" / "b"
        ancestors = list(iter_ancestors(start))
        
        assert ancestors[0] == start
        assert ancestors[1] == tmp_path / "a"
        assert ancestors[-1] == Path(start.anchor)
        assert ancestors[-1].parent == ancestors[-1]
    
    def test_root_yields_only_itself(self, tmp_path):
        root = Path(tmp_path.anchor)
        assert list(iter_ancestors(root)) == [root]
    
    def test_relative_start_is_made_absolute(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert next(iter_ancestors(".")) == Path.cwd()
    
    def test_is_lazy(self, tmp_path):
        ancestors = iter_ancestors(tmp_path)
        assert next(ancestors) == tmp_path
        assert next(ancestors) == tmp_path.parent
