"""Tests for config CLI commands."""

import json
import pytest
from click.testing import CliRunner
from secretctl.cli.main import cli
from secretctl.config.paths import CONFIG_FILE_NAME, CONFIG_FOLDER_NAME, WORKSPACE_CONFIG_FILE_NAME


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Isolated home directory and working directory."""
    home_dir = tmp_path / "home"
    work_dir = tmp_path / "work"
    home_dir.mkdir()
    work_dir.mkdir()
    monkeypatch.setenv("SECRETCTL_HOME", str(home_dir))
    monkeypatch.chdir(work_dir)
    return home_dir


def read_global_config(home_dir):
    return json.loads((home_dir / CONFIG_FOLDER_NAME / CONFIG_FILE_NAME).read_text())


class TestConfigCommands:
    """Test config command group."""
    
    def test_init_writes_email(self, home):
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'init', 'a@x.com'])
        
        assert result.exit_code == 0
        assert "a@x.com" in result.output
        assert read_global_config(home)["loggedInUserEmail"] == "a@x.com"
    
    def test_init_keeps_backend(self, home):
        runner = CliRunner()
        runner.invoke(cli, ['config', 'set-backend', 'vault1'])
        result = runner.invoke(cli, ['config', 'init', 'b@x.com'])
        
        assert result.exit_code == 0
        assert read_global_config(home) == {"loggedInUserEmail": "b@x.com", "vaultBackendType": "vault1"}
    
    def test_init_fails_on_corrupt_config(self, home):
        (home / CONFIG_FOLDER_NAME).mkdir()
        (home / CONFIG_FOLDER_NAME / CONFIG_FILE_NAME).write_text("garbage")
        
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'init', 'a@x.com'])
        
        assert result.exit_code == 1
    
    def test_path(self, home):
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'path'])
        
        assert result.exit_code == 0
        assert str(home / CONFIG_FOLDER_NAME / CONFIG_FILE_NAME) in result.output
    
    def test_show_without_any_config(self, home):
        runner = CliRunner()
        result = runner.invoke(cli, ['config', 'show'])
        
        assert result.exit_code == 0
        assert "(none)" in result.output
    
    def test_show_json_with_workspace(self, home):
        (home.parent / "work" / WORKSPACE_CONFIG_FILE_NAME).write_text(json.dumps({"workspaceId": "ws-1"}))
        runner = CliRunner()
        runner.invoke(cli, ['config', 'init', 'a@x.com'])
        result = runner.invoke(cli, ['config', 'show', '--json'])
        
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["global"]["loggedInUserEmail"] == "a@x.com"
        assert data["workspace"]["workspaceId"] == "ws-1"
        assert data["workspace_path"].endswith(WORKSPACE_CONFIG_FILE_NAME)
    
    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ['version'])
        
        assert result.exit_code == 0
        assert "secretctl version" in result.output
