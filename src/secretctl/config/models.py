"""Pydantic models for the global and workspace config records."""

from pathlib import Path
from typing import Dict, Optional
from pydantic import BaseModel, Field, field_validator


class GlobalConfig(BaseModel):
    """Per-user config record stored under the home directory."""
    logged_in_user_email: str = Field(default="", alias="loggedInUserEmail", description="Email of the logged-in user")
    vault_backend_type: str = Field(default="", alias="vaultBackendType", description="Active secret-storage backend")
    
    @field_validator("logged_in_user_email", "vault_backend_type", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value
    
    class Config:
        """Pydantic config."""
        populate_by_name = True
        extra = "ignore"


class WorkspaceConfig(BaseModel):
    """Per-project config record decoded from the workspace marker file."""
    workspace_id: str = Field(default="", alias="workspaceId", description="Remote project identifier")
    default_environment: str = Field(default="", alias="defaultEnvironment", description="Environment used when no branch mapping applies")
    git_branch_to_environment_mapping: Optional[Dict[str, str]] = Field(
        default=None,
        alias="gitBranchToEnvironmentMapping",
        description="Git branch name to environment slug"
    )
    
    class Config:
        """Pydantic config."""
        populate_by_name = True
        extra = "allow"
        frozen = True
    
    def environment_for_branch(self, branch: Optional[str]) -> str:
        """Return the environment mapped to branch, falling back to the default."""
        if branch and self.git_branch_to_environment_mapping:
            mapped = self.git_branch_to_environment_mapping.get(branch)
            if mapped:
                return mapped
        return self.default_environment


class UserCredentials(BaseModel):
    """Credentials handed over by the login flow. Only email is consumed here."""
    email: str
    jtw_token: Optional[str] = Field(default=None, alias="JTWToken")
    private_key: Optional[str] = Field(default=None, alias="privateKey")
    
    class Config:
        """Pydantic config."""
        populate_by_name = True


class ResolvedConfig(BaseModel):
    """Global record plus the workspace record found from the working directory, if any."""
    global_config: GlobalConfig
    workspace_config: Optional[WorkspaceConfig] = None
    workspace_path: Optional[Path] = None
