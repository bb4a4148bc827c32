"""CLI utilities package."""

import json
from typing import Any, Dict, Optional
import click
from ...config.models import ResolvedConfig


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def resolved_config_to_dict(resolved: ResolvedConfig) -> Dict[str, Any]:
    """Convert a ResolvedConfig into the JSON shape printed by `config show --json`."""
    return {
        "global": resolved.global_config.model_dump(by_alias=True),
        "workspace": (
            resolved.workspace_config.model_dump(by_alias=True)
            if resolved.workspace_config is not None
            else None
        ),
        "workspace_path": str(resolved.workspace_path) if resolved.workspace_path else None,
    }


def echo_json(data: Dict[str, Any]) -> None:
    click.echo(json.dumps(data, indent=2))


__all__ = ["format_error", "resolved_config_to_dict", "echo_json"]
