"""
Configuration module for the sandbox tools.
Handles environment variables and tool-layer settings.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _split_env(name: str, default: str) -> Tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _optional_seconds(name: str) -> Optional[float]:
    raw = os.getenv(name, "")
    if not raw:
        return None
    value = float(raw)
    return value if value > 0 else None


@dataclass
class ToolsConfig:
    """Tool-layer configuration"""
    title: str = "Sandbox Tools"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Name of the ignore file looked up at the project root
    gitignore_name: str = os.getenv("GITIGNORE_NAME", ".gitignore")
    # Files/dirs whose presence marks a project root when PROJECT_ROOT is unset
    root_markers: Tuple[str, ...] = field(default_factory=lambda: _split_env(
        "ROOT_MARKERS", ".git,pyproject.toml,package.json,Cargo.toml,go.mod,Makefile,.gitignore",
    ))
    # Directory names the scanner never descends into
    scan_skip_dirs: Tuple[str, ...] = field(default_factory=lambda: _split_env("SCAN_SKIP_DIRS", ".git"))
    # Subprocess limits in seconds; unset or 0 means wait indefinitely
    command_timeout: Optional[float] = field(default_factory=lambda: _optional_seconds("COMMAND_TIMEOUT"))
    search_timeout: Optional[float] = field(default_factory=lambda: _optional_seconds("SEARCH_TIMEOUT"))


def get_env_project_root() -> str:
    """Read PROJECT_ROOT at call time so it can change between operations."""
    return os.getenv("PROJECT_ROOT", "").strip()


app_config = ToolsConfig()
