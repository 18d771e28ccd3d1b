"""Project root detection.

The host decides what the project is. It can install its own provider with
set_project_root_provider(); otherwise PROJECT_ROOT is honoured, then the
nearest ancestor of the current directory carrying a root marker.
The root is looked up on every call and never cached.
"""

import logging
import os
from typing import Callable, Optional

from config import app_config, get_env_project_root

logger = logging.getLogger(__name__)

_provider: Optional[Callable[[], str]] = None


def set_project_root_provider(provider: Optional[Callable[[], str]]) -> None:
    """Install (or clear, with None) the host's project-root function."""
    global _provider
    _provider = provider


def _find_marked_ancestor(start: str) -> Optional[str]:
    current = start
    while True:
        for marker in app_config.root_markers:
            if os.path.exists(os.path.join(current, marker)):
                return current
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent


def get_project_root() -> str:
    """Return the current project root as an absolute, normalized path."""
    if _provider is not None:
        root = _provider()
    else:
        root = get_env_project_root()
        if not root:
            cwd = os.getcwd()
            root = _find_marked_ancestor(cwd) or cwd
    root = os.path.normpath(os.path.abspath(os.path.expanduser(root)))
    if not os.path.isdir(root):
        logger.warning(f"Project root is not a directory: {root}")
    return root
