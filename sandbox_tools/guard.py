"""Path resolution and the sandbox permission check.

has_permission() is the single authorization checkpoint: every tool that
touches the filesystem calls it (through require_permission) before doing
anything else.
"""

import os
import logging
from typing import Optional

from config import app_config
from project import get_project_root
from sandbox_tools._common import PermissionDenied
from sandbox_tools.gitignore import IgnoreRuleSet, parse_gitignore

logger = logging.getLogger(__name__)


def resolve_path(rel_path: str, project_root: Optional[str] = None) -> str:
    """Join rel_path onto the project root and normalize. No existence check."""
    root = project_root or get_project_root()
    return os.path.normpath(os.path.join(root, rel_path or "."))


def is_within(path: str, root: str) -> bool:
    """True if path equals root or sits below it, compared segment by segment."""
    path = os.path.normpath(path)
    root = os.path.normpath(root)
    try:
        return os.path.commonpath([path, root]) == root
    except ValueError:
        # Different drives, or mixing absolute and relative paths
        return False


def relative_to_root(abs_path: str, root: str) -> str:
    """Project-relative form with forward slashes; the root itself is "."."""
    rel = os.path.relpath(abs_path, root)
    return rel.replace(os.sep, "/")


def load_rules(project_root: str) -> IgnoreRuleSet:
    return parse_gitignore(os.path.join(project_root, app_config.gitignore_name))


def has_permission(abs_path: str, project_root: Optional[str] = None,
                   is_dir: Optional[bool] = None) -> bool:
    """Decide whether abs_path may be touched by a tool.

    is_dir overrides the on-disk check, for paths about to be created as
    directories; when None the filesystem decides.
    """
    if not abs_path or not os.path.isabs(abs_path):
        return False
    root = project_root or get_project_root()
    abs_path = os.path.normpath(abs_path)
    if not is_within(abs_path, root):
        logger.debug(f"Denied {abs_path}: outside project root {root}")
        return False
    rel = relative_to_root(abs_path, root)
    if rel == ".":
        return True
    if is_dir is None:
        is_dir = os.path.isdir(abs_path)
    rules = load_rules(root)
    if rules.is_ignored(rel, is_dir=is_dir):
        logger.debug(f"Denied {abs_path}: ignored by {app_config.gitignore_name}")
        return False
    return True


def require_permission(abs_path: str, project_root: Optional[str] = None,
                       is_dir: Optional[bool] = None) -> str:
    """Raise PermissionDenied unless has_permission(); returns abs_path for chaining."""
    if not has_permission(abs_path, project_root, is_dir=is_dir):
        raise PermissionDenied(f"No permission to access path: {abs_path}")
    return abs_path
