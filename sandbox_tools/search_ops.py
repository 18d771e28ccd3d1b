"""Directory scanning and the listing/search-by-name tools."""

import os
import logging
from typing import List, Optional, Tuple

from backend import Backend, LocalBackend
from config import app_config
from project import get_project_root
from sandbox_tools._common import NotFound, ToolError, TypeMismatch
from sandbox_tools.gitignore import IgnoreRuleSet
from sandbox_tools.guard import load_rules, relative_to_root, require_permission, resolve_path

logger = logging.getLogger(__name__)


def _walk_tree(
    b: Backend,
    abs_dir: str,
    rel_dir: str,
    rules: IgnoreRuleSet,
    add_dirs: bool,
    depth: Optional[int],
    out: List[str],
    level: int = 1,
) -> None:
    """Recursively collect entries below abs_dir, skipping ignored subtrees."""
    if depth is not None and level > depth:
        return
    try:
        entries = b.list_dir(abs_dir)
    except OSError as e:
        logger.debug(f"Cannot list {abs_dir}: {e}")
        return

    for e in entries:
        name = e["name"]
        is_dir = e["type"] == "directory"
        child_rel = f"{rel_dir}/{name}" if rel_dir != "." else name
        if is_dir and name in app_config.scan_skip_dirs:
            continue
        if rules.is_ignored(child_rel, is_dir=is_dir):
            continue
        if is_dir:
            if add_dirs:
                out.append(child_rel)
            _walk_tree(b, os.path.join(abs_dir, name), child_rel, rules, add_dirs, depth, out, level + 1)
        else:
            out.append(child_rel)


def scan_directory(
    directory: str,
    project_root: Optional[str] = None,
    add_dirs: bool = False,
    depth: Optional[int] = None,
    backend: Optional[Backend] = None,
) -> List[str]:
    """List paths under directory, respecting the project's .gitignore.

    Paths come back project-relative with "/" separators, in sorted walk
    order. depth=1 means immediate children only; None means unbounded.
    """
    b = backend or LocalBackend()
    root = project_root or get_project_root()
    directory = os.path.normpath(directory)
    rules = load_rules(root)
    out: List[str] = []
    _walk_tree(b, directory, relative_to_root(directory, root), rules, add_dirs, depth, out)
    logger.debug(f"Scanned {directory}: {len(out)} entries (depth={depth})")
    return out


def _resolve_directory(rel_path: str, root: str, b: Backend) -> str:
    abs_path = require_permission(resolve_path(rel_path, root), root)
    if not b.exists(abs_path):
        raise NotFound(f"Directory not found: {abs_path}")
    if not b.is_dir(abs_path):
        raise TypeMismatch(f"Path is not a directory: {abs_path}")
    return abs_path


def list_files(rel_path: str, depth: Optional[int] = None,
               backend: Optional[Backend] = None) -> Tuple[str, Optional[str]]:
    """List files and directories under rel_path, newline-joined."""
    try:
        b = backend or LocalBackend()
        root = get_project_root()
        abs_path = _resolve_directory(rel_path, root, b)
        if depth is not None:
            depth = int(depth)
        files = scan_directory(abs_path, root, add_dirs=True, depth=depth, backend=b)
        return "\n".join(files), None
    except (ToolError, OSError, ValueError) as e:
        return "", str(e)


def search_files(rel_path: str, keyword: str,
                 backend: Optional[Backend] = None) -> Tuple[str, Optional[str]]:
    """Find files whose project-relative path contains keyword."""
    try:
        b = backend or LocalBackend()
        root = get_project_root()
        abs_path = _resolve_directory(rel_path, root, b)
        files = scan_directory(abs_path, root, backend=b)
        keyword = str(keyword)
        return "\n".join(f for f in files if keyword in f), None
    except (ToolError, OSError) as e:
        return "", str(e)
