"""File operation tools: read, symbols, create, rename, copy, delete."""

import os
import errno
import logging
from typing import Optional, Tuple

from backend import Backend, LocalBackend
from project import get_project_root
from sandbox_tools._common import AlreadyExists, NotFound, ToolError, TypeMismatch
from sandbox_tools.guard import require_permission, resolve_path
from sandbox_tools.symbols import extract_definitions

logger = logging.getLogger(__name__)

_NOUNS = {"file": "File", "directory": "Directory"}


def _authorized(rel_path: str, root: str, is_dir: Optional[bool] = None) -> str:
    return require_permission(resolve_path(rel_path, root), root, is_dir=is_dir)


def _require_kind(b: Backend, abs_path: str, kind: str) -> str:
    """Raise unless abs_path exists and is a file/directory as asked."""
    if not b.exists(abs_path):
        raise NotFound(f"{_NOUNS[kind]} not found: {abs_path}")
    is_kind = b.is_file(abs_path) if kind == "file" else b.is_dir(abs_path)
    if not is_kind:
        raise TypeMismatch(f"Path is not a {kind}: {abs_path}")
    return abs_path


def _require_absent(b: Backend, abs_path: str, kind: str) -> str:
    if b.exists(abs_path):
        raise AlreadyExists(f"{_NOUNS[kind]} already exists: {abs_path}")
    return abs_path


def _source_and_destination(b: Backend, rel_path: str, new_rel_path: str, kind: str) -> Tuple[str, str]:
    root = get_project_root()
    src = _require_kind(b, _authorized(rel_path, root), kind)
    # The destination does not exist yet, so its kind comes from the source
    dst_is_dir = True if kind == "directory" else None
    dst = _require_absent(b, _authorized(new_rel_path, root, is_dir=dst_is_dir), kind)
    return src, dst


def read_file(rel_path: str, backend: Optional[Backend] = None) -> Tuple[str, Optional[str]]:
    """Read the contents of a file."""
    try:
        b = backend or LocalBackend()
        abs_path = _require_kind(b, _authorized(rel_path, get_project_root()), "file")
        return b.read_file(abs_path), None
    except (ToolError, OSError, ValueError) as e:
        return "", str(e)


def read_file_toplevel_symbols(rel_path: str, backend: Optional[Backend] = None) -> Tuple[str, Optional[str]]:
    """List the top-level definitions of a source file."""
    try:
        b = backend or LocalBackend()
        abs_path = _require_kind(b, _authorized(rel_path, get_project_root()), "file")
        return extract_definitions(abs_path, b.read_file(abs_path)), None
    except (ToolError, OSError, ValueError) as e:
        return "", str(e)


def create_file(rel_path: str, backend: Optional[Backend] = None) -> Tuple[bool, Optional[str]]:
    """Create an empty file (and its parent directories). Existing files are left alone."""
    try:
        b = backend or LocalBackend()
        abs_path = _authorized(rel_path, get_project_root())
        if b.is_dir(abs_path):
            raise TypeMismatch(f"Path is not a file: {abs_path}")
        if not b.exists(abs_path):
            b.make_dirs(os.path.dirname(abs_path))
            b.touch(abs_path)
            logger.info(f"Created file {abs_path}")
        return True, None
    except (ToolError, OSError, ValueError) as e:
        return False, str(e)


def rename_file(rel_path: str, new_rel_path: str, backend: Optional[Backend] = None) -> Tuple[bool, Optional[str]]:
    """Move a file to a new path inside the project."""
    try:
        b = backend or LocalBackend()
        src, dst = _source_and_destination(b, rel_path, new_rel_path, "file")
        b.rename(src, dst)
        logger.info(f"Renamed file {src} -> {dst}")
        return True, None
    except (ToolError, OSError, ValueError) as e:
        return False, str(e)


def copy_file(rel_path: str, new_rel_path: str, backend: Optional[Backend] = None) -> Tuple[bool, Optional[str]]:
    """Copy a file's bytes to a new path inside the project."""
    try:
        b = backend or LocalBackend()
        src, dst = _source_and_destination(b, rel_path, new_rel_path, "file")
        b.write_bytes(dst, b.read_bytes(src))
        logger.info(f"Copied file {src} -> {dst}")
        return True, None
    except (ToolError, OSError, ValueError) as e:
        return False, str(e)


def delete_file(rel_path: str, backend: Optional[Backend] = None) -> Tuple[bool, Optional[str]]:
    try:
        b = backend or LocalBackend()
        abs_path = _require_kind(b, _authorized(rel_path, get_project_root()), "file")
        b.remove_file(abs_path)
        logger.info(f"Deleted file {abs_path}")
        return True, None
    except (ToolError, OSError, ValueError) as e:
        return False, str(e)


def create_dir(rel_path: str, backend: Optional[Backend] = None) -> Tuple[bool, Optional[str]]:
    """Create a directory and any missing parents; fails if the path exists."""
    try:
        b = backend or LocalBackend()
        abs_path = _require_absent(b, _authorized(rel_path, get_project_root(), is_dir=True), "directory")
        b.make_dirs(abs_path)
        logger.info(f"Created directory {abs_path}")
        return True, None
    except (ToolError, OSError, ValueError) as e:
        return False, str(e)


def rename_dir(rel_path: str, new_rel_path: str, backend: Optional[Backend] = None) -> Tuple[bool, Optional[str]]:
    try:
        b = backend or LocalBackend()
        src, dst = _source_and_destination(b, rel_path, new_rel_path, "directory")
        b.rename(src, dst)
        logger.info(f"Renamed directory {src} -> {dst}")
        return True, None
    except (ToolError, OSError, ValueError) as e:
        return False, str(e)


def delete_dir(rel_path: str, backend: Optional[Backend] = None) -> Tuple[bool, Optional[str]]:
    """Remove an empty directory. Contents are never deleted recursively."""
    try:
        b = backend or LocalBackend()
        abs_path = _require_kind(b, _authorized(rel_path, get_project_root()), "directory")
        try:
            b.remove_dir(abs_path)
        except OSError as e:
            if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
                return False, f"Directory not empty: {abs_path}"
            raise
        logger.info(f"Deleted directory {abs_path}")
        return True, None
    except (ToolError, OSError, ValueError) as e:
        return False, str(e)
