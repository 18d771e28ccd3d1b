"""Tests for path resolution and the sandbox permission check."""

import os

from sandbox_tools.guard import has_permission, is_within, require_permission, resolve_path
from sandbox_tools._common import PermissionDenied

import pytest


def test_resolve_joins_and_normalizes(project_root):
    assert resolve_path("a/./b/../c.txt") == os.path.join(str(project_root), "a", "c.txt")
    assert resolve_path(".") == str(project_root)
    assert resolve_path("") == str(project_root)


def test_relative_paths_are_denied(project_root):
    assert not has_permission("a/b.txt")


def test_root_and_descendants_are_allowed(project_root):
    assert has_permission(str(project_root))
    assert has_permission(str(project_root / "missing" / "file.txt"))


def test_outside_root_is_denied(project_root):
    assert not has_permission(resolve_path("../../etc/passwd"))
    assert not has_permission("/etc/passwd")


def test_sibling_with_shared_prefix_is_denied(project_root):
    sibling = str(project_root) + "2"
    assert not is_within(sibling, str(project_root))
    assert not has_permission(os.path.join(sibling, "x.txt"))


def test_ignore_negation(project_root, write_gitignore):
    write_gitignore("*.log", "!important.log")
    assert has_permission(str(project_root / "important.log"))
    assert not has_permission(str(project_root / "debug.log"))
    assert not has_permission(str(project_root / "sub" / "debug.log"))


def test_ignored_directory_covers_descendants(project_root, write_gitignore):
    write_gitignore("secrets/")
    (project_root / "secrets").mkdir()
    assert not has_permission(str(project_root / "secrets"))
    assert not has_permission(str(project_root / "secrets" / "key.pem"))


def test_directory_hint_for_paths_not_yet_created(project_root, write_gitignore):
    write_gitignore("build/")
    target = str(project_root / "build")
    assert has_permission(target)
    assert not has_permission(target, is_dir=True)
    with pytest.raises(PermissionDenied):
        require_permission(target, is_dir=True)


def test_gitignore_is_reread_on_every_check(project_root, write_gitignore):
    target = str(project_root / "notes.txt")
    assert has_permission(target)
    write_gitignore("notes.txt")
    assert not has_permission(target)
    (project_root / ".gitignore").unlink()
    assert has_permission(target)


def test_require_permission_message(project_root):
    outside = resolve_path("../outside.txt")
    with pytest.raises(PermissionDenied, match="No permission to access path: "):
        require_permission(outside)
