"""Shared pytest fixtures: a temporary project pinned as the project root."""

from pathlib import Path

import pytest

from project import set_project_root_provider


@pytest.fixture
def project_root(tmp_path: Path):
    root = tmp_path / "proj"
    root.mkdir()
    resolved = str(root.resolve())
    set_project_root_provider(lambda: resolved)
    yield Path(resolved)
    set_project_root_provider(None)


@pytest.fixture
def write_gitignore(project_root: Path):
    def _write(*lines: str) -> Path:
        path = project_root / ".gitignore"
        path.write_text("\n".join(lines) + "\n")
        return path
    return _write
