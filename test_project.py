"""Tests for project root detection."""

import os

import project
from config import app_config


def test_provider_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("PROJECT_ROOT", "/somewhere/else")
    project.set_project_root_provider(lambda: str(tmp_path))
    try:
        assert project.get_project_root() == os.path.normpath(str(tmp_path))
    finally:
        project.set_project_root_provider(None)


def test_env_var_is_read_per_call(tmp_path, monkeypatch):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    monkeypatch.setenv("PROJECT_ROOT", str(first))
    assert project.get_project_root() == str(first)
    monkeypatch.setenv("PROJECT_ROOT", str(second))
    assert project.get_project_root() == str(second)


def test_nearest_marked_ancestor(tmp_path, monkeypatch):
    monkeypatch.delenv("PROJECT_ROOT", raising=False)
    monkeypatch.setattr(app_config, "root_markers", ("marker.file",))
    (tmp_path / "marker.file").write_text("")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    assert os.path.realpath(project.get_project_root()) == os.path.realpath(str(tmp_path))


def test_falls_back_to_cwd(tmp_path, monkeypatch):
    monkeypatch.delenv("PROJECT_ROOT", raising=False)
    monkeypatch.setattr(app_config, "root_markers", ("no-such-marker-anywhere.xyz",))
    monkeypatch.chdir(tmp_path)
    assert os.path.realpath(project.get_project_root()) == os.path.realpath(str(tmp_path))
