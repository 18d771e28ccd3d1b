"""Tests for directory scanning, list_files and search_files."""

from sandbox_tools.search_ops import list_files, scan_directory, search_files


def _make_tree(root):
    (root / "a" / "b").mkdir(parents=True)
    (root / "a" / "b" / "c.txt").write_text("c")


def test_depth_one_lists_immediate_children(project_root):
    _make_tree(project_root)
    files, err = list_files(".", depth=1)
    assert err is None
    assert files.split("\n") == ["a"]


def test_depth_zero_lists_nothing(project_root):
    _make_tree(project_root)
    assert list_files(".", depth=0) == ("", None)


def test_no_depth_lists_everything(project_root):
    _make_tree(project_root)
    files, err = list_files(".")
    assert err is None
    assert files.split("\n") == ["a", "a/b", "a/b/c.txt"]


def test_list_subdirectory_returns_root_relative_paths(project_root):
    _make_tree(project_root)
    files, err = list_files("a", depth=2)
    assert err is None
    assert files.split("\n") == ["a/b", "a/b/c.txt"]


def test_ignored_subtrees_are_skipped(project_root, write_gitignore):
    write_gitignore("build/", "*.log", "!keep.log")
    (project_root / "build").mkdir()
    (project_root / "build" / "out.js").write_text("")
    (project_root / "debug.log").write_text("")
    (project_root / "keep.log").write_text("")
    (project_root / "src").mkdir()
    (project_root / "src" / "main.py").write_text("")
    files = scan_directory(str(project_root), str(project_root), add_dirs=True)
    assert files == [".gitignore", "keep.log", "src", "src/main.py"]


def test_git_directory_is_never_scanned(project_root):
    (project_root / ".git" / "objects").mkdir(parents=True)
    (project_root / "x.txt").write_text("")
    assert scan_directory(str(project_root), str(project_root), add_dirs=True) == ["x.txt"]


def test_list_files_errors(project_root):
    (project_root / "file.txt").write_text("")
    _, err = list_files("missing")
    assert err.startswith("Directory not found: ")
    _, err = list_files("file.txt")
    assert err.startswith("Path is not a directory: ")
    files, err = list_files("../..")
    assert files == ""
    assert err.startswith("No permission to access path: ")


def test_search_files_filters_by_substring(project_root):
    (project_root / "src" / "utils").mkdir(parents=True)
    (project_root / "src" / "utils" / "helpers.py").write_text("")
    (project_root / "src" / "main.py").write_text("")
    (project_root / "README.md").write_text("")
    files, err = search_files(".", "utils")
    assert err is None
    assert files == "src/utils/helpers.py"
    files, err = search_files("src", ".py")
    assert files.split("\n") == ["src/main.py", "src/utils/helpers.py"]
    files, err = search_files(".", "nothing-matches")
    assert (files, err) == ("", None)
