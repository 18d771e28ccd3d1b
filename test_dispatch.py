"""Tests for the tool registry and dispatcher."""

import json

import pytest

from sandbox_tools.dispatch import execute_tool, process_tool_use
from sandbox_tools.schemas import TOOL_DEFINITIONS, TOOL_IMPLEMENTATIONS, TOOLS, get_tool

EXPECTED_TOOLS = [
    "list_files", "search_files", "search", "read_file_toplevel_symbols", "read_file",
    "create_file", "rename_file", "copy_file", "delete_file", "create_dir",
    "rename_dir", "delete_dir", "run_command",
]


def test_registry_is_complete_and_bound():
    assert [t.name for t in TOOLS] == EXPECTED_TOOLS
    assert set(TOOL_IMPLEMENTATIONS) == set(EXPECTED_TOOLS)
    for tool in TOOLS:
        assert tool.returns[-1].name == "error"
        assert tool.returns[-1].optional


def test_descriptors_are_immutable():
    with pytest.raises(AttributeError):
        TOOLS[0].name = "other"


def test_definitions_expose_required_and_optional_fields():
    list_files = next(d for d in TOOL_DEFINITIONS if d["name"] == "list_files")
    schema = list_files["input_schema"]
    assert schema["type"] == "object"
    assert schema["required"] == ["rel_path"]
    assert schema["properties"]["depth"]["type"] == "integer"
    assert get_tool("run_command").param.fields[1].name == "command"
    assert get_tool("nope") is None


def test_create_dir_round_trip(project_root):
    assert process_tool_use("create_dir", json.dumps({"rel_path": "newdir"})) == ("true", None)
    result, err = process_tool_use("create_dir", '{"rel_path": "newdir"}')
    assert result == "false"
    assert err == f"Directory already exists: {project_root / 'newdir'}"


def test_string_results_are_not_reencoded(project_root):
    (project_root / "a.txt").write_text("hello")
    assert process_tool_use("read_file", '{"rel_path": "a.txt"}') == ("hello", None)


def test_list_files_via_dispatch(project_root):
    (project_root / "a" / "b").mkdir(parents=True)
    (project_root / "a" / "b" / "c.txt").write_text("")
    assert process_tool_use("list_files", '{"rel_path": ".", "depth": 1}') == ("a", None)
    assert process_tool_use("list_files", '{"rel_path": "."}') == ("a\na/b\na/b/c.txt", None)


def test_unknown_tool_is_a_silent_no_op(project_root):
    assert execute_tool("format_disk", "{}") is None
    assert process_tool_use("format_disk", "not even json") == (None, None)


def test_malformed_json_propagates(project_root):
    with pytest.raises(json.JSONDecodeError):
        process_tool_use("read_file", "{rel_path:")


def test_bad_arguments_become_errors(project_root):
    result, err = process_tool_use("read_file", "{}")
    assert result is None
    assert err.startswith("Invalid arguments for read_file: ")
    result, err = process_tool_use("read_file", '{"rel_path": "a", "bogus": 1}')
    assert err.startswith("Invalid arguments for read_file: ")


def test_backend_key_in_payload_is_rejected(project_root):
    result, err = process_tool_use("create_dir", '{"rel_path": "d", "backend": "local"}')
    assert result is None
    assert err == "Invalid arguments for create_dir: unexpected argument 'backend'"
    assert not (project_root / "d").exists()


def test_tool_result_carries_error(project_root):
    res = execute_tool("delete_file", {"rel_path": "missing.txt"})
    assert not res.ok
    assert res.output == "false"
    assert res.error == f"File not found: {project_root / 'missing.txt'}"


def test_run_command_failure_serializes_false(project_root):
    assert process_tool_use("run_command", '{"rel_path": "nowhere", "command": "ls"}') == (
        "false", f"Path not found: {project_root / 'nowhere'}",
    )


def test_out_of_root_rejected_for_every_path_tool(project_root):
    for name in EXPECTED_TOOLS:
        args = {"rel_path": "../../etc/passwd", "new_rel_path": "x", "keyword": "root", "command": "ls"}
        fields = {f.name for f in get_tool(name).param.fields}
        res = execute_tool(name, {k: v for k, v in args.items() if k in fields})
        assert res.error.startswith("No permission to access path: "), name
