"""Tool descriptors and dispatch maps.

Descriptors are metadata only: the dispatcher never validates arguments
against them. They exist so callers can introspect the registry and build
function-calling definitions (TOOL_DEFINITIONS) for an LLM.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from sandbox_tools.file_ops import (
    read_file, read_file_toplevel_symbols, create_file, rename_file, copy_file,
    delete_file, create_dir, rename_dir, delete_dir,
)
from sandbox_tools.search_ops import list_files, search_files
from sandbox_tools.external_ops import search, run_command


@dataclass(frozen=True)
class ToolField:
    name: str
    description: str
    type: str
    optional: bool = False


@dataclass(frozen=True)
class ToolParam:
    fields: Tuple[ToolField, ...]
    type: str = "object"


@dataclass(frozen=True)
class ToolDescriptor:
    """Immutable description of one tool: its arguments and return values."""
    name: str
    description: str
    param: ToolParam
    returns: Tuple[ToolField, ...]


def _field(name: str, description: str, type: str = "string", optional: bool = False) -> ToolField:
    return ToolField(name=name, description=description, type=type, optional=optional)


def _error(action: str) -> ToolField:
    return _field("error", f"Error message if the {action}", optional=True)


_DIR_PATH = _field("rel_path", "Relative path to the directory")
_FILE_PATH = _field("rel_path", "Relative path to the file")


TOOLS: Tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="list_files",
        description="List files in a directory",
        param=ToolParam((_DIR_PATH, _field("depth", "Depth of the directory", "integer", optional=True))),
        returns=(
            _field("files", "List of files in the directory", "string[]"),
            _error("directory was not listed successfully"),
        ),
    ),
    ToolDescriptor(
        name="search_files",
        description="Search for files in a directory",
        param=ToolParam((_DIR_PATH, _field("keyword", "Keyword to search for"))),
        returns=(
            _field("files", "List of files that match the keyword"),
            _error("directory was not searched successfully"),
        ),
    ),
    ToolDescriptor(
        name="search",
        description="Search for a keyword in a directory",
        param=ToolParam((_DIR_PATH, _field("keyword", "Keyword to search for"))),
        returns=(
            _field("files", "List of files that match the keyword"),
            _error("directory was not searched successfully"),
        ),
    ),
    ToolDescriptor(
        name="read_file_toplevel_symbols",
        description="Read the top-level symbols of a file",
        param=ToolParam((_FILE_PATH,)),
        returns=(
            _field("definitions", "Top-level symbols of the file"),
            _error("file was not read successfully"),
        ),
    ),
    ToolDescriptor(
        name="read_file",
        description="Read the contents of a file",
        param=ToolParam((_FILE_PATH,)),
        returns=(
            _field("content", "Contents of the file"),
            _error("file was not read successfully"),
        ),
    ),
    ToolDescriptor(
        name="create_file",
        description="Create a new file",
        param=ToolParam((_FILE_PATH,)),
        returns=(
            _field("success", "True if the file was created successfully, false otherwise", "boolean"),
            _error("file was not created successfully"),
        ),
    ),
    ToolDescriptor(
        name="rename_file",
        description="Rename a file",
        param=ToolParam((_FILE_PATH, _field("new_rel_path", "New relative path for the file"))),
        returns=(
            _field("success", "True if the file was renamed successfully, false otherwise", "boolean"),
            _error("file was not renamed successfully"),
        ),
    ),
    ToolDescriptor(
        name="copy_file",
        description="Copy a file",
        param=ToolParam((_FILE_PATH, _field("new_rel_path", "Relative path for the copy"))),
        returns=(
            _field("success", "True if the file was copied successfully, false otherwise", "boolean"),
            _error("file was not copied successfully"),
        ),
    ),
    ToolDescriptor(
        name="delete_file",
        description="Delete a file",
        param=ToolParam((_FILE_PATH,)),
        returns=(
            _field("success", "True if the file was deleted successfully, false otherwise", "boolean"),
            _error("file was not deleted successfully"),
        ),
    ),
    ToolDescriptor(
        name="create_dir",
        description="Create a new directory",
        param=ToolParam((_DIR_PATH,)),
        returns=(
            _field("success", "True if the directory was created successfully, false otherwise", "boolean"),
            _error("directory was not created successfully"),
        ),
    ),
    ToolDescriptor(
        name="rename_dir",
        description="Rename a directory",
        param=ToolParam((_DIR_PATH, _field("new_rel_path", "New relative path for the directory"))),
        returns=(
            _field("success", "True if the directory was renamed successfully, false otherwise", "boolean"),
            _error("directory was not renamed successfully"),
        ),
    ),
    ToolDescriptor(
        name="delete_dir",
        description="Delete a directory",
        param=ToolParam((_DIR_PATH,)),
        returns=(
            _field("success", "True if the directory was deleted successfully, false otherwise", "boolean"),
            _error("directory was not deleted successfully"),
        ),
    ),
    ToolDescriptor(
        name="run_command",
        description="Run a command in a directory",
        param=ToolParam((_DIR_PATH, _field("command", "Command to run"))),
        returns=(
            _field("stdout", "Output of the command"),
            _error("command was not run successfully"),
        ),
    ),
)

TOOL_IMPLEMENTATIONS: Dict[str, Callable[..., Tuple[Any, Optional[str]]]] = {
    "list_files": list_files,
    "search_files": search_files,
    "search": search,
    "read_file_toplevel_symbols": read_file_toplevel_symbols,
    "read_file": read_file,
    "create_file": create_file,
    "rename_file": rename_file,
    "copy_file": copy_file,
    "delete_file": delete_file,
    "create_dir": create_dir,
    "rename_dir": rename_dir,
    "delete_dir": delete_dir,
    "run_command": run_command,
}

_TOOLS_BY_NAME: Dict[str, ToolDescriptor] = {t.name: t for t in TOOLS}


def get_tool(name: str) -> Optional[ToolDescriptor]:
    return _TOOLS_BY_NAME.get(name)


_JSON_TYPES: Dict[str, Dict[str, Any]] = {
    "string": {"type": "string"},
    "integer": {"type": "integer"},
    "boolean": {"type": "boolean"},
    "string[]": {"type": "array", "items": {"type": "string"}},
}


def describe_tool(tool: ToolDescriptor) -> Dict[str, Any]:
    """Render a descriptor as a function-calling definition with a JSON-schema input_schema."""
    properties: Dict[str, Any] = {}
    required: List[str] = []
    for f in tool.param.fields:
        properties[f.name] = dict(_JSON_TYPES.get(f.type, {"type": f.type}), description=f.description)
        if not f.optional:
            required.append(f.name)
    return {
        "name": tool.name,
        "description": tool.description,
        "input_schema": {
            "type": tool.param.type,
            "properties": properties,
            "required": required,
        },
    }


TOOL_DEFINITIONS: List[Dict[str, Any]] = [describe_tool(t) for t in TOOLS]
