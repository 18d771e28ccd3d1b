"""
Sandboxed filesystem and process tools for a coding agent.
Every tool resolves paths against the project root, checks them against the
sandbox guard (root containment + .gitignore) and reports failures as strings.
"""

from sandbox_tools._common import (  # noqa: F401
    ToolResult,
    ToolError,
    PermissionDenied,
    NotFound,
    TypeMismatch,
    AlreadyExists,
    ExecutionFailure,
)
from sandbox_tools.gitignore import (  # noqa: F401
    IgnoreRuleSet,
    parse_gitignore,
    parse_gitignore_lines,
    is_ignored,
)
from sandbox_tools.guard import (  # noqa: F401
    resolve_path,
    has_permission,
    require_permission,
)
from sandbox_tools.search_ops import (  # noqa: F401
    scan_directory,
    list_files,
    search_files,
)
from sandbox_tools.file_ops import (  # noqa: F401
    read_file,
    read_file_toplevel_symbols,
    create_file,
    rename_file,
    copy_file,
    delete_file,
    create_dir,
    rename_dir,
    delete_dir,
)
from sandbox_tools.external_ops import (  # noqa: F401
    search,
    run_command,
    build_search_command,
)
from sandbox_tools.symbols import extract_definitions  # noqa: F401
from sandbox_tools.schemas import (  # noqa: F401
    TOOLS,
    TOOL_DEFINITIONS,
    TOOL_IMPLEMENTATIONS,
    ToolDescriptor,
    ToolField,
    ToolParam,
    describe_tool,
    get_tool,
)
from sandbox_tools.dispatch import execute_tool, process_tool_use  # noqa: F401
