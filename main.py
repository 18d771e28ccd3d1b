"""
Sandbox Tools - command-line access to the agent tool layer.
Lists the tool registry, prints tool definitions, and dispatches single calls.
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from config import app_config
from project import set_project_root_provider
from sandbox_tools import TOOLS, TOOL_DEFINITIONS, execute_tool, get_tool

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _print_tools() -> int:
    table = Table(title=app_config.title)
    table.add_column("Tool", style="bold", no_wrap=True)
    table.add_column("Arguments")
    table.add_column("Returns")
    table.add_column("Description")
    for tool in TOOLS:
        args = ", ".join(f.name + ("?" if f.optional else "") for f in tool.param.fields)
        returns = ", ".join(f.name + ("?" if f.optional else "") for f in tool.returns)
        table.add_row(tool.name, args, returns, tool.description)
    console.print(table)
    return 0


def _print_schema(name: Optional[str]) -> int:
    if name:
        definitions = [d for d in TOOL_DEFINITIONS if d["name"] == name]
        if not definitions:
            err_console.print(f"Unknown tool: {name}", style="red", markup=False)
            return 2
        console.print_json(json.dumps(definitions[0]))
    else:
        console.print_json(json.dumps(TOOL_DEFINITIONS))
    return 0


def _call(name: str, args_json: str) -> int:
    if get_tool(name) is None:
        err_console.print(f"Unknown tool: {name}", style="red", markup=False)
        return 2
    try:
        result = execute_tool(name, args_json)
    except (ValueError, TypeError) as e:
        err_console.print(f"Invalid arguments: {e}", style="red", markup=False)
        return 2
    if result.output is not None:
        console.print(result.output, markup=False, highlight=False, soft_wrap=True)
    if result.error:
        err_console.print(result.error, style="red", markup=False, highlight=False, soft_wrap=True)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Sandbox Tools - sandboxed filesystem and process tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py tools
  python main.py schema read_file
  python main.py -d ~/my-project call list_files '{"rel_path": ".", "depth": 1}'
        """,
    )
    parser.add_argument(
        "-d", "--directory",
        default=None,
        help="Project root (default: PROJECT_ROOT or nearest marked ancestor of the current directory)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("tools", help="List registered tools")
    schema = sub.add_parser("schema", help="Print function-calling definitions as JSON")
    schema.add_argument("name", nargs="?", help="Only this tool")
    call = sub.add_parser("call", help="Dispatch one tool call")
    call.add_argument("name", help="Tool name")
    call.add_argument("args_json", nargs="?", default="{}", help="JSON object of arguments")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, app_config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.directory:
        root = os.path.abspath(os.path.expanduser(args.directory))
        if not os.path.isdir(root):
            err_console.print(f"Error: {root} is not a directory", markup=False)
            return 1
        set_project_root_provider(lambda: root)

    try:
        if args.command == "tools":
            return _print_tools()
        if args.command == "schema":
            return _print_schema(args.name)
        return _call(args.name, args.args_json)
    finally:
        if args.directory:
            set_project_root_provider(None)


if __name__ == "__main__":
    sys.exit(main())
