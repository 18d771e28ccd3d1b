"""External process tools: keyword search via rg/ag/ack/grep, and run_command."""

import os
import logging
import subprocess
from typing import Callable, List, Optional, Tuple, Union

from backend import Backend, LocalBackend
from config import app_config
from sandbox_tools._common import ExecutionFailure, NotFound, ToolError, TypeMismatch
from sandbox_tools.guard import require_permission, resolve_path

logger = logging.getLogger(__name__)


def _rg_argv(binary: str, keyword: str, path: str) -> List[str]:
    return [binary, "--no-ignore-vcs", "--ignore-case", "--hidden", "--glob", "!.git", "--", keyword, path]


def _ag_argv(binary: str, keyword: str, path: str) -> List[str]:
    return [binary, "--ignore-case", "--nocolor", "--nogroup", "--hidden", "--ignore", ".git", "--", keyword, path]


def _ack_argv(binary: str, keyword: str, path: str) -> List[str]:
    return [binary, "--ignore-case", "--nocolor", "--nogroup", "--ignore-dir=.git", "--", keyword, path]


def _grep_argv(binary: str, keyword: str, path: str) -> List[str]:
    return [binary, "-riH", "--exclude-dir=.git", "--", keyword, path]


# Probed in order; the first one found on PATH wins
SEARCH_COMMANDS: Tuple[Tuple[str, Callable[[str, str, str], List[str]]], ...] = (
    ("rg", _rg_argv),
    ("ag", _ag_argv),
    ("ack", _ack_argv),
    ("grep", _grep_argv),
)


def build_search_command(keyword: str, path: str, backend: Optional[Backend] = None) -> List[str]:
    """Pick the first available search binary and build its argv."""
    b = backend or LocalBackend()
    for name, build in SEARCH_COMMANDS:
        binary = b.which(name)
        if binary:
            return build(binary, keyword, path)
    raise NotFound("No search command found")


def search(rel_path: str, keyword: str, backend: Optional[Backend] = None) -> Tuple[str, Optional[str]]:
    """Search file contents under rel_path for keyword. Output is passed through as-is."""
    try:
        b = backend or LocalBackend()
        abs_path = require_permission(resolve_path(rel_path))
        if not b.exists(abs_path):
            raise NotFound(f"No such file or directory: {abs_path}")
        argv = build_search_command(str(keyword), abs_path, backend=b)
        logger.debug(f"search: {argv}")
        try:
            output, rc = b.run_argv(argv, timeout=app_config.search_timeout)
        except subprocess.TimeoutExpired:
            raise ExecutionFailure(f"Search timed out after {app_config.search_timeout}s")
        except OSError as e:
            raise ExecutionFailure(f"Search command failed: {os.path.basename(argv[0])}: {e}")
        # Exit status 1 only means "no matches" for every supported backend
        if rc > 1:
            logger.debug(f"{os.path.basename(argv[0])} exited with code {rc}")
        return output, None
    except ToolError as e:
        return "", str(e)


def run_command(rel_path: str, command: str,
                backend: Optional[Backend] = None) -> Tuple[Union[str, bool], Optional[str]]:
    """Execute a shell command with rel_path as its working directory."""
    try:
        b = backend or LocalBackend()
        abs_path = require_permission(resolve_path(rel_path))
        if not b.exists(abs_path):
            raise NotFound(f"Path not found: {abs_path}")
        if not b.is_dir(abs_path):
            raise TypeMismatch(f"Path is not a directory: {abs_path}")
        logger.info(f"run_command in {abs_path}: {command}")
        try:
            output, rc = b.run_command(command, cwd=abs_path, timeout=app_config.command_timeout)
        except subprocess.TimeoutExpired:
            raise ExecutionFailure(f"Command timed out after {app_config.command_timeout}s: {command}")
        except OSError as e:
            logger.debug(f"Failed to start command {command!r}: {e}")
            raise ExecutionFailure(f"Command failed: {command}")
        if rc != 0:
            logger.info(f"Command exited with code {rc}: {command}")
        return output, None
    except ToolError as e:
        return False, str(e)
