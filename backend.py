"""
Backend abstraction for file and command operations.
The tool layer resolves and authorizes every path before calling a backend,
so backends only ever receive absolute paths.
"""

import logging
import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class Backend(ABC):
    """Abstract backend for file system and command operations."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a path exists."""

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Check if a path is a file."""

    @abstractmethod
    def list_dir(self, path: str) -> List[Dict[str, Any]]:
        """List entries in a directory. Returns list of {name, type}."""

    @abstractmethod
    def read_file(self, path: str) -> str:
        """Read file content as text."""

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Read raw file content."""

    @abstractmethod
    def write_bytes(self, path: str, data: bytes) -> None:
        """Write raw content to a file (create dirs as needed)."""

    @abstractmethod
    def touch(self, path: str) -> None:
        """Create an empty file if it does not exist."""

    @abstractmethod
    def make_dirs(self, path: str) -> None:
        """Create a directory and any missing parents."""

    @abstractmethod
    def rename(self, src: str, dst: str) -> None:
        """Atomically move src to dst."""

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """Delete a file."""

    @abstractmethod
    def remove_dir(self, path: str) -> None:
        """Delete an empty directory."""

    @abstractmethod
    def which(self, name: str) -> Optional[str]:
        """Resolve an executable on the search path."""

    @abstractmethod
    def run_command(self, command: str, cwd: str, timeout: Optional[float] = None) -> Tuple[str, int]:
        """Run a shell command in cwd. Returns (combined output, returncode)."""

    @abstractmethod
    def run_argv(self, argv: Sequence[str], timeout: Optional[float] = None) -> Tuple[str, int]:
        """Run a program without a shell. Returns (stdout, returncode)."""


# ============================================================
# Local Backend
# ============================================================

class LocalBackend(Backend):
    """Backend that operates on the local filesystem."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def list_dir(self, path: str) -> List[Dict[str, Any]]:
        entries = []
        for name in sorted(os.listdir(path)):
            child = os.path.join(path, name)
            if os.path.islink(child):
                # Reported as a leaf so scans never follow links out of the tree
                entries.append({"name": name, "type": "link"})
            elif os.path.isdir(child):
                entries.append({"name": name, "type": "directory"})
            else:
                entries.append({"name": name, "type": "file"})
        return entries

    def read_file(self, path: str) -> str:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def write_bytes(self, path: str, data: bytes) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)

    def touch(self, path: str) -> None:
        with open(path, "a", encoding="utf-8"):
            pass

    def make_dirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)

    def rename(self, src: str, dst: str) -> None:
        os.rename(src, dst)

    def remove_file(self, path: str) -> None:
        os.remove(path)

    def remove_dir(self, path: str) -> None:
        os.rmdir(path)

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)

    def run_command(self, command: str, cwd: str, timeout: Optional[float] = None) -> Tuple[str, int]:
        # cwd goes to the child only; the parent's working directory is left alone
        proc = subprocess.run(
            command, shell=True, cwd=cwd,
            stdout=subprocess.PIPE, stderr=subprocess.STDOUT,
            text=True, errors="replace", timeout=timeout,
        )
        return proc.stdout or "", proc.returncode

    def run_argv(self, argv: Sequence[str], timeout: Optional[float] = None) -> Tuple[str, int]:
        proc = subprocess.run(
            list(argv),
            stdout=subprocess.PIPE, stderr=subprocess.PIPE,
            text=True, errors="replace", timeout=timeout,
        )
        if proc.returncode > 1 and proc.stderr:
            logger.debug(f"{argv[0]} exited {proc.returncode}: {proc.stderr.strip()}")
        return proc.stdout or "", proc.returncode
