""".gitignore rule parsing and matching.

Rules are split into exclusion and negation ("!pattern") sets. A path is
ignored when it matches any exclusion and no negation; order inside the file
does not matter, so a negation always wins.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

import pathspec

logger = logging.getLogger(__name__)


def _compile(patterns: Iterable[str]) -> pathspec.PathSpec:
    return pathspec.PathSpec.from_lines("gitwildmatch", patterns)


@dataclass(frozen=True)
class IgnoreRuleSet:
    """Exclusion and negation patterns from one ignore file."""
    exclude: Tuple[str, ...] = ()
    negate: Tuple[str, ...] = ()
    _exclude_spec: pathspec.PathSpec = field(init=False, repr=False, compare=False)
    _negate_spec: pathspec.PathSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_exclude_spec", _compile(self.exclude))
        object.__setattr__(self, "_negate_spec", _compile(self.negate))

    def __bool__(self) -> bool:
        return bool(self.exclude)

    def is_ignored(self, rel_path: str, is_dir: bool = False) -> bool:
        """Check a project-relative path ("a/b.txt", never "./a") against the rules."""
        if not self.exclude:
            return False
        check_path = _normalize(rel_path)
        if not check_path:
            return False
        if is_dir:
            check_path += "/"
        if not self._exclude_spec.match_file(check_path):
            return False
        return not self._negate_spec.match_file(check_path)


def _normalize(rel_path: str) -> str:
    path = rel_path.replace(os.sep, "/")
    while path.startswith("./"):
        path = path[2:]
    path = path.strip("/")
    return "" if path == "." else path


def parse_gitignore_lines(lines: Iterable[str]) -> IgnoreRuleSet:
    """Split raw ignore-file lines into exclusion and negation patterns."""
    exclude = []
    negate = []
    for raw in lines:
        line = raw.rstrip("\r\n").rstrip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("!"):
            pattern = line[1:]
            if pattern:
                negate.append(pattern)
        else:
            exclude.append(line)
    return IgnoreRuleSet(exclude=tuple(exclude), negate=tuple(negate))


def parse_gitignore(gitignore_path: str) -> IgnoreRuleSet:
    """Read an ignore file. A missing or unreadable file excludes nothing.

    Parsed fresh on every call; edits to .gitignore apply immediately.
    """
    if not os.path.isfile(gitignore_path):
        return IgnoreRuleSet()
    try:
        with open(gitignore_path, "r", encoding="utf-8", errors="replace") as f:
            return parse_gitignore_lines(f)
    except OSError as e:
        logger.debug(f"Failed to read {gitignore_path}: {e}")
        return IgnoreRuleSet()


def is_ignored(rel_path: str, exclude: Sequence[str], negate: Sequence[str],
               is_dir: bool = False) -> bool:
    """Functional form of IgnoreRuleSet.is_ignored for ad-hoc pattern lists."""
    return IgnoreRuleSet(exclude=tuple(exclude), negate=tuple(negate)).is_ignored(rel_path, is_dir=is_dir)
