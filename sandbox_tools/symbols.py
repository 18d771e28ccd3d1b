"""Top-level symbol listings, keyed by file type.

Python files are parsed with the ast module; other languages use regex
anchors on unindented declaration lines.
"""

import os
import re
import ast
import logging
from typing import Dict, List, Optional, Pattern

logger = logging.getLogger(__name__)

_EXTENSION_LANGUAGES: Dict[str, str] = {
    ".py": "python", ".pyi": "python",
    ".js": "javascript", ".jsx": "javascript", ".mjs": "javascript", ".cjs": "javascript",
    ".ts": "typescript", ".tsx": "typescript",
    ".go": "go",
    ".rs": "rust",
    ".lua": "lua",
    ".rb": "ruby",
    ".java": "java",
}

_JS_PATTERNS = [
    r"^(?:export\s+)?(?:default\s+)?(?:async\s+)?function\*?\s+\w+\s*\(.*",
    r"^(?:export\s+)?(?:default\s+)?(?:abstract\s+)?class\s+\w+.*",
    r"^(?:export\s+)?(?:const|let|var)\s+\w+\s*=.*",
]

_LANGUAGE_PATTERNS: Dict[str, List[str]] = {
    "javascript": _JS_PATTERNS,
    "typescript": _JS_PATTERNS + [
        r"^(?:export\s+)?(?:declare\s+)?interface\s+\w+.*",
        r"^(?:export\s+)?(?:declare\s+)?type\s+\w+.*",
        r"^(?:export\s+)?(?:declare\s+)?(?:const\s+)?enum\s+\w+.*",
    ],
    "go": [
        r"^func\s+.*",
        r"^type\s+\w+.*",
        r"^(?:var|const)\s+\w+.*",
    ],
    "rust": [
        r"^(?:pub(?:\([^)]*\))?\s+)?(?:async\s+)?(?:unsafe\s+)?fn\s+\w+.*",
        r"^(?:pub(?:\([^)]*\))?\s+)?(?:struct|enum|trait|type|union|mod)\s+\w+.*",
        r"^impl\b.*",
        r"^(?:pub(?:\([^)]*\))?\s+)?(?:const|static)\s+\w+.*",
    ],
    "lua": [
        r"^(?:local\s+)?function\s+[\w.:]+\s*\(.*",
        r"^local\s+\w+\s*=.*",
    ],
    "ruby": [
        r"^(?:class|module)\s+\w+.*",
        r"^def\s+\S+.*",
    ],
    "java": [
        r"^(?:public\s+|protected\s+|private\s+)?(?:abstract\s+|final\s+|sealed\s+)*"
        r"(?:class|interface|enum|record)\s+\w+.*",
    ],
}

_COMPILED: Dict[str, List[Pattern[str]]] = {
    lang: [re.compile(p) for p in pats] for lang, pats in _LANGUAGE_PATTERNS.items()
}


def detect_language(path: str) -> Optional[str]:
    """Map a file name to a language key, or None when unsupported."""
    _, ext = os.path.splitext(path.lower())
    return _EXTENSION_LANGUAGES.get(ext)


def _signature(node: ast.AST) -> str:
    prefix = "async def" if isinstance(node, ast.AsyncFunctionDef) else "def"
    return f"{prefix} {node.name}({ast.unparse(node.args)})"


def _python_definitions(content: str) -> str:
    try:
        tree = ast.parse(content)
    except SyntaxError as e:
        logger.debug(f"Cannot parse python source: {e}")
        return ""
    lines: List[str] = []
    for node in tree.body:
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            lines.append(_signature(node))
        elif isinstance(node, ast.ClassDef):
            bases = ", ".join(ast.unparse(b) for b in [*node.bases, *node.keywords])
            lines.append(f"class {node.name}({bases})" if bases else f"class {node.name}")
            for child in node.body:
                if isinstance(child, (ast.FunctionDef, ast.AsyncFunctionDef)):
                    lines.append(f"  {_signature(child)}")
        elif isinstance(node, (ast.Assign, ast.AnnAssign)):
            targets = node.targets if isinstance(node, ast.Assign) else [node.target]
            for target in targets:
                if isinstance(target, ast.Name):
                    lines.append(target.id)
    return "\n".join(lines)


def _regex_definitions(content: str, language: str) -> str:
    patterns = _COMPILED[language]
    found = []
    for line in content.splitlines():
        if not line or line[0].isspace():
            continue
        if any(p.match(line) for p in patterns):
            found.append(line.rstrip().rstrip("{").rstrip())
    return "\n".join(found)


def extract_definitions(path: str, content: str) -> str:
    """Return a newline-joined listing of path's top-level symbols ("" if unknown type)."""
    language = detect_language(path)
    if language is None:
        return ""
    if language == "python":
        return _python_definitions(content)
    return _regex_definitions(content, language)
