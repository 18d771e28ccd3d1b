"""Tests for top-level symbol extraction."""

from sandbox_tools.symbols import detect_language, extract_definitions

PY_SOURCE = '''
import os

VERSION = "1.0"
limit: int = 3


async def fetch(url, *, retries=2):
    def inner():
        pass


class Client(Base, metaclass=Meta):
    timeout = 5

    def get(self, path):
        pass

    async def close(self):
        pass
'''


def test_python_definitions():
    assert extract_definitions("client.py", PY_SOURCE).split("\n") == [
        "VERSION",
        "limit",
        "async def fetch(url, *, retries=2)",
        "class Client(Base, metaclass=Meta)",
        "  def get(self, path)",
        "  async def close(self)",
    ]


def test_python_syntax_error_yields_nothing():
    assert extract_definitions("broken.py", "def (:\n") == ""


def test_typescript_definitions():
    source = (
        "import x from 'y';\n"
        "export interface Props {\n  a: string;\n}\n"
        "export function render(p: Props) {\n  const inner = 1;\n}\n"
        "const helper = () => 1;\n"
        "export default class View {\n}\n"
    )
    assert extract_definitions("view.tsx", source).split("\n") == [
        "export interface Props",
        "export function render(p: Props)",
        "const helper = () => 1;",
        "export default class View",
    ]


def test_go_definitions():
    source = "package main\n\ntype Server struct {\n}\n\nfunc (s *Server) Start() error {\n\treturn nil\n}\n"
    assert extract_definitions("main.go", source).split("\n") == [
        "type Server struct",
        "func (s *Server) Start() error",
    ]


def test_unknown_extension():
    assert detect_language("README.md") is None
    assert extract_definitions("README.md", "# title") == ""
