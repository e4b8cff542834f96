"""Test configuration and fixtures for projstruct."""

from pathlib import Path
from typing import Dict, Union

import pytest

from projstruct.cli.signal_handler import signal_handler


def build_tree(base: Path, layout: Dict[str, Union[str, bytes, None]]) -> Path:
    """Create files and directories below base.

    Keys ending in '/' are directories; other keys are files whose value is the text or
    bytes to write.
    """
    for relative, content in layout.items():
        target = base / relative
        if relative.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content or "")
    return base


@pytest.fixture
def make_tree(tmp_path):
    """Factory fixture creating a directory layout inside tmp_path."""

    def _make(layout: Dict[str, Union[str, bytes, None]]) -> Path:
        return build_tree(tmp_path, layout)

    return _make


@pytest.fixture
def react_project(tmp_path, monkeypatch):
    """A small front-end project, with the working directory set to its root."""
    build_tree(
        tmp_path,
        {
            "src/App.js": "export default function App() {}\n",
            "src/components/Button.js": "export const Button = () => null;\n",
            "public/index.html": "<!doctype html>\n",
            "node_modules/react/index.js": "module.exports = {};\n",
            ".git/HEAD": "ref: refs/heads/main\n",
            "README.md": "# demo\n",
        },
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_signal_state():
    """Make sure no test observes a signal recorded by another."""
    signal_handler.sigpipe_received.clear()
    signal_handler.sigint_received.clear()
    yield
    signal_handler.sigpipe_received.clear()
    signal_handler.sigint_received.clear()
