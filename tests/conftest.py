"""Shared fixtures for create-qwqo tests."""

import sys
from pathlib import Path

import pytest
from rich.console import Console

sys.path.insert(0, str(Path(__file__).parent.parent))

from scripts.create_qwqo import CommandError


class FakeRunner:
    """Records commands instead of running them.

    outputs maps a command tuple to its captured stdout; any command starting
    with one of the failures prefixes raises CommandError.
    """

    def __init__(self, outputs=None, failures=()):
        self.outputs = dict(outputs or {})
        self.failures = [tuple(f) for f in failures]
        self.calls = []

    def __call__(self, command, cwd=None, capture_output=False):
        command = tuple(command)
        self.calls.append((command, cwd, capture_output))
        for prefix in self.failures:
            if command[: len(prefix)] == prefix:
                raise CommandError(
                    f"Command failed (1): {' '.join(command)}",
                    command=command,
                    returncode=1,
                )
        return self.outputs.get(command, "")

    @property
    def commands(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def console():
    """Plain console wide enough that nothing wraps; output goes to capsys."""
    return Console(width=200, color_system=None, highlight=False)


@pytest.fixture
def template_dir(tmp_path):
    """Create a small two-language template tree."""
    root = tmp_path / "template"
    for language in ("ts", "js"):
        lang_dir = root / language
        (lang_dir / "src" / "nested").mkdir(parents=True)
        (lang_dir / "package.json").write_text(
            '{\n  "name": "qwqo-project",\n  "version": "0.1.0",\n'
            '  "type": "commonjs",\n  "scripts": {\n    "dev": "node ."\n  }\n}'
        )
        (lang_dir / "src" / f"index.{language}").write_text("console.log('hi')\n")
        (lang_dir / "src" / "nested" / "data.bin").write_bytes(bytes(range(256)))
    return root


@pytest.fixture
def workspace(tmp_path):
    """Directory the projects are created in."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def make_runner():
    """Factory for FakeRunner with canned outputs/failures."""
    return FakeRunner
