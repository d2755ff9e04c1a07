"""Shared test fixtures and configuration."""

import io
from pathlib import Path
from typing import Tuple

import pytest
from rich.console import Console

from varresolver import cli


class Captured:
    """Holds the StringIO buffers behind the patched consoles."""

    def __init__(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()

    def read(self) -> Tuple[str, str]:
        return self.out.getvalue(), self.err.getvalue()


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Captured:
    """Route CLI output into buffers and run from an empty directory.

    The wide console keeps long values and error messages on one line.
    """
    buffers = Captured()
    monkeypatch.setattr(cli, "console", Console(file=buffers.out, width=500))
    monkeypatch.setattr(cli, "error_console", Console(file=buffers.err, width=500))
    monkeypatch.chdir(tmp_path)
    return buffers
