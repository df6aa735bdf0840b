"""Pytest fixtures for radix sort tests."""

from pathlib import Path

import pytest


@pytest.fixture
def decimal_tokens() -> list[str]:
    """Radix 10 input with mixed widths and a duplicate."""
    return ["10", "23", "5", "100", "7", "23", "0", "999"]


@pytest.fixture
def hex_tokens() -> list[str]:
    """Radix 16 input with mixed letter case."""
    return ["16", "1a", "ff", "09", "A", "100", "b"]


@pytest.fixture
def write_input(tmp_path: Path):
    """Write an input file and return its path."""

    def _write(text: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def run_cli(monkeypatch):
    """Run the CLI main() with the given arguments."""
    from cll_radixsort.cli import main

    def _run(*argv: str) -> None:
        monkeypatch.setattr("sys.argv", ["cll-radixsort", *argv])
        main()

    return _run
