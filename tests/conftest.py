"""Pytest fixtures for nakedret tests."""
from __future__ import annotations

from pathlib import Path

import pytest

LONG_NAKED_SOURCE: str = """\
package sample

func f() (err error) {
\ta := 1
\tb := 2
\tc := 3
\td := 4
\t_ = a + b + c + d
\treturn
}
"""

SHORT_NAKED_SOURCE: str = """\
package sample

func g() (n int) {
\tn = 1
\treturn
}
"""


@pytest.fixture
def go_package(tmp_path: Path) -> Path:
    """Create a Go module with a nested package and non-Go files."""
    root: Path = tmp_path / "module"
    (root / "internal" / "util").mkdir(parents=True)
    (root / "docs").mkdir()

    (root / "main.go").write_text(LONG_NAKED_SOURCE)
    (root / "short.go").write_text(SHORT_NAKED_SOURCE)
    (root / "README.md").write_text("# sample\n")
    (root / "internal" / "util" / "util.go").write_text(
        LONG_NAKED_SOURCE.replace("package sample", "package util")
    )
    (root / "docs" / "notes.txt").write_text("not go\n")
    return root


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a .nakedret.toml with a custom threshold."""
    config_path: Path = tmp_path / ".nakedret.toml"
    config_path.write_text("max_length = 10\n")
    return config_path


@pytest.fixture
def invalid_toml(tmp_path: Path) -> Path:
    """Create an invalid TOML file."""
    config_path: Path = tmp_path / ".nakedret.toml"
    config_path.write_text("invalid [ toml content")
    return config_path


@pytest.fixture
def invalid_config(tmp_path: Path) -> Path:
    """Create a .nakedret.toml with invalid values."""
    config_path: Path = tmp_path / ".nakedret.toml"
    config_path.write_text('max_length = "five"\noutput = "json"\n')
    return config_path
