import os
import stat
from pathlib import Path

import pytest

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """A node_modules/.bin directory with a typescript package beside it."""
    node_modules = tmp_path / "node_modules"
    bin_path = node_modules / ".bin"
    bin_path.mkdir(parents=True)
    tsserver = node_modules / "typescript" / "bin" / "tsserver"
    tsserver.parent.mkdir(parents=True)
    tsserver.write_text("// tsserver entry point\n", encoding="utf-8")
    return bin_path


@pytest.fixture
def make_script():
    """Return a helper that writes a shell script, executable unless told otherwise."""

    def _make(path: Path, body: str, executable: bool = True) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
        mode = path.stat().st_mode
        path.chmod(mode | _EXEC_BITS if executable else mode & ~_EXEC_BITS)
        return path

    return _make


@pytest.fixture
def posix_only():
    if os.name != "posix":
        pytest.skip("exec tests need a POSIX shell")
