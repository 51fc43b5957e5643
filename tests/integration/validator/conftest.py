import shutil
from pathlib import Path

import pytest


@pytest.fixture
def records_dir(data_dir: Path, tmp_path: Path) -> Path:
    """A writable copy of the sample records."""
    target = tmp_path / "records"
    shutil.copytree(data_dir, target)
    return target


@pytest.fixture
def crlf_records_dir(records_dir: Path) -> Path:
    """The sample records rewritten with CRLF line endings."""
    for path in records_dir.glob("*.txt"):
        path.write_bytes(path.read_bytes().replace(b"\n", b"\r\n"))
    return records_dir
