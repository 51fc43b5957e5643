# src/massbank_kit/batch/files.py

"""Input discovery and reading for batch validation."""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".txt"


def resolve_inputs(paths: str | Path | Iterable[str | Path]) -> list[Path]:
    """Expand directories into their record files.

    Directories are searched recursively for ``*.txt`` files, in sorted
    order. Explicit ``.txt`` paths are kept as given, even if they do not
    exist, so the read failure is reported against them. Anything else is
    skipped. Duplicates are dropped, first occurrence wins.
    """
    if isinstance(paths, (str, Path)):
        paths = [paths]

    resolved: list[Path] = []
    for item in paths:
        path = Path(item)
        if path.is_dir():
            found = sorted(
                p for p in path.rglob(f"*{RECORD_SUFFIX}") if p.is_file()
            )
            logger.debug("Found %d record files in %s", len(found), path)
            resolved.extend(found)
        elif path.suffix.lower() == RECORD_SUFFIX:
            resolved.append(path)
        else:
            logger.debug("Skipping non-record path: %s", path)

    return list(dict.fromkeys(resolved))


def read_text(path: str | Path) -> str:
    """Read a record file as UTF-8, keeping its line endings untouched.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()
