from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"

SAMPLE_ACCESSIONS = [
    "MSBNK-test-TST00001",
    "MSBNK-test-TST00002",
    "MSBNK-test-TST00003",
]


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the sample record files."""
    return DATA_DIR


@pytest.fixture
def sample_accessions() -> list[str]:
    return list(SAMPLE_ACCESSIONS)


@pytest.fixture
def record_text():
    """Read a sample record by accession, keeping its line endings."""

    def _read(accession: str) -> str:
        with open(DATA_DIR / f"{accession}.txt", encoding="utf-8", newline="") as f:
            return f.read()

    return _read


@pytest.fixture
def minimal_record():
    """Build the smallest record text that parses and serializes back to itself."""

    def _build(accession: str, title: str = "Test record") -> str:
        return f"ACCESSION: {accession}\nRECORD_TITLE: {title}\nCH$NAME: Test\n//\n"

    return _build
