from pathlib import Path

from massbank_kit.batch import read_text, resolve_inputs


class TestResolveInputs:
    def test_directory_is_searched_recursively_in_order(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        for name in ["b.txt", "a.txt", "sub/c.txt", "notes.md"]:
            (tmp_path / name).write_text("x")

        inputs = resolve_inputs(tmp_path)

        assert inputs == [
            tmp_path / "a.txt",
            tmp_path / "b.txt",
            tmp_path / "sub" / "c.txt",
        ]

    def test_explicit_missing_record_is_kept(self, tmp_path: Path) -> None:
        missing = tmp_path / "MSBNK-missing.txt"

        assert resolve_inputs([missing]) == [missing]

    def test_non_record_paths_are_skipped(self, tmp_path: Path) -> None:
        other = tmp_path / "data.csv"
        other.write_text("x")

        assert resolve_inputs([str(other), str(tmp_path / "missing.json")]) == []

    def test_duplicates_are_dropped(self, tmp_path: Path) -> None:
        record = tmp_path / "a.txt"
        record.write_text("x")

        assert resolve_inputs([record, tmp_path, str(record)]) == [record]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert resolve_inputs(tmp_path) == []


class TestReadText:
    def test_keeps_crlf(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_bytes(b"ACCESSION: A\r\n//\r\n")

        assert read_text(path) == "ACCESSION: A\r\n//\r\n"

    def test_decodes_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_bytes("COMMENT: 5 µg\n".encode())

        assert read_text(path) == "COMMENT: 5 µg\n"
