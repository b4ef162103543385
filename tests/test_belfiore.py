"""Tests for the Belfiore code directory.

Tests cover:
- Bundled table lookups by name and code
- Foreign countries (empty province)
- Loading custom files, blank lines, malformed rows, duplicates
"""

from __future__ import annotations

from pathlib import Path

import pytest

from codice_fiscale.directory import MunicipalityDirectory, load_default_directory
from codice_fiscale.schemas.codice_fiscale import Place


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "belfiore.csv"
    path.write_text(content, encoding="utf-8")
    return path


class TestBundledDirectory:
    """Test the table shipped with the package."""

    def test_loaded_once(self) -> None:
        assert load_default_directory() is load_default_directory()
        assert len(load_default_directory()) > 0

    def test_lookup_by_code(self) -> None:
        place = load_default_directory().lookup_by_code("E889")
        assert place == Place(name="MANIAGO", province="PN", belfiore_code="E889")

    def test_lookup_by_code_case_insensitive(self) -> None:
        place = load_default_directory().lookup_by_code(" h501 ")
        assert place is not None
        assert place.name == "ROMA"

    def test_lookup_by_name_case_insensitive(self) -> None:
        place = load_default_directory().lookup_by_name("milano")
        assert place is not None
        assert place.belfiore_code == "F205"
        assert place.province == "MI"

    def test_foreign_country(self) -> None:
        place = load_default_directory().lookup_by_name("Stati Uniti d'America")
        assert place is not None
        assert place.belfiore_code == "Z404"
        assert place.province == ""

    def test_unknown(self) -> None:
        directory = load_default_directory()
        assert directory.lookup_by_code("Z999") is None
        assert directory.lookup_by_name("Atlantide") is None

    def test_contains_and_iter(self) -> None:
        directory = load_default_directory()
        assert "E889" in directory
        assert "e889" in directory
        assert "Z999" not in directory
        assert 889 not in directory
        codes = [place.belfiore_code for place in directory]
        assert len(codes) == len(set(codes)) == len(directory)


class TestFromFile:
    """Test loading custom tables."""

    def test_loads_rows(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "E889,PN,MANIAGO\nZ110,,FRANCIA\n")
        directory = MunicipalityDirectory.from_file(path)
        assert len(directory) == 2
        assert directory.lookup_by_name("Francia") == Place(name="FRANCIA", belfiore_code="Z110")

    def test_blank_lines_skipped(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "\nE889,PN,MANIAGO\n\n")
        assert len(MunicipalityDirectory.from_file(path)) == 1

    def test_normalizes_case(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "e889,pn,Maniago\n")
        place = MunicipalityDirectory.from_file(str(path)).lookup_by_code("E889")
        assert place == Place(name="MANIAGO", province="PN", belfiore_code="E889")

    def test_wrong_column_count(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "E889,PN,MANIAGO\nH501,ROMA\n")
        with pytest.raises(ValueError, match=":2:"):
            MunicipalityDirectory.from_file(path)

    def test_malformed_code(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "EX,PN,MANIAGO\n")
        with pytest.raises(ValueError, match=":1:"):
            MunicipalityDirectory.from_file(path)

    def test_duplicate_code(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "E889,PN,MANIAGO\nE889,PN,MANIAGO\n")
        with pytest.raises(ValueError, match="Duplicate"):
            MunicipalityDirectory.from_file(path)

    def test_homonyms_first_wins(self) -> None:
        directory = MunicipalityDirectory([
            Place(name="SAN TEODORO", province="ME", belfiore_code="I328"),
            Place(name="SAN TEODORO", province="SS", belfiore_code="I329"),
        ])
        place = directory.lookup_by_name("San Teodoro")
        assert place is not None
        assert place.province == "ME"
        assert directory.lookup_by_code("I329") is not None
