"""Tests for the command-line interface.

Covers:
- encode by place name and by Belfiore code, unknown place, invalid birthdate
- parse output and errors
- check exit codes
- lookup
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from codice_fiscale.main import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


_MICHELE = ["--name", "Michele", "--surname", "Beltrame", "--birthdate", "1977-11-04", "--sex", "M"]


class TestHelp:
    def test_help_points_to_full_table(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "CF_BELFIORE_PATH" in result.output


class TestEncodeCommand:
    def test_by_place_name(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["encode", *_MICHELE, "--place", "Maniago"])
        assert result.exit_code == 0
        assert result.output.strip() == "BLTMHL77S04E889G"

    def test_by_belfiore_code(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["encode", *_MICHELE, "--place", "e889"])
        assert result.exit_code == 0
        assert "BLTMHL77S04E889G" in result.output

    def test_lowercase_sex(self, runner: CliRunner) -> None:
        args = ["encode", "--name", "Maria", "--surname", "Rossi", "--birthdate", "1985-06-12",
                "--sex", "f", "--place", "Milano"]
        result = runner.invoke(cli, args)
        assert result.exit_code == 0
        assert "RSSMRA85H52F205C" in result.output

    def test_unknown_place(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["encode", *_MICHELE, "--place", "Atlantide"])
        assert result.exit_code == 1
        assert "Unknown place" in result.output

    def test_invalid_birthdate(self, runner: CliRunner) -> None:
        args = ["encode", "--name", "Michele", "--surname", "Beltrame", "--birthdate", "1977-04-32",
                "--sex", "M", "--place", "Maniago"]
        result = runner.invoke(cli, args)
        assert result.exit_code == 1
        assert "invalid-birthdate" in result.output


class TestParseCommand:
    def test_parse(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "RSSMRA70A41H501W", "--current-year", "2026"])
        assert result.exit_code == 0
        assert "1970-01-01" in result.output
        assert "sex:        F" in result.output
        assert "H501 ROMA (RM)" in result.output

    def test_parse_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "BLTMHL77S04E889Y"])
        assert result.exit_code == 1
        assert "invalid-checkchar" in result.output


class TestCheckCommand:
    def test_valid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "BLTMHL77S04E889G"])
        assert result.exit_code == 0
        assert result.output.strip() == "valid"

    def test_invalid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "BLTMHL77S04E889Y"])
        assert result.exit_code == 1
        assert result.output.strip() == "invalid"


class TestLookupCommand:
    def test_by_code(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lookup", "E889"])
        assert result.exit_code == 0
        assert result.output.strip() == "E889 MANIAGO (PN)"

    def test_foreign_country_has_no_province(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lookup", "Francia"])
        assert result.exit_code == 0
        assert result.output.strip() == "Z110 FRANCIA"

    def test_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["lookup", "Z999"])
        assert result.exit_code == 1
