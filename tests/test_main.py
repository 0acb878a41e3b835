"""Tests for the command-line entry point."""

import pytest

from roster_week.main import main, validate_arguments

CONFIG_YAML = """
title: Support roster
shifts:
  - {id: 1, hour_start: "06:00", hour_end: "14:00"}
  - {id: 2, hour_start: "14:00", hour_end: "22:00"}
team_list: [A, B, C]
roster_matrix:
  - [1, 2]
  - [1, 1]
  - [2, 1]
"""


def run_main(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestValidateArguments:
    @pytest.mark.parametrize("year,week", [(2018, 1), (2025, 55), (2021, 30)])
    def test_in_range_accepted(self, year: int, week: int):
        validate_arguments(year, week)

    @pytest.mark.parametrize("year", [2017, 2026])
    def test_year_out_of_range(self, year: int):
        with pytest.raises(ValueError, match="year out of range"):
            validate_arguments(year, 10)

    @pytest.mark.parametrize("week", [0, 56])
    def test_week_out_of_range(self, week: int):
        with pytest.raises(ValueError, match="week out of range"):
            validate_arguments(2024, week)


class TestMain:
    """End-to-end runs of the CLI."""

    def test_successful_run(self, write_yaml, capsys):
        path = write_yaml(CONFIG_YAML)
        assert run_main([str(path), "2024", "4"]) == 0

        out = capsys.readouterr().out
        assert "✓ Configuration loaded successfully" in out
        assert "Rotation offset: 1 (first row: B)" in out
        assert "B, C" in out

    def test_exports(self, write_yaml, tmp_path):
        path = write_yaml(CONFIG_YAML)
        html_path = tmp_path / "output.html"
        csv_path = tmp_path / "shift.csv"

        code = run_main(
            [
                str(path),
                "2024",
                "4",
                "--quiet",
                "--export-html",
                str(html_path),
                "--export-csv",
                str(csv_path),
                "--view",
                "shift",
            ]
        )

        assert code == 0
        assert "B<br>C" in html_path.read_text(encoding="utf-8")
        assert csv_path.read_text().startswith("Shift,")

    def test_year_out_of_range_exits_nonzero(self, write_yaml, capsys):
        path = write_yaml(CONFIG_YAML)
        assert run_main([str(path), "2030", "4"]) == 1
        assert "year out of range" in capsys.readouterr().err

    def test_missing_config_exits_nonzero(self, tmp_path, capsys):
        assert run_main([str(tmp_path / "missing.yaml"), "2024", "4"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_invalid_week_exits_nonzero(self, write_yaml, capsys):
        path = write_yaml(CONFIG_YAML)
        assert run_main([str(path), "2024", "53"]) == 1
        assert "Roster Error" in capsys.readouterr().err

    def test_configuration_error_exits_nonzero(self, write_yaml, capsys):
        path = write_yaml(CONFIG_YAML.replace("team_list: [A, B, C]", "team_list: []"))
        assert run_main([str(path), "2024", "4"]) == 1
        assert "Configuration Error" in capsys.readouterr().err

    def test_ragged_matrix_exits_nonzero(self, write_yaml, capsys):
        path = write_yaml(CONFIG_YAML.replace("- [1, 1]", "- [1]"))
        assert run_main([str(path), "2024", "4"]) == 1
        assert "Roster Error" in capsys.readouterr().err

    def test_non_integer_year_is_usage_error(self, write_yaml):
        path = write_yaml(CONFIG_YAML)
        assert run_main([str(path), "twenty", "4"]) == 2
