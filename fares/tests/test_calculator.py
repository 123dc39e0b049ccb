"""
Unit Tests for the Fare Calculator Script

Run with: pytest fares/tests/test_calculator.py -v
"""

import json
import logging

import polars as pl
import pytest

from fares.scripts.calculator import main
from shared import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def journeys_file(tmp_path):
    path = tmp_path / "journeys.json"
    path.write_text(json.dumps([
        {"dateTime": "2025-07-29T16:50:00", "from": 1, "to": 2},
        {"dateTime": "2025-07-29T17:30:00", "from": 2, "to": 1},
    ]))
    return path


class TestCalculatorScript:
    """Tests for the command line entry point."""

    def test_prints_breakdown(self, journeys_file, capsys):
        assert main([str(journeys_file)]) == 0
        out = capsys.readouterr().out
        assert "Tue Jul 29 2025 16:50:00" in out
        assert "Tue Jul 29 2025 17:30:00" in out
        assert "TOTAL" in out
        assert "65.00" in out

    def test_json_output(self, journeys_file, capsys):
        assert main([str(journeys_file), "--json"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert [t["fare"] for t in result["trip_fares"]] == [30, 35]
        assert result["day_fares"][0]["label"] == "Tue Jul 29 2025"

    def test_writes_csv(self, journeys_file, tmp_path, capsys):
        out_dir = tmp_path / "out"
        assert main([str(journeys_file), "--output-dir", str(out_dir)]) == 0
        days = pl.read_csv(out_dir / "day_fares.csv")
        assert days["fare"].to_list() == [65.0]
        assert (out_dir / "trip_fares.csv").exists()

    def test_custom_fare_table(self, journeys_file, tmp_path, capsys):
        fares = tmp_path / "fares.csv"
        fares.write_text(
            "from_zone,to_zone,peak_fare,off_peak_fare,daily_cap,weekly_cap\n"
            "1,2,10,5,100,500\n"
            "2,1,10,5,100,500\n"
        )
        assert main([str(journeys_file), "--fares", str(fares), "--json"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert [t["fare"] for t in result["trip_fares"]] == [5, 10]

    def test_configuration_error(self, journeys_file, tmp_path, capsys):
        fares = tmp_path / "fares.csv"
        fares.write_text(
            "from_zone,to_zone,peak_fare,off_peak_fare,daily_cap,weekly_cap\n"
            "1,1,30,25,100,500\n"
        )
        assert main([str(journeys_file), "--fares", str(fares)]) == 1
        assert "No fare data configured" in capsys.readouterr().err

    def test_log_level_case_insensitive(self, journeys_file, capsys):
        assert main([str(journeys_file), "--log-level", "debug"]) == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_log_level(self, journeys_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(journeys_file), "--log-level", "bogus"])
        assert exc.value.code == 2
        assert "invalid choice" in capsys.readouterr().err


class TestSetupLogging:
    """Tests for shared.setup_logging."""

    def test_level_by_name(self):
        setup_logging("info")
        assert logging.getLogger().level == logging.INFO

    def test_unknown_level_name(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("bogus")
