"""Tests for hwgate.cli — Click command-line interface."""

from __future__ import annotations

import json
from unittest.mock import patch

from click.testing import CliRunner

from hwgate.cli import main
from hwgate.hardware import HardwareSnapshot


def _snap(**overrides) -> HardwareSnapshot:
    defaults = dict(cores=4, clock_ghz=2.1, memory_gb=6, disk_gb=20)
    defaults.update(overrides)
    return HardwareSnapshot(**defaults)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestMainGroup:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "hwgate" in result.output
        assert "serve" in result.output
        assert "check" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output


# ---------------------------------------------------------------------------
# hwgate serve
# ---------------------------------------------------------------------------


class TestServeCommand:
    def test_defaults(self):
        runner = CliRunner()
        with patch("hwgate.server.run_server") as mock_run:
            result = runner.invoke(main, ["serve"])
        assert result.exit_code == 0
        mock_run.assert_called_once_with(host="0.0.0.0", port=8080, log_level="info")

    def test_custom_port_and_host(self):
        runner = CliRunner()
        with patch("hwgate.server.run_server") as mock_run:
            result = runner.invoke(
                main, ["serve", "-p", "9000", "--host", "127.0.0.1", "--log-level", "debug"]
            )
        assert result.exit_code == 0
        mock_run.assert_called_once_with(host="127.0.0.1", port=9000, log_level="debug")

    def test_invalid_log_level(self):
        runner = CliRunner()
        result = runner.invoke(main, ["serve", "--log-level", "loud"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# hwgate check
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_pass_exits_zero(self):
        runner = CliRunner()
        with patch("hwgate.hardware.probe_hardware", return_value=_snap()):
            result = runner.invoke(main, ["check"])
        assert result.exit_code == 0
        assert "Your PC meets the requirements." in result.output
        assert "Cores:  4" in result.output

    def test_fail_exits_one_and_lists_reasons(self):
        runner = CliRunner()
        with patch("hwgate.hardware.probe_hardware", return_value=_snap(cores=2, disk_gb=1)):
            result = runner.invoke(main, ["check"])
        assert result.exit_code == 1
        assert "This is because of:" in result.output
        assert "Not enough CPU cores" in result.output
        assert "Not enough free disk space" in result.output
        assert "Not enough memory" not in result.output

    def test_shows_diagnostics(self):
        snap = _snap(clock_ghz=0.0, diagnostics=["CPU clock speed: unavailable"])
        runner = CliRunner()
        with patch("hwgate.hardware.probe_hardware", return_value=snap):
            result = runner.invoke(main, ["check"])
        assert "Diagnostics" in result.output
        assert "CPU clock speed: unavailable" in result.output

    def test_json_output(self):
        runner = CliRunner()
        with patch("hwgate.hardware.probe_hardware", return_value=_snap(memory_gb=2)):
            result = runner.invoke(main, ["check", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["meets_requirements"] is False
        assert data["failed"] == ["memory"]
