"""Tests for the complexity-report command line."""

import json

import pytest
from typer.testing import CliRunner

from complexity_report import __version__
from complexity_report.cli import app

runner = CliRunner()

LOGICAL_OR = "def pick(a, b, c):\n    return a or b or c\n"


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("COMPLEXITY_REPORT_MAXCYC", raising=False)
    monkeypatch.delenv("COMPLEXITY_REPORT_SILENT", raising=False)
    monkeypatch.delenv("COMPLEXITY_REPORT_FORMAT", raising=False)


class TestBasics:
    def test_no_arguments_prints_usage(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "usage" in result.output.lower()

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_plain_report(self, source_tree):
        result = runner.invoke(app, [str(source_tree)])
        assert result.exit_code == 0
        assert "Mean per-function cyclomatic complexity" in result.output
        assert "Function: classify" in result.output

    def test_json_report(self, source_tree):
        result = runner.invoke(app, ["-f", "json", "-s", "-o", "out.json", str(source_tree)])
        assert result.exit_code == 0

        result = runner.invoke(app, ["--format", "json", str(source_tree)])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["reports"]) == 3


class TestThresholds:
    def test_breach_exits_nonzero_and_names_module(self, source_tree):
        result = runner.invoke(app, ["--maxcyc", "4", str(source_tree)])
        assert result.exit_code == 1
        assert "Warning: Complexity threshold breached!" in result.output
        assert "Failing modules:" in result.output
        assert str(source_tree / "pkg" / "branchy.py") in result.output
        # the report is still produced before the breach
        assert "Function: classify" in result.output

    def test_threshold_equal_to_metric_passes(self, source_tree):
        result = runner.invoke(app, ["-C", "5", str(source_tree)])
        assert result.exit_code == 0

    def test_silent_without_thresholds(self, source_tree):
        result = runner.invoke(app, ["-s", str(source_tree)])
        assert result.exit_code == 0
        assert result.output == ""

    def test_silent_breach_still_fails(self, source_tree):
        result = runner.invoke(app, ["-s", "-C", "1", str(source_tree)])
        assert result.exit_code == 1
        assert "Failing modules:" in result.output

    def test_logicalor_switch(self, tmp_path):
        (tmp_path / "pick.py").write_text(LOGICAL_OR)
        assert runner.invoke(app, ["-s", "-C", "2", str(tmp_path)]).exit_code == 1
        assert runner.invoke(app, ["-s", "-l", "-C", "2", str(tmp_path)]).exit_code == 0

    def test_config_file(self, source_tree, tmp_path):
        config = tmp_path / "ci.toml"
        config.write_text("maxcyc = 4\nsilent = true\n")
        result = runner.invoke(app, ["--config", str(config), str(source_tree)])
        assert result.exit_code == 1
        assert "branchy.py" in result.output


class TestOutputFile:
    def test_file_matches_console_output(self, source_tree, tmp_path):
        target = tmp_path / "report.txt"
        result = runner.invoke(app, ["-o", str(target), str(source_tree)])
        assert result.exit_code == 0
        assert result.stdout == ""

        console = runner.invoke(app, [str(source_tree)])
        assert console.stdout == target.read_text(encoding="utf-8") + "\n"


class TestLogging:
    def test_log_file_receives_debug_messages(self, source_tree, tmp_path):
        log_file = tmp_path / "report.log"
        result = runner.invoke(app, ["-s", "--verbose", "--log-file", str(log_file), str(source_tree)])
        assert result.exit_code == 0
        assert "Analysing 3 modules" in log_file.read_text()

    def test_quiet_run(self, source_tree, tmp_path):
        log_file = tmp_path / "quiet.log"
        result = runner.invoke(app, ["-s", "--quiet", "--log-file", str(log_file), str(source_tree)])
        assert result.exit_code == 0
        assert log_file.read_text() == ""


class TestFailures:
    def test_missing_path(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "Fatal error [stat]" in result.output

    def test_unknown_format(self, tmp_path):
        result = runner.invoke(app, ["-f", "yaml", str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "Unknown format: 'yaml'" in result.output
        assert "[stat]" not in result.output

    def test_syntax_error(self, tmp_path):
        (tmp_path / "broken.py").write_text("def broken(:\n")
        result = runner.invoke(app, [str(tmp_path)])
        assert result.exit_code == 1
        assert "Fatal error [analyse]" in result.output
        assert "broken.py" in result.output

    def test_invalid_regex(self, source_tree):
        result = runner.invoke(app, ["-p", "(", str(source_tree)])
        assert result.exit_code == 1
        assert "Fatal error [configuration]" in result.output
