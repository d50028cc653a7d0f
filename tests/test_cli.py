"""Tests for the CLI entry points."""

import json
from pathlib import Path

from click.testing import CliRunner

from cfg_levels.cli import cli

FIXTURES = Path(__file__).parent / "fixtures"
COMPILE_RESULT = FIXTURES / "compile_result.json"
DANGLING = FIXTURES / "dangling.json"
NO_OUTPUT = FIXTURES / "no_output.json"


def test_level_writes_all_functions(tmp_path):
    out = tmp_path / "levels.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["level", str(COMPILE_RESULT), "-o", str(out)])
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text())
    assert list(data) == ["main", "helper"]
    levels = {n["id"]: n["level"] for n in data["main"]["nodes"]}
    assert levels == {"bb0": 1, "bb1": 2, "bb2": 3, "bb3": 3}
    back = data["main"]["edges"][2]
    assert back["from"] == "bb2" and back["physics"] is False
    assert "length" not in back


def test_level_default_output(tmp_path):
    src = tmp_path / "result.json"
    src.write_text(COMPILE_RESULT.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["level", str(src)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "result.levels.json").exists()


def test_export_function(tmp_path):
    out = tmp_path / "helper.json"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["export", str(COMPILE_RESULT), "-f", "helper", "-o", str(out),
         "--style", "compact", "--direction", "LR"],
    )
    assert result.exit_code == 0, result.output
    bundle = json.loads(out.read_text())
    assert bundle["function"] == "helper"
    assert bundle["data"]["edges"] == [{"from": 0, "to": 1, "physics": True, "length": 195}]
    hierarchical = bundle["options"]["layout"]["hierarchical"]
    assert hierarchical["direction"] == "LR"
    assert hierarchical["nodeSpacing"] == 300.0


def test_export_unknown_function_falls_back(tmp_path):
    out = tmp_path / "out.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["export", str(COMPILE_RESULT), "-f", "nope", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text())["function"] == "main"


def test_export_placeholder_when_no_functions(tmp_path):
    out = tmp_path / "out.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["export", str(NO_OUTPUT), "-o", str(out)])
    assert result.exit_code == 0, result.output
    bundle = json.loads(out.read_text())
    assert bundle["function"] is None
    assert bundle["data"]["nodes"] == [{"id": 0, "label": "No Output", "shape": "box", "level": 1}]


def test_export_unknown_function_without_functions(tmp_path):
    out = tmp_path / "out.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["export", str(NO_OUTPUT), "-f", "main", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "using placeholder graph" in result.output
    assert "'None'" not in result.output


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(COMPILE_RESULT)])
    assert result.exit_code == 0
    assert "Functions: 2" in result.output
    assert "main: 4 nodes, 5 edges, 3 levels" in result.output
    assert "back edges: 1, cycles: 1" in result.output


def test_validate_success():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(COMPILE_RESULT)])
    assert result.exit_code == 0
    assert "Valid: 2 functions, 6 nodes, 6 edges" in result.output


def test_validate_reports_errors():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(DANGLING)])
    assert result.exit_code == 1
    assert "unknown node" in result.output
    assert "duplicate node id 'b'" in result.output


def test_parse_error(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_verbose_flag():
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "info", str(COMPILE_RESULT)])
    assert result.exit_code == 0


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_nonexistent_file():
    runner = CliRunner()
    result = runner.invoke(cli, ["level", "/nonexistent/file.json"])
    assert result.exit_code != 0
