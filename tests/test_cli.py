"""Tests for the routedoc command line."""

import json

import yaml
from typer.testing import CliRunner

from routedoc.cli import app

runner = CliRunner()


def test_render_yaml_to_stdout():
    result = runner.invoke(app, ["render", "sample_docs:document"])

    assert result.exit_code == 0
    rendered = yaml.safe_load(result.stdout)
    assert rendered["info"]["title"] == "Users"
    assert rendered["paths"]["/users/{id}"]["get"]["operationId"] == "getUser"


def test_render_json_from_callable(tmp_path):
    output_file = tmp_path / "openapi.json"

    result = runner.invoke(
        app,
        ["render", "sample_docs:build_document", "--format", "json", "-o", str(output_file)],
    )

    assert result.exit_code == 0
    assert "Successfully rendered" in result.stdout
    rendered = json.loads(output_file.read_text())
    assert rendered["paths"]["/users/{id}"]["get"]["parameters"][0]["name"] == "id"


def test_render_rejects_bad_targets():
    for target in ("sample_docs", "missing_module_xyz:doc", "sample_docs:nope", "sample_docs:not_a_document"):
        result = runner.invoke(app, ["render", target])
        assert result.exit_code == 1, target


def test_render_rejects_unknown_format():
    result = runner.invoke(app, ["render", "sample_docs:document", "--format", "toml"])

    assert result.exit_code == 1


def test_formats_lists_table():
    result = runner.invoke(app, ["formats"])

    assert result.exit_code == 0
    assert "INT64" in result.stdout
    assert "double" in result.stdout


def test_render_reports_failing_callable():
    result = runner.invoke(app, ["render", "sample_docs:broken_document"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, RuntimeError)
