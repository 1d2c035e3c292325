import json

import pytest
from click.testing import CliRunner

from main import cli
from steamer_plugin import DEFAULT_CONFIG


@pytest.fixture
def runner(home, workdir):
    return CliRunner()


def test_show_empty(runner):
    result = runner.invoke(cli, ["show"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {}


def test_create_then_show(runner, workdir):
    result = runner.invoke(cli, ["create", "--name", "steamer-plugin-kit", "--data", '{"a": 1, "b": 2}'])
    assert result.exit_code == 0
    assert "Created" in result.output
    assert (workdir / ".steamer" / "steamer-plugin-kit.json").exists()

    result = runner.invoke(cli, ["show", "-n", "steamer-plugin-kit"])
    assert json.loads(result.output) == {"a": 1, "b": 2}


def test_create_global_merges_under_local(runner):
    runner.invoke(cli, ["create", "-n", "kit", "-d", '{"a": 1}'])
    runner.invoke(cli, ["create", "-n", "kit", "-g", "-d", '{"a": 3, "c": 3}'])

    assert json.loads(runner.invoke(cli, ["show", "-n", "kit"]).output) == {"a": 1, "c": 3}
    assert json.loads(runner.invoke(cli, ["show", "-n", "kit", "-g"]).output) == {"a": 3, "c": 3}


def test_create_existing_fails(runner):
    runner.invoke(cli, ["create", "-d", '{"a": 1}'])
    result = runner.invoke(cli, ["create", "-d", '{"a": 2}'])

    assert result.exit_code == 1
    assert "exists" in result.output

    result = runner.invoke(cli, ["create", "--overwrite", "-d", '{"a": 2}'])
    assert result.exit_code == 0
    assert json.loads(runner.invoke(cli, ["show"]).output) == {"a": 2}


@pytest.mark.parametrize("data", ["{oops", "[1, 2]"])
def test_create_rejects_bad_payload(runner, data):
    result = runner.invoke(cli, ["create", "-d", data])
    assert result.exit_code == 2
    assert "--data" in result.output


def test_tool_defaults(runner):
    result = runner.invoke(cli, ["tool", "--defaults"])
    assert json.loads(result.output) == dict(DEFAULT_CONFIG)


def test_tool_empty(runner):
    assert json.loads(runner.invoke(cli, ["tool"]).output) == {}


def test_modules_override(runner, monkeypatch):
    monkeypatch.setenv("STEAMER_PLUGIN_PATH", "/opt/steamer")
    result = runner.invoke(cli, ["modules"])
    assert result.exit_code == 0
    assert result.output.strip() == "/opt/steamer"


def test_modules_missing(runner, monkeypatch, tmp_path):
    monkeypatch.delenv("STEAMER_PLUGIN_PATH", raising=False)
    monkeypatch.setattr("sysconfig.get_paths", lambda: {"purelib": str(tmp_path / "nope")})
    result = runner.invoke(cli, ["modules"])
    assert result.exit_code == 1
    assert "No global module directory found." in result.output
