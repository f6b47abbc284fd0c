"""CLI tests for the engine commands."""

import json

import yaml
from typer.testing import CliRunner

from docshot.cli._create_app import _create_app
from docshot.cli.engine import engine
from tests.conftest import REST_URL, FakeResponse

runner = CliRunner()


def test_engine_check_cli_failure_exit_code(config_file, fake_session):
    fake_session.routes[f"{REST_URL}/engine"] = FakeResponse(401)
    result = runner.invoke(engine(), ["check"])
    assert result.exit_code == 1
    output = yaml.safe_load(result.stdout)
    assert output["rest_ok"] is False


def test_engine_status_cli(config_file, fake_session):
    fake_session.routes[f"{REST_URL}/engine"] = FakeResponse(200, [{"name": "default"}])
    result = runner.invoke(engine(), ["status"])
    # Every count is unreachable, yet the engine answered
    assert result.exit_code == 0
    output = yaml.safe_load(result.stdout)
    assert output["runtime"]["tasks"] is None


def test_engine_check_cli_json_display(config_file, fake_session):
    fake_session.routes[f"{REST_URL}/engine"] = FakeResponse(401)
    result = runner.invoke(_create_app(), ["--display", "json", "engine", "check"])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["rest_ok"] is False
