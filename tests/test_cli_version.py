from importlib.metadata import PackageNotFoundError
import re

import pytest
from typer.testing import CliRunner

import deepdelta
from deepdelta.cli import app as cli_app


def test_cli_version_option_prints_only_the_version() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app.app, ["--version", "diff", "missing.json", "other.json"])

    assert result.exit_code == 0
    reported = result.output.strip()
    assert re.fullmatch(r"\d+\.\d+\.\d+", reported) is not None
    assert "diff failed" not in result.output


def test_cli_version_falls_back_to_package_attribute(monkeypatch: pytest.MonkeyPatch) -> None:
    def _not_installed(name: str) -> str:
        raise PackageNotFoundError(name)

    monkeypatch.setattr(cli_app, "package_version", _not_installed)
    runner = CliRunner()
    result = runner.invoke(cli_app.app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == deepdelta.__version__


def test_cli_version_prefers_installed_metadata(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_app, "package_version", lambda name: "9.8.7")

    assert cli_app._resolve_cli_version() == "9.8.7"
