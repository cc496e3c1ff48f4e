from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
import re

import pytest

import deepdelta

REPO_ROOT = Path(__file__).resolve().parents[1]


def _pyproject_version() -> str:
    content = (REPO_ROOT / "pyproject.toml").read_text(encoding="utf-8")
    match = re.search(r'(?m)^version\s*=\s*"([^"]+)"\s*$', content)
    assert match is not None, "pyproject.toml has no [project] version"
    return match.group(1)


def test_package_version_matches_pyproject() -> None:
    assert deepdelta.__version__ == _pyproject_version()


def test_installed_metadata_matches_pyproject() -> None:
    try:
        installed = package_version("deepdelta")
    except PackageNotFoundError:
        pytest.skip("deepdelta is not installed")

    assert installed == _pyproject_version()
