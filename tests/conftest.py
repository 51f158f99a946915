"""Shared fixtures: fixture config texts and an isolated project directory."""

from pathlib import Path

import pytest

from uglier.config import Config

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A temporary project directory with a package.json and no user agent set."""
    monkeypatch.delenv("npm_config_user_agent", raising=False)
    monkeypatch.delenv("UGLIER_CONFIG_FILE", raising=False)
    (tmp_path / "package.json").write_text('{"name": "demo", "devDependencies": {}}\n')
    return Config(cwd=tmp_path)


@pytest.fixture
def install_fixture(project):
    """Copy a fixture into the project as eslint.config.js; returns its path."""

    def _install(name: str) -> Path:
        path = project.config_path
        path.write_text(read_fixture(name), encoding="utf-8")
        return path

    return _install


@pytest.fixture
def fixture_text():
    """Loader for the fixture config texts under tests/fixtures/."""
    return read_fixture
