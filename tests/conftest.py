"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest
import requests

from docshot.utils.logger import reset_logging

ENGINE_ENV_VARS = ("OPERATON_REST_URL", "OPERATON_BASE_URL", "OPERATON_USERNAME", "OPERATON_PASSWORD")

REST_URL = "http://engine.test/engine-rest"
WEB_URL = "http://engine.test"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single API module")
    config.addinivalue_line("markers", "integration: tests driving the Typer CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Config dict pointing the engine at a host that never resolves in tests."""
    return {
        "docs": {
            "root": "docs",
            "output_dir": "output",
            "extensions": [".md", ".mdx"],
            "exclude_dirnames": ["node_modules"],
            "max_entries_per_category": 20,
            "max_locations_per_entry": 3,
        },
        "engine": {
            "rest_url": REST_URL,
            "web_url": WEB_URL,
            "username": "demo",
            "password": "demo",
            "timeout_secs": 1.0,
        },
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def docshot_home(tmp_path: Path, monkeypatch) -> Path:
    """Isolate DOCSHOT_HOME and the OPERATON_* environment for every test."""
    home = tmp_path / ".docshot"
    home.mkdir()
    monkeypatch.setenv("DOCSHOT_HOME", str(home))
    for name in ENGINE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_logging()
    yield home
    reset_logging()


@pytest.fixture
def config_file(docshot_home: Path) -> Path:
    """Write the minimal config into DOCSHOT_HOME."""
    path = docshot_home / "config.json"
    path.write_text(json.dumps(minimal_config_dict()), encoding="utf-8")
    return path


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """Small documentation tree with flagged, unflagged and ignored images."""
    root = tmp_path / "docs"
    (root / "webapps" / "cockpit").mkdir(parents=True)
    (root / "webapps" / "admin").mkdir(parents=True)
    (root / "node_modules" / "pkg").mkdir(parents=True)

    (root / "index.md").write_text(
        "# Welcome\n\n<img src=\"assets/welcome-banner.jpg\">\n\n![Logo](https://example.com/logo.png)\n",
        encoding="utf-8",
    )
    (root / "webapps" / "cockpit" / "dashboard.md").write_text(
        "# Cockpit\n\n![Cockpit Dashboard](images/cockpit-dashboard.png)\n\nSee the [report](report.pdf).\n",
        encoding="utf-8",
    )
    (root / "webapps" / "admin" / "users.md").write_text(
        "# Users\n![Users](images/admin-users.png)\n",
        encoding="utf-8",
    )
    (root / "webapps" / "admin" / "groups.mdx").write_text(
        "# Groups\n\n\n![Users again](images/admin-users.png)\n![Arch](img/architecture.svg)\n",
        encoding="utf-8",
    )
    (root / "node_modules" / "pkg" / "README.md").write_text("![x](images/cockpit-x.png)\n", encoding="utf-8")
    (root / "notes.txt").write_text("![x](images/cockpit-y.png)\n", encoding="utf-8")
    return root


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data=None):
        self.status_code = status_code
        self._json = json_data

    def json(self):
        if self._json is None:
            raise ValueError("No JSON body")
        return self._json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Stands in for requests.Session; routes map URL to a response or an exception."""

    def __init__(self, routes: dict | None = None):
        self.routes = routes or {}
        self.auth = None
        self.calls: list[tuple[str, dict]] = []
        self.plain_calls: list[tuple[str, dict]] = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self._route(url, kwargs)

    def plain_get(self, url, **kwargs):
        """Stands in for module-level requests.get, which carries no session auth."""
        self.plain_calls.append((url, kwargs))
        return self._route(url, kwargs)

    def _route(self, url, kwargs):
        route = self.routes.get(url)
        if route is None:
            raise requests.ConnectionError(f"Connection refused: {url}")
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(kwargs)
        return route

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session(monkeypatch) -> FakeSession:
    """Patch requests.Session and requests.get so EngineClient talks to a FakeSession."""
    session = FakeSession()
    monkeypatch.setattr(requests, "Session", lambda: session)
    monkeypatch.setattr(requests, "get", session.plain_get)
    return session
