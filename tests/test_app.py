"""Tests for the Gradio app callbacks."""

import importlib.util
from pathlib import Path

import pytest

from campus_routes.config import reset_config
from campus_routes.container import reset_container

APP_PATH = Path(__file__).resolve().parents[1] / "apps" / "app.py"


@pytest.fixture
def app_module(monkeypatch, tmp_path):
    monkeypatch.setenv("CR_GRAPH_DATA_DIR", str(tmp_path))
    reset_config()
    reset_container()
    spec = importlib.util.spec_from_file_location("campus_routes_app", APP_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    yield module
    reset_config()
    reset_container()


def test_app_starts_without_graph_file(app_module):
    assert app_module.BACKEND.list_locations() == []


def test_reload_refreshes_location_choices(app_module, tmp_path):
    dot = tmp_path / "tiny.dot"
    dot.write_text('"Hall" -> "Union" [seconds=2];\n', encoding="utf-8")

    status, *updates = app_module.reload_graph(str(dot))

    assert status.endswith("2 locations loaded.")
    assert len(updates) == 3
    assert all(update["choices"] == ["Hall", "Union"] for update in updates)


def test_failed_reload_keeps_current_choices(app_module, tmp_path):
    dot = tmp_path / "tiny.dot"
    dot.write_text('"Hall" -> "Union" [seconds=2];\n', encoding="utf-8")
    app_module.reload_graph(str(dot))

    status, *updates = app_module.reload_graph(str(tmp_path / "missing.dot"))

    assert status.startswith("❌")
    assert all(update["choices"] == ["Hall", "Union"] for update in updates)
