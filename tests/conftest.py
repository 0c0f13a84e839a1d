"""Shared fixtures for the calculator tests."""

import json

import pytest

from Calculator import config_manager


@pytest.fixture
def config_files(tmp_path, monkeypatch):
    """Point config_manager at a fresh config.json / ui_strings.json in tmp_path."""
    config_path = tmp_path / "config.json"
    strings_path = tmp_path / "ui_strings.json"
    config_path.write_text(json.dumps({"darkmode": True, "decimal_places": 4}), encoding="utf-8")
    strings_path.write_text(json.dumps({"darkmode": "Dark mode"}), encoding="utf-8")
    monkeypatch.setattr(config_manager, "config_json", config_path)
    monkeypatch.setattr(config_manager, "ui_strings", strings_path)
    return config_path, strings_path


@pytest.fixture
def settings():
    return dict(config_manager.DEFAULT_SETTINGS)
