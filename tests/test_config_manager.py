"""Tests for the JSON settings layer."""

import json
import logging

from Calculator import config_manager


def test_load_all_merges_defaults(config_files):
    settings = config_manager.load_setting_value("all")
    assert settings["darkmode"] is True
    assert settings["decimal_places"] == 4
    assert settings["show_equation"] is True


def test_load_single_value(config_files):
    assert config_manager.load_setting_value("decimal_places") == 4
    assert config_manager.load_setting_value("no_such_key") == 0


def test_missing_file_falls_back_to_defaults(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing.json")
    with caplog.at_level(logging.WARNING, logger="Calculator.config_manager"):
        assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert "Error 5001" in caplog.text


def test_corrupt_file_falls_back_to_defaults(tmp_path, monkeypatch, caplog):
    broken = tmp_path / "config.json"
    broken.write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(config_manager, "config_json", broken)
    with caplog.at_level(logging.WARNING, logger="Calculator.config_manager"):
        assert config_manager.load_setting_value("darkmode") is False
    assert "Error 5001" in caplog.text


def test_save_setting_round_trip(config_files):
    config_path, _ = config_files
    settings = config_manager.load_setting_value("all")
    settings["decimal_places"] = 6

    assert config_manager.save_setting(settings) == settings
    assert json.loads(config_path.read_text(encoding="utf-8"))["decimal_places"] == 6
    assert config_manager.load_setting_value("decimal_places") == 6


def test_save_setting_failure_returns_empty(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "no_dir" / "config.json")
    assert config_manager.save_setting({"darkmode": True}) == {}


def test_load_descriptions(config_files):
    assert config_manager.load_setting_description("darkmode") == "Dark mode"
    assert config_manager.load_setting_description("all") == {"darkmode": "Dark mode"}
