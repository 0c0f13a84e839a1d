"""Tests for the command line side of main.py."""

import io
import json

import pytest

import main


def test_main_evaluates_arguments(config_files, capsys):
    assert main.main(["2 + 3 * 4", "(1 + 1) / 4"]) == 0
    assert capsys.readouterr().out.splitlines() == ["2 + 3 * 4 = 14", "(1 + 1) / 4 = 0.5"]


def test_main_reports_failures(config_files, capsys):
    assert main.main(["2 + @"]) == 1
    assert capsys.readouterr().out == "2 + @ -> Error 3011: Unexpected Token: '@'\n"


def test_main_reads_stdin(config_files, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 / 3\n"))
    assert main.main(["-"]) == 0
    # decimal_places is 4 in the test config
    assert capsys.readouterr().out == "1 / 3 ≈ 0.3333\n"


def test_help_exits_without_evaluating(config_files, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["-h"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "usage:" in out
    assert "Error" not in out


def test_decimal_places_option(config_files, capsys):
    assert main.main(["-d", "2", "1 / 3"]) == 0
    assert capsys.readouterr().out == "1 / 3 ≈ 0.33\n"


def test_show_equation_setting_is_honoured(config_files, capsys):
    config_path, _ = config_files
    config_path.write_text(json.dumps({"show_equation": False}), encoding="utf-8")
    assert main.main(["2 + 3 * 4"]) == 0
    assert capsys.readouterr().out == "= 14\n"
