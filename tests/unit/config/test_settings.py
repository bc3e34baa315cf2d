# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""Tests for application settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from recordkeep.config import Environment, RecordkeepSettings, get_settings


def test_defaults(tmp_path):
    settings = RecordkeepSettings(data_dir=tmp_path)
    assert settings.inventory_file == "inventory.json"
    assert settings.report_file == "report.txt"
    assert settings.date_format == "%Y-%m-%d"
    assert settings.environment is Environment.DEVELOPMENT


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RECORDKEEP_INVENTORY_FILE", "stock.json")
    monkeypatch.setenv("RECORDKEEP_ENVIRONMENT", "testing")
    settings = RecordkeepSettings()
    assert settings.inventory_file == "stock.json"
    assert settings.environment is Environment.TESTING
    assert settings.data_dir == tmp_path


def test_resolve_path(tmp_path):
    settings = RecordkeepSettings(data_dir=tmp_path)
    assert settings.resolve_path("a.json") == tmp_path / "a.json"
    absolute = tmp_path / "elsewhere" / "b.json"
    assert settings.resolve_path(absolute) == absolute


def test_blank_file_name_rejected():
    with pytest.raises(ValidationError):
        RecordkeepSettings(report_file="  ")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
    get_settings.cache_clear()
    assert isinstance(get_settings().data_dir, Path)
