"""Tests for reader module"""

import pytest
import yaml

import constants as cv
import reader
from errors import ConfigError


@pytest.fixture
def specs_path(tmp_path, monkeypatch):
    """Path to a not-yet-written settings file, with no env override"""
    monkeypatch.delenv(cv.SONGS_CSV_ENV, raising=False)
    return str(tmp_path / "user_specs.yaml")


def _write_specs(path, data):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f)


def test_missing_specs_file_is_empty(specs_path):
    """Test that a missing settings file reads as no settings"""
    assert reader.load_user_specs(specs_path) == {}


def test_empty_specs_file_is_empty(specs_path):
    """Test that an empty settings file reads as no settings"""
    open(specs_path, "w").close()
    assert reader.load_user_specs(specs_path) == {}


def test_non_mapping_specs_rejected(specs_path):
    """Test that a YAML list raises ConfigError"""
    _write_specs(specs_path, ["not", "a", "mapping"])
    with pytest.raises(ConfigError):
        reader.load_user_specs(specs_path)


def test_unparseable_specs_rejected(specs_path):
    """Test that broken YAML raises ConfigError"""
    with open(specs_path, "w", encoding="utf-8") as f:
        f.write("songs_csv: [unclosed\n")
    with pytest.raises(ConfigError):
        reader.load_user_specs(specs_path)


def test_songs_csv_from_specs(specs_path):
    """Test that songs_csv in the settings file is used"""
    _write_specs(specs_path, {"songs_csv": "/music/songs.csv"})
    assert reader.get_songs_csv_path(specs_path) == "/music/songs.csv"


def test_songs_csv_env_overrides_specs(specs_path, monkeypatch):
    """Test that the environment variable wins over the settings file"""
    _write_specs(specs_path, {"songs_csv": "/music/songs.csv"})
    monkeypatch.setenv(cv.SONGS_CSV_ENV, "/env/songs.csv")
    assert reader.get_songs_csv_path(specs_path) == "/env/songs.csv"


def test_songs_csv_default(specs_path):
    """Test that the bundled data file is used when nothing is configured"""
    assert reader.get_songs_csv_path(specs_path) == cv.DEFAULT_SONGS_CSV


def test_log_level(specs_path):
    """Test the default log level and that configured names are upper-cased"""
    assert reader.get_log_level(specs_path) == "WARNING"
    _write_specs(specs_path, {"log_level": "debug"})
    assert reader.get_log_level(specs_path) == "DEBUG"


def test_unknown_log_level_rejected(specs_path):
    """Test that a log level logging does not know raises ConfigError"""
    _write_specs(specs_path, {"log_level": "loud"})
    with pytest.raises(ConfigError, match="LOUD"):
        reader.get_log_level(specs_path)


def test_ensure_user_specs_creates_file(specs_path, monkeypatch):
    """Test that the first run writes the entered songs path"""
    monkeypatch.setattr("builtins.input", lambda prompt="": "/my/songs.csv")

    assert reader.ensure_user_specs(specs_path) is True
    specs = reader.load_user_specs(specs_path)
    assert specs["songs_csv"] == "/my/songs.csv"
    assert specs["log_level"] == cv.DEFAULT_LOG_LEVEL


def test_ensure_user_specs_blank_keeps_default(specs_path, monkeypatch):
    """Test that blank input on first run stores the default songs path"""
    monkeypatch.setattr("builtins.input", lambda prompt="": "  ")

    reader.ensure_user_specs(specs_path)
    assert reader.get_songs_csv_path(specs_path) == cv.DEFAULT_SONGS_CSV


def test_ensure_user_specs_leaves_existing_file(specs_path, monkeypatch):
    """Test that an existing settings file is kept without prompting"""
    _write_specs(specs_path, {"songs_csv": "/music/songs.csv"})

    def _fail(prompt=""):
        raise AssertionError("should not prompt")

    monkeypatch.setattr("builtins.input", _fail)

    assert reader.ensure_user_specs(specs_path) is False
    assert reader.get_songs_csv_path(specs_path) == "/music/songs.csv"
