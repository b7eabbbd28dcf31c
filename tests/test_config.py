"""Tests for configuration loading, validation and persistence."""

import json

import pytest

from code_overview.config import (
    CONFIG_FILE_NAME,
    ScanConfig,
    ScannerSettings,
    load_config,
    load_settings,
    save_config,
)
from code_overview.exceptions import ConfigurationError, InvalidConfigError


class TestScanConfig:
    def test_defaults(self):
        config = ScanConfig()
        assert config.good_threshold == 150
        assert config.medium_threshold == 300
        assert config.excluded_files == []

    def test_negative_threshold_rejected(self):
        with pytest.raises(InvalidConfigError):
            ScanConfig(good_threshold=-1)

    def test_non_integer_threshold_rejected(self):
        with pytest.raises(InvalidConfigError):
            ScanConfig(medium_threshold="300")

    def test_inverted_thresholds_accepted(self):
        config = ScanConfig(good_threshold=400, medium_threshold=100)
        assert config.good_threshold > config.medium_threshold

    def test_exclusions(self):
        config = ScanConfig()
        assert config.add_exclusion("Player") is True
        assert config.add_exclusion("Player") is False
        assert config.excluded_files == ["Player"]
        assert config.remove_exclusion("Player") is True
        assert config.remove_exclusion("Player") is False

    def test_set_thresholds_validates(self):
        config = ScanConfig()
        with pytest.raises(InvalidConfigError):
            config.set_thresholds(-5, 10)
        assert config.good_threshold == 150

    def test_snapshot_is_frozen_copy(self):
        config = ScanConfig(excluded_files=["A"])
        snapshot = config.snapshot()
        config.add_exclusion("B")
        assert snapshot.excluded_files == frozenset({"A"})
        assert snapshot.snapshot() is snapshot


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / CONFIG_FILE_NAME) == ScanConfig()

    def test_reads_json(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text(json.dumps({"good_threshold": 80, "excluded_files": ["Boot"]}))
        config = load_config(path)
        assert config.good_threshold == 80
        assert config.medium_threshold == 300
        assert config.excluded_files == ["Boot"]

    def test_overrides_win(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text(json.dumps({"good_threshold": 80}))
        config = load_config(path, good_threshold=90, medium_threshold=None)
        assert config.good_threshold == 90
        assert config.medium_threshold == 300

    def test_env_vars(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CODE_OVERVIEW_MEDIUM_THRESHOLD", "250")
        assert load_config(tmp_path / CONFIG_FILE_NAME).medium_threshold == 250

    def test_bad_env_var(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CODE_OVERVIEW_GOOD_THRESHOLD", "many")
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / CONFIG_FILE_NAME)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text(json.dumps({"bad_threshold": 1}))
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError):
            load_config(path)


class TestSaveConfig:
    def test_round_trip(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        config = ScanConfig(good_threshold=120, medium_threshold=240, excluded_files=["A", "B"])
        assert save_config(config, path) == path
        assert load_config(path) == config

    def test_written_as_indented_json(self, tmp_path):
        path = save_config(ScanConfig(), tmp_path / CONFIG_FILE_NAME)
        text = path.read_text()
        assert text.startswith("{\n  ")
        assert json.loads(text)["excluded_files"] == []


class TestScannerSettings:
    def test_defaults(self):
        settings = ScannerSettings()
        assert settings.comment_marker == "//"
        assert settings.editor_marker == "using UnityEditor;"
        assert settings.behavior_base == "MonoBehaviour"
        assert settings.extensions == (".cs",)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"comment_marker": ""},
            {"editor_marker": ""},
            {"behavior_base": ""},
            {"extensions": ()},
            {"max_file_size_mb": 0},
            {"workers": 0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidConfigError):
            ScannerSettings(**kwargs)

    def test_max_file_size_bytes(self):
        assert ScannerSettings(max_file_size_mb=1.0).max_file_size_bytes == 1024 * 1024

    def test_load_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("CODE_OVERVIEW_WORKERS", "4")
        monkeypatch.setenv("CODE_OVERVIEW_BEHAVIOR_BASE", "Node")
        settings = load_settings()
        assert settings.workers == 4
        assert settings.behavior_base == "Node"

    def test_load_settings_override_beats_env(self, monkeypatch):
        monkeypatch.setenv("CODE_OVERVIEW_WORKERS", "4")
        assert load_settings(workers=2).workers == 2
        assert load_settings(workers=None).workers == 4
