"""Tests for the scan session."""

import json

import pytest

from code_overview.config import CONFIG_FILE_NAME
from code_overview.exceptions import InvalidInputError
from code_overview.session import ScanSession


class TestRefresh:
    def test_scans_project(self, project):
        session = ScanSession.open(project)
        result = session.refresh()

        assert result.scripts_count == 4
        assert result.editor_scripts_count == 1
        assert result.total_line_count == 216
        assert result.average_line_count == 54
        assert [s.name for s in result.medium_offenders] == ["Player"]
        assert result.bad_offenders == ()

        assert result.class_count == 3
        assert result.interface_count == 1
        assert result.behavior_subclass_count == 1
        assert result.non_behavior_class_count == 2

    def test_config_file_defaults_to_project_root(self, project):
        session = ScanSession.open(project)
        assert session.config_file == project / CONFIG_FILE_NAME

    def test_overrides_apply(self, project):
        session = ScanSession.open(project, good_threshold=100, medium_threshold=200)
        result = session.refresh()
        assert [s.name for s in result.bad_offenders] == ["Player"]

    def test_result_replaced_on_each_refresh(self, project):
        session = ScanSession.open(project)
        first = session.refresh()
        (project / "Assets" / "Scripts" / "Util.cs").unlink()
        second = session.refresh()
        assert session.result is second
        assert first.scripts_count == 4
        assert second.scripts_count == 3


class TestMutations:
    def test_set_thresholds_persists_and_rescans(self, project):
        session = ScanSession.open(project)
        session.refresh()
        result = session.set_thresholds(50, 100)

        assert [s.name for s in result.bad_offenders] == ["Player"]
        saved = json.loads((project / CONFIG_FILE_NAME).read_text())
        assert saved["good_threshold"] == 50
        assert saved["medium_threshold"] == 100

    def test_add_and_remove_exclusion(self, project):
        session = ScanSession.open(project)
        result = session.add_exclusion("Player")
        assert result.find("Player") is None
        assert result.total_line_count == 216
        assert "Player" not in session.candidates_for_exclusion()

        reopened = ScanSession.open(project)
        assert reopened.config.excluded_files == ["Player"]

        result = reopened.remove_exclusion("Player")
        assert result.find("Player") is not None
        assert json.loads((project / CONFIG_FILE_NAME).read_text())["excluded_files"] == []

    def test_cannot_exclude_unknown_file(self, project):
        session = ScanSession.open(project)
        with pytest.raises(InvalidInputError):
            session.add_exclusion("Nope")
        assert not (project / CONFIG_FILE_NAME).exists()

    def test_cannot_remove_missing_exclusion(self, project):
        session = ScanSession.open(project)
        with pytest.raises(InvalidInputError):
            session.remove_exclusion("Player")

    def test_candidates(self, project):
        session = ScanSession.open(project)
        session.refresh()
        assert session.candidates_for_exclusion() == [
            "PlayerEditor",
            "IDamageable",
            "Player",
            "Util",
        ]


class TestOpenFile:
    def test_launches_offender(self, project, monkeypatch):
        launched = []
        monkeypatch.setattr("code_overview.session.typer.launch", launched.append)
        session = ScanSession.open(project)
        scored = session.open_file("Player")
        assert scored.weight == 204
        assert launched == [str(project / "Assets" / "Scripts" / "Player.cs")]

    def test_unknown_offender(self, project, monkeypatch):
        monkeypatch.setattr("code_overview.session.typer.launch", lambda path: None)
        session = ScanSession.open(project)
        with pytest.raises(InvalidInputError):
            session.open_file("Util")
