"""Tests for config persistence and load hardening."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from component_hub.config import (
    _config_to_dict,
    _dict_to_config,
    _parse_export_language,
    _safe_get,
    load_config,
    save_config,
)
from component_hub.models import SessionState, UserConfig


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "component-hub" / "config.json"
    monkeypatch.setattr("component_hub.config.get_config_path", lambda: path)
    return path


class TestSafeGet:
    def test_returns_value_of_expected_type(self):
        assert _safe_get({"a": "x"}, "a", "", str) == "x"

    def test_wrong_type_returns_default(self):
        assert _safe_get({"a": 3}, "a", "dflt", str) == "dflt"

    def test_missing_returns_default(self):
        assert _safe_get({}, "a", 5, int) == 5


class TestDictToConfig:
    def test_empty_dict_gives_defaults(self):
        config = _dict_to_config({})

        assert config.theme_name == "monokai"
        assert config.export_language == "typescript"
        assert config.show_preview is True
        assert config.ascii_icons is False
        assert config.session == SessionState()

    def test_invalid_category_resets_to_all(self):
        config = _dict_to_config({"session": {"category_filter": "Widgets"}})
        assert config.session.category_filter == "all"

    def test_saved_selection_is_ignored(self):
        config = _dict_to_config({"session": {"search_term": "a", "selected_ids": ["1", "2"]}})
        assert config.session == SessionState(search_term="a")
        assert "selected_ids" not in _config_to_dict(config)["session"]

    def test_non_dict_session_ignored(self):
        assert _dict_to_config({"session": "bad"}).session == SessionState()

    def test_bad_highlighted_id_ignored(self):
        assert _dict_to_config({"session": {"highlighted_id": 7}}).session.highlighted_id is None

    @pytest.mark.parametrize("raw", [None, 3, "", "type script"])
    def test_invalid_export_language_defaults(self, raw):
        assert _parse_export_language(raw) == "typescript"

    def test_valid_export_language_kept(self):
        assert _parse_export_language("tsx") == "tsx"

    def test_round_trip(self):
        config = UserConfig(
            session=SessionState(
                search_term="auth",
                category_filter="Pages",
                highlighted_id="7",
            ),
            theme_name="solarized-dark",
            export_language="tsx",
            export_dir="/tmp/out",
            ascii_icons=True,
            show_preview=False,
        )
        assert _dict_to_config(_config_to_dict(config)) == config


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, config_file):
        loaded = load_config()
        assert loaded == UserConfig()
        assert loaded.config_defaulted is False

    def test_invalid_json_is_backed_up(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("{broken", encoding="utf-8")

        loaded = load_config()

        assert loaded.config_defaulted is True
        assert not config_file.exists()
        assert (config_file.parent / "config.json.corrupt").read_text(encoding="utf-8") == "{broken"

    def test_non_utf8_file_is_backed_up(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_bytes(b'{"theme_name": "\xff"}')

        loaded = load_config()

        assert loaded.config_defaulted is True
        assert loaded.theme_name == "monokai"
        assert (config_file.parent / "config.json.corrupt").exists()

    @pytest.mark.parametrize("payload", [[], "oops", 123])
    def test_non_dict_root_returns_default(self, config_file, payload):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps(payload), encoding="utf-8")

        loaded = load_config()

        assert isinstance(loaded, UserConfig)
        assert loaded.config_defaulted is True

    def test_loads_saved_values(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(
            json.dumps({"theme_name": "catppuccin-mocha", "session": {"search_term": "auth"}}),
            encoding="utf-8",
        )

        loaded = load_config()

        assert loaded.theme_name == "catppuccin-mocha"
        assert loaded.session.search_term == "auth"


class TestSaveConfig:
    def test_save_then_load(self, config_file):
        config = UserConfig(theme_name="solarized-dark", session=SessionState(search_term="auth"))

        assert save_config(config) is True
        loaded = load_config()

        assert loaded.theme_name == "solarized-dark"
        assert loaded.session.search_term == "auth"

    def test_save_leaves_no_temp_files(self, config_file):
        save_config(UserConfig())
        assert [p.name for p in config_file.parent.iterdir()] == ["config.json"]

    def test_never_writes_catalog_data(self, config_file):
        save_config(UserConfig())
        data = json.loads(config_file.read_text(encoding="utf-8"))
        assert set(data) == {
            "version",
            "theme_name",
            "export_language",
            "export_dir",
            "ascii_icons",
            "show_preview",
            "session",
        }

    def test_replace_failure_returns_false_and_cleans_up(self, config_file):
        with patch("component_hub.config.os.replace", side_effect=OSError("disk full")):
            assert save_config(UserConfig()) is False
        assert list(config_file.parent.iterdir()) == []
