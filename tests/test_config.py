"""
Unit tests for Config and ConfigManager.

Run with:
    pytest tests/test_config.py -v
"""

import json

import pytest

from commit_composer.config import AUTO_WRAP_WIDTH_ENV, Config, ConfigManager


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run in an empty cwd with a fake home and no env override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
    monkeypatch.delenv(AUTO_WRAP_WIDTH_ENV, raising=False)
    return tmp_path


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.preserve_message is True
        assert config.auto_wrap_commit_message is True
        assert config.auto_wrap_width == 72
        assert config.max_subject_length == 50
        assert config.show_multi_character_gitmojis is True

    def test_to_dict(self):
        d = Config().to_dict()
        assert d["auto_wrap_width"] == 72
        assert set(d) == {
            "preserve_message",
            "auto_wrap_commit_message",
            "auto_wrap_width",
            "max_subject_length",
            "show_multi_character_gitmojis",
        }

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"auto_wrap_width": 60, "unknown_key": "value"})
        assert config.auto_wrap_width == 60
        assert not hasattr(config, "unknown_key")

    @pytest.mark.parametrize("name", [
        "preserve_message",
        "auto_wrap_commit_message",
        "show_multi_character_gitmojis",
    ])
    def test_validate_non_bool_flag(self, name):
        config = Config(**{name: "yes"})
        warnings = config.validate()
        assert len(warnings) == 1
        assert getattr(config, name) is True  # reset to default

    @pytest.mark.parametrize("name, value", [
        ("auto_wrap_width", 0),
        ("auto_wrap_width", -5),
        ("auto_wrap_width", "72"),
        ("max_subject_length", True),
        ("max_subject_length", 12.5),
    ])
    def test_validate_bad_int(self, name, value):
        config = Config(**{name: value})
        warnings = config.validate()
        assert any(name in w for w in warnings)
        assert getattr(config, name) == getattr(Config(), name)

    def test_validate_valid_config_no_warnings(self):
        assert Config(auto_wrap_width=100, preserve_message=False).validate() == []

    def test_from_dict_triggers_validation(self, capsys):
        Config.from_dict({"auto_wrap_width": -1})
        err = capsys.readouterr().err
        assert "Config warning" in err


class TestConfigManager:

    def test_load_returns_defaults_when_no_file(self, isolated):
        config = ConfigManager().load()
        assert config == Config()

    def test_load_reads_local_file(self, isolated):
        (isolated / ".composerc").write_text(json.dumps({"preserve_message": False, "auto_wrap_width": 80}))

        manager = ConfigManager()
        config = manager.load()
        assert config.preserve_message is False
        assert config.auto_wrap_width == 80
        assert manager.get_config_path() == isolated / ".composerc"

    def test_local_file_beats_home(self, isolated):
        home = isolated / "fakehome"
        home.mkdir()
        (home / ".composerc").write_text(json.dumps({"auto_wrap_width": 100}))
        (isolated / ".composerc").write_text(json.dumps({"auto_wrap_width": 60}))

        assert ConfigManager().load().auto_wrap_width == 60

    def test_save_and_load_roundtrip(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        # Also patch Path.home for Windows
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
        monkeypatch.delenv(AUTO_WRAP_WIDTH_ENV, raising=False)

        original = Config(auto_wrap_commit_message=False, max_subject_length=65)
        ConfigManager().save(original, global_config=True)

        loaded = ConfigManager().load()
        assert loaded.auto_wrap_commit_message is False
        assert loaded.max_subject_length == 65

    def test_malformed_json_returns_defaults(self, isolated, capsys):
        (isolated / ".composerc").write_text("not valid json {{{")
        config = ConfigManager().load()
        assert config == Config()
        assert "Could not load" in capsys.readouterr().err

    def test_non_object_json_returns_defaults(self, isolated, capsys):
        (isolated / ".composerc").write_text("[1, 2, 3]")
        assert ConfigManager().load() == Config()
        assert "expected a JSON object" in capsys.readouterr().err

    def test_env_overrides_width(self, isolated, monkeypatch):
        (isolated / ".composerc").write_text(json.dumps({"auto_wrap_width": 60}))
        monkeypatch.setenv(AUTO_WRAP_WIDTH_ENV, "90")
        assert ConfigManager().load().auto_wrap_width == 90

    def test_bad_env_width_ignored(self, isolated, monkeypatch, capsys):
        monkeypatch.setenv(AUTO_WRAP_WIDTH_ENV, "wide")
        assert ConfigManager().load().auto_wrap_width == 72
        assert AUTO_WRAP_WIDTH_ENV in capsys.readouterr().err

    def test_load_is_cached(self, isolated):
        manager = ConfigManager()
        assert manager.load() is manager.load()
