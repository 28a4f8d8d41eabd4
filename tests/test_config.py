"""
Tests for settings and the YAML configuration loader.
"""

import logging
import pytest
from datetime import timedelta

from frostparse.config import ParserSettings, wow_data
from frostparse.config.loader import ConfigLoader, load_and_apply_config


class TestParserSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for var in ("FROSTPARSE_LOG_FILE", "FROSTPARSE_YEAR", "FROSTPARSE_TIME_RESOLUTION",
                    "LOG_LEVEL", "FROSTPARSE_SKIP_MALFORMED", "FROSTPARSE_CONFIG"):
            monkeypatch.delenv(var, raising=False)

        settings = ParserSettings.from_env()
        assert settings.log_file == ""
        assert settings.time_resolution == timedelta(seconds=30)
        assert settings.skip_malformed is False
        assert settings.config_path is None
        settings.validate()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FROSTPARSE_LOG_FILE", "/tmp/WoWCombatLog.txt")
        monkeypatch.setenv("FROSTPARSE_YEAR", "2010")
        monkeypatch.setenv("FROSTPARSE_TIME_RESOLUTION", "10")
        monkeypatch.setenv("FROSTPARSE_SKIP_MALFORMED", "true")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = ParserSettings.from_env()
        assert settings.log_file == "/tmp/WoWCombatLog.txt"
        assert settings.reference_year == 2010
        assert settings.time_resolution == timedelta(seconds=10)
        assert settings.skip_malformed is True
        assert settings.log_level == "debug"

    def test_validate_collects_errors(self, tmp_path):
        settings = ParserSettings(
            time_resolution_seconds=0,
            log_level="loud",
            config_path=str(tmp_path / "missing.yaml"),
        )
        with pytest.raises(ValueError) as exc_info:
            settings.validate()

        message = str(exc_info.value)
        assert "Time resolution" in message
        assert "log level" in message
        assert "Config file not found" in message

    def test_sub_microsecond_resolution_is_rejected(self):
        with pytest.raises(ValueError, match="Time resolution"):
            ParserSettings(time_resolution_seconds=1e-7).validate()

    def test_log_level(self):
        assert ParserSettings(log_level="warning").get_log_level() == logging.WARNING
        assert ParserSettings(log_level="warning").get_log_level(verbose=True) == logging.DEBUG
        assert ParserSettings().get_log_level() == logging.INFO


class TestConfigLoader:
    """Test loading boss names and ID prefixes from YAML."""

    def test_load_config_from_path(self, tmp_path):
        path = tmp_path / "frostparse.yaml"
        path.write_text("boss_names:\n  - Onyxia\nid_prefixes:\n  player: '0x00'\n")

        config = ConfigLoader.load_config(str(path))
        assert config == {"boss_names": ["Onyxia"], "id_prefixes": {"player": "0x00"}}

    def test_missing_config_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert ConfigLoader.load_config(str(tmp_path / "nope.yaml")) == {}

    def test_replace_boss_names(self):
        ConfigLoader.apply_config({"boss_names": ["Onyxia", "Ragnaros"]})

        assert wow_data.is_boss_name("Onyxia")
        assert not wow_data.is_boss_name("Lord Marrowgar")

    def test_extend_boss_names(self):
        ConfigLoader.apply_config({"extra_boss_names": ["Halion", "Lord Marrowgar"]})

        assert wow_data.is_boss_name("Halion")
        assert wow_data.BOSS_NAMES.count("Lord Marrowgar") == 1

    def test_id_prefixes(self):
        ConfigLoader.apply_config({"id_prefixes": {"player": "Player-", "npc": "Creature-"}})

        assert wow_data.is_player_id("Player-1234-0ABC")
        assert wow_data.is_npc_id("Creature-0-1-2")
        assert not wow_data.is_player_id("0x0700000000000001")

    def test_invalid_entries_are_skipped(self, caplog):
        ConfigLoader.apply_config({
            "boss_names": "Onyxia",
            "id_prefixes": {"pet": "Pet-", "boss": ""},
        })

        assert wow_data.is_boss_name("Lord Marrowgar")
        assert wow_data.ID_PREFIXES["boss"] == "0xF15"
        assert "pet" not in wow_data.ID_PREFIXES
        assert any("boss_names" in r.message for r in caplog.records)

    def test_load_and_apply(self, tmp_path):
        path = tmp_path / "frostparse.yaml"
        path.write_text("extra_boss_names:\n  - Halion\n")

        load_and_apply_config(str(path))
        assert wow_data.is_boss_name("Halion")
