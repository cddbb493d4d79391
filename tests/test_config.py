"""Test configuration management."""

import json

import pytest
from pydantic import ValidationError

from mdp.config import ConfigManager, LogLevel, MdpConfig
from mdp.query import Operator, SectionOrdering, TagOrdering, TaskFilter, TaskOrdering


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "MDP_LOG_LEVEL",
        "MDP_TAG_ORDERING",
        "MDP_SEARCH_MODE",
        "MDP_SECTION_ORDERING",
        "MDP_TASK_FILTER",
        "MDP_TASK_ORDERING",
        "MDP_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestMdpConfig:
    """Test MdpConfig defaults and environment overrides."""

    def test_defaults(self):
        config = MdpConfig()
        assert config.log_level == "WARNING"
        assert config.tag_ordering == TagOrdering.ALPHABETIC
        assert config.search_mode == Operator.OR
        assert config.section_ordering == SectionOrdering.DATE
        assert config.task_filter == TaskFilter.UNFINISHED
        assert config.task_ordering == TaskOrdering.OCCURRENCE

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("MDP_TASK_FILTER", "all")
        monkeypatch.setenv("MDP_SEARCH_MODE", "and")
        config = MdpConfig()
        assert config.task_filter == TaskFilter.ALL
        assert config.search_mode == Operator.AND


class TestConfigManager:
    """Test loading the config file."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(tmp_path / "missing.json").config
        assert config == MdpConfig()

    def test_file_values(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"tag_ordering": "count", "unknown": 1}))
        config = ConfigManager(config_file).config
        assert config.tag_ordering == TagOrdering.COUNT

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"task_ordering": "urgency", "log_level": "DEBUG"}))
        monkeypatch.setenv("MDP_LOG_LEVEL", "ERROR")
        config = ConfigManager(config_file).config
        assert config.log_level == "ERROR"
        assert config.task_ordering == TaskOrdering.URGENCY

    def test_config_file_from_environment(self, tmp_path, monkeypatch):
        config_file = tmp_path / "custom.json"
        config_file.write_text(json.dumps({"section_ordering": "relevance"}))
        monkeypatch.setenv("MDP_CONFIG_FILE", str(config_file))
        manager = ConfigManager()
        assert manager.config_file == config_file
        assert manager.config.section_ordering == SectionOrdering.RELEVANCE

    def test_unreadable_file_is_ignored(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        assert ConfigManager(config_file).config == MdpConfig()


class TestLogLevel:
    """Test log level validation."""

    def test_level_names_any_case(self, monkeypatch):
        monkeypatch.setenv("MDP_LOG_LEVEL", "debug")
        assert MdpConfig().log_level == LogLevel.DEBUG

    def test_unknown_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("MDP_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            MdpConfig()

    def test_unknown_level_from_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"log_level": "LOUD"}))
        with pytest.raises(ValidationError):
            ConfigManager(config_file).config
