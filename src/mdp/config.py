"""Configuration management for mdp.

Settings come from an optional JSON config file and from MDP_* environment
variables. Environment variables take precedence over the file.
"""

import json
import os
import sys
from pathlib import Path
from enum import Enum
from typing import Any, Optional

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from mdp.query.ast import Operator
from mdp.query.search import SectionOrdering
from mdp.query.tag_index import TagOrdering
from mdp.query.tasks import TaskFilter, TaskOrdering

CONFIG_FILE_ENV = "MDP_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path.home() / ".mdp" / "config.json"


class LogLevel(str, Enum):
    """Loguru level names accepted for stderr output."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class MdpConfig(BaseSettings):
    """Settings for the mdp command line tool."""

    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Log level for stderr output")
    tag_ordering: TagOrdering = Field(
        default=TagOrdering.ALPHABETIC, description="Default ordering of the tags command"
    )
    search_mode: Operator = Field(
        default=Operator.OR, description="Operator joining search terms when none is given"
    )
    section_ordering: SectionOrdering = Field(
        default=SectionOrdering.DATE, description="Default ordering of search results"
    )
    task_filter: TaskFilter = Field(
        default=TaskFilter.UNFINISHED, description="Default filter of the tasks command"
    )
    task_ordering: TaskOrdering = Field(
        default=TaskOrdering.OCCURRENCE, description="Default ordering of the tasks command"
    )

    model_config = SettingsConfigDict(env_prefix="MDP_", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment first so it overrides values loaded from the config file
        return env_settings, init_settings, file_secret_settings


class ConfigManager:
    """Loads MdpConfig from the config file and the environment."""

    def __init__(self, config_file: Optional[Path] = None):
        env_file = os.environ.get(CONFIG_FILE_ENV)
        self.config_file = config_file or (Path(env_file) if env_file else DEFAULT_CONFIG_FILE)
        self._config: Optional[MdpConfig] = None

    def load_config(self) -> MdpConfig:
        """Load configuration from file and environment."""
        data: dict[str, Any] = {}
        if self.config_file.exists():
            try:
                data = json.loads(self.config_file.read_text())
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Ignoring unreadable config file {self.config_file}: {e}")
        return MdpConfig(**data)

    @property
    def config(self) -> MdpConfig:
        if self._config is None:
            self._config = self.load_config()
        return self._config


def _stderr_sink(message: str) -> None:
    # sys.stderr is looked up per message, not bound when the sink is added
    sys.stderr.write(message)


def init_cli_logging(log_level: LogLevel = LogLevel.WARNING) -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()
    logger.add(
        _stderr_sink,
        level=LogLevel(log_level).value,
        format="{level: <8} | {message}",
    )
