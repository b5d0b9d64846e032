"""Configuration service for Solanum.

Loads ``config.toml`` from the user config directory (or an explicit path)
and merges command-line overrides on top of it. The file is optional: with no
file every setting takes its default.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import ValidationError

from solanum.errors import ConfigError, ConfigNotFoundError
from solanum.models.config_models import AppConfig, SessionConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.toml"


class ConfigService:
    """Service for loading the application configuration.

    Args:
        config_path: Explicit configuration file. It must exist; when omitted
            the default location is used and may be absent.
    """

    def __init__(self, config_path: Path | None = None):
        self.config_dir = Path(user_config_dir("solanum"))
        self.explicit = config_path is not None
        self.config_path = Path(config_path) if config_path else self.config_dir / CONFIG_FILE_NAME
        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from the config file.

        Raises:
            ConfigNotFoundError: if an explicit path is not a file.
            ConfigError: if the file is not valid TOML or fails validation.
        """
        if not self.config_path.is_file():
            if self.explicit:
                raise ConfigNotFoundError(self.config_path)
            logger.debug("no configuration at %s, using defaults", self.config_path)
            return AppConfig()

        try:
            with open(self.config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"broken configuration: {e}") from e
        except OSError as e:
            raise ConfigError(f"unable to read `{self.config_path}`: {e}") from e

        try:
            config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"broken configuration: {_describe(e)}") from e

        logger.info("configuration loaded from %s", self.config_path)
        return config

    def apply_overrides(
        self,
        *,
        pomodoro: int | None = None,
        short_break: int | None = None,
        long_break: int | None = None,
        pomodoros: int | None = None,
    ) -> AppConfig:
        """Override session settings with command-line values and revalidate."""
        overrides = {
            key: value
            for key, value in {
                "pomodoro": pomodoro,
                "short_break": short_break,
                "long_break": long_break,
                "pomodoros": pomodoros,
            }.items()
            if value is not None
        }
        if not overrides:
            return self.config

        session_data = self.config.session.model_dump()
        session_data.update(overrides)
        try:
            session = SessionConfig.model_validate(session_data)
        except ValidationError as e:
            raise ConfigError(f"invalid option: {_describe(e)}") from e

        self._config = self.config.model_copy(update={"session": session})
        return self._config


def _describe(error: ValidationError) -> str:
    """Condense a pydantic error into one line."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)
