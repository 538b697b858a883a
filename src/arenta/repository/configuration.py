# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from arenta import configuration
from arenta.error import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        stored: Optional[dict[str, Any]] = None
        if configuration.APP_CONFIG_PATH.is_file():
            try:
                stored = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
            except YAMLError as e:
                raise ConfigurationError(
                    f"{configuration.APP_CONFIG_PATH} is not valid YAML: {e}"
                )
        if stored is not None and not isinstance(stored, dict):
            raise ConfigurationError(
                f"{configuration.APP_CONFIG_PATH} must hold a mapping of settings"
            )

        # Keys missing from the file (older or hand-written configs) get defaults
        config = cast(dict[str, Any], configuration.get_default_configuration())
        if stored is not None:
            config.update(stored)

        self.__validate(cast(configuration.Configuration, config))
        self._config = cast(configuration.Configuration, config)

    def __validate(self, config: configuration.Configuration) -> None:
        for int_key in ("timeline_width", "timeline_start_hour", "timeline_end_hour"):
            value = config[int_key]  # type: ignore[literal-required]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{int_key} must be a whole number, got {value!r}")
        if config["timeline_width"] < 1:
            raise ConfigurationError(
                f"timeline_width must be at least 1, got {config['timeline_width']}"
            )
        if not (
            0 <= config["timeline_start_hour"] < config["timeline_end_hour"] <= 24
        ):
            raise ConfigurationError(
                "timeline hours must satisfy 0 <= timeline_start_hour < timeline_end_hour <= 24"
            )
        if config["log_level"] not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {config['log_level']}"
            )
        for glyph_key in ("planned_glyph", "actual_glyph", "empty_glyph"):
            glyph = config[glyph_key]  # type: ignore[literal-required]
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ConfigurationError(f"{glyph_key} must be a single character")

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        use_color: Optional[bool] = None,
        log_level: Optional[str] = None,
        timeline_width: Optional[int] = None,
        timeline_start_hour: Optional[int] = None,
        timeline_end_hour: Optional[int] = None,
        start_immediately: Optional[bool] = None,
    ) -> None:
        updated = deepcopy(self.config)

        if show_header is not None:
            updated["show_header"] = show_header
        if use_color is not None:
            updated["use_color"] = use_color
        if log_level is not None:
            updated["log_level"] = log_level.upper()
        if timeline_width is not None:
            updated["timeline_width"] = timeline_width
        if timeline_start_hour is not None:
            updated["timeline_start_hour"] = timeline_start_hour
        if timeline_end_hour is not None:
            updated["timeline_end_hour"] = timeline_end_hour
        if start_immediately is not None:
            updated["start_immediately"] = start_immediately

        self.__validate(updated)
        self._config = updated
        self.is_dirty = True


CONFIGURATION_REPO = ConfigurationRepository()
