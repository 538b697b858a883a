# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from arenta.error import ConfigurationError

APP_NAME = "arenta"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"
DATA_LOCK_PATH: Path = DATA_PATH / "arenta.lock"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    use_color: bool
    log_level: str
    timeline_width: int
    timeline_start_hour: int
    timeline_end_hour: int
    planned_glyph: str
    actual_glyph: str
    empty_glyph: str
    start_immediately: bool


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "use_color": True,
        "log_level": "WARNING",
        "timeline_width": 72,
        "timeline_start_hour": 0,
        "timeline_end_hour": 24,
        "planned_glyph": "-",
        "actual_glyph": "=",
        "empty_glyph": " ",
        "start_immediately": True,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the task
    repository is first read.
    """
    global DATA_PATH, DATA_TASKS_PATH, DATA_LOCK_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    try:
        config = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    except YAMLError as e:
        raise ConfigurationError(f"{APP_CONFIG_PATH} is not valid YAML: {e}")
    if config is None:
        return
    if not isinstance(config, dict):
        raise ConfigurationError(f"{APP_CONFIG_PATH} must hold a mapping of settings")
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting).expanduser()
        DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"
        DATA_LOCK_PATH = DATA_PATH / "arenta.lock"
