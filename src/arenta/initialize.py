# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from arenta import configuration
from arenta.logger import configure_logging
from arenta.repository.configuration import CONFIGURATION_REPO
from arenta.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])
    view_state.set_use_color(config["use_color"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(config), Dumper=Dumper, sort_keys=False)
        )


def __ensure_data_files() -> None:
    if not configuration.DATA_TASKS_PATH.is_file():
        configuration.DATA_TASKS_PATH.touch()
        configuration.DATA_TASKS_PATH.write_text(dump({"tasks": []}, Dumper=Dumper))
