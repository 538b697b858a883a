# SPDX-License-Identifier: MIT

from importlib.metadata import PackageNotFoundError, version

from arenta.configuration import APP_NAME


def get_version() -> str:
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        return "unknown"
