# SPDX-License-Identifier: MIT

import sys

from rich.console import Console
from rich.markup import escape

from arenta.cleanup import register_cleanup
from arenta.error import ConfigurationError
from arenta.initialize import initialize
from arenta.terminal.app import run


def main() -> None:
    try:
        initialize()
    except ConfigurationError as e:
        Console(stderr=True).print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(1)
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
