# SPDX-License-Identifier: MIT

from typing import TypedDict


class DisplayFlags(TypedDict):
    include_backlog: bool
    verbose: bool
    timeline: bool
