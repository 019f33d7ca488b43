# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Environment diagnostics for the lvlcodes CLI.

The minimum interpreter version is enforced by requires-python in
pyproject.toml, so nothing here checks it again.
"""

import platform
from typing import NamedTuple


class SystemInfo(NamedTuple):
    """Snapshot of the current system environment."""

    python_version: str
    platform: str
    architecture: str


def get_system_info() -> SystemInfo:
    """Collect basic system information for the info command."""
    return SystemInfo(
        python_version=platform.python_version(),
        platform=platform.system(),
        architecture=platform.machine(),
    )
