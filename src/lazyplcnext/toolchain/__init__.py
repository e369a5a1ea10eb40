"""Installed and running PLCnext Engineer toolchains, and launching them.

Public API::

    from lazyplcnext.toolchain import LaunchResolver

    result = LaunchResolver().launch(project)
    print(result.message)
"""

from __future__ import annotations

from lazyplcnext.toolchain.installed import (
    DEFAULT_IDE_ROOT,
    IDE_EXECUTABLE_NAMES,
    find_installed_toolchains,
)
from lazyplcnext.toolchain.launcher import (
    LaunchResolver,
    LaunchResult,
    ToolchainSelection,
    select_toolchain,
)
from lazyplcnext.toolchain.processes import (
    RunningInstance,
    find_running_instance,
    list_running_instances,
)

__all__ = [
    "DEFAULT_IDE_ROOT",
    "IDE_EXECUTABLE_NAMES",
    "LaunchResolver",
    "LaunchResult",
    "RunningInstance",
    "ToolchainSelection",
    "find_installed_toolchains",
    "find_running_instance",
    "list_running_instances",
    "select_toolchain",
]
