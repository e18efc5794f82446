"""Model package for tslaunch."""

from tslaunch.models.launch_plan import InterpreterChoice, LaunchPlan
from tslaunch.models.launcher_config import (
    DEFAULT_INTERPRETER_NAME,
    DEFAULT_MODULE_PATH_VAR,
    DEFAULT_SERVER_SCRIPT,
    LauncherConfig,
)

__all__ = [
    "DEFAULT_INTERPRETER_NAME",
    "DEFAULT_MODULE_PATH_VAR",
    "DEFAULT_SERVER_SCRIPT",
    "InterpreterChoice",
    "LaunchPlan",
    "LauncherConfig",
]
