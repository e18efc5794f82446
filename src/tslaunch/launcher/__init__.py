"""Locate node, extend NODE_PATH, and exec the TypeScript server."""

from tslaunch.launcher.interpreter import select_interpreter
from tslaunch.launcher.module_path import (
    MODULE_PATH_ENTRIES,
    apply_module_paths,
    build_module_paths,
    module_path_separator,
)
from tslaunch.launcher.paths import resolve_install_dir
from tslaunch.launcher.plan import build_launch_plan, exec_launch_plan

__all__ = [
    "MODULE_PATH_ENTRIES",
    "apply_module_paths",
    "build_launch_plan",
    "build_module_paths",
    "exec_launch_plan",
    "module_path_separator",
    "resolve_install_dir",
    "select_interpreter",
]
