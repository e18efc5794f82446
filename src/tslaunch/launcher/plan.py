"""Build the launch plan and hand off to the interpreter."""

import logging
import os
from collections.abc import Mapping
from typing import NoReturn

from tslaunch.launcher.interpreter import select_interpreter
from tslaunch.launcher.module_path import (
    apply_module_paths,
    build_module_paths,
    module_path_separator,
)
from tslaunch.launcher.paths import resolve_install_dir
from tslaunch.models import LaunchPlan, LauncherConfig

log = logging.getLogger(__name__)


def build_launch_plan(
    invocation_path: str,
    args: list[str],
    environ: Mapping[str, str] | None = None,
    config: LauncherConfig | None = None,
) -> LaunchPlan:
    """Resolve the install dir, configure NODE_PATH, then pick the interpreter."""
    config = config or LauncherConfig()
    env = dict(os.environ if environ is None else environ)

    install_dir = resolve_install_dir(invocation_path)
    module_paths = build_module_paths(install_dir, env.get(config.module_path_var))
    apply_module_paths(
        env,
        module_paths,
        var=config.module_path_var,
        separator=module_path_separator(),
    )

    interpreter = select_interpreter(install_dir, config.interpreter_name)
    server_script = f"{install_dir}/{config.server_script}"
    return LaunchPlan(
        install_dir=install_dir,
        interpreter=interpreter,
        server_script=server_script,
        argv=[interpreter.executable, server_script, *args],
        env=env,
        module_paths=module_paths,
    )


def exec_launch_plan(plan: LaunchPlan) -> NoReturn:
    """Replace the current process with the planned interpreter.

    Only returns by raising OSError when the interpreter cannot be executed.
    """
    log.debug("exec %s", plan.argv)
    os.execvpe(plan.interpreter.executable, plan.argv, plan.env)
