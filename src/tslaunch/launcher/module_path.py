"""NODE_PATH construction."""

import logging
from collections.abc import MutableMapping

from tslaunch.launcher.paths import is_windows_posix_layer
from tslaunch.models import DEFAULT_MODULE_PATH_VAR

log = logging.getLogger(__name__)

# Relative to the install directory. The first two cover a typescript package
# whose own dependencies are nested under it, the last one a hoisted layout.
MODULE_PATH_ENTRIES = (
    "../typescript/bin/node_modules",
    "../typescript/node_modules",
    "../.pnpm/node_modules",
    "../node_modules",
    "../../node_modules",
)


def build_module_paths(install_dir: str, existing: str | None = None) -> list[str]:
    """Return launcher-derived search paths followed by any existing value."""
    paths = [f"{install_dir}/{entry}" for entry in MODULE_PATH_ENTRIES]
    if existing:
        paths.append(existing)
    return paths


def module_path_separator() -> str:
    """Return the list delimiter node expects in NODE_PATH."""
    # Under Cygwin/MSYS node is a native Windows binary and splits on ';'.
    return ";" if is_windows_posix_layer() else ":"


def apply_module_paths(
    env: MutableMapping[str, str],
    paths: list[str],
    var: str = DEFAULT_MODULE_PATH_VAR,
    separator: str = ":",
) -> str:
    """Write the joined search path into ``env`` and return the value."""
    value = separator.join(paths)
    env[var] = value
    log.debug("%s=%s", var, value)
    return value
