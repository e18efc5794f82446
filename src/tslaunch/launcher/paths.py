"""Install directory resolution."""

import logging
import platform
import posixpath
import subprocess

log = logging.getLogger(__name__)

# platform.system() prefixes reported by POSIX layers running on Windows.
_WINDOWS_POSIX_LAYERS = ("CYGWIN", "MSYS", "MINGW")


def is_windows_posix_layer() -> bool:
    """Return whether we are running under Cygwin or MSYS/MinGW."""
    return platform.system().upper().startswith(_WINDOWS_POSIX_LAYERS)


def to_native_windows_path(path: str) -> str:
    """Convert a POSIX-layer path to native Windows form with `cygpath -w`."""
    try:
        result = subprocess.run(
            ["cygpath", "-w", path],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, PermissionError) as e:
        log.debug("cygpath -w %s failed: %s", path, e)
        return path
    converted = result.stdout.strip()
    if result.returncode != 0 or not converted:
        log.debug("cygpath -w %s returned nothing (rc=%d)", path, result.returncode)
        return path
    return converted


def resolve_install_dir(invocation_path: str) -> str:
    """Return the directory the launcher was invoked from.

    Backslashes are rewritten to forward slashes first, so Windows-style and
    Unix-style invocation paths give the same answer. A bare name or an empty
    string resolves to ``.``, as ``dirname`` does.
    """
    normalized = invocation_path.replace("\\", "/")
    install_dir = posixpath.dirname(normalized) or "."
    if is_windows_posix_layer():
        install_dir = to_native_windows_path(install_dir)
    log.debug("install dir %s (invoked as %r)", install_dir, invocation_path)
    return install_dir
