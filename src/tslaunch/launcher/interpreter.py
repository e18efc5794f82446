"""Node interpreter selection."""

import logging
import os

from tslaunch.models import DEFAULT_INTERPRETER_NAME, InterpreterChoice

log = logging.getLogger(__name__)

LOCAL = "local"
SYSTEM = "system"


def _is_executable_file(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def select_interpreter(
    install_dir: str, name: str = DEFAULT_INTERPRETER_NAME
) -> InterpreterChoice:
    """Prefer an executable ``node`` next to the launcher, else the one on PATH.

    The system fallback is the bare name; PATH lookup happens at exec time and
    is not checked here.
    """
    local = f"{install_dir}/{name}"
    if _is_executable_file(local):
        log.debug("using local interpreter %s", local)
        return InterpreterChoice(kind=LOCAL, executable=local)
    log.debug("no executable %s, falling back to %s on PATH", local, name)
    return InterpreterChoice(kind=SYSTEM, executable=name)
