"""Launch plan models for the tsserver shim."""

from dataclasses import dataclass


@dataclass
class InterpreterChoice:
    """Which node binary to exec: a sibling of the launcher or the one on PATH."""

    kind: str
    executable: str


@dataclass
class LaunchPlan:
    """Everything needed to replace the launcher process with the server."""

    install_dir: str
    interpreter: InterpreterChoice
    server_script: str
    argv: list[str]
    env: dict[str, str]
    module_paths: list[str]
