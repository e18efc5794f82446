"""Configuration for tslaunch."""

import os
from collections.abc import Mapping

from tslaunch.models import LauncherConfig

DEBUG_ENV_VAR = "TSLAUNCH_DEBUG"
_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(environ: Mapping[str, str], key: str) -> bool:
    return environ.get(key, "").strip().lower() in _TRUTHY


def load_config(environ: Mapping[str, str] | None = None) -> LauncherConfig:
    """Return launcher configuration read from environment variables."""
    env = os.environ if environ is None else environ
    return LauncherConfig(debug=_env_flag(env, DEBUG_ENV_VAR))
