"""Configuration model for tslaunch."""

from pydantic import BaseModel

DEFAULT_MODULE_PATH_VAR = "NODE_PATH"
DEFAULT_INTERPRETER_NAME = "node"
DEFAULT_SERVER_SCRIPT = "../typescript/bin/tsserver"


class LauncherConfig(BaseModel):
    """Runtime configuration for the launcher."""

    module_path_var: str = DEFAULT_MODULE_PATH_VAR
    interpreter_name: str = DEFAULT_INTERPRETER_NAME
    server_script: str = DEFAULT_SERVER_SCRIPT
    debug: bool = False
