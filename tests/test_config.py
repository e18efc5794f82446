"""Unit tests for tslaunch.config."""

import pytest

from tslaunch.config import load_config
from tslaunch.models import LauncherConfig


class TestLoadConfig:
    def test_defaults_when_env_is_empty(self):
        config = load_config({})
        assert config == LauncherConfig()
        assert config.module_path_var == "NODE_PATH"
        assert config.interpreter_name == "node"
        assert config.server_script == "../typescript/bin/tsserver"
        assert config.debug is False

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy_debug_values(self, value):
        assert load_config({"TSLAUNCH_DEBUG": value}).debug is True

    @pytest.mark.parametrize("value", ["", "0", "false", "off", "nope"])
    def test_other_debug_values_are_off(self, value):
        assert load_config({"TSLAUNCH_DEBUG": value}).debug is False
