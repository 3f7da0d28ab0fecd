"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

from toolcommon.core.paths import (
    APP_NAME,
    get_config_dir,
    get_tool_config_path,
    get_user_theme_path,
)


class TestXdgDirs:
    """Tests for XDG directory lookup."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_config_dir()
            expected = Path.home() / ".config" / APP_NAME

        assert result == expected

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_dir() == tmp_path / APP_NAME
            assert get_tool_config_path() == tmp_path / APP_NAME / "config.toml"
            assert get_user_theme_path() == tmp_path / APP_NAME / "theme.toml"

    def test_empty_xdg_config_home_ignored(self) -> None:
        """An empty XDG_CONFIG_HOME falls back to the home directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            assert get_config_dir() == Path.home() / ".config" / APP_NAME
