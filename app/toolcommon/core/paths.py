"""XDG-compliant path management for toolcommon.

The tool configuration and the user theme live in the XDG config
directory, ~/.config/toolcommon/ unless XDG_CONFIG_HOME is set.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "toolcommon"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/toolcommon/ (or XDG_CONFIG_HOME/toolcommon/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_tool_config_path() -> Path:
    """Get the tool configuration file path.

    Returns:
        Path to ~/.config/toolcommon/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/toolcommon/theme.toml.
    """
    return get_config_dir() / "theme.toml"
