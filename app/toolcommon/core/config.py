"""Tool configuration and settings.

Tools read a small auxiliary configuration file next to their user
settings, ~/.config/toolcommon/config.toml, which lists the extension
types to load in addition to the ones named on the command line:

    extensions = ["Acme.UIExtension", "Acme.UtilExtension"]

A single semicolon-separated string is accepted as well.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from toolcommon.core.paths import get_tool_config_path


class ToolConfig(BaseModel):
    """Configuration shared by command-line tools.

    Attributes:
        extensions: Extension types to load, in order.
    """

    model_config = ConfigDict(extra="forbid")

    extensions: Annotated[
        list[str],
        Field(description="Extension types to load"),
    ] = []

    @field_validator("extensions", mode="before")
    @classmethod
    def split_extensions(cls, v: object) -> object:
        """Accept a semicolon-separated string in place of a list."""
        if isinstance(v, str):
            return [part.strip() for part in v.split(";") if part.strip()]
        return v


class ToolConfigError(Exception):
    """Base exception for tool configuration errors."""


class ToolConfigNotFoundError(ToolConfigError):
    """Raised when the tool config file is not found."""


class ToolConfigParseError(ToolConfigError):
    """Raised when the tool config file cannot be parsed."""


def load_tool_config(path: Path | None = None) -> ToolConfig:
    """Load tool configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ToolConfig object.

    Raises:
        ToolConfigNotFoundError: If the config file doesn't exist.
        ToolConfigParseError: If the TOML syntax is invalid.
        ToolConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_tool_config_path()

    if not config_path.exists():
        raise ToolConfigNotFoundError(f"Tool config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ToolConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ToolConfigError(f"Failed to read tool config: {e}") from e

    try:
        return ToolConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ToolConfigError(f"Invalid tool config content: {e}") from e


def read_configuration(extensions: list[str], path: Path | None = None) -> None:
    """Append the configured extension types to ``extensions``.

    A missing config file is not an error; nothing is appended.

    Args:
        extensions: List to extend in place.
        path: Path to the config file. If None, uses the default config path.

    Raises:
        ValueError: If extensions is None.
        ToolConfigParseError: If the TOML syntax is invalid.
        ToolConfigError: If the content doesn't match the schema.
    """
    if extensions is None:
        msg = "extensions must not be None"
        raise ValueError(msg)

    try:
        config = load_tool_config(path)
    except ToolConfigNotFoundError:
        return

    extensions.extend(config.extensions)


def save_tool_config(config: ToolConfig, path: Path | None = None) -> Path:
    """Save tool configuration to a TOML file.

    The file is written to a temporary file in the same directory and moved
    into place with os.replace().

    Args:
        config: The ToolConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ToolConfigError: If the file cannot be written.
    """
    config_path = path or get_tool_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, object] = {"extensions": list(config.extensions)}

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ToolConfigError(f"Failed to write tool config: {e}") from e

    return config_path
