"""Tool configuration commands.

Provides commands to show the configured extension types and to add
new ones to ~/.config/toolcommon/config.toml.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from toolcommon.core.config import (
    ToolConfig,
    ToolConfigError,
    ToolConfigNotFoundError,
    load_tool_config,
    save_tool_config,
)
from toolcommon.core.paths import get_tool_config_path
from toolcommon.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and edit tool configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)

ConfigPathOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Config file (default: user config)."),
]


@app.command()
def show(
    config_path: ConfigPathOption = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON."),
    ] = False,
) -> None:
    """Show the configured extension types."""
    path = config_path or get_tool_config_path()
    try:
        config = load_tool_config(path)
    except ToolConfigNotFoundError:
        print_info(escape(f"No tool config at {path}."))
        return
    except ToolConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if json_output:
        console.print_json(json.dumps(config.model_dump()))
        return

    if not config.extensions:
        print_info("No extensions configured.")
        return

    for extension in config.extensions:
        console.print(extension, highlight=False, markup=False, soft_wrap=True)


@app.command("add-extension")
def add_extension(
    extension: Annotated[
        str,
        typer.Argument(help="Extension type to add."),
    ],
    config_path: ConfigPathOption = None,
) -> None:
    """Add an extension type to the tool configuration."""
    path = config_path or get_tool_config_path()
    try:
        config = load_tool_config(path)
    except ToolConfigNotFoundError:
        config = ToolConfig()
    except ToolConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if extension in config.extensions:
        print_info(escape(f"Extension already configured: {extension}"))
        return

    updated = ToolConfig(extensions=[*config.extensions, extension])
    try:
        saved = save_tool_config(updated, path)
    except ToolConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(escape(f"Added {extension} to {saved}"))
