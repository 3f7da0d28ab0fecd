"""Console localization command."""

from toolcommon.core.console import prepare_console_for_localization
from toolcommon.utils.formatting import console


def culture() -> None:
    """Show the UI culture selected for console messages."""
    selected = prepare_console_for_localization()
    suffix = " [muted](fallback)[/]" if selected.fallback else ""
    console.print(f"{selected.name} [muted]{selected.encoding}[/]{suffix}")
