"""Product name and version strings for tool output."""

from toolcommon import PRODUCT_NAME, __version__
from toolcommon.utils.formatting import console

HELP_HEADER = "{tool} version {version}\nPart of {product}."
HELP_FOOTER = "For more information see: toolcommon --help\n"


def get_creating_application_string() -> str:
    """Return the creating application string.

    Returns:
        String of the form "<product> (<version>)".
    """
    return f"{PRODUCT_NAME} ({__version__})"


def format_tool_header(tool_name: str) -> str:
    """Build the help header for a tool."""
    return HELP_HEADER.format(tool=tool_name, version=__version__, product=PRODUCT_NAME)


def display_tool_header(tool_name: str) -> None:
    """Print the help header for a tool."""
    console.print(format_tool_header(tool_name), highlight=False)


def display_tool_footer() -> None:
    """Print the help footer."""
    console.print(HELP_FOOTER, end="", highlight=False)
