"""toolcommon - shared helper routines for command-line tools."""

__version__ = "0.1.0"

PRODUCT_NAME = "toolcommon"
