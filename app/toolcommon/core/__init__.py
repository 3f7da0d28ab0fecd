"""Core helpers: paths, configuration, search paths, and console setup."""
