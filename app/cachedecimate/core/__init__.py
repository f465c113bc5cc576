"""Core infrastructure: paths, configuration and logging setup."""
