"""Core infrastructure: paths, theme and user settings."""
