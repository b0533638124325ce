"""smallsh - a small interactive shell with background jobs and foreground-only mode."""

__version__ = "1.0.0"
