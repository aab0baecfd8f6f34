"""Message translation and formatting, a JSON document container, and levelled logging."""

__version__ = "0.1.0"

__all__ = ["json_container", "json_value", "locale", "log_levels", "logger"]