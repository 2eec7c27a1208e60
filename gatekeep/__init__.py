"""Access-list conditions, field types, path patterns, and bypass and header settings."""

__version__ = "0.1.0"
__all__ = ["conditions", "config", "fields", "matchers", "path"]