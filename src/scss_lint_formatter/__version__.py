"""Version information for scss-lint-formatter."""

__version__ = "1.0.0"
