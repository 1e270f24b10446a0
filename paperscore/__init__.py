"""Plain-text game score files, run expectancy and batting statistics."""

__version__ = "0.1.0"