"""Two-stack integer sorting, solution checking and their command-line tools."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "checker", "sorting", "cli"]