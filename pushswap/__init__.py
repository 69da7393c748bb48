"""Two-stack sorting: move generation and move checking."""

__version__ = "1.0.0"
__all__ = ["checker", "cli", "parsing", "sorter", "stacks"]