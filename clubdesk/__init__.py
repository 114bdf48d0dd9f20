"""Replay computer-club event logs and report per-table revenue and usage."""

__version__ = "0.1.0"
__all__ = ["cli", "club", "parser", "validation"]