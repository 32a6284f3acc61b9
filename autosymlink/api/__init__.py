"""API module for autosymlink.

Functions defined here are the single source of truth for the CLI commands;
the CLI layer only parses arguments and displays StageResult output.
"""

__all__ = []
