"""Command-line interface for borderline.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Border width, mode and corner rounding from the command line
- Quiet output mode
- Optional structured log file
- Detailed error reporting
"""

from borderline.cli.app import cli, main

__all__ = ["cli", "main"]
