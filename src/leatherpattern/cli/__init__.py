"""Command-line interface for leatherpattern.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Pattern reports with outline size and stitch counts
- Stitch count comparison between joined layers
- Geometry export as JSON
- Verbose/quiet output modes
"""

from leatherpattern.cli.app import cli, main

__all__ = ["cli", "main"]
