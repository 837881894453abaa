"""Command-line interface for surfaceloops.

This module provides the CLI using Typer with rich output.

Key features:
- Side table of the fundamental polygon for a genus
- Replay of scripted traces with warnings for rejected positions
- Exact segment intersection
"""

from surfaceloops.cli.app import cli, main

__all__ = ["cli", "main"]
