"""Command-line interface for csslogo.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Writes every variant, or a chosen subset, to an output directory
- Canvas profile selection and color overrides
- Printing a single document to standard output
- Verbose/quiet output modes
"""

from csslogo.cli.app import cli, main

__all__ = ["cli", "main"]
