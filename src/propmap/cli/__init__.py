"""Command-line interface for propmap.

This package provides the CLI implementation split into logical modules:

- main: Core CLI entry point and shared options
- entries: Commands reading and writing map entries
- transfer: Export and import of map snapshots
"""

from __future__ import annotations

from propmap.cli.main import cli, main

__all__ = ["cli", "main"]
