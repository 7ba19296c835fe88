"""contentforge CLI — Typer-based command-line interface.

Provides the ``contentforge`` command with subcommands for generating
reports and auditing validation coverage.

All console output uses Rich for formatted terminal display.
"""
