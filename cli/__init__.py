"""Command-line client for the rockfall risk monitoring service.

The Typer application lives in ``cli.app``; run it with ``rockfall --help``.
"""
