"""
CLI Layer - Command-line harness for the KissKH source plugin.
"""

from kisskh.cli.main import app, cli_main

__all__ = ["app", "cli_main"]
