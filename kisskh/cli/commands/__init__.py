"""
CLI Commands - Individual command implementations.

This module contains the commands that exercise each plugin capability.
"""

from kisskh.cli.commands import browse, stream

__all__ = ["browse", "stream"]
