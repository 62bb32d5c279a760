"""
CLI command modules.

Each module implements one subcommand of the lolhtml CLI.
"""

from .build import cmd_build, open_in_browser
from .check import cmd_check

__all__ = ["cmd_build", "cmd_check", "open_in_browser"]
