"""
Check command implementation.

Compiles a .lol file without writing any output, reporting whether it
follows the grammar.
"""

import argparse

from ..context import get_cli_context
from ..errors import handle_cli_exception
from ..loading import compile_lol_file
from ..output import print_fragments, print_success
from ..validation import validate_path


def cmd_check(args: argparse.Namespace) -> None:
    """Handle the 'check' subcommand."""
    try:
        ctx = get_cli_context(args)
        source_path = validate_path(args.file)
        result = compile_lol_file(source_path, suffix=ctx.config.defaults.source_suffix)

        if getattr(args, "print_fragments", False):
            print_fragments(result.fragments)

        print_success(f"The file '{args.file}' follows the LOLCODE grammar!")

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
